"""Domain layer - pure build-script helpers with no I/O or framework dependencies.

Every function here takes its inputs explicitly (including the host platform
identifier) and returns new values, so callers may use them from any thread.

Contents:
    * :mod:`.versioning` - Semantic version bumps
    * :mod:`.targets` - Host platform to packaging target resolution
    * :mod:`.packaging` - Packaging and installer command assembly
    * :mod:`.aliases` - Documentation alias normalization
    * :mod:`.commands` - Command-line parsing into runnable descriptors
    * :mod:`.enums` - Domain enumerations (ReleaseType, TargetOS, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .aliases import RESERVED_NAMESPACE, fix_alias
from .commands import CommandDescriptor, CommandOptions, parse_command
from .enums import OutputFormat, ReleaseType, TargetOS
from .errors import ConfigurationError, InvalidVersionError
from .packaging import (
    DEFAULT_PACKAGING_PROFILE,
    PackagingProfile,
    build_pkg_command,
    installer_invocation,
    ps_task,
)
from .targets import resolve_target
from .versioning import DEFAULT_PRERELEASE_ID, bump_version

__all__ = [
    # Versioning
    "DEFAULT_PRERELEASE_ID",
    "bump_version",
    # Targets
    "resolve_target",
    # Packaging
    "DEFAULT_PACKAGING_PROFILE",
    "PackagingProfile",
    "build_pkg_command",
    "installer_invocation",
    "ps_task",
    # Aliases
    "RESERVED_NAMESPACE",
    "fix_alias",
    # Commands
    "CommandDescriptor",
    "CommandOptions",
    "parse_command",
    # Enums
    "OutputFormat",
    "ReleaseType",
    "TargetOS",
    # Errors
    "ConfigurationError",
    "InvalidVersionError",
]
