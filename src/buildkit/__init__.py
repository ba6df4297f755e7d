"""buildkit: helpers for the lando build scripts.

The domain functions below are pure and usable without the CLI;
:func:`get_config` loads the layered configuration the CLI runs with.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.loader import get_config
from .domain.aliases import RESERVED_NAMESPACE, fix_alias
from .domain.commands import CommandDescriptor, CommandOptions, parse_command
from .domain.enums import ReleaseType, TargetOS
from .domain.packaging import (
    DEFAULT_PACKAGING_PROFILE,
    PackagingProfile,
    build_pkg_command,
    installer_invocation,
    ps_task,
)
from .domain.targets import resolve_target
from .domain.versioning import bump_version

__all__ = [
    "DEFAULT_PACKAGING_PROFILE",
    "RESERVED_NAMESPACE",
    "CommandDescriptor",
    "CommandOptions",
    "PackagingProfile",
    "ReleaseType",
    "TargetOS",
    "build_pkg_command",
    "bump_version",
    "fix_alias",
    "get_config",
    "installer_invocation",
    "parse_command",
    "print_info",
    "ps_task",
    "resolve_target",
]
