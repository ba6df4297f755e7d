"""Type-safe domain enums for release types, build targets and output formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration and command listings.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output, one item per line.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ReleaseType(str, Enum):
    """Granularity of a semantic version increment.

    Attributes:
        MAJOR: ``X.0.0`` - breaking release.
        MINOR: ``X.Y.0`` - feature release.
        PATCH: ``X.Y.Z`` - fix release, also the fallback for unknown types.
        PRERELEASE: ``X.Y.Z-id.N`` - bump the prerelease counter.

    Example:
        >>> ReleaseType.MINOR.value
        'minor'
        >>> ReleaseType.PRERELEASE == "prerelease"
        True
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"

    @classmethod
    def parse(cls, value: str | ReleaseType | None) -> ReleaseType:
        """Map a release type token to a member, falling back to PATCH.

        Example:
            >>> ReleaseType.parse("major")
            <ReleaseType.MAJOR: 'major'>
            >>> ReleaseType.parse("jacksonbrowne")
            <ReleaseType.PATCH: 'patch'>
            >>> ReleaseType.parse(None)
            <ReleaseType.PATCH: 'patch'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.PATCH


class TargetOS(str, Enum):
    """Canonical packaging target derived from the host platform.

    Values match the platform part of ``pkg`` target tokens
    (``node14-macos``, ``node14-win``, ``node14-linux``).

    Example:
        >>> TargetOS.MACOS.value
        'macos'
        >>> TargetOS.WIN.is_posix
        False
    """

    MACOS = "macos"
    WIN = "win"
    LINUX = "linux"

    def __str__(self) -> str:
        return self.value

    @property
    def is_posix(self) -> bool:
        """Check if the target builds with POSIX tooling (chmod, sleep, sh)."""
        return self in (TargetOS.MACOS, TargetOS.LINUX)


__all__ = [
    "OutputFormat",
    "ReleaseType",
    "TargetOS",
]
