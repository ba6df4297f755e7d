"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[buildkit]`` settings fail validation. Typically caught
    at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from buildkit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("buildkit.packaging.settle_seconds: must be >= 0")
        >>> str(err)
        'buildkit.packaging.settle_seconds: must be >= 0'
    """


class InvalidVersionError(ValueError):
    """A version string is not a valid semantic version.

    Inherits from ValueError so callers treating malformed input as a plain
    value problem keep working.

    Example:
        >>> from buildkit.domain.errors import InvalidVersionError
        >>> err = InvalidVersionError("not.a.version")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidVersionError",
]
