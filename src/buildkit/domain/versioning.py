"""Semantic version increments for release tooling.

Contents:
    * :data:`DEFAULT_PRERELEASE_ID` - Identifier used when a prerelease starts.
    * :func:`bump_version` - Increment a version string by release type.
"""

from __future__ import annotations

import semver

from .enums import ReleaseType
from .errors import InvalidVersionError

DEFAULT_PRERELEASE_ID = "beta"


def bump_version(
    version: str,
    release_type: str | ReleaseType = ReleaseType.PATCH,
    prerelease_id: str = DEFAULT_PRERELEASE_ID,
) -> str:
    """Return *version* incremented according to *release_type*.

    Rules:
        * ``major`` increments MAJOR, resets MINOR/PATCH, drops the prerelease.
        * ``minor`` increments MINOR, resets PATCH, drops the prerelease.
        * ``patch`` increments PATCH and drops the prerelease. Unrecognized
          release types behave exactly like ``patch``.
        * ``prerelease`` increments the counter of an existing prerelease,
          keeping its identifier, or starts ``-{prerelease_id}.1``.

    Args:
        version: Semantic version in ``MAJOR.MINOR.PATCH[-ID.N]`` form.
        release_type: Release granularity, as a member or a plain string.
        prerelease_id: Identifier for a freshly started prerelease.

    Returns:
        The bumped version string.

    Raises:
        InvalidVersionError: If *version* is not a semantic version.

    Example:
        >>> bump_version("1.0.0")
        '1.0.1'
        >>> bump_version("1.0.0", "major")
        '2.0.0'
        >>> bump_version("1.0.0-beta.1", "prerelease")
        '1.0.0-beta.2'
        >>> bump_version("1.0.0", "prerelease", "rc")
        '1.0.0-rc.1'
        >>> bump_version("1.0.0", "jacksonbrowne")
        '1.0.1'
    """
    try:
        current = semver.Version.parse(version)
    except (TypeError, ValueError) as exc:
        raise InvalidVersionError(f"Invalid version: {version!r}") from exc

    kind = ReleaseType.parse(release_type)
    if kind is ReleaseType.MAJOR:
        bumped = current.bump_major()
    elif kind is ReleaseType.MINOR:
        bumped = current.bump_minor()
    elif kind is ReleaseType.PRERELEASE:
        bumped = current.bump_prerelease(token=prerelease_id)
    else:
        bumped = current.bump_patch()
    return str(bumped)


__all__ = [
    "DEFAULT_PRERELEASE_ID",
    "bump_version",
]
