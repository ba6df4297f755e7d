"""Read buildkit's layered configuration through lib_layered_config.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, ``.env`` and environment variables. A profile
adds ``profile/<name>/`` to every file location. Results are cached per
``(profile, start_dir)`` because one CLI run asks several times.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from buildkit import __init__conf__

_DEFAULTS_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Raise ValueError unless *profile* is safe as a directory name.

    Example:
        >>> validate_profile("ci")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ValueError: ...
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Location of the bundled ``defaultconfig.toml``."""
    return _DEFAULTS_FILE


@lru_cache(maxsize=4)
def _read(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULTS_FILE,
        start_dir=start_dir,
    )


class _CachedLoader:
    """The ``get_config`` callable; ``cache_clear()`` forgets earlier reads."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration, optionally for *profile*.

        Raises:
            ValueError: If *profile* is not a valid profile name.

        Example:
            >>> get_config().get("buildkit.prerelease_id", default="beta")
            'beta'
        """
        if profile is not None:
            validate_profile(profile)
        return _read(profile, start_dir)

    @staticmethod
    def cache_clear() -> None:
        _read.cache_clear()


get_config = _CachedLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
