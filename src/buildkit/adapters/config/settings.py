"""Typed settings for the ``[buildkit]`` configuration section.

Bridges lib_layered_config's dictionary output with Pydantic models and
converts them into the domain's value objects.

Contents:
    * :class:`PackagingSettings` - ``[buildkit.packaging]`` section.
    * :class:`BuildSettings` - ``[buildkit]`` section.
    * :func:`load_build_settings` - Validate a Config into BuildSettings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from buildkit.domain.aliases import RESERVED_NAMESPACE
from buildkit.domain.errors import ConfigurationError
from buildkit.domain.packaging import DEFAULT_PACKAGING_PROFILE, DEFAULT_SCRIPTS_DIR, PackagingProfile
from buildkit.domain.versioning import DEFAULT_PRERELEASE_ID

_PROFILE = DEFAULT_PACKAGING_PROFILE


class PackagingSettings(BaseModel):
    """Validated ``[buildkit.packaging]`` settings.

    Example:
        >>> PackagingSettings().runtime
        'node14'
        >>> PackagingSettings(settle_seconds=5).to_profile().settle_seconds
        5
    """

    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    install_command: str = _PROFILE.install_command
    pkg_binary: str = _PROFILE.pkg_binary
    runtime: str = _PROFILE.runtime
    config_file: str = _PROFILE.config_file
    entrypoint: str = _PROFILE.entrypoint
    settle_seconds: int = Field(default=_PROFILE.settle_seconds, ge=0)

    def to_profile(self) -> PackagingProfile:
        """Convert to the domain's PackagingProfile."""
        return PackagingProfile(**self.model_dump())


class BuildSettings(BaseModel):
    """Validated ``[buildkit]`` settings.

    Example:
        >>> settings = BuildSettings()
        >>> settings.prerelease_id, settings.reserved_namespace, settings.scripts_dir
        ('beta', 'lando', 'scripts')
        >>> settings.host_platform is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    prerelease_id: str = Field(default=DEFAULT_PRERELEASE_ID, min_length=1)
    reserved_namespace: str = Field(default=RESERVED_NAMESPACE, min_length=1)
    scripts_dir: str = Field(default=DEFAULT_SCRIPTS_DIR, min_length=1)
    host_platform: str | None = None
    packaging: PackagingSettings = Field(default_factory=PackagingSettings)

    @field_validator("host_platform", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Treat an empty ``host_platform`` as "detect at runtime".

        Examples:
            >>> BuildSettings._coerce_empty_string_to_none("  ")
            >>> BuildSettings._coerce_empty_string_to_none("darwin")
            'darwin'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_build_settings(config: Config) -> BuildSettings:
    """Validate the ``[buildkit]`` section of *config* into BuildSettings.

    Missing keys fall back to the domain defaults, so an empty configuration
    yields the same behaviour as calling the domain functions directly.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Frozen BuildSettings instance.

    Raises:
        ConfigurationError: If the section is not a table or a value fails
            validation.

    Example:
        >>> from lib_layered_config import Config
        >>> load_build_settings(Config({"buildkit": {"prerelease_id": "rc"}}, {})).prerelease_id
        'rc'
    """
    raw: object = config.as_dict().get("buildkit", {})
    if not raw:
        return BuildSettings()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[buildkit] must be a table, got {type(raw).__name__}")
    try:
        return BuildSettings.model_validate(dict(cast("Mapping[str, Any]", raw)))
    except ValidationError as exc:
        details = "; ".join(
            f"buildkit.{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(details) from exc


__all__ = [
    "BuildSettings",
    "PackagingSettings",
    "load_build_settings",
]
