"""lib_layered_config loading, ``--set`` overrides, display and the ``[buildkit]`` settings model."""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import BuildSettings, PackagingSettings, load_build_settings

__all__ = [
    "BuildSettings",
    "PackagingSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_build_settings",
]
