"""Wiring of adapters to the application ports.

:func:`build_production` is what the console script runs with;
:func:`build_testing` swaps every I/O boundary for the in-memory adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_build_settings
from ..adapters.logging.setup import init_logging
from ..adapters.platform.host import detect_host_platform

if TYPE_CHECKING:
    from ..application.ports import (
        DetectHostPlatform,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBuildSettings,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """The port implementations one CLI run uses."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_build_settings: LoadBuildSettings
    detect_host_platform: DetectHostPlatform
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by lib_layered_config, lib_log_rich and ``sys.platform``."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_build_settings=load_build_settings,
        detect_host_platform=detect_host_platform,
        init_logging=init_logging,
    )


def build_testing(
    *,
    host_platform: str = "linux",
    config_data: Mapping[str, Any] | None = None,
) -> AppServices:
    """Services with fixed configuration and a fixed host platform.

    Settings validation stays real, so invalid *config_data* fails exactly
    as it would in production.

    Example:
        >>> services = build_testing(host_platform="darwin", config_data={"buildkit": {"scripts_dir": "tools"}})
        >>> services.detect_host_platform(), services.load_build_settings(services.get_config()).scripts_dir
        ('darwin', 'tools')
    """
    from ..adapters.memory import (
        FixedHostPlatform,
        StaticConfig,
        display_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=StaticConfig(dict(config_data or {})),
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_build_settings=load_build_settings,
        detect_host_platform=FixedHostPlatform(host_platform),
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
