"""Port implementations for tests: fixed data, no filesystem, no logging backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import StaticConfig, display_config_in_memory, get_default_config_path_in_memory
from .logging import init_logging_in_memory
from .platform import FixedHostPlatform

if TYPE_CHECKING:
    from buildkit.application.ports import (
        DetectHostPlatform,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _get_config: GetConfig = StaticConfig()
    _get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _display_config: DisplayConfig = display_config_in_memory
    _detect_host_platform: DetectHostPlatform = FixedHostPlatform()
    _init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "FixedHostPlatform",
    "StaticConfig",
    "display_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
