"""Ports wired by :mod:`buildkit.composition`."""

from __future__ import annotations

from .ports import (
    DetectHostPlatform,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadBuildSettings,
)

__all__ = [
    "DetectHostPlatform",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBuildSettings",
]
