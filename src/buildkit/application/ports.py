"""Call signatures the CLI needs from the outside world.

Adapters are plain functions or small callables; they match these Protocols
structurally, so nothing subclasses them. ``Config`` and ``BuildSettings``
are only imported for type checking to keep this layer free of adapter
imports at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import BuildSettings


class GetConfig(Protocol):
    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Print *config*, or one *section* of it; ValueError for an unknown section."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadBuildSettings(Protocol):
    """Validate ``[buildkit]``; ConfigurationError when it is invalid."""

    def __call__(self, config: Config) -> BuildSettings: ...


class DetectHostPlatform(Protocol):
    """Return a ``sys.platform``-style identifier such as ``darwin`` or ``win32``."""

    def __call__(self) -> str: ...


class InitLogging(Protocol):
    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DetectHostPlatform",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBuildSettings",
]
