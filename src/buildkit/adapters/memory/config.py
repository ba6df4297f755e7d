"""Configuration adapters that never touch the filesystem."""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat


@dataclass(slots=True)
class StaticConfig:
    """GetConfig stand-in serving fixed *data* for every profile.

    Each call records the requested profile in ``requested_profiles``.

    Example:
        >>> loader = StaticConfig({"buildkit": {"scripts_dir": "tools"}})
        >>> loader(profile="ci")["buildkit"]["scripts_dir"], loader.requested_profiles
        ('tools', ['ci'])
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    requested_profiles: list[str | None] = field(default_factory=list)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        self.requested_profiles.append(profile)
        return Config(dict(self.data), {})


def get_default_config_path_in_memory() -> Path:
    """Path where a defaults file would live; nothing is written there."""
    return Path(tempfile.gettempdir()) / "buildkit" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing."""


__all__ = [
    "StaticConfig",
    "display_config_in_memory",
    "get_default_config_path_in_memory",
]
