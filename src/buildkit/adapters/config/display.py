"""Configuration display for ``buildkit config``.

Delegates rendering to lib_layered_config's Rich display and flushes pending
lib_log_rich output first so log lines do not interleave with the dump.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from buildkit.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render *config* (or one *section* of it) to stdout.

    Args:
        config: Already-loaded layered configuration.
        output_format: TOML-like human output or JSON.
        section: Restrict output to one top-level section, e.g. ``buildkit``.
        console: Rich console to write to; tests pass a recording console.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: If *section* does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
