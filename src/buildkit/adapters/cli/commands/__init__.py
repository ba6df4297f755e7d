"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info commands from :mod:`.info`
    * Config command from :mod:`.config`
    * Version bump command from :mod:`.bump_cmd`
    * Target, packaging and installer commands from :mod:`.target_cmd`
    * Alias and command-line descriptor commands from :mod:`.descriptor_cmd`
"""

from __future__ import annotations

from .bump_cmd import cli_bump
from .config import cli_config
from .descriptor_cmd import cli_fix_alias, cli_parse_command
from .info import cli_fail, cli_info
from .target_cmd import cli_installer, cli_pkg_commands, cli_target

__all__ = [
    "cli_bump",
    "cli_config",
    "cli_fail",
    "cli_fix_alias",
    "cli_info",
    "cli_installer",
    "cli_parse_command",
    "cli_pkg_commands",
    "cli_target",
]
