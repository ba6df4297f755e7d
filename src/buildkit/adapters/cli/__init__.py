"""The ``buildkit`` command line.

``main`` is what the console script calls; ``cli`` is the Click group, handy
for ``CliRunner`` in tests. Every subcommand is re-exported as ``cli_<name>``.
"""

from __future__ import annotations

from .commands import (
    cli_bump,
    cli_config,
    cli_fail,
    cli_fix_alias,
    cli_info,
    cli_installer,
    cli_parse_command,
    cli_pkg_commands,
    cli_target,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
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
