"""Settings shared by every ``buildkit`` command."""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

# Characters of traceback text lib_cli_exit_tools prints without / with --traceback.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
