"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a buildkit command carries one of these values
instead of a bare ``1``. Signal codes are informational only;
``lib_cli_exit_tools`` translates signals automatically.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0-1: generic success / failure
    * 22: EINVAL - malformed version, descriptor or option value
    * 78: EX_CONFIG (sysexits.h) - invalid ``[buildkit]`` settings
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
