"""Run the ``buildkit`` group and turn its outcome into an exit code.

Both the console script and ``python -m buildkit`` go through :func:`main`,
so they print errors and pick exit codes identically.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from buildkit import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from buildkit.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = snapshot_traceback_state().enabled
    if not isinstance(exc, SystemExit):
        lib_cli_exit_tools.print_exception_message(
            trace_back=verbose,
            length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
        )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand the factory to ctx.obj.
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - SystemExit and KeyboardInterrupt map to exit codes too
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``buildkit`` with *argv* and return the process exit code.

    Args:
        argv: Arguments after the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the ``--traceback`` flags back as they were
            before the run.
        services_factory: Builds the AppServices for this run, normally
            :func:`buildkit.composition.build_production`.

    Raises:
        ValueError: Without a *services_factory*.

    Example:
        >>> from buildkit.composition import build_testing
        >>> main(["bump", "1.0.0", "minor"], services_factory=build_testing)  # doctest: +SKIP
        1.1.0
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required, e.g. buildkit.composition.build_production")

    before = snapshot_traceback_state()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(before)
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
