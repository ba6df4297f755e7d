"""Shared helpers for CLI command modules.

Internal module (underscore prefix) providing common patterns used across
multiple command implementations.

Contents:
    * :data:`platform_option` - ``--platform`` option decorator.
    * :func:`resolve_cli_target` - Pick the host platform and resolve its target.
    * :func:`echo_json` - Print a JSON document with orjson.
    * :func:`fail_invalid_argument` - Report an error and exit with INVALID_ARGUMENT.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import orjson
import rich_click as click

from buildkit.domain.enums import TargetOS
from buildkit.domain.targets import resolve_target

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

platform_option = click.option(
    "--platform",
    "host_platform",
    type=str,
    default=None,
    metavar="ID",
    help="Host platform identifier to resolve (darwin, win32, linux, ...). Defaults to the running host.",
)


def resolve_cli_target(cli_ctx: CLIContext, host_platform: str | None) -> TargetOS:
    """Resolve the packaging target for this invocation.

    The identifier comes from ``--platform``, then ``[buildkit].host_platform``,
    then the platform detection service.
    """
    host = host_platform or cli_ctx.settings.host_platform or cli_ctx.services.detect_host_platform()
    target = resolve_target(host)
    logger.debug("Resolved host platform %r to target %s", host, target.value)
    return target


def echo_json(data: Any) -> None:
    """Print *data* as indented JSON on stdout."""
    click.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8"))


def fail_invalid_argument(message: str, exc: BaseException | None = None) -> NoReturn:
    """Print *message* to stderr and exit with INVALID_ARGUMENT (22)."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = [
    "echo_json",
    "fail_invalid_argument",
    "platform_option",
    "resolve_cli_target",
]
