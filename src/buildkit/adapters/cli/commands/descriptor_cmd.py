"""CLI commands that normalize and build descriptors, printed as JSON.

Contents:
    * :func:`cli_fix_alias` - Normalize a documentation descriptor's alias.
    * :func:`cli_parse_command` - Split a command line into a run descriptor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click
from click import get_text_stream

from buildkit.domain.aliases import fix_alias
from buildkit.domain.commands import parse_command

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import echo_json, fail_invalid_argument

logger = logging.getLogger(__name__)


def _load_descriptor(raw: str) -> dict[str, Any]:
    """Parse a JSON object, exiting with INVALID_ARGUMENT on anything else."""
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        fail_invalid_argument(f"descriptor is not valid JSON: {exc}", exc)
    if not isinstance(data, Mapping):
        fail_invalid_argument(f"descriptor must be a JSON object, got {type(data).__name__}")
    return dict(data)


@click.command("fix-alias", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("descriptor", default="-")
@click.option(
    "--namespace",
    type=str,
    default=None,
    help="Reserved alias namespace (default: [buildkit].reserved_namespace)",
)
@click.pass_context
def cli_fix_alias(ctx: click.Context, descriptor: str, namespace: str | None) -> None:
    """Normalize the alias of a DESCRIPTOR JSON object ('-' reads stdin).

    Aliases under the reserved namespace become global functions named
    after the alias.

    Example:
        buildkit fix-alias '{"alias": "lando.start", "memberof": "app"}'
    """
    cli_ctx = get_cli_context(ctx)
    reserved = namespace or cli_ctx.settings.reserved_namespace
    raw = get_text_stream("stdin").read() if descriptor == "-" else descriptor

    with lib_log_rich.runtime.bind(job_id="cli-fix-alias", extra={"namespace": reserved}):
        fixed = fix_alias(_load_descriptor(raw), reserved)
        logger.debug("Normalized descriptor alias %r", fixed.get("alias"))
        echo_json(fixed)


@click.command("parse-command", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("command_line")
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Working directory recorded in the descriptor (default: current directory)",
)
def cli_parse_command(command_line: str, cwd: Path | None) -> None:
    """Split COMMAND_LINE on whitespace into a run descriptor.

    Example:
        buildkit parse-command "yarn test:unit"
    """
    with lib_log_rich.runtime.bind(job_id="cli-parse-command", extra={"command": "parse-command"}):
        descriptor = parse_command(command_line, cwd)
        logger.debug("Parsed %d tokens", len(descriptor.run))
        echo_json(descriptor.as_dict())


__all__ = ["cli_fix_alias", "cli_parse_command"]
