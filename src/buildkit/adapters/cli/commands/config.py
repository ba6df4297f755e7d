"""``buildkit config``: show the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from buildkit.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like) or json",
)
@click.option("--section", default=None, help="Print one section only, e.g. 'buildkit'")
@click.option("--profile", default=None, help="Reload for this profile instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the configuration buildkit runs with.

    Layers, lowest first: bundled defaults, app, host, user, .env, environment.
    Root ``--set`` values apply on top, also when ``--profile`` reloads.
    """
    cli_ctx = get_cli_context(ctx)
    config, active_profile = cli_ctx.config_for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config", extra={"format": fmt.value, "profile": active_profile, "section": section}
    ):
        logger.info("Displaying configuration")
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=active_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
