"""CLI commands that depend on the packaging target.

Contents:
    * :func:`cli_target` - Print the canonical target for the host.
    * :func:`cli_pkg_commands` - Print the commands that package the CLI binary.
    * :func:`cli_installer` - Print the installer script invocation.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from buildkit.domain.enums import OutputFormat
from buildkit.domain.packaging import build_pkg_command, installer_invocation

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import echo_json, platform_option, resolve_cli_target

logger = logging.getLogger(__name__)


@click.command("target", context_settings=CLICK_CONTEXT_SETTINGS)
@platform_option
@click.pass_context
def cli_target(ctx: click.Context, host_platform: str | None) -> None:
    """Print the packaging target (macos, win or linux) for the host platform."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-target", extra={"command": "target"}):
        target = resolve_cli_target(cli_ctx, host_platform)
        click.echo(target.value)


@click.command("pkg-commands", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("output")
@platform_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="One command per line, or a JSON array",
)
@click.pass_context
def cli_pkg_commands(ctx: click.Context, output: str, host_platform: str | None, output_format: str) -> None:
    """Print the shell commands that package the CLI binary into OUTPUT.

    Commands are printed, never executed. POSIX targets include
    ``chmod +x OUTPUT`` and a settle delay after the packager call.

    Example:
        buildkit pkg-commands dist/lando
        buildkit pkg-commands dist/lando.exe --platform win32 --format json
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-pkg-commands", extra={"output": output}):
        target = resolve_cli_target(cli_ctx, host_platform)
        commands = build_pkg_command(output, target, cli_ctx.settings.packaging.to_profile())
        logger.info("Built %d packaging commands for %s", len(commands), target.value)
        if fmt is OutputFormat.JSON:
            echo_json(commands)
        else:
            for command in commands:
                click.echo(command)


@click.command("installer", context_settings=CLICK_CONTEXT_SETTINGS)
@platform_option
@click.pass_context
def cli_installer(ctx: click.Context, host_platform: str | None) -> None:
    """Print the command that runs the platform installer build script.

    Windows scripts are wrapped in a non-interactive PowerShell call.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-installer", extra={"command": "installer"}):
        target = resolve_cli_target(cli_ctx, host_platform)
        click.echo(installer_invocation(target, cli_ctx.settings.scripts_dir))


__all__ = ["cli_installer", "cli_pkg_commands", "cli_target"]
