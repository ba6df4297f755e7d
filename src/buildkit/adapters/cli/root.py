"""The ``buildkit`` command group.

Before any subcommand runs, the group turns the services factory on
``ctx.obj`` into a :class:`~buildkit.adapters.cli.context.CLIContext`. It
loads the layered configuration for ``--profile``, merges the ``--set``
values and starts logging. It then validates ``[buildkit]``, so invalid
settings stop every command with exit code 78 instead of surfacing halfway
through one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import rich_click as click

from buildkit import __init__conf__
from buildkit.adapters.config.overrides import apply_overrides
from buildkit.domain.errors import ConfigurationError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from buildkit.composition import AppServices

logger = logging.getLogger(__name__)


def _bootstrap(
    factory: Callable[[], AppServices],
    *,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
) -> CLIContext:
    services = factory()
    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc

    services.init_logging(config)

    try:
        settings = services.load_build_settings(config)
    except ConfigurationError as exc:
        logger.error("Invalid buildkit configuration: %s", exc)
        click.echo(f"Error: invalid configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    return CLIContext(
        traceback=traceback,
        config=config,
        settings=settings,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load (e.g. 'ci', 'release')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeat for more.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Helpers for the lando build scripts: version bumps, pkg targets, installers."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("buildkit CLI invoked without a services factory on ctx.obj")

    store_cli_context(
        ctx,
        _bootstrap(factory, traceback=traceback, profile=profile, set_overrides=set_overrides),
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here: the command modules import this package.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
