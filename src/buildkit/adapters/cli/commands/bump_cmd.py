"""CLI command for semantic version bumps.

Prints the bumped version so release scripts can capture it::

    NEXT=$(buildkit bump "$CURRENT" minor)

Contents:
    * :func:`cli_bump` - Bump a version string.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from buildkit.domain.enums import ReleaseType
from buildkit.domain.errors import InvalidVersionError
from buildkit.domain.versioning import bump_version

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import fail_invalid_argument

logger = logging.getLogger(__name__)


@click.command("bump", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("version")
@click.argument("release_type", required=False, default=ReleaseType.PATCH.value)
@click.option(
    "--preid",
    "prerelease_id",
    type=str,
    default=None,
    help="Identifier for a new prerelease (default: [buildkit].prerelease_id)",
)
@click.pass_context
def cli_bump(ctx: click.Context, version: str, release_type: str, prerelease_id: str | None) -> None:
    """Print VERSION bumped by RELEASE_TYPE (major, minor, patch, prerelease).

    Unknown release types bump the patch version.

    Example:
        buildkit bump 1.3.0 major              # 2.0.0
        buildkit bump 1.3.0                    # 1.3.1
        buildkit bump 1.3.0-beta.1 prerelease  # 1.3.0-beta.2
        buildkit bump 1.3.0 prerelease --preid rc  # 1.3.0-rc.1
    """
    cli_ctx = get_cli_context(ctx)
    preid = prerelease_id or cli_ctx.settings.prerelease_id
    kind = ReleaseType.parse(release_type)

    with lib_log_rich.runtime.bind(job_id="cli-bump", extra={"type": kind.value}):
        if kind.value != release_type:
            logger.warning("Unknown release type %r, bumping %s instead", release_type, kind.value)
        try:
            bumped = bump_version(version, kind, preid)
        except InvalidVersionError as exc:
            fail_invalid_argument(str(exc), exc)
        logger.info("Bumped version %s -> %s", version, bumped)
        click.echo(bumped)


__all__ = ["cli_bump"]
