"""``buildkit info`` and the ``buildkit fail`` diagnostic."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from buildkit import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print name, version and install metadata."""
    with lib_log_rich.runtime.bind(job_id="cli-info"):
        logger.debug("Printing package metadata")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise RuntimeError; shows how errors and --traceback are reported."""
    with lib_log_rich.runtime.bind(job_id="cli-fail"):
        logger.warning("fail command invoked, raising RuntimeError")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
