"""Per-invocation CLI state and the ``lib_cli_exit_tools`` traceback switches.

The root group builds one :class:`CLIContext` and parks it on ``ctx.obj``;
subcommands fetch it back with :func:`get_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from buildkit.adapters.config.overrides import apply_overrides
from buildkit.adapters.config.settings import BuildSettings

if TYPE_CHECKING:
    from buildkit.composition import AppServices


class TracebackState(NamedTuple):
    """``lib_cli_exit_tools.config`` traceback flags at one point in time."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolved before dispatching to a subcommand.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Layered configuration with the root ``--set`` values merged in.
        settings: The validated ``[buildkit]`` section of *config*.
        services: Wired adapters from the composition root.
        profile: Root ``--profile``, if any.
        set_overrides: The raw ``--set`` strings, kept for profile reloads.
    """

    traceback: bool
    config: Config
    settings: BuildSettings
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration for *profile* and the profile it came from.

        Without *profile* this is the root configuration. With one, the
        configuration is loaded again for that profile and the root
        ``--set`` values are merged on top.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(ctx: click.Context, state: CLIContext) -> None:
    """Replace the services factory on ``ctx.obj`` with the resolved *state*."""
    ctx.obj = state


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext the root group stored on *ctx*.

    Raises:
        RuntimeError: When a subcommand runs without the root group.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), settings=BuildSettings(), services=MagicMock())
        >>> get_cli_context(ctx).settings.prerelease_id
        'beta'
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError(f"buildkit CLI context missing on ctx.obj (found {type(state).__name__})")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for ``lib_cli_exit_tools``."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags.

    Example:
        >>> state = snapshot_traceback_state()
        >>> state == (state.enabled, state.force_color)
        True
    """
    cfg = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(cfg, "traceback", False)),
        force_color=bool(getattr(cfg, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags read earlier by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
