"""Fixtures shared by the buildkit test suite."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from buildkit.composition import AppServices

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """CliRunner keeping stdout and stderr apart (click>=8.2)."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour and cursor escapes from rich output."""
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Run with traceback flags off and put every lib_cli_exit_tools setting back afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    cfg = lib_cli_exit_tools.config
    saved = {f.name: getattr(cfg, f.name) for f in fields(cfg)}
    yield
    for name, value in saved.items():
        setattr(cfg, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    """Forget configurations cached by earlier tests."""
    from buildkit.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def production_factory(clear_config_cache: None) -> Callable[[], AppServices]:
    from buildkit.composition import build_production

    return build_production


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Wrap a plain dict in lib_layered_config's Config."""
    return lambda data: Config(data, {})


@pytest.fixture
def cli_services() -> Callable[..., AppServices]:
    """Build services with fixed config data and host platform.

    Configuration display and logging are the production adapters, so CLI
    output and log handling match a real run.
    """
    from buildkit.adapters.config.display import display_config
    from buildkit.adapters.logging.setup import init_logging
    from buildkit.composition import build_testing

    def _build(config_data: dict[str, Any] | None = None, *, host_platform: str = "linux") -> AppServices:
        return replace(
            build_testing(host_platform=host_platform, config_data=config_data),
            display_config=display_config,
            init_logging=init_logging,
        )

    return _build


@pytest.fixture
def config_cli_context(cli_services: Callable[..., AppServices]) -> Callable[..., Callable[[], AppServices]]:
    """Services factory to pass as ``obj=`` to ``CliRunner.invoke``.

    Example:
        factory = config_cli_context({"buildkit": {"scripts_dir": "tools"}}, host_platform="win32")
        cli_runner.invoke(cli, ["installer"], obj=factory)
    """

    def _factory(
        config_data: dict[str, Any] | None = None, *, host_platform: str = "linux"
    ) -> Callable[[], AppServices]:
        services = cli_services(config_data, host_platform=host_platform)
        return lambda: services

    return _factory
