"""Root group stories: help, version, info, fail and traceback handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from buildkit import __init__conf__
from buildkit.adapters import cli as cli_mod
from buildkit.composition import AppServices


@pytest.fixture
def services_factory(cli_services: Callable[..., AppServices]) -> Callable[[], AppServices]:
    return cli_services

# ======================== --traceback flags ========================


@pytest.mark.os_agnostic
def test_traceback_flags_round_trip(managed_traceback_state: None) -> None:
    """Flags switched on by --traceback can be put back from a snapshot."""
    before = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)
    during = cli_mod.snapshot_traceback_state()
    cli_mod.restore_traceback_state(before)

    assert (before.enabled, before.force_color) == (False, False)
    assert (during.enabled, during.force_color) == (True, True)
    assert cli_mod.snapshot_traceback_state() == before


@pytest.mark.os_agnostic
def test_commands_see_traceback_enabled_only_during_the_run(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    services_factory: Callable[[], AppServices],
) -> None:
    seen: list[bool] = []
    monkeypatch.setattr(__init__conf__, "print_info", lambda: seen.append(cli_mod.snapshot_traceback_state().enabled))

    assert cli_mod.main(["--traceback", "info"], services_factory=services_factory) == 0
    assert seen == [True]
    assert not cli_mod.snapshot_traceback_state().enabled


@pytest.mark.os_agnostic
def test_traceback_flags_survive_when_restore_is_disabled(
    managed_traceback_state: None,
    services_factory: Callable[[], AppServices],
) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=services_factory)

    assert cli_mod.snapshot_traceback_state().enabled


# ======================== main() ========================


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("argv", "code", "stdout"),
    [
        (["bump", "1.2.3", "minor"], 0, "1.3.0"),
        (["target", "--platform", "win32"], 0, "win"),
        (["installer", "--platform", "darwin"], 0, "scripts/build-darwin.sh"),
    ],
)
def test_main_prints_command_output(
    argv: list[str],
    code: int,
    stdout: str,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    services_factory: Callable[[], AppServices],
) -> None:
    assert cli_mod.main(argv, services_factory=services_factory) == code
    assert capsys.readouterr().out.strip() == stdout


@pytest.mark.os_agnostic
def test_main_without_arguments_prints_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    services_factory: Callable[[], AppServices],
) -> None:
    assert cli_mod.main([], services_factory=services_factory) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_passes_invalid_argument_code_through(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    services_factory: Callable[[], AppServices],
) -> None:
    """A malformed version exits 22 with the reason on stderr."""
    code = cli_mod.main(["bump", "not.a.version"], services_factory=services_factory)

    assert code == cli_mod.ExitCode.INVALID_ARGUMENT
    assert "Invalid version" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_usage_error_exits_2(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    services_factory: Callable[[], AppServices],
) -> None:
    assert cli_mod.main(["pkg-commands"], services_factory=services_factory) == 2
    assert "Missing argument" in capsys.readouterr().err


@pytest.mark.os_agnostic
@pytest.mark.parametrize("verbose", [True, False])
def test_main_reports_unexpected_errors(
    verbose: bool,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    services_factory: Callable[[], AppServices],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the whole traceback; without it only the summary."""
    argv = ["--traceback", "fail"] if verbose else ["fail"]

    code = cli_mod.main(argv, services_factory=services_factory)

    err = strip_ansi(capsys.readouterr().err)
    assert code != 0
    assert "I should fail" in err or "RuntimeError" in err
    if verbose:
        assert "Traceback (most recent call last)" in err
        assert "[TRUNCATED" not in err
    assert not cli_mod.snapshot_traceback_state().enabled


# ======================== root group via CliRunner ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("args", [[], ["--traceback"]])
def test_group_without_subcommand_prints_help(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
    args: list[str],
) -> None:
    """The root group prints help when no subcommand is given."""
    result: Result = cli_runner.invoke(cli_mod.cli, args, obj=config_cli_context({}))

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_subcommand(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
    strip_ansi: Callable[[str], str],
) -> None:
    """All registered subcommands appear in --help."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=config_cli_context({}))

    plain = strip_ansi(result.output)
    for name in ("bump", "target", "pkg-commands", "installer", "fix-alias", "parse-command", "config", "info"):
        assert name in plain


@pytest.mark.os_agnostic
def test_version_option_prints_shell_command_and_version(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    """--version reports the package version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=config_cli_context({}))

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    """info prints the package name and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=config_cli_context({}))

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.stdout
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_fail_command_raises_runtime_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    """fail raises RuntimeError for main() to format."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["fail"], obj=config_cli_context({}))

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_unknown_command_is_reported(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    """Unknown subcommands fail with Click's usage error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=config_cli_context({}))

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_missing_services_factory_is_a_bug(cli_runner: CliRunner) -> None:
    """Invoking the group without a factory fails loudly."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=None)

    assert isinstance(result.exception, RuntimeError)
