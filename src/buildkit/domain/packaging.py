"""Packaging and installer command assembly.

Builds the shell command strings a release pipeline runs to turn the CLI into
a standalone binary and to produce the platform installer. Nothing here
executes a command; callers hand the strings to their shell runner.

Contents:
    * :class:`PackagingProfile` - Fixed parts of the packaging invocation.
    * :func:`build_pkg_command` - Ordered commands producing a binary.
    * :func:`ps_task` - Wrap a command for a non-interactive PowerShell.
    * :func:`installer_invocation` - Installer script call for a target.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath

from .enums import TargetOS

POWERSHELL_PREFIX = "PowerShell -NoProfile -ExecutionPolicy Bypass -Command"
POWERSHELL_SUFFIX = "&& EXIT /B %errorlevel%"
DEFAULT_SCRIPTS_DIR = "scripts"

_INSTALLER_SCRIPTS: dict[TargetOS, str] = {
    TargetOS.MACOS: "build-darwin.sh",
    TargetOS.LINUX: "build-linux.sh",
    TargetOS.WIN: "build-win32.ps1",
}


@dataclass(frozen=True, slots=True)
class PackagingProfile:
    """Fixed parts of the packaging pipeline.

    Attributes:
        install_command: Installs production dependencies only.
        pkg_binary: Packager executable.
        runtime: Runtime prefix of the target token (``<runtime>-<target>``).
        config_file: Packager configuration file.
        entrypoint: Script bundled into the binary.
        settle_seconds: Delay after ``chmod`` so the binary is ready on disk.
    """

    install_command: str = "yarn --production"
    pkg_binary: str = "node_modules/.bin/pkg"
    runtime: str = "node14"
    config_file: str = "package.json"
    entrypoint: str = "bin/lando.js"
    settle_seconds: int = 2

    def target_token(self, target: TargetOS) -> str:
        """Return the packager target token, e.g. ``node14-linux``."""
        return f"{self.runtime}-{target.value}"


DEFAULT_PACKAGING_PROFILE = PackagingProfile()


def build_pkg_command(
    output: str,
    target: TargetOS,
    profile: PackagingProfile = DEFAULT_PACKAGING_PROFILE,
) -> list[str]:
    """Return the ordered shell commands that package the CLI into *output*.

    The packaging invocation keeps the target token at whitespace position 3
    and the output path as its last token. POSIX targets get a ``chmod +x``
    and a settle delay appended; Windows does not.

    Example:
        >>> build_pkg_command("dist/lando", TargetOS.LINUX)[2:]
        ['chmod +x dist/lando', 'sleep 2']
        >>> len(build_pkg_command("dist/lando.exe", TargetOS.WIN))
        2
    """
    pkg = " ".join(
        [
            profile.pkg_binary,
            profile.entrypoint,
            "--targets",
            profile.target_token(target),
            "--config",
            profile.config_file,
            "--output",
            output,
        ]
    )
    commands = [profile.install_command, pkg]
    if target.is_posix:
        commands.extend([f"chmod +x {output}", f"sleep {profile.settle_seconds}"])
    return commands


def ps_task(command: str) -> list[str]:
    """Wrap *command* so cmd.exe runs it through a non-interactive PowerShell.

    The trailing ``EXIT /B`` propagates PowerShell's exit code to the caller.

    Example:
        >>> ps_task("thing")[1]
        'thing'
    """
    return [POWERSHELL_PREFIX, command, POWERSHELL_SUFFIX]


def installer_invocation(target: TargetOS, scripts_dir: str = DEFAULT_SCRIPTS_DIR) -> str:
    """Return the command that builds the installer for *target*.

    POSIX targets call their shell script directly. Windows paths use
    backslashes and are wrapped with :func:`ps_task`.

    Example:
        >>> installer_invocation(TargetOS.MACOS)
        'scripts/build-darwin.sh'
        >>> "scripts\\\\build-win32.ps1" in installer_invocation(TargetOS.WIN)
        True
    """
    script = _INSTALLER_SCRIPTS[target]
    if target is TargetOS.WIN:
        return " ".join(ps_task(str(PureWindowsPath(scripts_dir, script))))
    return str(PurePosixPath(scripts_dir, script))


__all__ = [
    "DEFAULT_PACKAGING_PROFILE",
    "DEFAULT_SCRIPTS_DIR",
    "POWERSHELL_PREFIX",
    "POWERSHELL_SUFFIX",
    "PackagingProfile",
    "build_pkg_command",
    "installer_invocation",
    "ps_task",
]
