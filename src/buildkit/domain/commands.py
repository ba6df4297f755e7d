"""Command-line parsing into runnable descriptors."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_MODE = "collect"


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Execution options handed to the shell runner."""

    mode: str
    cwd: str


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """Executable plus arguments, with the options used to run them."""

    run: list[str]
    opts: CommandOptions

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-ready ``{"run": [...], "opts": {...}}`` mapping."""
        return asdict(self)


def parse_command(command_line: str, cwd: str | os.PathLike[str] | None = None) -> CommandDescriptor:
    """Split *command_line* on whitespace into a :class:`CommandDescriptor`.

    Options default to ``collect`` mode in the absolute current working
    directory. Tokens are taken as-is; quoting is not interpreted.

    Args:
        command_line: Whitespace-delimited command, e.g. ``"yarn test"``.
        cwd: Directory to run in. Defaults to the current working directory.

    Example:
        >>> descriptor = parse_command("thing stuff", cwd="/tmp")
        >>> descriptor.run
        ['thing', 'stuff']
        >>> descriptor.opts.mode
        'collect'
    """
    directory = os.path.abspath(cwd if cwd is not None else os.curdir)
    return CommandDescriptor(
        run=command_line.split(),
        opts=CommandOptions(mode=DEFAULT_MODE, cwd=directory),
    )


__all__ = [
    "DEFAULT_MODE",
    "CommandDescriptor",
    "CommandOptions",
    "parse_command",
]
