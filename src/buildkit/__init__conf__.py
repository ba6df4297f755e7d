"""Static package metadata surfaced to CLI commands and documentation.

Kept in sync with ``pyproject.toml`` so the CLI can report its identity
without importing ``importlib.metadata`` at start-up.

Contents:
    * Module constants describing the distribution (name, title, version).
    * ``LAYEREDCONF_*`` identifiers that drive lib_layered_config path lookup.
    * :func:`print_info` - Render the metadata block for ``buildkit info``.
"""

from __future__ import annotations

name = "buildkit"
title = "Build-script helpers: version bumps, platform targets, packaging commands"
version = "0.1.0"
shell_command = "buildkit"

#: Vendor directory on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: str = "buildkit"
#: Application directory on macOS/Windows configuration paths.
LAYEREDCONF_APP: str = "buildkit"
#: XDG slug used for Linux configuration paths.
LAYEREDCONF_SLUG: str = "buildkit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for buildkit:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))  # noqa: T201
