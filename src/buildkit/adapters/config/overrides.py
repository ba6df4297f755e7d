"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config.

Values are read as JSON literals when they parse (``5``, ``true``,
``["a"]``) and kept as plain text otherwise, so ``--set
buildkit.packaging.settle_seconds=5`` yields an int while ``--set
buildkit.prerelease_id=rc`` stays a string.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]

OverrideTree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment: ``section`` plus the dotted ``key_path`` below it."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted(self) -> str:
        """``SECTION.KEY.SUBKEY`` form, used in error messages.

        Example:
            >>> ConfigOverride("buildkit", ("packaging", "runtime"), "node16").dotted
            'buildkit.packaging.runtime'
        """
        return ".".join((self.section, *self.key_path))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as a JSON literal, falling back to the text itself.

    Examples:
        >>> coerce_value("5"), coerce_value("false"), coerce_value("win32")
        (5, False, 'win32')
    """
    if not raw:
        return raw
    try:
        return cast(CoercedValue, orjson.loads(raw))
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse one ``SECTION.KEY[.SUBKEY...]=VALUE`` string.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: On a missing ``=``, a path without a dot, or an empty
            path component.

    Examples:
        >>> parse_override("buildkit.packaging.settle_seconds=5")
        ConfigOverride(section='buildkit', key_path=('packaging', 'settle_seconds'), value=5)
        >>> parse_override("buildkit.install_command=yarn --frozen=1").value
        'yarn --frozen=1'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, keys = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(keys.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section, key_path, coerce_value(value))


def _insert(tree: OverrideTree, override: ConfigOverride) -> None:
    """Place *override* into *tree*, creating tables along its key path.

    Raises:
        TypeError: If a key on the path already holds a scalar.
    """
    table: dict[str, object] = tree.setdefault(override.section, {})
    for key in override.key_path[:-1]:
        child = table.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(
                f"Expected dict at key {key!r}, got {type(child).__name__} (while applying {override.dotted})"
            )
        table = cast("dict[str, object]", child)
    table[override.key_path[-1]] = override.value


def build_override_tree(raw_overrides: Iterable[str]) -> OverrideTree:
    """Collect every ``--set`` string into one nested mapping.

    Later assignments to the same key win.

    Example:
        >>> build_override_tree(["buildkit.scripts_dir=a", "buildkit.scripts_dir=b"])
        {'buildkit': {'scripts_dir': 'b'}}
    """
    tree: OverrideTree = {}
    for raw in raw_overrides:
        _insert(tree, parse_override(raw))
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with *raw_overrides* deep-merged in.

    *config* itself is returned untouched when there is nothing to apply.

    Example:
        >>> cfg = Config({"buildkit": {"scripts_dir": "scripts"}}, {})
        >>> apply_overrides(cfg, ("buildkit.scripts_dir=tools",))["buildkit"]["scripts_dir"]
        'tools'
    """
    if not raw_overrides:
        return config
    return config.with_overrides(build_override_tree(raw_overrides))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "build_override_tree",
    "coerce_value",
    "parse_override",
]
