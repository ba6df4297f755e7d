"""Alias normalization for generated API documentation descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

RESERVED_NAMESPACE = "lando"


def fix_alias(descriptor: Mapping[str, Any], namespace: str = RESERVED_NAMESPACE) -> dict[str, Any]:
    """Promote a namespaced alias to a global function descriptor.

    Descriptors whose ``alias`` starts with ``<namespace>.`` are documented as
    global functions under that alias: ``name`` takes the alias, ``scope``
    becomes ``global``, ``kind`` becomes ``function`` and ``memberof`` is
    removed. An alias equal to the bare namespace is left alone, as is every
    descriptor without a matching alias.

    The input is not mutated; a new dict is always returned. Applying the
    function twice gives the same result as applying it once.

    Example:
        >>> fix_alias({"alias": "lando.thing", "memberof": "app"})
        {'alias': 'lando.thing', 'name': 'lando.thing', 'scope': 'global', 'kind': 'function'}
        >>> fix_alias({"alias": "stuff"})
        {'alias': 'stuff'}
    """
    fixed = dict(descriptor)
    alias = fixed.get("alias")
    if not isinstance(alias, str) or alias == namespace or not alias.startswith(f"{namespace}."):
        return fixed

    fixed["name"] = alias
    fixed["scope"] = "global"
    fixed["kind"] = "function"
    fixed.pop("memberof", None)
    return fixed


__all__ = [
    "RESERVED_NAMESPACE",
    "fix_alias",
]
