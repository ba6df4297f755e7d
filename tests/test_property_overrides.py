"""Property-based tests for ``--set`` configuration overrides.

Checks that ``parse_override`` and ``coerce_value`` keep their contracts
for generated strings, not just for the buildkit keys used elsewhere.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from buildkit.adapters.config.overrides import coerce_value, parse_override

ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)
names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    """coerce_value always yields a JSON-compatible Python value."""
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=0, max_value=3600))
def test_coerce_value_turns_settle_delays_into_ints(value: int) -> None:
    """Numeric strings such as settle delays become integers."""
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=names)
@settings(max_examples=200)
def test_coerce_value_keeps_identifiers_as_strings(raw: str) -> None:
    """Identifiers such as prerelease ids stay strings unless they are JSON literals."""
    if raw in ("true", "false", "null"):
        return

    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=names, key=names, value=st.text(max_size=50))
@settings(max_examples=200)
def test_parse_override_splits_section_key_and_value(section: str, key: str, value: str) -> None:
    """SECTION.KEY=VALUE parses into its three parts."""
    result = parse_override(f"{section}.{key}={value}")

    assert result.section == section
    assert result.key_path == (key,)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(section=names, key1=names, key2=names)
def test_parse_override_nested_keys(section: str, key1: str, key2: str) -> None:
    """SECTION.KEY1.KEY2=VALUE yields a two-element key path."""
    assert parse_override(f"{section}.{key1}.{key2}=x").key_path == (key1, key2)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_parse_override_rejects_strings_without_equals(raw: str) -> None:
    """Any string lacking '=' is rejected."""
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(key_part=st.text(min_size=1).filter(lambda s: "." not in s and "=" not in s), value=st.text(max_size=20))
@settings(max_examples=200)
def test_parse_override_rejects_keys_without_dot(key_part: str, value: str) -> None:
    """KEY=VALUE without a section is rejected."""
    with pytest.raises(ValueError, match="must contain at least one dot"):
        parse_override(f"{key_part}={value}")
