"""Domain enum tests: member values, string equality, fallbacks and member counts."""

from __future__ import annotations

import pytest

from buildkit.domain.enums import OutputFormat, ReleaseType, TargetOS

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
def test_output_formats_are_the_config_command_choices() -> None:
    """`config --format` and `pkg-commands --format` accept exactly these."""
    assert [fmt.value for fmt in OutputFormat] == ["human", "json"]
    assert OutputFormat("json") is OutputFormat.JSON


# ======================== ReleaseType ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("major", ReleaseType.MAJOR),
        ("minor", ReleaseType.MINOR),
        ("patch", ReleaseType.PATCH),
        ("prerelease", ReleaseType.PRERELEASE),
    ],
)
def test_release_type_parse_recognizes_every_member(token: str, expected: ReleaseType) -> None:
    """Known tokens map to their members."""
    assert ReleaseType.parse(token) is expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("token", ["jacksonbrowne", "", "MAJOR", "pre", None])
def test_release_type_parse_falls_back_to_patch(token: str | None) -> None:
    """Unknown, empty, differently cased or missing tokens become PATCH."""
    assert ReleaseType.parse(token) is ReleaseType.PATCH


@pytest.mark.os_agnostic
def test_release_type_parse_passes_members_through() -> None:
    """A member given to parse is returned unchanged."""
    assert ReleaseType.parse(ReleaseType.MINOR) is ReleaseType.MINOR


@pytest.mark.os_agnostic
def test_release_type_member_count() -> None:
    """ReleaseType must have exactly 4 members."""
    assert len(ReleaseType) == 4


# ======================== TargetOS ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_str", "posix"),
    [
        (TargetOS.MACOS, "macos", True),
        (TargetOS.WIN, "win", False),
        (TargetOS.LINUX, "linux", True),
    ],
)
def test_target_os_values_and_posix_flag(member: TargetOS, expected_str: str, posix: bool) -> None:
    """Each TargetOS member renders as its value and knows whether it is POSIX."""
    assert member == expected_str
    assert str(member) == expected_str
    assert member.is_posix is posix


@pytest.mark.os_agnostic
def test_target_os_member_count() -> None:
    """TargetOS must have exactly 3 members."""
    assert len(TargetOS) == 3
