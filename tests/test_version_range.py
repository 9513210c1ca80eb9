"""Tests for VersionRange."""

import dataclasses

import pytest

from dotver import InvalidVersionError, UnsupportedRangeError, Version, VersionRange


def versions(*version_strings: str) -> list[Version]:
    """Build a list of versions from strings."""
    return [Version(version_string) for version_string in version_strings]


@pytest.fixture
def major_range() -> VersionRange:
    """Range covering every 1.x version."""
    return VersionRange("1", "2")


@pytest.mark.parametrize(
    ("start", "end"),
    [
        ("1.0-SNAPSHOT", "1.0-BETA"),
        ("1.-1", "1.-2"),
        ("1.+1", "1.+2"),
        ("1.1_000", "1.2_000"),
        (".3", ".3.0"),
        ("0..3", "0..4"),
        ("3.2.15.", "3.2.16."),
    ],
)
def test_new_reports_invalid_start(start: str, end: str) -> None:
    """Test the first invalid bound is reported."""
    with pytest.raises(InvalidVersionError) as exc_info:
        VersionRange(start, end)

    assert str(exc_info.value) == f"Invalid version string '{start}'"


def test_new_reports_invalid_end() -> None:
    """Test an invalid end bound reports its own string."""
    with pytest.raises(InvalidVersionError, match=r"Invalid version string '2\.'"):
        VersionRange("1", "2.")


def test_new_with_zerolike_versions() -> None:
    """Test ranges between zero versions."""
    assert VersionRange("", "").start == Version()
    assert VersionRange("0", "0").end == Version()


def test_new_with_existing_versions() -> None:
    """Test ranges built from Version instances."""
    versions_range = VersionRange(Version("1"), Version("1.0.1"))

    assert versions_range.start == Version("1")
    assert versions_range.end == Version("1.0.1")


def test_new_with_mixed_inputs() -> None:
    """Test each bound is coerced independently."""
    versions_range = VersionRange("1", Version("1.2.3"))

    assert str(versions_range.start) == "1"
    assert str(versions_range.end) == "1.2.3"


def test_new_accepts_inverted_bounds() -> None:
    """Test no ordering is enforced at construction."""
    versions_range = VersionRange("2", "1")

    assert versions_range.start > versions_range.end
    assert not versions_range.include("1.5")


def test_range_is_immutable(major_range: VersionRange) -> None:
    """Test bounds cannot be reassigned."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        major_range.start = Version("0")  # type: ignore[misc]


@pytest.mark.parametrize(
    "version_string",
    ["1.0-SNAPSHOT", "1.-1", "1.+1", "1.1_000", ".3", "0..3", "3.2.15."],
)
def test_include_rejects_invalid_versions(
    major_range: VersionRange, version_string: str
) -> None:
    """Test include validates its argument."""
    with pytest.raises(InvalidVersionError) as exc_info:
        major_range.include(version_string)

    assert str(exc_info.value) == f"Invalid version string '{version_string}'"


def test_include(major_range: VersionRange) -> None:
    """Test membership in a half-open range."""
    assert major_range.include("1.13.9") is True
    assert major_range.include("0.209.9") is False
    assert major_range.include(Version("1.999")) is True


def test_include_start_bound(major_range: VersionRange) -> None:
    """Test the start bound is included."""
    assert major_range.include("1") is True
    assert major_range.include("1.0.0") is True


def test_include_end_bound(major_range: VersionRange) -> None:
    """Test the end bound is excluded."""
    assert major_range.include("2") is False
    assert major_range.include("2.0.0.0") is False


def test_contains(major_range: VersionRange) -> None:
    """Test the in operator delegates to include."""
    assert "1.5" in major_range
    assert Version("2.1") not in major_range
    assert 1 not in major_range

    with pytest.raises(InvalidVersionError):
        "1.x" in major_range  # noqa: B015


def test_to_list_from_empty_start() -> None:
    """Test enumeration starting at the empty version."""
    versions_range = VersionRange("", "0.0.5")

    assert versions_range.to_list() == versions(
        "0", "0.0.1", "0.0.2", "0.0.3", "0.0.4"
    )


def test_to_list_from_zerolike_start() -> None:
    """Test enumeration starting at an all-zero version."""
    versions_range = VersionRange(Version("0"), Version("0.0.5"))

    assert versions_range.to_list() == versions(
        "0", "0.0.1", "0.0.2", "0.0.3", "0.0.4"
    )


def test_to_list_start_equals_end() -> None:
    """Test an empty range yields nothing."""
    assert VersionRange("2.1", "2.1").to_list() == []
    assert VersionRange("2.1", "2.1.0").to_list() == []


def test_to_list_to_build_version() -> None:
    """Test enumeration keeps the start version as given."""
    result = VersionRange("0.0.8", "0.1").to_list()

    assert [str(version) for version in result] == ["0.0.8", "0.0.9"]


def test_to_list_to_minor_version() -> None:
    """Test enumeration through every build of a minor version."""
    result = VersionRange("1", "1.1").to_list()

    assert len(result) == 10
    assert result == versions(
        "1",
        "1.0.1",
        "1.0.2",
        "1.0.3",
        "1.0.4",
        "1.0.5",
        "1.0.6",
        "1.0.7",
        "1.0.8",
        "1.0.9",
    )


def test_to_list_to_major_version() -> None:
    """Test enumeration carries across minor and major boundaries."""
    result = VersionRange(Version("1.8.9"), Version("2.1")).to_list()

    assert [str(version) for version in result] == [
        "1.8.9",
        "1.9",
        "1.9.1",
        "1.9.2",
        "1.9.3",
        "1.9.4",
        "1.9.5",
        "1.9.6",
        "1.9.7",
        "1.9.8",
        "1.9.9",
        "2",
        "2.0.1",
        "2.0.2",
        "2.0.3",
        "2.0.4",
        "2.0.5",
        "2.0.6",
        "2.0.7",
        "2.0.8",
        "2.0.9",
    ]


def test_to_list_is_increasing_and_within_range() -> None:
    """Test every enumerated version is in the range and in order."""
    versions_range = VersionRange("0.9.7", "1.1.2")
    result = versions_range.to_list()

    assert all(versions_range.include(version) for version in result)
    assert all(low < high for low, high in zip(result, result[1:], strict=False))


def test_to_list_is_recomputed(major_range: VersionRange) -> None:
    """Test each call returns a fresh list."""
    first = major_range.to_list()
    first.clear()

    assert len(major_range.to_list()) == 100


def test_iter(major_range: VersionRange) -> None:
    """Test iterating a range yields the enumerated versions."""
    assert list(VersionRange("0.0.8", "0.1")) == versions("0.0.8", "0.0.9")
    assert next(iter(major_range)) == Version("1")


def test_size() -> None:
    """Test size matches the enumeration length without building it."""
    assert VersionRange("1.8.9", "2.1").size() == 21
    assert VersionRange("2.1", "2.1").size() == 0
    assert VersionRange("1", "3").size() == 200


@pytest.mark.parametrize(
    ("start", "end"),
    [
        ("1.2.3.4", "2"),
        ("1", "1.0.0.1"),
        ("1.10", "2"),
        ("1", "1.2.10"),
    ],
)
def test_to_list_outside_odometer_model(start: str, end: str) -> None:
    """Test bounds the major.minor.build model cannot represent are rejected."""
    with pytest.raises(UnsupportedRangeError, match="Cannot enumerate with bound"):
        VersionRange(start, end).to_list()


def test_to_list_inverted_bounds() -> None:
    """Test enumerating backwards is rejected."""
    with pytest.raises(UnsupportedRangeError, match="down to"):
        VersionRange("2", "1").to_list()


def test_include_unaffected_by_odometer_limits() -> None:
    """Test membership works for bounds that cannot be enumerated."""
    versions_range = VersionRange("1.2.3.4", "1.20")

    assert versions_range.include("1.15.7.1")
    assert not versions_range.include("1.2.3")


def test_equality_and_hash() -> None:
    """Test ranges with equal bounds are equal."""
    assert VersionRange("1.0", "2") == VersionRange("1", "2.0.0")
    assert hash(VersionRange("1.0", "2")) == hash(VersionRange("1", "2.0.0"))
    assert VersionRange("1", "2") != VersionRange("1", "3")


def test_repr() -> None:
    """Test the debugging representation."""
    assert repr(VersionRange("1.0", "2.1")) == "VersionRange('1', '2.1')"
