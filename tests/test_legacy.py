from dataclasses import FrozenInstanceError

import pytest

import semv
from semv import LegacyVersion, Version, from_legacy


def test_conversion():
    converted = Version.from_legacy(LegacyVersion(1, 2, 3, 4))

    assert converted == Version(1, 2, 3, None, "4")
    assert converted.pre_release is None
    assert converted.build_metadata == "4"
    assert str(converted) == "1.2.3+4"


@pytest.mark.parametrize(
    "legacy, expected",
    [
        (LegacyVersion(1, 2), "1.2.0+0"),
        (LegacyVersion(1, 2, 3), "1.2.3+0"),
        (LegacyVersion(1, 2, None, 7), "1.2.0+7"),
        (LegacyVersion(0, 0, 0, 0), "0.0.0+0"),
    ],
)
def test_conversion_of_absent_fields(legacy, expected):
    assert str(from_legacy(legacy)) == expected


def test_omitted_fields_read_as_zero():
    legacy = LegacyVersion(1, 2)

    assert legacy.build == 0
    assert legacy.revision == 0
    assert legacy == LegacyVersion(1, 2, 0, 0)
    assert str(legacy) == "1.2.0.0"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.2", LegacyVersion(1, 2)),
        ("1.2.3", LegacyVersion(1, 2, 3)),
        ("1.2.3.4", LegacyVersion(1, 2, 3, 4)),
        ("01.002.3.4", LegacyVersion(1, 2, 3, 4)),
        (" 5.6.7.8\n", LegacyVersion(5, 6, 7, 8)),
    ],
)
def test_legacy_parse(text, expected):
    assert LegacyVersion.parse(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1.2.3.4.5", "a.b", "1..2", "-1.2", "1.2-beta"])
def test_legacy_parse_failure(text):
    with pytest.raises(ValueError, match="invalid version"):
        LegacyVersion.parse(text)


def test_legacy_parse_then_convert():
    assert Version.from_legacy(LegacyVersion.parse("1.2.3.4")) == Version.parse("1.2.3+4")


@pytest.mark.parametrize("args", [(-1, 0), (0, -1), (0, 0, -1), (0, 0, 0, -1)])
def test_legacy_rejects_negative_fields(args):
    with pytest.raises(ValueError):
        LegacyVersion(*args)


def test_legacy_is_immutable():
    legacy = LegacyVersion(1, 2, 3, 4)
    with pytest.raises(FrozenInstanceError):
        legacy.build = 5  # type: ignore


def test_package_version_info():
    assert isinstance(semv.version_info, Version)
    assert str(semv.version_info) == semv.__version__
