"""Tests for query option validation and encoding."""

import pytest

from darksky.constants import SUPPORTED_EXCLUDES, SUPPORTED_LANGUAGES, SUPPORTED_UNITS
from darksky.errors import (
    ExcludeNotUniqueError,
    LanguageNotSupportedError,
    UnitNotSupportedError,
    UnsupportedExcludeValueError,
)
from darksky.options import (
    ExcludeOption,
    ExtendOption,
    LanguageOption,
    Option,
    UnitOption,
    apply_options,
)


@pytest.mark.parametrize("code", sorted(SUPPORTED_LANGUAGES))
def test_language_any_case_is_lowered(code: str) -> None:
    for variant in (code, code.upper(), code.title()):
        query: dict[str, str] = {}
        LanguageOption(variant).apply(query)
        assert query == {"lang": code}


@pytest.mark.parametrize("code", ["test", "english", "", "zh-cn", "en-us"])
def test_language_not_supported(code: str) -> None:
    query: dict[str, str] = {}
    with pytest.raises(LanguageNotSupportedError):
        LanguageOption(code).apply(query)
    assert query == {}


@pytest.mark.parametrize("code", sorted(SUPPORTED_UNITS))
def test_unit_any_case_is_lowered(code: str) -> None:
    for variant in (code, code.upper(), code.capitalize()):
        query: dict[str, str] = {}
        UnitOption(variant).apply(query)
        assert query == {"units": code}


@pytest.mark.parametrize("code", ["metric", "imperial", "", "uk"])
def test_unit_not_supported(code: str) -> None:
    with pytest.raises(UnitNotSupportedError):
        UnitOption(code).apply({})


def test_exclude_sets_bracketed_list() -> None:
    query: dict[str, str] = {}
    ExcludeOption("Minutely", "HOURLY").apply(query)
    assert query == {"exclude": "[minutely,hourly]"}


def test_exclude_accepts_every_section() -> None:
    query: dict[str, str] = {}
    ExcludeOption(*sorted(SUPPORTED_EXCLUDES)).apply(query)
    assert query["exclude"] == "[" + ",".join(sorted(SUPPORTED_EXCLUDES)) + "]"


@pytest.mark.parametrize(
    "sections",
    [
        ("hourly", "hourly"),
        ("hourly", "HOURLY"),
        ("daily", "alerts", "Daily"),
    ],
)
def test_exclude_duplicates_rejected(sections: tuple[str, ...]) -> None:
    query: dict[str, str] = {}
    with pytest.raises(ExcludeNotUniqueError):
        ExcludeOption(*sections).apply(query)
    assert query == {}


@pytest.mark.parametrize(
    "sections, bad",
    [
        (("test",), "test"),
        (("minutely", "weekly"), "weekly"),
        (("Monthly", "daily"), "Monthly"),
    ],
)
def test_exclude_unknown_value_is_echoed(sections: tuple[str, ...], bad: str) -> None:
    with pytest.raises(UnsupportedExcludeValueError) as excinfo:
        ExcludeOption(*sections).apply({})

    assert excinfo.value.value == bad
    assert str(excinfo.value) == f"Unsupported value for exclude option : {bad}"


def test_exclude_unknown_value_wins_over_duplicate() -> None:
    # Values are checked in order
    with pytest.raises(UnsupportedExcludeValueError):
        ExcludeOption("nope", "nope").apply({})


def test_extend_sets_hourly() -> None:
    query: dict[str, str] = {}
    ExtendOption().apply(query)
    assert query == {"extend": "hourly"}


def test_options_satisfy_protocol() -> None:
    for option in (LanguageOption("en"), ExcludeOption("flags"), ExtendOption(), UnitOption("si")):
        assert isinstance(option, Option)


def test_apply_options_last_write_wins() -> None:
    query = apply_options([UnitOption("si"), LanguageOption("fr"), UnitOption("CA")])
    assert query == {"units": "ca", "lang": "fr"}


def test_apply_options_stops_at_first_failure() -> None:
    with pytest.raises(LanguageNotSupportedError):
        apply_options([UnitOption("si"), LanguageOption("xx"), UnitOption("bogus")])


def test_options_are_immutable() -> None:
    option = UnitOption("si")
    with pytest.raises(AttributeError):
        option.unit = "us"  # type: ignore[misc]
