"""Tests for request path, query and header construction."""

from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from darksky.errors import LanguageNotSupportedError, RequestBuildError
from darksky.options import ExcludeOption, ExtendOption, LanguageOption, UnitOption
from darksky.request import (
    build_request,
    forecast_path,
    new_forecast_request,
    new_time_machine_request,
    time_machine_path,
)

SECRET = "test-secret"
LAT = 37.8267
LNG = -122.4233
FORECAST_URL = "https://api.darksky.net/forecast/test-secret/37.8267,-122.4233"


def test_forecast_path() -> None:
    assert forecast_path(SECRET, LAT, LNG) == "/forecast/test-secret/37.8267,-122.4233"


@pytest.mark.parametrize(
    "lat, lng, expected",
    [
        (37.82674, -122.42326, "37.8267,-122.4233"),
        (0, 0, "0.0000,0.0000"),
        (-33.9, 151.2, "-33.9000,151.2000"),
    ],
)
def test_coordinates_use_four_decimals(lat: float, lng: float, expected: str) -> None:
    assert forecast_path(SECRET, lat, lng).endswith(f"/{expected}")


def test_time_machine_path_from_datetime() -> None:
    when = datetime(2018, 12, 9, 18, 0, tzinfo=UTC)
    assert time_machine_path(SECRET, LAT, LNG, when) == (
        f"/forecast/test-secret/37.8267,-122.4233,{int(when.timestamp())}"
    )


def test_time_machine_path_naive_datetime_is_utc() -> None:
    naive = datetime(1978, 2, 7, 0, 0)
    aware = datetime(1978, 2, 7, 0, 0, tzinfo=UTC)
    assert time_machine_path(SECRET, LAT, LNG, naive) == time_machine_path(
        SECRET, LAT, LNG, aware
    )


def test_time_machine_path_from_offset_datetime() -> None:
    est = timezone(timedelta(hours=-5))
    when = datetime(1978, 2, 6, 19, 0, tzinfo=est)
    assert time_machine_path(SECRET, LAT, LNG, when).endswith(",255657600")


def test_time_machine_path_from_epoch() -> None:
    assert time_machine_path(SECRET, LAT, LNG, 255657600).endswith(",255657600")


def test_forecast_request_without_options() -> None:
    request = new_forecast_request(SECRET, LAT, LNG)

    assert request.method == "GET"
    assert request.url == FORECAST_URL
    parts = urlsplit(request.url)
    assert parts.path == "/forecast/test-secret/37.8267,-122.4233"
    assert parts.query == ""


def test_forecast_request_with_units() -> None:
    request = new_forecast_request(SECRET, LAT, LNG, [UnitOption("ca")])
    assert request.url == FORECAST_URL + "?units=ca"


def test_request_headers() -> None:
    request = new_forecast_request(SECRET, LAT, LNG)
    assert request.headers["Accept-Encoding"] == "gzip"
    assert request.headers["Accept"] == "application/json"


def test_request_query_with_all_options() -> None:
    request = new_forecast_request(
        SECRET,
        LAT,
        LNG,
        [
            LanguageOption("EN"),
            ExcludeOption("minutely", "hourly"),
            ExtendOption(),
            UnitOption("us"),
        ],
    )
    query = parse_qs(urlsplit(request.url).query)
    assert query == {
        "exclude": ["[minutely,hourly]"],
        "extend": ["hourly"],
        "lang": ["en"],
        "units": ["us"],
    }


def test_query_keys_are_sorted_and_encoded() -> None:
    request = new_forecast_request(
        SECRET, LAT, LNG, [UnitOption("si"), ExcludeOption("minutely", "hourly")]
    )
    assert urlsplit(request.url).query == "exclude=%5Bminutely%2Chourly%5D&units=si"


def test_time_machine_request() -> None:
    request = new_time_machine_request(SECRET, LAT, LNG, 255657600, [UnitOption("si")])
    assert request.url == FORECAST_URL + ",255657600?units=si"


def test_invalid_option_aborts_build() -> None:
    with pytest.raises(LanguageNotSupportedError):
        new_forecast_request(SECRET, LAT, LNG, [UnitOption("si"), LanguageOption("test")])


def test_unpreparable_url_raises_build_error() -> None:
    with patch("darksky.request.requests.Request") as mock_request:
        mock_request.return_value.prepare.side_effect = requests.exceptions.InvalidURL("bad")

        with pytest.raises(RequestBuildError) as excinfo:
            build_request("/forecast/test-secret/1.0000,2.0000")

    assert isinstance(excinfo.value.__cause__, requests.exceptions.InvalidURL)
