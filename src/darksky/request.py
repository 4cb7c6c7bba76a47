"""Request construction for the forecast and time machine endpoints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Final

import requests

from darksky.constants import BASE_PATH, DEFAULT_HEADERS, HOST, SCHEME
from darksky.errors import RequestBuildError
from darksky.options import Option, apply_options
from darksky.utils import TimeUtils

logger: Final = logging.getLogger(__name__)


def forecast_path(secret: str, lat: float, lng: float) -> str:
    """Path of a forecast query, coordinates rounded to 4 decimals."""
    return f"/{BASE_PATH}/{secret}/{lat:.4f},{lng:.4f}"


def time_machine_path(
    secret: str, lat: float, lng: float, when: datetime | int
) -> str:
    """Path of a time machine query for the given instant.

    Args:
        secret: API secret
        lat: Latitude in degrees
        lng: Longitude in degrees
        when: Instant to query; naive datetimes are taken as UTC

    Returns:
        Path ending in ``{lat},{lng},{unix seconds}``
    """
    return f"{forecast_path(secret, lat, lng)},{TimeUtils.to_epoch(when)}"


def build_request(path: str, options: Sequence[Option] = ()) -> requests.PreparedRequest:
    """Build a GET request against the API host.

    Options are applied first, so an invalid option fails the build before
    any request object exists.

    Args:
        path: Absolute request path
        options: Query options, applied in order

    Returns:
        Prepared request with query string and headers set

    Raises:
        OptionValidationError: When an option is rejected
        RequestBuildError: When requests cannot prepare the URL
    """
    query = apply_options(tuple(options))

    try:
        prepared = requests.Request(
            method="GET",
            url=f"{SCHEME}://{HOST}{path}",
            params=sorted(query.items()),
            headers=dict(DEFAULT_HEADERS),
        ).prepare()
    except (requests.RequestException, ValueError) as exc:
        raise RequestBuildError(f"Unable to build request: {exc}") from exc

    logger.debug("Built request %s", _mask_secret(prepared.url or ""))
    return prepared


def new_forecast_request(
    secret: str, lat: float, lng: float, options: Sequence[Option] = ()
) -> requests.PreparedRequest:
    """Build a forecast request."""
    return build_request(forecast_path(secret, lat, lng), options)


def new_time_machine_request(
    secret: str,
    lat: float,
    lng: float,
    when: datetime | int,
    options: Sequence[Option] = (),
) -> requests.PreparedRequest:
    """Build a time machine request."""
    return build_request(time_machine_path(secret, lat, lng, when), options)


def _mask_secret(url: str) -> str:
    # https://host/forecast/{secret}/...
    parts = url.split("/", 5)
    if len(parts) < 6:
        return url
    parts[4] = "***"
    return "/".join(parts)
