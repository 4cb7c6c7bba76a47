import gzip
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from darksky.client import DarkSkyClient
from darksky.models import WeatherPayload

DATA_DIR = Path(__file__).parent / "data"

SECRET = "test-secret"
LAT = 37.8267
LNG = -122.4233


class FakeResponse:
    """TransportResponse double returning a canned body."""

    def __init__(
        self,
        body: bytes,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self._body = body
        self.close_error = close_error
        self.read_calls = 0
        self.closed = False

    def read(self) -> bytes:
        self.read_calls += 1
        return self._body

    def close(self) -> None:
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeTransport:
    """HTTPTransport double recording every request it is asked to send."""

    def __init__(
        self, response: FakeResponse | None = None, error: Exception | None = None
    ) -> None:
        self.response = response
        self.error = error
        self.sent: list[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest) -> FakeResponse:
        self.sent.append(request)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


ResponseFactory = Callable[..., FakeResponse]


@pytest.fixture
def forecast_body() -> bytes:
    return (DATA_DIR / "forecast_sample.json").read_bytes()


@pytest.fixture
def timemachine_body() -> bytes:
    return (DATA_DIR / "timemachine_sample.json").read_bytes()


@pytest.fixture
def weather_payload(forecast_body: bytes) -> WeatherPayload:
    return WeatherPayload.model_validate_json(forecast_body)


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build a FakeResponse, gzip-encoding the body when asked to."""

    def _make(
        body: bytes | str | dict[str, Any] = b"",
        status_code: int = 200,
        content_type: str | None = None,
        compress: bool = False,
        close_error: Exception | None = None,
    ) -> FakeResponse:
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")

        headers: dict[str, str] = {}
        if content_type is not None:
            headers["Content-Type"] = content_type
        if compress:
            body = gzip.compress(body)
            headers["Content-Encoding"] = "gzip"
        return FakeResponse(body, status_code, headers, close_error)

    return _make


@pytest.fixture
def make_client() -> Callable[..., DarkSkyClient]:
    """Client wired to a FakeTransport."""

    def _make(transport: FakeTransport, **kwargs: Any) -> DarkSkyClient:
        return DarkSkyClient(SECRET, transport=transport, **kwargs)

    return _make
