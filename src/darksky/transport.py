"""HTTP transport used to send requests to the API.

The client talks to a transport through the HTTPTransport protocol so any
HTTP stack can be substituted. The default implementation uses a
requests Session and hands the body back still encoded, leaving gzip
handling to the response handler.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Final, Protocol, runtime_checkable

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from darksky.constants import DEFAULT_TIMEOUT
from darksky.errors import TransportError

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class Closeable(Protocol):
    """Anything holding a resource that must be released."""

    def close(self) -> None: ...


@runtime_checkable
class TransportResponse(Protocol):
    """Protocol for a received HTTP response.

    ``headers`` must be a case-insensitive mapping of header names to
    values. ``read`` returns the body exactly as sent on the wire, without
    undoing any Content-Encoding.
    """

    status_code: int
    headers: Mapping[str, str]

    def read(self) -> bytes:
        """Read the entire response body.

        Returns:
            Body bytes, still content-encoded
        """
        ...

    def close(self) -> None:
        """Release the connection held by the response."""
        ...


@runtime_checkable
class HTTPTransport(Protocol):
    """Protocol for sending a prepared request.

    Implementations raise their own exceptions on failure; the client
    passes them through to the caller unchanged.
    """

    def send(self, request: requests.PreparedRequest) -> TransportResponse:
        """Send a request and return the response once headers are in.

        Args:
            request: Fully prepared GET request

        Returns:
            Response whose body has not been read yet
        """
        ...


class RequestsResponse:
    """TransportResponse backed by a streamed requests.Response."""

    def __init__(self, response: requests.Response) -> None:
        self._response = response
        self.status_code: int = response.status_code
        self.headers: Mapping[str, str] = response.headers

    def read(self) -> bytes:
        try:
            return self._response.raw.read(decode_content=False)
        except (Urllib3HTTPError, OSError) as exc:
            raise TransportError(f"Error reading response body: {exc}", exc) from exc

    def close(self) -> None:
        self._response.close()


class RequestsTransport:
    """Default transport built on requests."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            session: Session to send requests with (a new one by default)
            timeout: Timeout for connecting and reading, in seconds
        """
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest) -> RequestsResponse:
        """Send the request, streaming so the raw body stays encoded.

        Raises:
            TransportError: When the request fails at the network level
        """
        try:
            resp = self.session.send(request, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            logger.warning("Dark Sky API network error: %s", exc)
            raise TransportError(f"Network error: {exc}", exc) from exc
        return RequestsResponse(resp)

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session:
            self.session.close()


@contextmanager
def released(
    resource: Closeable, diagnostics: logging.Logger | logging.LoggerAdapter
) -> Iterator[Closeable]:
    """Guarantee ``resource.close()`` on every exit path.

    A failure to close is reported to ``diagnostics`` and never raised, so
    it cannot mask the outcome of the block.

    Args:
        resource: Object to release
        diagnostics: Logger that receives close failures
    """
    try:
        yield resource
    finally:
        try:
            resource.close()
        except Exception as exc:  # noqa: BLE001 - reported, not raised
            diagnostics.warning("Failed to release %s: %s", type(resource).__name__, exc)
