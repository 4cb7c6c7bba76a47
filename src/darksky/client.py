"""Dark Sky API client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Final

import requests

from darksky.errors import EmptySecretError, NilLoggerError, NilTransportError
from darksky.models import WeatherPayload
from darksky.options import Option
from darksky.request import new_forecast_request, new_time_machine_request
from darksky.response import handle_response
from darksky.transport import Closeable, HTTPTransport, RequestsTransport

if TYPE_CHECKING:
    from darksky.settings import ClientSettings

DEFAULT_LOGGER_NAME: Final = "darksky"

# Distinguishes "not supplied" from an explicit None
_UNSET: Any = object()


@dataclass(frozen=True)
class ClientConfig:
    """Validated, read-only client configuration.

    Attributes:
        secret: API secret embedded in every request path
        transport: HTTP transport requests are sent through
        logger: Receives non-fatal diagnostics such as release failures
        default_options: Options applied before the per-call ones
    """

    secret: str = field(repr=False)
    transport: HTTPTransport
    logger: logging.Logger | logging.LoggerAdapter
    default_options: tuple[Option, ...] = ()

    @classmethod
    def create(
        cls,
        secret: str,
        transport: HTTPTransport | None = _UNSET,
        logger: logging.Logger | logging.LoggerAdapter | None = _UNSET,
        default_options: tuple[Option, ...] = (),
    ) -> ClientConfig:
        """Validate arguments and fill in defaults.

        Args:
            secret: API secret, must not be empty
            transport: Custom transport; omit for the requests default
            logger: Custom diagnostic logger; omit for the package logger
            default_options: Options applied to every query

        Returns:
            Frozen configuration

        Raises:
            EmptySecretError: When the secret is empty
            NilTransportError: When transport is explicitly None
            NilLoggerError: When logger is explicitly None
        """
        if not secret:
            raise EmptySecretError()
        if transport is None:
            raise NilTransportError()
        if logger is None:
            raise NilLoggerError()

        return cls(
            secret=secret,
            transport=RequestsTransport() if transport is _UNSET else transport,
            logger=logging.getLogger(DEFAULT_LOGGER_NAME) if logger is _UNSET else logger,
            default_options=tuple(default_options),
        )


class DarkSkyClient:
    """Client for the Dark Sky forecast and time machine endpoints.

    The client keeps no mutable state after construction; concurrent calls
    are safe as long as the transport is.
    """

    def __init__(
        self,
        secret: str,
        *,
        transport: HTTPTransport | None = _UNSET,
        logger: logging.Logger | logging.LoggerAdapter | None = _UNSET,
        default_options: tuple[Option, ...] = (),
    ) -> None:
        """Initialize the client.

        Args:
            secret: API secret
            transport: Substitute HTTP transport (must not be None)
            logger: Substitute diagnostic logger (must not be None)
            default_options: Options prepended to the options of every call

        Raises:
            ConfigError: When the configuration is invalid
        """
        self.config: Final = ClientConfig.create(
            secret, transport=transport, logger=logger, default_options=default_options
        )
        self._owns_transport = transport is _UNSET

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        session: requests.Session | None = None,
    ) -> DarkSkyClient:
        """Create a client from loaded settings.

        Args:
            settings: Validated settings
            session: Optional requests session for the default transport

        Returns:
            Client whose default options come from the settings
        """
        client = cls(
            settings.secret,
            transport=RequestsTransport(session=session, timeout=settings.timeout),
            default_options=settings.options(),
        )
        client._owns_transport = True
        return client

    def forecast(self, lat: float, lng: float, *options: Option) -> WeatherPayload:
        """Query the current conditions and forecast for a location.

        Args:
            lat: Latitude in degrees
            lng: Longitude in degrees
            *options: Query options, applied in order

        Returns:
            Parsed weather payload

        Raises:
            OptionValidationError: When an option is rejected; nothing is sent
            HTTPError: When the API answers with an error status
            DecodingError: When the body cannot be decoded
            TransportError: When the default transport fails
        """
        request = new_forecast_request(
            self.config.secret, lat, lng, self.config.default_options + options
        )
        return self._send(request)

    def time_machine(
        self, lat: float, lng: float, when: datetime | int, *options: Option
    ) -> WeatherPayload:
        """Query observed or forecast conditions at a given instant.

        Args:
            lat: Latitude in degrees
            lng: Longitude in degrees
            when: Instant to query, as a datetime (naive means UTC) or epoch seconds
            *options: Query options, applied in order

        Returns:
            Parsed weather payload

        Raises:
            Same as forecast
        """
        request = new_time_machine_request(
            self.config.secret, lat, lng, when, self.config.default_options + options
        )
        return self._send(request)

    def close(self) -> None:
        """Close the transport if this client created it."""
        transport = self.config.transport
        if self._owns_transport and isinstance(transport, Closeable):
            transport.close()

    def __enter__(self) -> DarkSkyClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def _send(self, request: requests.PreparedRequest) -> WeatherPayload:
        response = self.config.transport.send(request)
        return handle_response(response, self.config.logger)
