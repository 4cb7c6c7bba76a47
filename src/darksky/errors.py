"""Exception classes for Dark Sky API interactions.

Every error raised by this package derives from DarkSkyError so callers can
catch the whole family at once, while the intermediate classes separate
configuration mistakes, invalid query options, transport failures,
undecodable responses and error statuses returned by the API itself.
"""

from __future__ import annotations

from http import HTTPStatus


class DarkSkyError(Exception):
    """Base class for all errors raised by the client."""


# ─────────────────────────── configuration ───────────────────────────────────


class ConfigError(DarkSkyError):
    """Raised when a client is constructed with invalid configuration."""


class EmptySecretError(ConfigError):
    """Raised when the API secret is empty."""

    def __init__(self) -> None:
        super().__init__("secret cannot be empty")


class NilTransportError(ConfigError):
    """Raised when None is explicitly supplied as the HTTP transport."""

    def __init__(self) -> None:
        super().__init__("HTTP transport provided cannot be None")


class NilLoggerError(ConfigError):
    """Raised when None is explicitly supplied as the diagnostic logger."""

    def __init__(self) -> None:
        super().__init__("logger provided cannot be None")


# ─────────────────────────── query options ───────────────────────────────────


class OptionValidationError(DarkSkyError):
    """Raised while building a request when a query option is invalid."""


class LanguageNotSupportedError(OptionValidationError):
    """Raised for a language code outside the supported list."""

    def __init__(self, language: str) -> None:
        super().__init__(f"language provided is not supported: {language}")
        self.language = language


class UnitNotSupportedError(OptionValidationError):
    """Raised for a unit code outside the supported list."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"unit provided is not supported: {unit}")
        self.unit = unit


class ExcludeNotUniqueError(OptionValidationError):
    """Raised when the same section is excluded twice."""

    def __init__(self) -> None:
        super().__init__("exclude options must be unique within the same group")


class UnsupportedExcludeValueError(OptionValidationError):
    """Raised for an exclude value that names no response section."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unsupported value for exclude option : {value}")
        self.value = value


class RequestBuildError(DarkSkyError):
    """Raised when the HTTP request cannot be prepared."""


# ─────────────────────────── transport / decoding ────────────────────────────


class TransportError(DarkSkyError):
    """Raised when a network issue prevents API communication."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class DecodingError(DarkSkyError):
    """Raised when a response body cannot be turned into data."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with decoding error details.

        Args:
            message: Description of the decoding error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class CorruptContentError(DecodingError):
    """Raised when a gzip-encoded body cannot be decompressed."""


class DeserializationError(DecodingError):
    """Raised when a body is not valid JSON for the expected shape."""


# ─────────────────────────── API errors ──────────────────────────────────────


class HTTPError(DarkSkyError):
    """Error status returned by the API.

    Carries the HTTP status code and the message extracted from the
    response body. Two HTTPError instances compare equal when both the
    code and the message match.
    """

    def __init__(self, code: int, message: str) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code
            message: Human-readable error message
        """
        super().__init__(f"HTTP {code} Error - {message}")
        self.code: int = code
        self.message: str = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"HTTPError({self.code!r}, {self.message!r})"

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_status(cls, code: int, body: str = "") -> HTTPError:
        """Create an error from a status code and an unstructured body.

        Args:
            code: HTTP status code
            body: Raw response text, possibly empty

        Returns:
            HTTPError whose message is the body, or the standard reason
            phrase when the body is blank
        """
        message = body.strip()
        if not message:
            try:
                message = HTTPStatus(code).phrase
            except ValueError:
                message = "Unknown error"
        return cls(code, message)
