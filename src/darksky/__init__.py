"""Dark Sky API client - request building, options, models and errors."""

__version__ = "0.1.0"

from .client import ClientConfig, DarkSkyClient
from .errors import (
    ConfigError,
    CorruptContentError,
    DarkSkyError,
    DecodingError,
    DeserializationError,
    EmptySecretError,
    ExcludeNotUniqueError,
    HTTPError,
    LanguageNotSupportedError,
    NilLoggerError,
    NilTransportError,
    OptionValidationError,
    RequestBuildError,
    TransportError,
    UnitNotSupportedError,
    UnsupportedExcludeValueError,
)
from .models import Alert, DataBlock, DataPoint, Flags, WeatherPayload
from .options import ExcludeOption, ExtendOption, LanguageOption, Option, UnitOption
from .settings import ClientSettings
from .transport import HTTPTransport, RequestsTransport, TransportResponse

# Define what gets imported with: from darksky import *
__all__ = [
    "Alert",
    "ClientConfig",
    "ClientSettings",
    "ConfigError",
    "CorruptContentError",
    "DarkSkyClient",
    "DarkSkyError",
    "DataBlock",
    "DataPoint",
    "DecodingError",
    "DeserializationError",
    "EmptySecretError",
    "ExcludeNotUniqueError",
    "ExcludeOption",
    "ExtendOption",
    "Flags",
    "HTTPError",
    "HTTPTransport",
    "LanguageNotSupportedError",
    "LanguageOption",
    "NilLoggerError",
    "NilTransportError",
    "Option",
    "OptionValidationError",
    "RequestBuildError",
    "RequestsTransport",
    "TransportError",
    "TransportResponse",
    "UnitNotSupportedError",
    "UnitOption",
    "UnsupportedExcludeValueError",
    "WeatherPayload",
]
