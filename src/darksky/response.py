"""Turn a transport response into weather data or an error."""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import Final

from pydantic import ValidationError

from darksky.errors import CorruptContentError, DeserializationError, HTTPError
from darksky.models import ApiErrorBody, WeatherPayload
from darksky.transport import TransportResponse, released

logger: Final = logging.getLogger(__name__)

GZIP_ENCODING: Final = "gzip"
TEXT_PLAIN: Final = "text/plain"
APPLICATION_JSON: Final = "application/json"


def extract_content(
    response: TransportResponse, diagnostics: logging.Logger | logging.LoggerAdapter
) -> bytes:
    """Read the body, release the response and undo gzip encoding.

    Args:
        response: Response returned by the transport
        diagnostics: Logger receiving release failures

    Returns:
        Decoded body bytes

    Raises:
        CorruptContentError: When a gzip body cannot be decompressed
    """
    with released(response, diagnostics):
        content = response.read()

        if response.headers.get("Content-Encoding", "") == GZIP_ENCODING:
            return uncompress_gzip(content)
        return content


def uncompress_gzip(content: bytes) -> bytes:
    """Decompress a complete gzip stream.

    Raises:
        CorruptContentError: On a bad header, bad checksum or truncated stream
    """
    try:
        return gzip.decompress(content)
    except (OSError, EOFError, zlib.error) as exc:
        raise CorruptContentError(f"Unable to decompress gzip body: {exc}", exc) from exc


def parse_error(status_code: int, content_type: str, content: bytes) -> HTTPError:
    """Build the HTTPError described by an error response body.

    Plain text bodies are the message itself; JSON bodies carry it in the
    ``error`` field. Any other content type falls back to the raw text, or
    the status reason phrase when the body is empty.

    Raises:
        DeserializationError: When a JSON error body cannot be parsed
    """
    if content_type == TEXT_PLAIN:
        return HTTPError(status_code, _decode_text(content))

    if APPLICATION_JSON in content_type:
        try:
            body = ApiErrorBody.model_validate_json(content)
        except ValidationError as exc:
            raise DeserializationError(f"Invalid error response: {exc}", exc) from exc
        return HTTPError(status_code, body.error)

    logger.debug("Unexpected content type %r on HTTP %s", content_type, status_code)
    return HTTPError.from_status(status_code, _decode_text(content))


def parse_payload(content: bytes) -> WeatherPayload:
    """Deserialize a successful response body.

    Raises:
        DeserializationError: When the body is not a valid payload
    """
    try:
        return WeatherPayload.model_validate_json(content)
    except ValidationError as exc:
        raise DeserializationError(f"Invalid weather response: {exc}", exc) from exc


def handle_response(
    response: TransportResponse, diagnostics: logging.Logger | logging.LoggerAdapter
) -> WeatherPayload:
    """Decode a response into a WeatherPayload.

    Args:
        response: Response returned by the transport
        diagnostics: Logger receiving release failures

    Returns:
        Parsed weather payload for a status below 400

    Raises:
        HTTPError: For a status of 400 or above
        DecodingError: When the body cannot be decompressed or parsed
    """
    content = extract_content(response, diagnostics)
    logger.debug("HTTP %s, %d bytes", response.status_code, len(content))

    if response.status_code >= 400:
        error = parse_error(
            response.status_code, response.headers.get("Content-Type", ""), content
        )
        logger.error("Dark Sky API error: %s - %s", error.code, error.message)
        raise error

    return parse_payload(content)


def _decode_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")
