"""Helper utilities for the Kraken API client.

This module contains constants, client identification, response decoding and
display helpers shared by the client and the HTTP executors.
"""

import logging
from functools import lru_cache

import orjson
from prettyprinter import cpprint

from kraken_api.errors import DeserializationError
from kraken_api.types import JsonValue

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_API_URL: str = "https://api.kraken.com/0"

FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded; charset=utf-8"


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_user_agent() -> str:
    """Get the User-Agent string sent with every request."""
    import kraken_api

    return f"KrakenApiPy/{kraken_api.__version__}"


# ============================================================================
# URL CONSTRUCTION
# ============================================================================


def join_url(base_url: str, path: str, query: str = "") -> str:
    """Join base URL, path and an optional query string."""
    url = f"{base_url.rstrip('/')}{path}"
    if query:
        url = f"{url}?{query}"
    return url


# ============================================================================
# RESPONSE HANDLING
# ============================================================================


def decode_response(response_body: bytes, url: str) -> str:
    """Decode a raw response body as UTF-8 text.

    The JSON inside is passed through untouched; Kraken reports logical errors
    in the body, so the text is returned whatever the HTTP status was.

    Args:
        response_body: Response bytes
        url: URL that was requested (for error messages)

    Returns:
        The response body as text

    Raises:
        DeserializationError: If the body is not valid UTF-8

    """
    try:
        return response_body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(
            f"Response from {url} is not valid UTF-8: {e}"
        ) from e


def parse_response(response: str) -> JsonValue:
    """Parse a response body returned by one of the client's end-point methods.

    Raises:
        DeserializationError: If the text is not valid JSON

    """
    try:
        return orjson.loads(response)
    except orjson.JSONDecodeError as e:
        raise DeserializationError(f"Failed to parse JSON response: {e}") from e


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: str) -> None:
    """Pretty-print a JSON response body.

    Args:
        response: Raw JSON text as returned by the client

    """
    cpprint(parse_response(response))
