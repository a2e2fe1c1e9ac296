"""Python client for the Kraken exchange REST API."""

from kraken_api.api import KrakenApiClient, connect
from kraken_api.errors import (
    BaseError,
    CredentialFormat,
    DeserializationError,
    HttpConnectionError,
    InvalidOption,
    MalformedSecret,
    MissingCredentialsError,
    SigningFailure,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from kraken_api.helpers import parse_response, print_data
from kraken_api.types import (
    ApiOption,
    Credential,
    EndpointDescriptor,
    ExportRemovalType,
    Instruction,
    Nonce,
    OrderType,
    ReportType,
)

__version__ = "0.3.0"


def get_version() -> str:
    """Get the installed version of the package."""
    return __version__


__all__ = [
    "KrakenApiClient",
    "connect",
    "get_version",
    "parse_response",
    "print_data",
    "ApiOption",
    "Credential",
    "EndpointDescriptor",
    "ExportRemovalType",
    "Instruction",
    "Nonce",
    "OrderType",
    "ReportType",
    "BaseError",
    "CredentialFormat",
    "DeserializationError",
    "HttpConnectionError",
    "InvalidOption",
    "MalformedSecret",
    "MissingCredentialsError",
    "SigningFailure",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
]
