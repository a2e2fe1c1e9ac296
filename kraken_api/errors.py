"""Exception hierarchy for the Kraken API client.

This module defines the public exception hierarchy for the entire package. All
exceptions raised by this library inherit from BaseError.

Logical errors reported by the exchange itself (bad nonce, insufficient funds,
unknown pair) are not exceptions: they arrive inside the ``error`` array of an
ordinary JSON response and are left for the caller to inspect.

Exception Hierarchy
-------------------
BaseError
├── TransportError - Network/protocol-level errors during transmission
├── SigningFailure - Request authentication could not be computed
└── ValidationError - Client-side input validation failures
    └── CredentialFormat - Account secret has the wrong shape
"""


class BaseError(Exception):
    """Base exception for all Kraken API client errors.

    All exceptions raised by this library inherit from this class, allowing users
    to catch all client-related errors with a single except clause.

    This exception should not be raised directly. Use one of the specific subclasses
    instead (TransportError, SigningFailure, ValidationError).
    """

    pass


# ============================================================================
# TRANSPORT ERROR
# ============================================================================


class TransportError(BaseError):
    """Exception raised for errors in the process of transporting data to/from the exchange.

    TransportError indicates that:
    - The error occurred in the process of transporting data
    - No response body was obtained from the exchange
    - The error could be transient and may succeed on retry

    The library never retries by itself; the underlying exception is always
    chained as ``__cause__`` for diagnostics.

    Common causes include:
    - DNS resolution failures
    - TLS/SSL certificate or handshake errors
    - Connection refused or dropped
    - Read/write timeouts (only when a timeout was configured)
    - I/O errors while reading the response body
    """

    pass


class HttpConnectionError(TransportError):
    """Raised when a connection cannot be established or is lost."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize an HttpConnectionError.

        Args:
            message: Description of the connection error.
            url: The URL that failed to connect, if available.

        """
        self.message = message
        self.url = url
        if url:
            super().__init__(f"{message} (url: {url})")
        else:
            super().__init__(message)


class TransportTimeoutError(TransportError):
    """Raised when a request or connection times out."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        """Initialize a TransportTimeoutError.

        Args:
            message: Description of the timeout error.
            timeout_seconds: The timeout duration in seconds, if available.

        """
        self.message = message
        self.timeout_seconds = timeout_seconds
        if timeout_seconds:
            super().__init__(f"{message} (timeout: {timeout_seconds}s)")
        else:
            super().__init__(message)


class DeserializationError(TransportError):
    """Raised when the response body cannot be decoded as text."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# SIGNING FAILURE
# ============================================================================


class SigningFailure(BaseError):
    """Raised when the API-Sign value for a private call cannot be computed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# VALIDATION ERROR
# ============================================================================


class ValidationError(BaseError):
    """Exception raised for client-side input validation failures.

    ValidationError indicates that:
    - No network request was attempted
    - The error is due to invalid input from the caller
    - The error can be fixed by correcting the input parameters
    """

    pass


class MissingCredentialsError(ValidationError):
    """Raised when required authentication credentials are missing."""

    def __init__(self, credential_type: str = "API key"):
        """Initialize a MissingCredentialsError.

        Args:
            credential_type: The type of credential that is missing (default: "API key").

        """
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")


class InvalidOption(ValidationError):
    """Raised when an option identifier or enumerated argument is not recognised."""

    pass


class CredentialFormat(ValidationError):
    """Raised when the account secret does not have the documented format.

    Kraken secrets are 64 random bytes delivered as 88 characters of base64.
    The check happens before any network activity.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedSecret(CredentialFormat, SigningFailure):
    """Raised when the account secret is not valid base64."""

    pass
