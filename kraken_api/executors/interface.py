"""Abstract interface for HTTP executors.

This module defines the abstract base class that all HTTP executor
implementations must follow, enabling pluggable transport layers.
"""

from abc import ABC, abstractmethod


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status code, body text, and headers from an HTTP response.
    The body is the exchange's JSON exactly as received.
    """

    status: int
    body: str
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            body: The response body text.
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.body = body
        self.headers = headers

    def __repr__(self) -> str:
        return f"HttpResponse(status={self.status}, body={self.body!r})"


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    Defines the interface for sending both signed private requests and
    unauthenticated public requests.
    """

    api_key: str | None = None

    @abstractmethod
    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        timeout: float | None = None,
    ):
        """Initialize the HTTP executor.

        Args:
            api_url: The versioned base API URL, e.g. ``https://api.kraken.com/0``.
            api_key: Optional API key sent in the API-Key header of private calls.
            timeout: Optional request timeout in seconds; None waits indefinitely.

        """
        ...

    @abstractmethod
    def send_authorized_request(
        self,
        path: str,
        body: str,
        signature: str,
    ) -> HttpResponse:
        """POST a signed, form-encoded body to a private end-point.

        Args:
            path: The URL path relative to the base URL, e.g. ``/private/Balance``.
            body: The form-encoded POST body, including the nonce.
            signature: The API-Sign header value computed over path and body.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...

    @abstractmethod
    def send_simple_request(
        self,
        path: str,
        query: str = "",
    ) -> HttpResponse:
        """Send an unauthenticated HTTP GET request.

        Args:
            path: The URL path relative to the base URL, e.g. ``/public/Ticker``.
            query: Optional form-encoded query string, without the leading ``?``.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...

    def close(self) -> None:
        """Release any resources held by the executor."""
        return None
