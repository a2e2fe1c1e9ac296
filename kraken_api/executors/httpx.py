"""HTTP executor implementation using httpx.

This module provides HTTP request handling using the httpx library and is
the default transport of the Kraken API client.
"""

import logging
from typing import override

import httpx

from kraken_api.errors import (
    BaseError,
    HttpConnectionError,
    MissingCredentialsError,
    TransportError,
    TransportTimeoutError,
)
from kraken_api.executors.interface import HttpExecutor, HttpResponse
from kraken_api.helpers import (
    DEFAULT_API_URL,
    FORM_CONTENT_TYPE,
    decode_response,
    get_user_agent,
    join_url,
)

log = logging.getLogger(__name__)


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides synchronous HTTP request execution over a single pooled
    ``httpx.Client``.
    """

    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            api_url: The versioned base URL of the Kraken API. Defaults to DEFAULT_API_URL.
            api_key: Optional API key for private requests. If not provided,
                private requests will fail with a MissingCredentialsError.
            timeout: Optional timeout in seconds applied to every request.
                Defaults to None, which never times out.

        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.client = httpx.Client(timeout=timeout)

    @override
    def send_simple_request(self, path: str, query: str = "") -> HttpResponse:
        """Send an unauthenticated GET request to a public end-point.

        Args:
            path: The end-point path (appended to api_url).
            query: Optional query string, without the leading ``?``.

        Returns:
            HttpResponse containing the status code and the body text.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        url = join_url(self.api_url, path, query)
        log.debug("GET %s", url)
        try:
            response = self.client.get(
                url,
                headers={"User-Agent": get_user_agent()},
            )
        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"Request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.ConnectError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during request to {url}", url=url
            ) from e
        except Exception as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=decode_response(response.content, url),
            headers=dict(response.headers),
        )

    @override
    def send_authorized_request(
        self,
        path: str,
        body: str,
        signature: str,
    ) -> HttpResponse:
        """POST a signed body to a private end-point.

        Args:
            path: The end-point path (appended to api_url).
            body: The form-encoded POST body, including the nonce.
            signature: The API-Sign header value.

        Returns:
            HttpResponse containing the status code and the body text.

        Raises:
            MissingCredentialsError: If the api_key is not set.
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        if self.api_key is None:
            raise MissingCredentialsError("api_key")

        url = join_url(self.api_url, path)
        log.debug("POST %s", url)
        try:
            headers = {
                "API-Key": self.api_key,
                "API-Sign": signature,
                "Content-Type": FORM_CONTENT_TYPE,
                "User-Agent": get_user_agent(),
            }

            response = self.client.post(url, headers=headers, content=body.encode())

        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"POST request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.ConnectError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during POST request to {url}", url=url
            ) from e
        except Exception as e:
            raise TransportError(f"POST request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=decode_response(response.content, url),
            headers=dict(response.headers),
        )

    @override
    def close(self) -> None:
        """Close the underlying httpx client."""
        self.client.close()

    def __del__(self) -> None:
        """Cleanup the httpx client when the executor is destroyed."""
        client = getattr(self, "client", None)
        if client is not None:
            client.close()
