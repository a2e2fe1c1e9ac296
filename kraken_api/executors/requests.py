import logging
from typing import override

import requests

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


class RequestsHttpExecutor(HttpExecutor):
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    @override
    def send_simple_request(self, path: str, query: str = "") -> HttpResponse:
        url = join_url(self.api_url, path, query)
        log.debug("GET %s", url)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": get_user_agent()},
                timeout=self.timeout,
            )
        except BaseError:
            raise
        except requests.Timeout as e:
            raise TransportTimeoutError(
                f"Request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except requests.ConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except Exception as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=decode_response(response.content, url),
            headers=dict(response.headers),
        )

    @override
    def send_authorized_request(
        self, path: str, body: str, signature: str
    ) -> HttpResponse:
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

            response = requests.post(
                url, headers=headers, data=body.encode(), timeout=self.timeout
            )
        except BaseError:
            raise
        except requests.Timeout as e:
            raise TransportTimeoutError(
                f"POST request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except requests.ConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except Exception as e:
            raise TransportError(f"POST request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=decode_response(response.content, url),
            headers=dict(response.headers),
        )
