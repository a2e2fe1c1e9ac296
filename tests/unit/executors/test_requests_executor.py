"""Tests for the requests transport with requests.get/post patched out."""

from types import SimpleNamespace

import pytest
import requests

from kraken_api.errors import (
    HttpConnectionError,
    MissingCredentialsError,
    TransportError,
    TransportTimeoutError,
)
from kraken_api.executors import RequestsHttpExecutor
from kraken_api.helpers import FORM_CONTENT_TYPE, get_user_agent
from tests.unit.conftest import TEST_API_KEY


def fake_response(status: int = 200, content: bytes = b"{}"):
    return SimpleNamespace(status_code=status, content=content, headers={})


def test_simple_request(monkeypatch):
    calls = []

    def fake_get(url, headers, timeout):
        calls.append((url, headers, timeout))
        return fake_response(content=b'{"error":[]}')

    monkeypatch.setattr(requests, "get", fake_get)
    executor = RequestsHttpExecutor(api_key=TEST_API_KEY, timeout=3.0)

    response = executor.send_simple_request("/public/Depth", "pair=XXBTZUSD&count=5")

    assert response.body == '{"error":[]}'
    assert calls == [
        (
            "https://api.kraken.com/0/public/Depth?pair=XXBTZUSD&count=5",
            {"User-Agent": get_user_agent()},
            3.0,
        )
    ]


def test_authorized_request(monkeypatch):
    calls = []

    def fake_post(url, headers, data, timeout):
        calls.append((url, headers, data, timeout))
        return fake_response(status=403)

    monkeypatch.setattr(requests, "post", fake_post)
    executor = RequestsHttpExecutor(api_key=TEST_API_KEY)

    response = executor.send_authorized_request(
        "/private/Balance", "nonce=42", "c2ln"
    )

    assert response.status == 403
    url, headers, data, timeout = calls[0]
    assert url == "https://api.kraken.com/0/private/Balance"
    assert headers == {
        "API-Key": TEST_API_KEY,
        "API-Sign": "c2ln",
        "Content-Type": FORM_CONTENT_TYPE,
        "User-Agent": get_user_agent(),
    }
    assert data == b"nonce=42"
    assert timeout is None


def test_missing_api_key(monkeypatch):
    monkeypatch.setattr(requests, "post", lambda *args, **kwargs: pytest.fail())

    with pytest.raises(MissingCredentialsError):
        RequestsHttpExecutor().send_authorized_request("/private/Balance", "", "")


@pytest.mark.parametrize(
    "raised, expected",
    [
        (requests.Timeout("slow"), TransportTimeoutError),
        (requests.ConnectTimeout("slow connect"), TransportTimeoutError),
        (requests.ConnectionError("refused"), HttpConnectionError),
        (requests.TooManyRedirects("loop"), TransportError),
    ],
)
def test_exception_mapping(monkeypatch, raised, expected):
    def fake_get(*args, **kwargs):
        raise raised

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(expected) as exc_info:
        RequestsHttpExecutor().send_simple_request("/public/Time")

    assert exc_info.value.__cause__ is raised
