"""Tests for validation exceptions in the API client."""

import pytest

from kraken_api import KrakenApiClient
from kraken_api.errors import InvalidOption, MissingCredentialsError, ValidationError
from kraken_api.types import ApiOption, Credential
from tests.mock_executors import MockHttpExecutor
from tests.unit.conftest import TEST_API_KEY, TEST_API_SECRET


def test_api_key_property_not_set():
    """Test that accessing api_key when not set raises MissingCredentialsError."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(executor=mock_http)

    with pytest.raises(MissingCredentialsError) as exc_info:
        _ = client.api_key

    assert "API key is not set" in str(exc_info.value)


def test_credential_property_not_set():
    """Test that a key without a secret gives no usable credential."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(api_key=TEST_API_KEY, executor=mock_http)

    assert client.api_key == TEST_API_KEY
    with pytest.raises(MissingCredentialsError) as exc_info:
        _ = client.credential

    assert isinstance(exc_info.value, ValidationError)


def test_set_credentials():
    """Test that credentials can be set after construction."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(executor=mock_http)

    client.set_credentials(TEST_API_KEY, TEST_API_SECRET)

    assert client.credential == Credential(TEST_API_KEY, TEST_API_SECRET)
    assert mock_http.api_key == TEST_API_KEY


def test_set_credentials_none_clears_them():
    """Test that passing None clears previously set credentials."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(
        api_key=TEST_API_KEY, api_secret=TEST_API_SECRET, executor=mock_http
    )

    client.set_credentials(None, None)

    with pytest.raises(MissingCredentialsError):
        _ = client.credential
    with pytest.raises(MissingCredentialsError):
        _ = client.api_key


@pytest.mark.parametrize(
    "api_key, api_secret",
    [
        (12345, TEST_API_SECRET),
        (TEST_API_KEY, b"secret-bytes"),
        (["key"], None),
    ],
)
def test_set_credentials_invalid_type(api_key, api_secret):
    """Test that non-string credentials raise ValidationError."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(executor=mock_http)

    with pytest.raises(ValidationError) as exc_info:
        client.set_credentials(api_key, api_secret)

    assert isinstance(exc_info.value.__cause__, TypeError)


def test_constructor_rejects_invalid_credential_type():
    """Test that the constructor applies the same type checks."""
    with pytest.raises(ValidationError):
        KrakenApiClient(api_key=42, executor=MockHttpExecutor())  # type: ignore


def test_set_opt_invalid_option():
    """Test that setting an unknown option raises InvalidOption."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(executor=mock_http)

    with pytest.raises(InvalidOption):
        client.set_opt("pair", "XXBTZUSD")  # type: ignore

    assert len(client.options) == 0


def test_clear_all_options():
    """Test that clear_all_options returns the handle to an empty state."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(executor=mock_http)
    client.set_opt(ApiOption.PAIR, "XXBTZUSD")
    client.set_opt(ApiOption.SINCE, 0)

    client.clear_all_options()

    assert client.options.snapshot() == {}


@pytest.mark.parametrize(
    "api_key, api_secret, missing",
    [
        (TEST_API_KEY, None, "API secret is not set"),
        (None, TEST_API_SECRET, "API key is not set"),
        (None, None, "API key and API secret is not set"),
    ],
)
def test_missing_credential_is_named(api_key, api_secret, missing):
    """Test that a private call names the credential that is missing."""
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(
        api_key=api_key, api_secret=api_secret, executor=mock_http
    )

    with pytest.raises(MissingCredentialsError) as exc_info:
        client.account_balance()

    assert str(exc_info.value) == missing
    assert mock_http.call_log == []
