"""Computation of the API-Sign header for private end-points.

Kraken authenticates a private call with::

    HMAC-SHA512(base64decode(secret), url_path + SHA256(nonce + post_body))

base64-encoded. ``url_path`` is the request path only, e.g.
``/0/private/Balance``; the POST body never takes part in that prefix.
"""

import base64
import binascii
import hmac
from hashlib import sha256, sha512
from urllib.parse import urlsplit

from kraken_api.errors import MalformedSecret, SigningFailure
from kraken_api.types import Nonce

DEFAULT_BASE_PATH: str = "/0"


def base_path_of(api_url: str) -> str:
    """Path component of a versioned base URL, e.g. ``/0`` for the production URL."""
    return urlsplit(api_url).path.rstrip("/")


def private_url_path(endpoint_name: str, base_path: str = DEFAULT_BASE_PATH) -> str:
    """Path that is signed for a private end-point, e.g. ``/0/private/Balance``.

    The exchange verifies the signature against the full request path, so
    ``base_path`` must be the path of the base URL the request is sent to.
    """
    return f"{base_path.rstrip('/')}/private/{endpoint_name}"


def decode_secret(secret: str) -> bytes:
    """Decode the base64 account secret into the raw HMAC key.

    Raises:
        MalformedSecret: If the secret is not valid base64

    """
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedSecret(f"private key is not valid base64: {e}") from e


def sign_request(secret: str, url_path: str, nonce: Nonce | str, body: str) -> str:
    """Compute the API-Sign header value for a private call.

    Args:
        secret: Base64-encoded account secret
        url_path: Request path, e.g. ``/0/private/AddOrder``
        nonce: The nonce carried in the body
        body: The exact form-encoded POST body, including ``nonce=...``

    Returns:
        str: Base64-encoded HMAC-SHA512 signature

    Raises:
        MalformedSecret: If the secret is not valid base64
        SigningFailure: If the digest or MAC cannot be computed

    """
    key = decode_secret(secret)
    try:
        digest = sha256(f"{nonce}{body}".encode()).digest()
        mac = hmac.new(key, url_path.encode() + digest, sha512).digest()
    except (TypeError, ValueError, UnicodeError) as e:
        raise SigningFailure(f"Failed to sign request for {url_path}: {e}") from e
    return base64.b64encode(mac).decode()
