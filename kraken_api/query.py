"""Form-encoded parameter strings for end-point calls."""

from typing import Iterable
from urllib.parse import quote

from kraken_api.options import OptionRegistry
from kraken_api.types import ApiOption, Nonce


def build_query(whitelist: Iterable[ApiOption], registry: OptionRegistry) -> str:
    """Serialize the whitelisted options currently set in the registry.

    Pairs are emitted in whitelist order and joined with ``&``. Options absent
    from the registry are skipped, as are registry entries that are not
    whitelisted. Parameter names are sent verbatim (``close[price]`` keeps its
    brackets); values are percent-encoded.

    Args:
        whitelist: Ordered options accepted by the end-point
        registry: Current option values

    Returns:
        str: e.g. ``"pair=XXBTZUSD&since=1000"``, or ``""`` if nothing applies

    """
    pairs = []
    for option in whitelist:
        value = registry.get(option)
        if value is not None:
            pairs.append(f"{option.wire_name}={quote(value, safe='')}")
    return "&".join(pairs)


def build_private_body(query: str, nonce: Nonce) -> str:
    """Append the nonce parameter to a query string to form a POST body."""
    if not query:
        return f"nonce={nonce}"
    return f"{query}&nonce={nonce}"
