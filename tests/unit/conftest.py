import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Generator

import orjson
import pytest

from kraken_api.api import KrakenApiClient
from kraken_api.nonce import NonceGenerator
from tests.mock_executors import MockHttpExecutor, MockOutputNotExhausted

DATA_DIR = Path(__file__).parent.joinpath("data")

log = logging.getLogger(__name__)

# Example credentials from the exchange's authentication documentation
TEST_API_KEY = "TEST-API-KEY"
TEST_API_SECRET = (
    "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
)

FIXED_NONCE = 1700000000000000


def fixed_nonce_generator(start: int = FIXED_NONCE) -> NonceGenerator:
    """A nonce generator whose clock never moves, so nonces count up from start."""
    return NonceGenerator(clock=lambda: start)


@pytest.fixture
def mock_http_client() -> Generator[
    tuple[KrakenApiClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = KrakenApiClient(
        # not used with the mock in place
        api_url="https://api.gaierror.xyz/0",
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        # replace real network requests with our mock
        executor=mock_http,
        nonce_generator=fixed_nonce_generator(),
    )

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


@lru_cache(maxsize=1)
def data_files() -> list[Path]:
    return list(DATA_DIR.iterdir())


def json_data_files(name: str) -> list[Path]:
    return list(
        sorted(
            path
            for path in data_files()
            if path.match(f"*/{name}.*.json", case_sensitive=True)
        )
    )


def load_text(name: str, case: int | None = None) -> str:
    """Load a fixture file verbatim, as the exchange would have sent it."""
    case_part = f"{case}." if case else ""
    path = DATA_DIR / f"{name}.{case_part}json"
    return path.read_text(encoding="utf-8")


def load_json_all_cases(name: str) -> list[tuple[dict[str, Any], Path]]:
    """Load all json payloads for a given base name (case1, case2, ...)."""
    results = []
    for path in json_data_files(name):
        log.debug("Loading json from %s", path.as_posix())
        with open(path, "rb") as fh:
            payload = orjson.loads(fh.read())
            results.append((payload, path))
    return results
