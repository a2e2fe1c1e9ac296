import pytest

import kraken_api
from kraken_api import helpers
from kraken_api.errors import DeserializationError
from kraken_api.helpers import decode_response, join_url, parse_response, print_data


@pytest.mark.parametrize(
    "base, path, query, expected",
    [
        ("https://api.kraken.com/0", "/public/Time", "", "https://api.kraken.com/0/public/Time"),
        ("https://api.kraken.com/0/", "/public/Time", "", "https://api.kraken.com/0/public/Time"),
        (
            "https://api.kraken.com/0",
            "/public/Ticker",
            "pair=XXBTZUSD",
            "https://api.kraken.com/0/public/Ticker?pair=XXBTZUSD",
        ),
    ],
)
def test_join_url(base, path, query, expected):
    assert join_url(base, path, query) == expected


def test_user_agent_carries_version():
    assert helpers.get_user_agent() == f"KrakenApiPy/{kraken_api.__version__}"


def test_decode_response():
    assert decode_response('{"result":"€"}'.encode(), "u") == '{"result":"€"}'

    with pytest.raises(DeserializationError):
        decode_response(b"\xc3\x28", "https://api.kraken.com/0/public/Time")


def test_parse_response():
    assert parse_response('{"error":[],"result":{"unixtime":1}}') == {
        "error": [],
        "result": {"unixtime": 1},
    }

    with pytest.raises(DeserializationError):
        parse_response("<html>502 Bad Gateway</html>")


def test_print_data(monkeypatch):
    printed = []
    monkeypatch.setattr(helpers, "cpprint", printed.append)

    print_data('{"error":["EGeneral:Invalid arguments"]}')

    assert printed == [{"error": ["EGeneral:Invalid arguments"]}]
