"""Tests for query string and POST body construction."""

from kraken_api.options import OptionRegistry
from kraken_api.query import build_private_body, build_query
from kraken_api.types import ApiOption as Opt


def test_only_whitelisted_and_set_options_are_emitted():
    registry = OptionRegistry()
    registry.set(Opt.PAIR, "2")
    registry.set(Opt.COUNT, "x")

    assert build_query([Opt.ASSET, Opt.PAIR, Opt.SINCE], registry) == "pair=2"


def test_whitelist_order_is_preserved():
    registry = OptionRegistry()
    whitelist = [Opt.PAIR, Opt.SINCE]

    registry.set(Opt.PAIR, "XXBTZUSD")
    assert build_query(whitelist, registry) == "pair=XXBTZUSD"

    registry.set(Opt.SINCE, 1000)
    assert build_query(whitelist, registry) == "pair=XXBTZUSD&since=1000"


def test_insertion_order_does_not_matter():
    registry = OptionRegistry()
    registry.set(Opt.SINCE, "1000")
    registry.set(Opt.INTERVAL, "60")
    registry.set(Opt.PAIR, "XXBTZUSD")

    assert (
        build_query([Opt.PAIR, Opt.INTERVAL, Opt.SINCE], registry)
        == "pair=XXBTZUSD&interval=60&since=1000"
    )


def test_empty_intersection_yields_empty_string():
    registry = OptionRegistry()
    registry.set(Opt.PAIR, "XXBTZUSD")

    assert build_query([], registry) == ""
    assert build_query([Opt.TXID], registry) == ""


def test_bracketed_wire_names_are_sent_verbatim():
    registry = OptionRegistry()
    registry.set(Opt.CLOSE_TYPE, "limit")
    registry.set(Opt.CLOSE_PRICE_1, "30000")

    assert (
        build_query([Opt.CLOSE_TYPE, Opt.CLOSE_PRICE_1, Opt.CLOSE_PRICE_2], registry)
        == "close[ordertype]=limit&close[price]=30000"
    )


def test_values_are_percent_encoded():
    registry = OptionRegistry()
    registry.set(Opt.EXPIRE_TIME, "+60")
    registry.set(Opt.OFLAGS, "post,fciq")
    registry.set(Opt.DESCRIPTION, "a&b=c")

    assert (
        build_query([Opt.EXPIRE_TIME, Opt.OFLAGS, Opt.DESCRIPTION], registry)
        == "expiretm=%2B60&oflags=post%2Cfciq&description=a%26b%3Dc"
    )


def test_private_body_with_empty_query():
    assert build_private_body("", 1700000000000000) == "nonce=1700000000000000"


def test_private_body_appends_nonce_last():
    assert (
        build_private_body("asset=ZUSD", 1700000000000000)
        == "asset=ZUSD&nonce=1700000000000000"
    )
