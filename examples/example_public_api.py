"""
Public API Example

This example demonstrates how to use Kraken's public market data end-points.
No authentication is required for these end-points.

Endpoints covered:
- Server time and system status
- Asset and asset pair information
- Ticker, OHLC candles and order book
- Recent trades and spreads
"""

from kraken_api import ApiOption, KrakenApiClient, get_version, print_data


def example_public_api() -> None:
    """Call every public end-point once and print the results."""

    print("=" * 70)
    print("Kraken Public API Example")
    print("=" * 70)

    print(f"\n[Info] Kraken API client version: {get_version()}\n")

    with KrakenApiClient() as kraken:
        print("\n[Server Time]")
        print_data(kraken.server_time())

        print("\n[System Status]")
        print_data(kraken.system_status())

        # Options persist on the handle until cleared
        kraken.set_opt(ApiOption.ASSET, "XBT,ETH")
        print("\n[Assets] XBT, ETH")
        print_data(kraken.asset_info())

        print("\n[Ticker] XXBTZUSD")
        print_data(kraken.ticker_info("XXBTZUSD"))

        kraken.set_opt(ApiOption.INTERVAL, 60)
        print("\n[OHLC] XXBTZUSD, hourly")
        print_data(kraken.ohlc_data("XXBTZUSD"))

        kraken.set_opt(ApiOption.COUNT, 5)
        print("\n[Order Book] XXBTZUSD, 5 levels")
        print_data(kraken.order_book("XXBTZUSD"))

        kraken.clear_all_options()
        print("\n[Recent Trades] XETHZUSD")
        print_data(kraken.recent_trades("XETHZUSD"))

        print("\n[Spread] XETHZUSD")
        print_data(kraken.spread_data("XETHZUSD"))


if __name__ == "__main__":
    example_public_api()
