"""
Private API Example

This example demonstrates the signed account end-points. Credentials are read
by setup_environment() from a .env file or the shell environment:

    KRAKEN_API_KEY_PRODUCTION=...
    KRAKEN_API_SECRET_PRODUCTION=...

The order placed at the end uses the validate flag, so the exchange checks it
without ever adding it to the book.
"""

from kraken_api import (
    ApiOption,
    Instruction,
    OrderType,
    connect,
    parse_response,
    print_data,
)
from kraken_api.env_setup import setup_environment


def example_private_api() -> None:
    api_url, api_key, api_secret, timeout = setup_environment()
    if api_key is None or api_secret is None:
        raise SystemExit("KRAKEN_API_KEY_* and KRAKEN_API_SECRET_* must be set")

    with connect(api_key, api_secret, api_url=api_url, timeout=timeout) as kraken:
        print("\n[Balance]")
        body = kraken.account_balance()
        balance = parse_response(body)
        if balance["error"]:
            print(f"Exchange reported: {balance['error']}")
        else:
            print_data(body)

        kraken.set_opt(ApiOption.ASSET, "ZUSD")
        print("\n[Trade Balance] ZUSD")
        print_data(kraken.trade_balance())

        print("\n[Open Orders]")
        print_data(kraken.open_orders())

        kraken.clear_all_options()
        kraken.set_opt(ApiOption.PRICE, "1000.0")
        kraken.set_opt(ApiOption.VALIDATE, True)
        print("\n[Add Order] validate only")
        print_data(
            kraken.add_order(OrderType.LIMIT, Instruction.BUY, "0.0001", "XXBTZUSD")
        )


if __name__ == "__main__":
    example_private_api()
