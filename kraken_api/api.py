"""HTTP API client for the Kraken exchange.

This module provides the KrakenApiClient class, which builds, signs and
dispatches calls to the Kraken REST API and hands back the exchange's JSON
text untouched.
"""

import logging
import threading
from decimal import Decimal
from types import NoneType, TracebackType
from typing import Any, Mapping, Self, cast

from kraken_api import endpoints
from kraken_api.errors import MissingCredentialsError, ValidationError
from kraken_api.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from kraken_api.helpers import DEFAULT_API_URL
from kraken_api.nonce import NonceGenerator
from kraken_api.options import OptionRegistry
from kraken_api.query import build_private_body, build_query
from kraken_api.signing import base_path_of, private_url_path, sign_request
from kraken_api.types import (
    ApiOption,
    Credential,
    EndpointDescriptor,
    ExportRemovalType,
    Instruction,
    OptionValue,
    OrderType,
    ReportType,
    coerce_enum,
)

log = logging.getLogger(__name__)


class KrakenApiClient:
    """Kraken API client handle.

    One method exists for every supported end-point. Each returns the JSON
    text sent by the exchange, whether it reports success (a ``result``
    object) or a logical failure (a non-empty ``error`` array); interpreting
    it is up to the caller.

    Optional arguments are set on the handle before a call with
    :meth:`set_opt` and persist across calls until cleared with
    :meth:`clear_opt` or :meth:`clear_all_options`. Each end-point only
    transmits the options it accepts. Methods that take required arguments
    store them as options too, so they remain set afterwards.

    A handle may be shared between threads. Each call sends its own
    arguments even when another thread changes the same option meanwhile.
    Private calls on one handle are serialized so that nonces reach the
    exchange in increasing order. Public calls are not.

    Examples:
        .. code-block:: python

            from kraken_api import ApiOption, KrakenApiClient, parse_response
            from kraken_api.env_setup import setup_environment

            api_url, api_key, api_secret, timeout = setup_environment()

            kraken = KrakenApiClient(
                api_url=api_url,
                api_key=api_key,
                api_secret=api_secret,
                timeout=timeout,
            )

            kraken.set_opt(ApiOption.ASSET, "ZUSD")
            balance = parse_response(kraken.trade_balance())
            if balance["error"]:
                raise RuntimeError(balance["error"])
            print(balance["result"])
    """

    _credential: Credential | None = None
    _api_secret: str | None = None

    _http_executor: HttpExecutor

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        api_secret: str | None = None,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
        nonce_generator: NonceGenerator | None = None,
    ):
        """Initialize the Kraken API client.

        No check is made here on the plausibility of the credentials; a
        malformed secret is reported when the first private call is made.

        Args:
            api_url: Versioned base URL of the API (default: production URL)
            api_key: Account API key (optional, needed for private end-points)
            api_secret: Base64 account secret (optional, needed for private end-points)
            executor: Custom HTTP executor (optional, uses default if not provided);
                it must send to api_url, whose path is part of every signature
            timeout: Request timeout in seconds for the default executor (optional)
            nonce_generator: Custom nonce source (optional)

        """
        self._http_executor = (
            executor
            if executor is not None
            else DEFAULT_HTTP_EXECUTOR(
                api_url=api_url,
                api_key=api_key,
                timeout=timeout,
            )
        )
        self._base_path = base_path_of(api_url)
        self._options = OptionRegistry()
        self._options_lock = threading.Lock()
        self._nonce = (
            nonce_generator if nonce_generator is not None else NonceGenerator()
        )
        self._dispatch_lock = threading.Lock()
        self.set_credentials(api_key, api_secret)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP executor's connections."""
        self._http_executor.close()

    @property
    def credential(self) -> Credential:
        """Get the account credential used for private calls.

        Raises:
            MissingCredentialsError: If the API key or secret has not been set

        """
        if self._credential is None:
            missing = [
                name
                for name, value in (
                    ("API key", self._http_executor.api_key),
                    ("API secret", self._api_secret),
                )
                if value is None
            ]
            raise MissingCredentialsError(" and ".join(missing))
        return self._credential

    @property
    def api_key(self) -> str:
        """Get the current API key.

        Raises:
            MissingCredentialsError: If the API key has not been set

        """
        if self._http_executor.api_key is None:
            raise MissingCredentialsError("API key")
        return self._http_executor.api_key

    @property
    def options(self) -> OptionRegistry:
        """The optional arguments currently set on this handle."""
        return self._options

    def set_credentials(self, api_key: str | None, api_secret: str | None) -> None:
        """Set (or clear, with None) the account key and secret.

        Raises:
            ValidationError: If either value is not a string or None

        """
        for name, value in (("api_key", api_key), ("api_secret", api_secret)):
            if not isinstance(cast(Any, value), (str, NoneType)):
                raise ValidationError from TypeError(
                    f"Unexpected type for {name} {type(value)}"
                )

        self._http_executor.api_key = api_key
        self._api_secret = api_secret
        if api_key is not None and api_secret is not None:
            self._credential = Credential(api_key, api_secret)
        else:
            self._credential = None

    """ Optional arguments """

    def set_opt(self, option: ApiOption, value: OptionValue) -> None:
        """Give a value to an optional argument.

        The value is sent to every later end-point that accepts the option.

        Args:
            option: The option to set
            value: Any value; booleans are sent as "true"/"false", enums as their value

        Raises:
            InvalidOption: If option is not an ApiOption

        """
        with self._options_lock:
            self._options.set(option, value)

    def clear_opt(self, option: ApiOption) -> None:
        """Clear an option so that no end-point will send it."""
        with self._options_lock:
            self._options.clear(option)

    def clear_all_options(self) -> None:
        """Clear every option, returning the handle to a well-known state."""
        with self._options_lock:
            self._options.clear_all()

    """ Market data end-points, can be called without credentials """

    def server_time(self) -> str:
        """Get the server's time.

        Endpoint:
            GET /0/public/Time

        """
        return self._public_call(endpoints.SERVER_TIME)

    def system_status(self) -> str:
        """Get the current exchange system status.

        Endpoint:
            GET /0/public/SystemStatus

        """
        return self._public_call(endpoints.SYSTEM_STATUS)

    def asset_info(self) -> str:
        """Get information about the assets available on the exchange.

        Uses the ACLASS and ASSET options.

        Endpoint:
            GET /0/public/Assets

        """
        return self._public_call(endpoints.ASSET_INFO)

    def asset_pairs(self) -> str:
        """Get tradable asset pairs.

        Uses the INFO and PAIR options.

        Endpoint:
            GET /0/public/AssetPairs

        """
        return self._public_call(endpoints.ASSET_PAIRS)

    def ticker_info(self, pair: str) -> str:
        """Get ticker information.

        Args:
            pair: Trading pair, e.g. "XXBTZUSD", or a comma-separated list

        Endpoint:
            GET /0/public/Ticker

        """
        return self._public_call(endpoints.TICKER, {ApiOption.PAIR: pair})

    def ohlc_data(self, pair: str) -> str:
        """Get OHLC (open, high, low, close) candles.

        Uses the INTERVAL and SINCE options.

        Args:
            pair: Trading pair

        Endpoint:
            GET /0/public/OHLC

        """
        return self._public_call(endpoints.OHLC, {ApiOption.PAIR: pair})

    def order_book(self, pair: str) -> str:
        """Get live order book data.

        The COUNT option limits the depth returned.

        Args:
            pair: Trading pair

        Endpoint:
            GET /0/public/Depth

        """
        return self._public_call(endpoints.ORDER_BOOK, {ApiOption.PAIR: pair})

    def recent_trades(self, pair: str) -> str:
        """Get recent trades; uses the SINCE option."""
        return self._public_call(endpoints.RECENT_TRADES, {ApiOption.PAIR: pair})

    def spread_data(self, pair: str) -> str:
        """Get recent spreads; uses the SINCE option."""
        return self._public_call(endpoints.SPREAD, {ApiOption.PAIR: pair})

    """ User data end-points, require credentials """

    def account_balance(self) -> str:
        """Retrieve all cash balances.

        Returns:
            str: JSON text from the exchange

        Raises:
            MissingCredentialsError: If no credentials are set
            CredentialFormat: If the secret is not 88 characters of base64
            TransportError: If the request could not be completed

        Endpoint:
            POST /0/private/Balance

        """
        return self._private_call(endpoints.BALANCE)

    def trade_balance(self) -> str:
        """Get a summary of standing with an asset; uses the ASSET option.

        Endpoint:
            POST /0/private/TradeBalance

        """
        return self._private_call(endpoints.TRADE_BALANCE)

    def open_orders(self) -> str:
        """Get currently open orders; uses the TRADES and USERREF options.

        Endpoint:
            POST /0/private/OpenOrders

        """
        return self._private_call(endpoints.OPEN_ORDERS)

    def closed_orders(self) -> str:
        """Get closed orders, paged 50 at a time.

        Uses the TRADES, USERREF, START, END, OFS and CLOSE_TIME options.

        Endpoint:
            POST /0/private/ClosedOrders

        """
        return self._private_call(endpoints.CLOSED_ORDERS)

    def query_orders(self, txid: str) -> str:
        """Get details of specific orders.

        Uses the TRADES and USERREF options.

        Args:
            txid: Transaction id, or a comma-separated list of them

        Endpoint:
            POST /0/private/QueryOrders

        """
        return self._private_call(endpoints.QUERY_ORDERS, {ApiOption.TXID: txid})

    def trades_history(self) -> str:
        """Get past trades, paged 50 at a time.

        Uses the TYPE, TRADES, START, END and OFS options.

        Endpoint:
            POST /0/private/TradesHistory

        """
        return self._private_call(endpoints.TRADES_HISTORY)

    def trades_info(self, txid: str) -> str:
        """Get information about specific trades; uses the TRADES option.

        Args:
            txid: Transaction id, or a comma-separated list of them

        Endpoint:
            POST /0/private/QueryTrades

        """
        return self._private_call(endpoints.QUERY_TRADES, {ApiOption.TXID: txid})

    def open_margin_positions(self) -> str:
        """Get open margin positions.

        Uses the TXID, DO_CALCS and CONSOLIDATION options.

        Endpoint:
            POST /0/private/OpenPositions

        """
        return self._private_call(endpoints.OPEN_POSITIONS)

    def ledgers_info(self) -> str:
        """Retrieve ledger entries.

        Uses the ACLASS, ASSET, TYPE, START, END and OFS options.

        Endpoint:
            POST /0/private/Ledgers

        """
        return self._private_call(endpoints.LEDGERS)

    def query_ledgers(self) -> str:
        """Retrieve specific ledger entries; uses the ID and TRADES options.

        Endpoint:
            POST /0/private/QueryLedgers

        """
        return self._private_call(endpoints.QUERY_LEDGERS)

    def trade_volume(self, pair: str) -> str:
        """Get 30-day trade volume; uses the FEE_INFO option.

        Args:
            pair: Trading pair for which fee data is required

        Endpoint:
            POST /0/private/TradeVolume

        """
        return self._private_call(endpoints.TRADE_VOLUME, {ApiOption.PAIR: pair})

    def request_export_report(
        self, report_type: ReportType | str, description: str
    ) -> str:
        """Request an export of trades or ledgers.

        Uses the FORMAT, FIELDS, START_TIME and END_TIME options.

        Args:
            report_type: ReportType.TRADES or ReportType.LEDGERS (or "trades"/"ledgers")
            description: Free-text description of the report

        Raises:
            InvalidOption: If report_type is not recognised

        Endpoint:
            POST /0/private/AddExport

        """
        report = coerce_enum(ReportType, report_type)
        return self._private_call(
            endpoints.ADD_EXPORT,
            {
                ApiOption.REPORT: report,
                ApiOption.DESCRIPTION: description,
            },
        )

    def get_export_report_status(self, report_type: ReportType | str) -> str:
        """Get the status of requested data exports.

        Endpoint:
            POST /0/private/ExportStatus

        """
        report = coerce_enum(ReportType, report_type)
        return self._private_call(endpoints.EXPORT_STATUS, {ApiOption.REPORT: report})

    def retrieve_data_export(self, id: str) -> str:
        """Retrieve a processed data export.

        Endpoint:
            POST /0/private/RetrieveExport

        """
        return self._private_call(endpoints.RETRIEVE_EXPORT, {ApiOption.ID: id})

    def delete_export_report(
        self, id: str, removal_type: ExportRemovalType | str
    ) -> str:
        """Delete or cancel an export report.

        Args:
            id: Report id
            removal_type: ExportRemovalType, or the string "delete" or "cancel"

        Raises:
            InvalidOption: If removal_type is anything else; no option is
                changed and no request is sent

        Endpoint:
            POST /0/private/RemoveExport

        """
        removal = coerce_enum(ExportRemovalType, removal_type)
        return self._private_call(
            endpoints.REMOVE_EXPORT,
            {
                ApiOption.ID: id,
                ApiOption.TYPE: removal,
            },
        )

    """ User trading end-points, require credentials """

    def add_order(
        self,
        order_type: OrderType | str,
        direction: Instruction | str,
        volume: str | int | float | Decimal,
        pair: str,
    ) -> str:
        """Place a new order on the exchange's order book.

        Also uses the USERREF, PRICE, PRICE_2, TRIGGER, LEVERAGE, OFLAGS,
        TIME_IN_FORCE, START_TIME, EXPIRE_TIME, CLOSE_TYPE, CLOSE_PRICE_1,
        CLOSE_PRICE_2, DEADLINE and VALIDATE options.

        Args:
            order_type: The kind of order
            direction: Buy or sell
            volume: Order quantity in terms of the base asset
            pair: Trading pair

        Raises:
            InvalidOption: If order_type or direction is not recognised

        Example:
            .. code-block:: python

                client.set_opt(ApiOption.PRICE, "27500.0")
                client.set_opt(ApiOption.VALIDATE, True)
                client.add_order(OrderType.LIMIT, Instruction.BUY, "0.01", "XXBTZUSD")

        Endpoint:
            POST /0/private/AddOrder

        """
        kind = coerce_enum(OrderType, order_type)
        side = coerce_enum(Instruction, direction)
        return self._private_call(
            endpoints.ADD_ORDER,
            {
                ApiOption.ORDER_TYPE: kind,
                ApiOption.TYPE: side,
                ApiOption.VOLUME: volume,
                ApiOption.PAIR: pair,
            },
        )

    def edit_order(self, txid: str, pair: str) -> str:
        """Edit an open order.

        Uses the VOLUME, USERREF, PRICE, PRICE_2, OFLAGS, DEADLINE,
        CANCEL_RESPONSE and VALIDATE options.

        Endpoint:
            POST /0/private/EditOrder

        """
        return self._private_call(
            endpoints.EDIT_ORDER,
            {
                ApiOption.TXID: txid,
                ApiOption.PAIR: pair,
            },
        )

    def cancel_order(self, txid: str) -> str:
        """Cancel an open order.

        Args:
            txid: Transaction id; a user reference id cancels every order carrying it

        Endpoint:
            POST /0/private/CancelOrder

        """
        return self._private_call(endpoints.CANCEL_ORDER, {ApiOption.TXID: txid})

    def cancel_all_orders(self) -> str:
        """Cancel every open order on the account.

        Endpoint:
            POST /0/private/CancelAll

        """
        return self._private_call(endpoints.CANCEL_ALL)

    def cancel_all_orders_after_x(self, timeout: int) -> str:
        """Arm the dead man's switch.

        All orders are cancelled once ``timeout`` seconds pass without another
        call; a timeout of 0 disarms it.

        Endpoint:
            POST /0/private/CancelAllOrdersAfter

        """
        return self._private_call(
            endpoints.CANCEL_ALL_AFTER,
            {
                ApiOption.TIMEOUT: timeout,
            },
        )

    """ Dispatch """

    def _prepare_query(
        self,
        endpoint: EndpointDescriptor,
        required: Mapping[ApiOption, OptionValue] | None,
    ) -> str:
        """Store the call's required arguments and serialize the query.

        Both steps happen under the options lock, so a concurrent call on the
        same handle cannot overwrite an argument between them.
        """
        with self._options_lock:
            for option, value in (required or {}).items():
                self._options.set(option, value)
            return build_query(endpoint.options, self._options)

    def _public_call(
        self,
        endpoint: EndpointDescriptor,
        required: Mapping[ApiOption, OptionValue] | None = None,
    ) -> str:
        """Send a public end-point request.

        Args:
            endpoint: Descriptor of the end-point to call
            required: Arguments of the call, stored as persistent options

        Returns:
            str: The response body text

        """
        query = self._prepare_query(endpoint, required)
        return self._http_executor.send_simple_request(
            endpoint.relative_path, query
        ).body

    def _private_call(
        self,
        endpoint: EndpointDescriptor,
        required: Mapping[ApiOption, OptionValue] | None = None,
    ) -> str:
        """Sign and send a private end-point request.

        The nonce is drawn and the request sent while holding the dispatch
        lock, so concurrent callers on one handle reach the exchange with
        increasing nonces.

        Args:
            endpoint: Descriptor of the end-point to call
            required: Arguments of the call, stored as persistent options

        Returns:
            str: The response body text

        Raises:
            MissingCredentialsError: If no credentials are set
            CredentialFormat: If the secret is not 88 characters of base64
            SigningFailure: If the signature cannot be computed
            TransportError: If the request could not be completed

        """
        credential = self.credential
        credential.validate()

        url_path = private_url_path(endpoint.name, self._base_path)
        with self._dispatch_lock:
            query = self._prepare_query(endpoint, required)
            nonce = self._nonce.next()
            body = build_private_body(query, nonce)
            signature = sign_request(credential.secret, url_path, nonce, body)
            log.debug("Private call %s with nonce %d", url_path, nonce)
            response = self._http_executor.send_authorized_request(
                endpoint.relative_path, body, signature
            )
        return response.body


def connect(api_key: str, api_secret: str, **kwargs: Any) -> KrakenApiClient:
    """Obtain a client handle for an account.

    This cannot fail on account of the credentials; they are checked when the
    first private call is made.

    Args:
        api_key: Account API key
        api_secret: Base64 account secret
        **kwargs: Passed through to KrakenApiClient

    """
    return KrakenApiClient(api_key=api_key, api_secret=api_secret, **kwargs)
