"""Declarative table of the Kraken REST end-points supported by the client.

Each descriptor pairs the exchange-defined end-point name with the ordered
list of optional arguments it is willing to transmit. Query strings are
always emitted in the order given here.
"""

from kraken_api.types import ApiOption as Opt
from kraken_api.types import EndpointDescriptor

# ============================================================================
# MARKET DATA (public)
# ============================================================================

SERVER_TIME = EndpointDescriptor("Time")
SYSTEM_STATUS = EndpointDescriptor("SystemStatus")
ASSET_INFO = EndpointDescriptor("Assets", (Opt.ACLASS, Opt.ASSET))
ASSET_PAIRS = EndpointDescriptor("AssetPairs", (Opt.INFO, Opt.PAIR))
TICKER = EndpointDescriptor("Ticker", (Opt.PAIR,))
OHLC = EndpointDescriptor("OHLC", (Opt.PAIR, Opt.INTERVAL, Opt.SINCE))
ORDER_BOOK = EndpointDescriptor("Depth", (Opt.PAIR, Opt.COUNT))
RECENT_TRADES = EndpointDescriptor("Trades", (Opt.PAIR, Opt.SINCE))
SPREAD = EndpointDescriptor("Spread", (Opt.PAIR, Opt.SINCE))

# ============================================================================
# USER DATA (private)
# ============================================================================

BALANCE = EndpointDescriptor("Balance", private=True)
TRADE_BALANCE = EndpointDescriptor("TradeBalance", (Opt.ASSET,), private=True)
OPEN_ORDERS = EndpointDescriptor(
    "OpenOrders", (Opt.TRADES, Opt.USERREF), private=True
)
CLOSED_ORDERS = EndpointDescriptor(
    "ClosedOrders",
    (Opt.TRADES, Opt.USERREF, Opt.START, Opt.END, Opt.OFS, Opt.CLOSE_TIME),
    private=True,
)
QUERY_ORDERS = EndpointDescriptor(
    "QueryOrders", (Opt.TXID, Opt.TRADES, Opt.USERREF), private=True
)
TRADES_HISTORY = EndpointDescriptor(
    "TradesHistory",
    (Opt.TYPE, Opt.TRADES, Opt.START, Opt.END, Opt.OFS),
    private=True,
)
QUERY_TRADES = EndpointDescriptor(
    "QueryTrades", (Opt.TXID, Opt.TRADES), private=True
)
OPEN_POSITIONS = EndpointDescriptor(
    "OpenPositions", (Opt.TXID, Opt.DO_CALCS, Opt.CONSOLIDATION), private=True
)
LEDGERS = EndpointDescriptor(
    "Ledgers",
    (Opt.ACLASS, Opt.ASSET, Opt.TYPE, Opt.START, Opt.END, Opt.OFS),
    private=True,
)
QUERY_LEDGERS = EndpointDescriptor("QueryLedgers", (Opt.ID, Opt.TRADES), private=True)
TRADE_VOLUME = EndpointDescriptor(
    "TradeVolume", (Opt.PAIR, Opt.FEE_INFO), private=True
)
ADD_EXPORT = EndpointDescriptor(
    "AddExport",
    (
        Opt.REPORT,
        Opt.FORMAT,
        Opt.DESCRIPTION,
        Opt.FIELDS,
        Opt.START_TIME,
        Opt.END_TIME,
    ),
    private=True,
)
EXPORT_STATUS = EndpointDescriptor("ExportStatus", (Opt.REPORT,), private=True)
RETRIEVE_EXPORT = EndpointDescriptor("RetrieveExport", (Opt.ID,), private=True)
REMOVE_EXPORT = EndpointDescriptor("RemoveExport", (Opt.ID, Opt.TYPE), private=True)

# ============================================================================
# USER TRADING (private)
# ============================================================================

ADD_ORDER = EndpointDescriptor(
    "AddOrder",
    (
        Opt.ORDER_TYPE,
        Opt.TYPE,
        Opt.VOLUME,
        Opt.PAIR,
        Opt.USERREF,
        Opt.PRICE,
        Opt.PRICE_2,
        Opt.TRIGGER,
        Opt.LEVERAGE,
        Opt.OFLAGS,
        Opt.TIME_IN_FORCE,
        Opt.START_TIME,
        Opt.EXPIRE_TIME,
        Opt.CLOSE_TYPE,
        Opt.CLOSE_PRICE_1,
        Opt.CLOSE_PRICE_2,
        Opt.DEADLINE,
        Opt.VALIDATE,
    ),
    private=True,
)
EDIT_ORDER = EndpointDescriptor(
    "EditOrder",
    (
        Opt.VOLUME,
        Opt.PAIR,
        Opt.USERREF,
        Opt.PRICE,
        Opt.PRICE_2,
        Opt.OFLAGS,
        Opt.DEADLINE,
        Opt.VALIDATE,
        Opt.TXID,
        Opt.CANCEL_RESPONSE,
    ),
    private=True,
)
CANCEL_ORDER = EndpointDescriptor("CancelOrder", (Opt.TXID,), private=True)
CANCEL_ALL = EndpointDescriptor("CancelAll", private=True)
CANCEL_ALL_AFTER = EndpointDescriptor(
    "CancelAllOrdersAfter", (Opt.TIMEOUT,), private=True
)

ALL_ENDPOINTS: tuple[EndpointDescriptor, ...] = (
    SERVER_TIME,
    SYSTEM_STATUS,
    ASSET_INFO,
    ASSET_PAIRS,
    TICKER,
    OHLC,
    ORDER_BOOK,
    RECENT_TRADES,
    SPREAD,
    BALANCE,
    TRADE_BALANCE,
    OPEN_ORDERS,
    CLOSED_ORDERS,
    QUERY_ORDERS,
    TRADES_HISTORY,
    QUERY_TRADES,
    OPEN_POSITIONS,
    LEDGERS,
    QUERY_LEDGERS,
    TRADE_VOLUME,
    ADD_EXPORT,
    EXPORT_STATUS,
    RETRIEVE_EXPORT,
    REMOVE_EXPORT,
    ADD_ORDER,
    EDIT_ORDER,
    CANCEL_ORDER,
    CANCEL_ALL,
    CANCEL_ALL_AFTER,
)
