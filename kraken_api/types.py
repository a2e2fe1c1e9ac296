"""Type definitions for the Kraken API client.

This module contains type aliases, enums, and dataclasses used throughout
the package, organized into logical sections for clarity.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TypeAlias, TypeVar

from kraken_api.errors import CredentialFormat, InvalidOption

# ============================================================================
# TYPE ALIASES
# ============================================================================

Nonce: TypeAlias = int

# Values accepted by OptionRegistry.set; everything ends up as a string
OptionValue: TypeAlias = str | int | float | Decimal | bool | Enum

# JSON type hierarchy, only used when callers choose to parse a response
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray

SECRET_ENCODED_LENGTH: int = 88


# ============================================================================
# OPTIONAL ARGUMENTS
# ============================================================================


class ApiOption(Enum):
    """Optional arguments understood by some of Kraken's end-points.

    Each member's value is the exact parameter name the exchange expects on the
    wire. Values given to options are always strings; the notes below describe
    how the exchange interprets them.
    """

    # One of "info", "leverage", "fees" or "margin"
    INFO = "info"
    # Asset class; "currency" is the only known value
    ACLASS = "aclass"
    # Asset such as "usd", a comma-delimited list, or "all"
    ASSET = "asset"
    # Whether to include trades (boolean)
    TRADES = "trades"
    # Restrict results to a user reference id
    USERREF = "userref"
    # UNIX timestamp or transaction id marking the start of results
    START = "start"
    # UNIX timestamp or transaction id marking the end of results
    END = "end"
    # Result offset, for pagination
    OFS = "ofs"
    # One of "open", "close" or "both"
    CLOSE_TIME = "closetime"
    # Whether to calculate profit and loss (boolean)
    DO_CALCS = "docalcs"
    # Trading pair such as "XETCXETH", or a comma-separated list
    PAIR = "pair"
    # Whether to include fee info (boolean)
    FEE_INFO = "fee-info"
    # Comma-delimited order flags: "post", "fcib", "fciq", "nompp"
    OFLAGS = "oflags"
    # UNIX timestamp of the start of a report, or scheduled order start
    START_TIME = "starttm"
    # UNIX timestamp of the end of a report
    END_TIME = "endtm"
    # "+<N>" seconds from now, or "<N>" as a UNIX timestamp
    EXPIRE_TIME = "expiretm"
    # "CSV" or "TSV"
    FORMAT = "format"
    # Comma-delimited list of report fields
    FIELDS = "fields"
    # Validate the order without submitting it (boolean)
    VALIDATE = "validate"
    # RFC3339 timestamp after which the order request is rejected
    DEADLINE = "deadline"
    # See OrderType
    ORDER_TYPE = "ordertype"
    # Trade type filter, order direction, or export removal type
    TYPE = "type"
    # Order type of the conditional close order
    CLOSE_TYPE = "close[ordertype]"
    # Conditional close order price
    CLOSE_PRICE_1 = "close[price]"
    # Conditional close order secondary price
    CLOSE_PRICE_2 = "close[price2]"
    # Limit price for limit orders, trigger price for all other types
    PRICE = "price"
    # Limit price for "stop-loss-limit" and "take-profit-limit" orders
    PRICE_2 = "price2"
    # "index" or "last"
    TRIGGER = "trigger"
    # Amount of leverage desired
    LEVERAGE = "leverage"
    # "GTC", "IOC" or "GTD"
    TIME_IN_FORCE = "timeinforce"
    # Order quantity in terms of the base asset
    VOLUME = "volume"
    # Time frame interval in minutes
    INTERVAL = "interval"
    # Dead man's switch timeout in seconds
    TIMEOUT = "timeout"
    # Return data since the given id or timestamp
    SINCE = "since"
    # Maximum number of entries to return
    COUNT = "count"
    # One or more transaction ids, sometimes user reference ids
    TXID = "txid"
    # Market over which to consolidate open margin positions
    CONSOLIDATION = "consolidation"
    # Comma-delimited list of ledger or report ids
    ID = "id"
    # Use pending replace before complete replace (boolean)
    CANCEL_RESPONSE = "cancel_response"
    # See ReportType
    REPORT = "report"
    # Free-text description of an export report
    DESCRIPTION = "description"

    @property
    def wire_name(self) -> str:
        """The parameter name sent to the exchange."""
        return self.value


# ============================================================================
# ENUMERATED ARGUMENTS
# ============================================================================


class Instruction(Enum):
    """Direction of a trade instruction."""

    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """Order types, spelled exactly as the exchange expects them."""

    MARKET = "market"
    LIMIT = "limit"
    STOP_LOSS = "stop-loss"
    TAKE_PROFIT = "take-profit"
    STOP_LOSS_PROFIT = "stop-loss-profit"
    STOP_LOSS_PROFIT_LIMIT = "stop-loss-profit-limit"
    STOP_LOSS_LIMIT = "stop-loss-limit"
    TAKE_PROFIT_LIMIT = "take-profit-limit"
    TRAILING_STOP = "trailing-stop"
    TRAILING_STOP_LIMIT = "trailing-stop-limit"
    STOP_LOSS_AND_LIMIT = "stop-loss-and-limit"
    SETTLE_POSITION = "settle-position"


class ReportType(Enum):
    """Kind of bulk data export."""

    TRADES = "trades"
    LEDGERS = "ledgers"


class ExportRemovalType(Enum):
    """How to dispose of an export report."""

    DELETE = "delete"
    CANCEL = "cancel"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_type: type[E], value: E | str) -> E:
    """Accept either an enum member or its exchange spelling.

    Raises:
        InvalidOption: If the string is not one of the enum's values

    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as e:
        expected = ", ".join(repr(member.value) for member in enum_type)
        raise InvalidOption(
            f"Invalid {enum_type.__name__} {value!r}, expected one of {expected}"
        ) from e


# ============================================================================
# CREDENTIALS
# ============================================================================


@dataclass(frozen=True)
class Credential:
    """Account key and base64 secret, as issued on the Kraken web site."""

    key: str
    secret: str = field(repr=False)

    def validate(self) -> None:
        """Check the secret has the documented encoded length.

        Raises:
            CredentialFormat: If the secret is not exactly 88 characters

        """
        if len(self.secret) != SECRET_ENCODED_LENGTH:
            raise CredentialFormat(
                f"private key must be {SECRET_ENCODED_LENGTH} characters long, "
                f"got {len(self.secret)}"
            )


# ============================================================================
# END-POINTS
# ============================================================================


@dataclass(frozen=True)
class EndpointDescriptor:
    """Name, visibility and accepted optional arguments of one end-point."""

    name: str
    options: tuple[ApiOption, ...] = ()
    private: bool = False

    @property
    def relative_path(self) -> str:
        """Request path relative to the versioned base URL."""
        scope = "private" if self.private else "public"
        return f"/{scope}/{self.name}"
