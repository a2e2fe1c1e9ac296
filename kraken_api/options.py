"""Persistent store of optional end-point arguments.

Options set on a client stay set across calls until they are cleared, so a
value meant for one end-point will also be sent to any later end-point that
accepts the same argument.
"""

from decimal import Decimal
from enum import Enum

from kraken_api.errors import InvalidOption
from kraken_api.types import ApiOption, OptionValue


def format_option_value(value: OptionValue) -> str:
    """Render an option value the way the exchange expects to read it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _check_option(option: ApiOption) -> None:
    if not isinstance(option, ApiOption):
        raise InvalidOption(f"Unknown option {option!r}")


class OptionRegistry:
    """Mapping from ApiOption to the string value that will be transmitted."""

    def __init__(self) -> None:
        self._values: dict[ApiOption, str] = {}

    def set(self, option: ApiOption, value: OptionValue) -> None:
        """Store a value for an option, replacing any previous one.

        Raises:
            InvalidOption: If option is not an ApiOption member

        """
        _check_option(option)
        self._values[option] = format_option_value(value)

    def clear(self, option: ApiOption) -> None:
        """Forget an option; does nothing if it was never set."""
        _check_option(option)
        self._values.pop(option, None)

    def clear_all(self) -> None:
        self._values.clear()

    def get(self, option: ApiOption) -> str | None:
        return self._values.get(option)

    def snapshot(self) -> dict[ApiOption, str]:
        """Return a copy of the current option values."""
        return dict(self._values)

    def __contains__(self, option: object) -> bool:
        return option in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{k.name}={v!r}" for k, v in self._values.items())
        return f"OptionRegistry({items})"
