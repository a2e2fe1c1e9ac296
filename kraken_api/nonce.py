"""Nonce generation for private calls.

The exchange rejects any private call whose nonce is not greater than the
last one it saw for the same API key.
"""

import threading
from time import time_ns
from typing import Callable

from kraken_api.types import Nonce


def epoch_microseconds() -> int:
    """Current wall-clock time in microseconds since the Unix epoch."""
    return time_ns() // 1_000


class NonceGenerator:
    """Issues strictly increasing microsecond nonces.

    Each value is the larger of the current clock reading and the previously
    issued value plus one, so a coarse clock or a backward clock step never
    produces a repeated or decreasing nonce.
    """

    def __init__(self, clock: Callable[[], int] = epoch_microseconds) -> None:
        self._clock = clock
        self._last: Nonce = 0
        self._lock = threading.Lock()

    @property
    def last(self) -> Nonce:
        """Most recently issued nonce, or 0 if none has been issued."""
        return self._last

    def next(self) -> Nonce:
        with self._lock:
            self._last = max(self._clock(), self._last + 1)
            return self._last
