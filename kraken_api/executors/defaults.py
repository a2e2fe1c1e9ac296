"""Default executor configuration.

This module defines the default HTTP executor implementation used by the
Kraken API client when no custom executor is provided.
"""

from typing import Type

from kraken_api.executors.httpx import HttpxHttpExecutor
from kraken_api.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
