from kraken_api.executors.defaults import DEFAULT_HTTP_EXECUTOR
from kraken_api.executors.httpx import HttpxHttpExecutor
from kraken_api.executors.interface import HttpExecutor, HttpResponse
from kraken_api.executors.requests import RequestsHttpExecutor

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "RequestsHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
