"""
Axion API Client - Main Package

Asynchronous Python client for the Axion financial-data API: stocks, crypto,
forex, futures, indices, economic data, news, sentiment, filings, financial
statements and insider activity.

Modules:
    clients: Transport session, request executor, endpoint catalog and client
    utils: Logging and exception helpers
    config: Environment-based configuration
"""

from axion.clients import AxionClient, AxionClientConfig, AxionResponse
from axion.utils.exceptions import (
    APIError,
    AuthError,
    AxionError,
    ClientInitError,
    NotFoundError,
    RateLimitError,
    ResponseParseError,
    ServerError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AxionClient",
    "AxionClientConfig",
    "AxionResponse",
    "AxionError",
    "ClientInitError",
    "TransportError",
    "APIError",
    "AuthError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ResponseParseError",
]
