"""
HTTP Clients Module

Provides the request pipeline for the Axion API.

Components:
    - AxionClient: Async client with one method per catalog endpoint
    - AxionClientConfig: Configuration for AxionClient
    - AxionResponse: Normalized result of one request
    - RequestExecutor: URL building, auth headers and outcome classification
    - TransportSession: Owns the aiohttp session and API key
    - build_query: Query string encoder
    - ENDPOINTS: Declarative endpoint catalog
"""

from .client import AxionClient, AxionClientConfig
from .endpoints import ENDPOINTS, Endpoint, Param, get_endpoint, list_endpoints
from .executor import RequestExecutor, build_url
from .query import build_query
from .response import AxionResponse
from .session import TransportSession

__all__ = [
    "AxionClient",
    "AxionClientConfig",
    "AxionResponse",
    "RequestExecutor",
    "TransportSession",
    "build_query",
    "build_url",
    "ENDPOINTS",
    "Endpoint",
    "Param",
    "get_endpoint",
    "list_endpoints",
]
