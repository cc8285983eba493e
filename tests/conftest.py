"""
Pytest configuration and shared fixtures for Axion client tests.

Provides:
    - A scripted transport that replays canned HTTP outcomes
    - Client and executor fixtures wired to that transport
    - Sample API payloads
"""

import asyncio
from typing import Optional, Union

import aiohttp
import pytest

from axion.clients.client import AxionClient, AxionClientConfig
from axion.clients.executor import RequestExecutor
from axion.clients.session import TransportSession


# ========== Scripted Transport ==========


Outcome = Union[tuple[int, bytes], BaseException]


class ScriptedTransport(TransportSession):
    """
    TransportSession replacement that never touches the network.

    Each queued outcome is either a (status, body) tuple or an exception
    to raise from perform(). When the queue holds a single outcome it is
    replayed for every call, which keeps repeated calls deterministic.
    """

    def __init__(self, *outcomes: Outcome, api_key: Optional[str] = "test_key_123"):
        super().__init__(api_key=api_key, timeout=5)
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    async def open(self) -> None:
        self._open = True

    async def close(self) -> None:
        self._open = False

    async def perform(self, url, headers, timeout=None):
        self.calls.append({"url": url, "headers": dict(headers), "timeout": timeout})
        if not self.outcomes:
            raise AssertionError("ScriptedTransport has no outcome queued")
        outcome = self.outcomes[0] if len(self.outcomes) == 1 else self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


# ========== Transport / Executor Fixtures ==========


@pytest.fixture
def make_transport():
    """
    Factory for opened scripted transports.

    Returns:
        Callable taking outcomes (and optional api_key) and returning an
        open ScriptedTransport
    """
    def _make(*outcomes: Outcome, api_key: Optional[str] = "test_key_123") -> ScriptedTransport:
        transport = ScriptedTransport(*outcomes, api_key=api_key)
        transport._open = True
        return transport

    return _make


@pytest.fixture
def make_executor(make_transport):
    """
    Factory for executors over a scripted transport.

    Returns:
        Callable returning (executor, transport)
    """
    def _make(*outcomes: Outcome, api_key: Optional[str] = "test_key_123"):
        transport = make_transport(*outcomes, api_key=api_key)
        return RequestExecutor(transport), transport

    return _make


@pytest.fixture
def make_client(make_transport):
    """
    Factory for AxionClient instances over a scripted transport.

    Returns:
        Callable returning (client, transport)
    """
    def _make(*outcomes: Outcome, api_key: Optional[str] = "test_key_123"):
        transport = make_transport(*outcomes, api_key=api_key)
        client = AxionClient(config=AxionClientConfig(api_key=api_key), transport=transport)
        return client, transport

    return _make


# ========== Sample Payload Fixtures ==========


@pytest.fixture
def quote_body() -> bytes:
    """Sample stock quote body."""
    return b'{"symbol":"AAPL","price":123.45}'


@pytest.fixture
def prices_body() -> bytes:
    """Sample price history body."""
    return (
        b'[{"date":"2024-01-02","open":187.15,"close":185.64},'
        b'{"date":"2024-01-03","open":184.22,"close":184.25}]'
    )


@pytest.fixture
def connection_error() -> aiohttp.ClientError:
    """Transport-level failure raised before any HTTP response."""
    return aiohttp.ClientConnectionError("Cannot connect to host api.axionquant.com:443")


@pytest.fixture
def timeout_error() -> asyncio.TimeoutError:
    """Timeout with an empty message, as aiohttp raises it."""
    return asyncio.TimeoutError()
