"""
Axion API client.

Asynchronous client exposing one coroutine method per catalog endpoint,
all routed through a single RequestExecutor.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..config import BASE_URL, AxionConfig
from .endpoints import ENDPOINTS, Endpoint, get_endpoint
from .executor import RequestExecutor
from .response import AxionResponse
from .session import TransportSession


logger = logging.getLogger(__name__)


@dataclass
class AxionClientConfig:
    """Configuration for the Axion API client.

    Attributes:
        api_key: Bearer token; None sends unauthenticated requests
        base_url: API host
        timeout: Total request timeout in seconds; None disables it
        user_agent: User-Agent header value
    """

    api_key: Optional[str] = None
    base_url: str = BASE_URL
    timeout: Optional[float] = 30
    user_agent: str = AxionConfig.USER_AGENT

    @classmethod
    def from_env(cls) -> "AxionClientConfig":
        """Create configuration from environment variables."""
        return cls(
            api_key=AxionConfig.API_KEY,
            timeout=AxionConfig.REQUEST_TIMEOUT,
            user_agent=AxionConfig.USER_AGENT,
        )


class AxionClient:
    """Asynchronous Axion API client.

    Features:
    - One shared aiohttp session per client
    - Bearer-token authentication
    - Every outcome returned as an AxionResponse, nothing raised for
      remote failures
    - Methods generated from the endpoint catalog

    Example:
        ```python
        from axion import AxionClient

        async with AxionClient("YOUR_API_KEY") as client:
            response = await client.stocks_prices("AAPL", from_date="2024-01-01")
            if response.error:
                print(f"Error: {response.error}")
            elif response.data is not None:
                print(response.data)
        ```
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[AxionClientConfig] = None,
        transport: Optional[TransportSession] = None,
    ):
        """Initialize Axion client.

        Args:
            api_key: Bearer token; overrides config.api_key when given
            config: Client configuration (defaults to AxionClientConfig())
            transport: Pre-built transport session, mainly for tests
        """
        config = config or AxionClientConfig()
        if api_key is not None:
            config = replace(config, api_key=api_key)
        self.config = config

        self.transport = transport or TransportSession(
            api_key=self.config.api_key,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )
        self.executor = RequestExecutor(self.transport, base_url=self.config.base_url)
        self._stats = {
            "requests_made": 0,
            "successes": 0,
            "http_errors": 0,
            "parse_errors": 0,
            "transport_errors": 0,
        }

        logger.info(
            "Initialized AxionClient",
            extra={
                "base_url": self.config.base_url,
                "timeout": self.config.timeout,
                "authenticated": bool(self.config.api_key),
            },
        )

    @classmethod
    def from_env(cls) -> "AxionClient":
        return cls(config=AxionClientConfig.from_env())

    async def __aenter__(self) -> "AxionClient":
        """Enter async context manager."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def open(self) -> None:
        """Open the transport session.

        Raises:
            ClientInitError: If the session cannot be created
        """
        await self.transport.open()

    async def close(self) -> None:
        """Close the transport session and release connections."""
        await self.transport.close()

    async def execute(
        self,
        path: str,
        query: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> AxionResponse:
        """Run a raw request against an arbitrary API path.

        Args:
            path: Resource path, e.g. "stocks/AAPL"
            query: Encoded query string without leading "?"
            timeout: Optional per-call deadline in seconds

        Returns:
            Normalized AxionResponse
        """
        response = await self.executor.execute(path, query, timeout=timeout)
        self._record(response)
        return response

    async def call(
        self,
        name: str,
        *args: Any,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> AxionResponse:
        """Call a catalog endpoint by name.

        Args:
            name: Endpoint name, e.g. "stocks_prices"
            *args: Path identifiers and required parameters
            timeout: Optional per-call deadline in seconds
            **kwargs: Optional query parameters

        Returns:
            Normalized AxionResponse

        Raises:
            KeyError: Unknown endpoint name
            TypeError: Arguments do not match the endpoint
        """
        endpoint = get_endpoint(name)
        path, query = endpoint.render(*args, **kwargs)
        return await self.execute(path, query, timeout=timeout)

    def _record(self, response: AxionResponse) -> None:
        self._stats["requests_made"] += 1
        if response.is_transport_error:
            self._stats["transport_errors"] += 1
        elif response.is_http_error:
            self._stats["http_errors"] += 1
        elif response.is_parse_error:
            self._stats["parse_errors"] += 1
        else:
            self._stats["successes"] += 1

    def get_stats(self) -> dict[str, Any]:
        """Get request outcome counters.

        Returns:
            Dictionary with per-outcome counts
        """
        return dict(self._stats)


def _make_endpoint_method(endpoint: Endpoint):
    async def method(self: AxionClient, *args: Any, **kwargs: Any) -> AxionResponse:
        return await self.call(endpoint.name, *args, **kwargs)

    method.__name__ = endpoint.name
    method.__qualname__ = f"AxionClient.{endpoint.name}"
    method.__doc__ = (
        f"{endpoint.description or 'GET ' + endpoint.path}\n\n"
        f"Signature: {endpoint.signature()}\n"
        f"Path: {endpoint.path}"
    )
    return method


for _endpoint in ENDPOINTS:
    setattr(AxionClient, _endpoint.name, _make_endpoint_method(_endpoint))
del _endpoint
