"""
Transport session for the Axion API client.

Owns one reusable aiohttp.ClientSession plus the API key used to
authenticate every request made through it.
"""

import logging
from typing import Optional

import aiohttp

from ..config import AxionConfig
from ..utils.exceptions import ClientInitError


logger = logging.getLogger(__name__)


class TransportSession:
    """Long-lived HTTP handle shared by all requests of one client.

    The session is opened once and closed once. It may be shared by
    concurrent coroutines on the event loop that opened it; aiohttp pools
    connections internally. Use from other threads or loops is unsupported.

    Example:
        ```python
        async with TransportSession(api_key="...") as session:
            status, body = await session.perform(
                "https://api.axionquant.com/stocks/AAPL",
                session.auth_headers(),
            )
        ```
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: str = AxionConfig.USER_AGENT,
    ):
        """Initialize transport session.

        Args:
            api_key: Bearer token; None sends unauthenticated requests
            timeout: Total per-request timeout in seconds; None disables it
            user_agent: User-Agent header value
        """
        self._api_key = api_key or None
        self.timeout = timeout
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "TransportSession":
        """Enter async context manager."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    @property
    def has_credentials(self) -> bool:
        return self._api_key is not None

    async def open(self) -> None:
        """Create the underlying aiohttp session.

        Raises:
            ClientInitError: If aiohttp cannot create the session
        """
        if self.is_open:
            return

        try:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
            )
        except (RuntimeError, aiohttp.ClientError) as e:
            logger.error(
                "Failed to create aiohttp session",
                extra={"error": str(e)},
            )
            raise ClientInitError(reason=str(e)) from e

        logger.debug(
            "Created new aiohttp session",
            extra={
                "timeout": self.timeout,
                "authenticated": self.has_credentials,
            },
        )

    async def close(self) -> None:
        """Close aiohttp session and release the connection pool."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")
        self._session = None

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the credential, empty when no API key is set."""
        if self._api_key is None:
            return {}
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def perform(
        self,
        url: str,
        headers: dict[str, str],
        timeout: Optional[float] = None,
    ) -> tuple[int, bytes]:
        """Issue one GET request and read the full response body.

        Args:
            url: Absolute request URL
            headers: Request headers
            timeout: Optional per-call total timeout in seconds

        Returns:
            Tuple of (status_code, body_bytes)

        Raises:
            aiohttp.ClientError: Connection, DNS, TLS or protocol failure
            asyncio.TimeoutError: Timeout expired before the body was read
        """
        if not self.is_open:
            raise aiohttp.ClientConnectionError("Transport session is closed")

        request_kwargs = {"headers": headers}
        if timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        async with self._session.get(url, **request_kwargs) as response:
            body = await response.read()
            return response.status, body
