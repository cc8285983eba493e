"""
Request executor for the Axion API client.

Every endpoint call funnels through RequestExecutor.execute(), which builds
the URL, attaches credentials, performs the GET, and classifies the outcome
into an AxionResponse. Remote failures are reported on the response and
never raised.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from ..config import BASE_URL
from .response import AxionResponse
from .session import TransportSession


logger = logging.getLogger(__name__)


NOT_OPEN_MESSAGE = "Client session is not open."
UNKNOWN_HTTP_ERROR = "An unknown HTTP error occurred."
UNPARSEABLE_HTTP_ERROR = "An unknown HTTP error occurred (failed to parse error response)."
JSON_PARSE_ERROR = "Failed to parse JSON response."

# Whitespace stripped before the empty-body check on success responses
_JSON_WHITESPACE = b" \t\r\n"


def build_url(base_url: str, path: str, query: Optional[str] = None) -> str:
    """Join base host, resource path and optional encoded query.

    Args:
        base_url: Scheme and host, e.g. "https://api.axionquant.com"
        path: Resource path, e.g. "stocks/AAPL/prices"
        query: Encoded query string without leading "?"

    Returns:
        Absolute URL; "?" is added only for a non-empty query
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    if query:
        url = f"{url}?{query}"
    return url


def _describe_transport_error(error: BaseException) -> str:
    text = str(error).strip()
    if text:
        return text
    if isinstance(error, asyncio.TimeoutError):
        return "Request timed out."
    return f"Transport error: {type(error).__name__}"


def _parse_json(body: bytes) -> Any:
    # Raises ValueError (JSONDecodeError / UnicodeDecodeError) on bad input
    try:
        return json.loads(body)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e


def _extract_error_message(body: bytes) -> str:
    try:
        payload = _parse_json(body)
    except ValueError:
        return UNPARSEABLE_HTTP_ERROR

    message = payload.get("message") if isinstance(payload, dict) else None
    if isinstance(message, str) and message:
        return message
    return UNKNOWN_HTTP_ERROR


class RequestExecutor:
    """Single chokepoint for Axion API requests.

    Attributes:
        transport: Open TransportSession used for every call
        base_url: API host prefix

    Example:
        ```python
        executor = RequestExecutor(session)
        response = await executor.execute("stocks/AAPL/prices", "from=2024-01-01")
        if response.error:
            print(response.error)
        elif response.data is not None:
            print(response.data)
        ```
    """

    def __init__(self, transport: Optional[TransportSession], base_url: str = BASE_URL):
        self.transport = transport
        self.base_url = base_url

    async def execute(
        self,
        path: str,
        query: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> AxionResponse:
        """Perform one GET request and normalize its outcome.

        Args:
            path: Resource path relative to the base host
            query: Encoded query string, or None
            timeout: Optional per-call deadline in seconds

        Returns:
            AxionResponse describing success, HTTP error, parse failure
            or transport failure
        """
        if self.transport is None or not self.transport.is_open:
            logger.error("Request rejected, session not open", extra={"path": path})
            return AxionResponse.transport_failure(NOT_OPEN_MESSAGE, path=path)

        url = build_url(self.base_url, path, query)
        headers = self.transport.auth_headers()

        logger.debug(
            "Making Axion API request",
            extra={
                "url": url,
                "authenticated": bool(headers),
            },
        )

        try:
            status, body = await self.transport.perform(url, headers, timeout=timeout)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            message = _describe_transport_error(e)
            logger.error(
                "HTTP transport error",
                extra={
                    "url": url,
                    "error": message,
                    "error_type": type(e).__name__,
                },
            )
            return AxionResponse.transport_failure(message, path=path)

        return self._classify(path, status, body)

    def _classify(self, path: str, status: int, body: bytes) -> AxionResponse:
        if status >= 400:
            message = _extract_error_message(body)
            logger.warning(
                "API returned error status",
                extra={
                    "path": path,
                    "status": status,
                    "error": message,
                },
            )
            return AxionResponse(status=status, error=message, path=path)

        body = body.strip(_JSON_WHITESPACE)
        if not body:
            logger.debug("Empty response body", extra={"path": path, "status": status})
            return AxionResponse(status=status, path=path)

        try:
            data = _parse_json(body)
        except ValueError:
            logger.warning(
                "Response body is not valid JSON",
                extra={
                    "path": path,
                    "status": status,
                    "content_length": len(body),
                },
            )
            return AxionResponse(status=status, error=JSON_PARSE_ERROR, path=path)

        logger.debug(
            "Request successful",
            extra={
                "path": path,
                "status": status,
                "content_length": len(body),
            },
        )
        return AxionResponse(status=status, data=data, path=path)
