"""
Custom exception classes for the Axion API client.

Provides a hierarchy of exceptions for different failure scenarios
with appropriate context and debugging information.

The request executor never raises these for remote failures; it reports
them on the returned AxionResponse. They are raised on demand through
AxionResponse.raise_for_error() and when a transport session cannot be
created.
"""

from typing import Any, Optional


class AxionError(Exception):
    """Base exception for all Axion client errors.

    All custom exceptions inherit from this class, allowing
    catch-all error handling when needed.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ClientInitError(AxionError):
    """Raised when the transport session cannot be created.

    This is a configuration/initialization failure: no request was
    attempted.

    Attributes:
        reason: Underlying cause reported by the transport library
    """

    def __init__(
        self,
        message: str = "Failed to initialize transport session",
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "reason": reason,
            **kwargs
        }
        details = {k: v for k, v in details.items() if v is not None}
        super().__init__(message, details)
        self.reason = reason


class TransportError(AxionError):
    """Raised when no HTTP exchange completed (DNS, TLS, refused, timeout).

    Attributes:
        endpoint: Request path that failed
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        **kwargs
    ):
        details = {
            "endpoint": endpoint,
            **kwargs
        }
        details = {k: v for k, v in details.items() if v is not None}
        super().__init__(message, details)
        self.endpoint = endpoint


class APIError(AxionError):
    """Raised when the API answers with a failure.

    Covers HTTP error statuses and success statuses whose body
    could not be decoded.

    Attributes:
        endpoint: API endpoint that failed
        status_code: HTTP status code
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs
    ):
        details = {
            "endpoint": endpoint,
            "status_code": status_code,
            **kwargs
        }
        details = {k: v for k, v in details.items() if v is not None}
        super().__init__(message, details)
        self.endpoint = endpoint
        self.status_code = status_code


class AuthError(APIError):
    """Raised when authentication fails (401/403)."""
    pass


class NotFoundError(APIError):
    """Raised when the requested resource does not exist (404)."""
    pass


class RateLimitError(APIError):
    """Raised when API rate limits are exceeded (429)."""
    pass


class ServerError(APIError):
    """Raised when server returns 5xx error."""
    pass


class ResponseParseError(APIError):
    """Raised when a success response body is not valid JSON."""
    pass


def error_for_status(status_code: int) -> type[APIError]:
    """Pick the APIError subclass matching an HTTP status code.

    Args:
        status_code: HTTP status code (>= 400)

    Returns:
        Exception class to raise
    """
    if status_code in (401, 403):
        return AuthError
    if status_code == 404:
        return NotFoundError
    if status_code == 429:
        return RateLimitError
    if status_code >= 500:
        return ServerError
    return APIError
