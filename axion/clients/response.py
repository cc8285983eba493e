"""
Normalized result of one Axion API request.

Every request, whatever its outcome, produces an AxionResponse. Exactly one
of three shapes holds:

- transport failure: no status, no data, an error message
- HTTP error (status >= 400): status and an error message, no data
- success (status < 400): status and the parsed document; an undecodable
  body leaves data empty and carries a parse error message instead

Raw response bytes are never kept.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..utils.exceptions import (
    APIError,
    ResponseParseError,
    TransportError,
    error_for_status,
)


@dataclass(frozen=True)
class AxionResponse:
    """Outcome of a single request.

    Attributes:
        status: HTTP status code, None when no HTTP exchange completed
        data: Parsed JSON document, None when absent
        error: Human-readable failure description, None on success
        path: Request path, kept for error reporting
    """

    status: Optional[int] = None
    data: Any = None
    error: Optional[str] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.data is not None and self.error:
            raise ValueError("AxionResponse cannot carry both data and an error")

    @classmethod
    def transport_failure(cls, message: str, path: Optional[str] = None) -> "AxionResponse":
        """Build a response for a request that never got an HTTP answer."""
        return cls(status=None, data=None, error=message, path=path)

    @property
    def ok(self) -> bool:
        """True when no failure message is attached."""
        return self.error is None

    @property
    def is_transport_error(self) -> bool:
        return self.status is None and self.error is not None

    @property
    def is_http_error(self) -> bool:
        return self.status is not None and self.status >= 400

    @property
    def is_parse_error(self) -> bool:
        """True for a success status whose body was not valid JSON."""
        return self.status is not None and self.status < 400 and self.error is not None

    def raise_for_error(self) -> "AxionResponse":
        """Raise the exception matching this response's failure, if any.

        Returns:
            This response, unchanged, when it carries no error

        Raises:
            TransportError: No HTTP exchange completed
            AuthError, NotFoundError, RateLimitError, ServerError, APIError:
                HTTP error status
            ResponseParseError: Success status with an undecodable body
        """
        if self.ok:
            return self

        if self.is_transport_error:
            raise TransportError(self.error, endpoint=self.path)

        if self.is_parse_error:
            raise ResponseParseError(self.error, endpoint=self.path, status_code=self.status)

        error_cls: type[APIError] = error_for_status(self.status)
        raise error_cls(self.error, endpoint=self.path, status_code=self.status)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
