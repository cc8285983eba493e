"""
Query string encoding for Axion API requests.

Turns an ordered set of optional parameters into a URL query string,
skipping parameters whose value is absent.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union
from urllib.parse import quote


QueryParams = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Optional[QueryParams]) -> Optional[str]:
    """Encode parameters as ``key=value`` pairs joined with ``&``.

    Pairs are emitted in input order. A pair whose value is None is skipped.
    Keys and values are percent-encoded; RFC 3986 unreserved characters
    (letters, digits, ``-._~``) pass through unchanged.

    Args:
        params: Mapping or iterable of (key, value) pairs

    Returns:
        Encoded query string without a leading ``?``, or None when no
        pair has a value

    Example:
        >>> build_query([("A", 1), ("B", None), ("C", 3)])
        'A=1&C=3'
        >>> build_query({"from": None}) is None
        True
    """
    if params is None:
        return None

    pairs = params.items() if isinstance(params, Mapping) else params

    parts = [
        f"{quote(str(key), safe='')}={quote(_format_value(value), safe='')}"
        for key, value in pairs
        if value is not None
    ]

    if not parts:
        return None
    return "&".join(parts)
