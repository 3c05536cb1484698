"""Input validation and URL encoding helpers."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any
from urllib.parse import quote, quote_plus

from .exceptions import InvalidArgumentError


def has_value(data: Mapping[str, Any], key: str) -> bool:
    """Return True if ``data`` holds a non-blank value at ``key``."""
    value = data.get(key)
    if value is None:
        return False
    return str(value).strip() != ""


def has_values(data: Mapping[str, Any], keys: Iterable[str]) -> bool:
    """Return True if ``data`` holds non-blank values at every key."""
    return all(has_value(data, key) for key in keys)


def require(**fields: Any) -> None:
    """
    Check that every keyword argument is non-blank.

    Integer arguments are ids or numbers and must be at least 1.

    Raises:
        InvalidArgumentError: Naming every blank argument, in call order
    """
    missing = [name for name in fields if not has_value(fields, name)]
    if missing:
        raise InvalidArgumentError(missing)
    too_small = [
        name
        for name, value in fields.items()
        if isinstance(value, int) and not isinstance(value, bool) and value < 1
    ]
    if too_small:
        raise InvalidArgumentError(
            too_small, f"Ids cannot be less than 1: {', '.join(too_small)}"
        )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(data: Mapping[str, Any]) -> str:
    """
    Encode a mapping as ``key=value`` pairs joined with ``&``.

    Keys and values are trimmed and percent-encoded. ``None`` values are
    dropped, booleans become ``true``/``false``.

    Example:
        >>> encode_query({"state": "open", "labels": "bug, ui"})
        'state=open&labels=bug%2C+ui'
    """
    pairs = []
    for key, value in data.items():
        if value is None:
            continue
        pairs.append(
            f"{quote_plus(str(key).strip())}={quote_plus(_query_value(value).strip())}"
        )
    return "&".join(pairs)


def quote_segment(value: Any) -> str:
    """Percent-encode a single path segment (``/`` included)."""
    return quote(str(value), safe="")


def quote_path(value: Any) -> str:
    """Percent-encode a multi-segment path such as a file path or ref, keeping ``/``."""
    return quote(str(value).strip("/"), safe="/")


def iso_timestamp(value: datetime | None) -> str | None:
    """Format a datetime as GitHub expects in query strings (ISO 8601, ``Z`` for UTC)."""
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")
