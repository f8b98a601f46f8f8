"""Type conversion utilities for loosely typed JSON payloads."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlparse

_INT_RE = re.compile(r"-?[0-9]+", re.ASCII)
_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def to_int(raw: Any) -> int | None:
    """Convert a JSON value to int, return None if invalid.

    Handles:
        - int → int (bool is rejected)
        - 12.0 → 12 (integral floats only)
        - "123" / " 123 " → 123
        - "1,234" → 1234
        - None / "" / "abc" / "--1" / "²" / 1.5 → None
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, int):
        return raw

    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None

    if isinstance(raw, str):
        txt = raw.strip().replace(",", "")
        if not _INT_RE.fullmatch(txt):
            return None
        return int(txt)

    return None


def to_bool(raw: Any) -> bool | None:
    """Convert a JSON flag to bool.

    Missing flags (``None``) read as ``False``; unrecognised values return
    ``None`` so callers can treat them as malformed.
    """
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0
    if isinstance(raw, str):
        txt = raw.strip().lower()
        if txt in _TRUE_STRINGS:
            return True
        if txt in _FALSE_STRINGS:
            return False
    return None


def to_absolute_url(raw: Any) -> str | None:
    """Return *raw* if it is an absolute http(s) URL, else None."""
    if not isinstance(raw, str):
        return None
    candidate = raw.strip()
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return None
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        return None
    return candidate


def to_datetime(raw: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
