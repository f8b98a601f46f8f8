"""Shared HTTP constants."""

from __future__ import annotations

DEFAULT_USER_AGENT = "indexarr/0.1.0"
DEFAULT_CLIENT_TIMEOUT = 30.0

JSON_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}
