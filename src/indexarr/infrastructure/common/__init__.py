"""Common infrastructure utilities."""

from __future__ import annotations

from .converters import to_absolute_url, to_bool, to_datetime, to_int
from .rate_limiter import HostRateLimiter, MinIntervalLimiter

__all__ = [
    "HostRateLimiter",
    "MinIntervalLimiter",
    "to_absolute_url",
    "to_bool",
    "to_datetime",
    "to_int",
]
