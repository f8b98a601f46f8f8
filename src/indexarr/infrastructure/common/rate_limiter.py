"""Per-host minimum-interval rate limiter for outgoing HTTP requests.

Private trackers publish limits such as "one API request per 2 seconds";
a token bucket with burst would violate them, so each host gets a fixed
gap between the start of two consecutive requests.
"""

from __future__ import annotations

import asyncio
import time
from urllib.parse import urlparse

import structlog

log = structlog.get_logger(__name__)


class MinIntervalLimiter:
    """Serializes callers so that consecutive acquires are >= *interval* apart.

    Args:
        interval: Minimum seconds between two requests. 0 = unlimited.
    """

    def __init__(self, interval: float) -> None:
        self._interval = max(0.0, interval)
        self._last_request: float | None = None
        self._lock = asyncio.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    async def acquire(self) -> None:
        """Wait until the interval since the previous request has elapsed."""
        if self._interval <= 0:
            return

        async with self._lock:
            if self._last_request is not None:
                wait = self._last_request + self._interval - time.monotonic()
                if wait > 0:
                    log.debug("rate_limit_wait", delay=round(wait, 2))
                    await asyncio.sleep(wait)
            self._last_request = time.monotonic()


class HostRateLimiter:
    """Manages one :class:`MinIntervalLimiter` per host.

    Args:
        default_interval: Seconds between requests to the same host.
        intervals: Per-host overrides (hostname -> seconds).
    """

    def __init__(
        self,
        default_interval: float = 0.0,
        intervals: dict[str, float] | None = None,
    ) -> None:
        self._default_interval = default_interval
        self._intervals = {k.lower(): v for k, v in (intervals or {}).items()}
        self._limiters: dict[str, MinIntervalLimiter] = {}

    def _get_host(self, url: str) -> str:
        return (urlparse(url).hostname or "").lower()

    def _get_limiter(self, host: str) -> MinIntervalLimiter:
        if host not in self._limiters:
            interval = self._intervals.get(host, self._default_interval)
            self._limiters[host] = MinIntervalLimiter(interval)
        return self._limiters[host]

    def set_interval(self, host: str, interval: float) -> None:
        """Configure *host*; only affects limiters not yet created."""
        self._intervals[host.lower()] = interval

    async def acquire(self, url: str) -> None:
        """Wait for rate limit clearance for the given URL's host."""
        host = self._get_host(url)
        if not host:
            return
        await self._get_limiter(host).acquire()
