"""httpx-backed transport with per-host request pacing."""

from __future__ import annotations

from collections.abc import Mapping

import httpx
import structlog

from indexarr.domain.indexers.exceptions import TransportError
from indexarr.domain.ports.transport import TransportResponse
from indexarr.infrastructure.common.rate_limiter import HostRateLimiter

from .constants import DEFAULT_CLIENT_TIMEOUT, DEFAULT_USER_AGENT

log = structlog.get_logger(__name__)


class RateLimitedTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx transport and waits on the host's limiter before sending.

    Every request (login, search, download, redirects) counts against the
    limit because the wait happens at the transport layer.
    """

    def __init__(
        self,
        wrapped: httpx.AsyncBaseTransport,
        rate_limiter: HostRateLimiter,
    ) -> None:
        self._wrapped = wrapped
        self._rate_limiter = rate_limiter

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await self._rate_limiter.acquire(str(request.url))
        return await self._wrapped.handle_async_request(request)

    async def aclose(self) -> None:
        await self._wrapped.aclose()


class HttpxTransport:
    """``TransportPort`` implementation on top of ``httpx.AsyncClient``.

    The client (and with it the cookie jar) is created lazily and reused
    for the lifetime of the transport.
    """

    def __init__(
        self,
        *,
        rate_limiter: HostRateLimiter | None = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        wrapped: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._rate_limiter = rate_limiter or HostRateLimiter()
        self._timeout = timeout
        self._user_agent = user_agent
        self._follow_redirects = follow_redirects
        self._wrapped = wrapped
        self._client: httpx.AsyncClient | None = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                headers={"User-Agent": self._user_agent},
                transport=RateLimitedTransport(
                    self._wrapped or httpx.AsyncHTTPTransport(),
                    self._rate_limiter,
                ),
            )
        return self._client

    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> TransportResponse:
        client = self._ensure_client()
        content = body.encode("utf-8") if isinstance(body, str) else body
        try:
            resp = await client.request(
                method.upper(), url, headers=dict(headers or {}), content=content
            )
        except httpx.TimeoutException as exc:
            log.warning("transport_timeout", url=url, method=method)
            raise TransportError(f"Request to {url} timed out") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning(
                "transport_error",
                url=url,
                method=method,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        log.debug("transport_response", url=url, method=method, status=resp.status_code)
        return TransportResponse(
            status=resp.status_code, text=resp.text, content=resp.content
        )

    async def aclose(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
