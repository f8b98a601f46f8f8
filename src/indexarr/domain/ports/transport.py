"""Port for rate-limited HTTP requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    status: int
    text: str
    content: bytes


@runtime_checkable
class TransportPort(Protocol):
    """Async interface for sending one HTTP request.

    Implementations enforce the site's minimum inter-request interval and
    raise ``TransportError`` on network failures and timeouts.
    """

    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...
