"""Port for diagnostics about malformed site responses."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from indexarr.domain.indexers.base import ParseError


@runtime_checkable
class ParseErrorSinkPort(Protocol):
    """Fire-and-forget sink; ``report`` must never raise."""

    def report(self, raw: str, error: ParseError) -> None: ...
