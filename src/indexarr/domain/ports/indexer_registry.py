"""Port for indexer lookup by site id."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from indexarr.domain.indexers.base import IndexerProtocol


@runtime_checkable
class IndexerRegistryPort(Protocol):
    """Synchronous interface for registering and retrieving indexers."""

    def register(self, indexer: IndexerProtocol) -> None: ...
    def get(self, indexer_id: str) -> IndexerProtocol: ...
    def list_ids(self) -> list[str]: ...
    def all(self) -> list[IndexerProtocol]: ...
