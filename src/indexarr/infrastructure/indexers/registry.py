"""In-memory indexer registry keyed by site id."""

from __future__ import annotations

import structlog

from indexarr.domain.indexers import (
    DuplicateIndexerError,
    IndexerNotFoundError,
    IndexerProtocol,
)

log = structlog.get_logger(__name__)


class IndexerRegistry:
    """Holds configured indexer instances.

    Ids are matched case-insensitively; listing is sorted.
    """

    def __init__(self) -> None:
        self._indexers: dict[str, IndexerProtocol] = {}

    def register(self, indexer: IndexerProtocol) -> None:
        key = indexer.id.lower()
        if key in self._indexers:
            raise DuplicateIndexerError(f"Indexer '{indexer.id}' already registered")
        self._indexers[key] = indexer
        log.info("indexer_registered", indexer=indexer.id)

    def get(self, indexer_id: str) -> IndexerProtocol:
        try:
            return self._indexers[indexer_id.lower()]
        except KeyError:
            raise IndexerNotFoundError(f"Indexer '{indexer_id}' not found") from None

    def list_ids(self) -> list[str]:
        return sorted(i.id for i in self._indexers.values())

    def all(self) -> list[IndexerProtocol]:
        return [self._indexers[k.lower()] for k in self.list_ids()]

    def __len__(self) -> int:
        return len(self._indexers)

    async def aclose(self) -> None:
        """Close every registered indexer's transport."""
        for indexer in self._indexers.values():
            await indexer.aclose()
