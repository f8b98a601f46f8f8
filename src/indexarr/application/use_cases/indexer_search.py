"""Search (and download) one indexer, returning explicit outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from indexarr.domain.entities import Release, SearchQuery
from indexarr.domain.indexers.exceptions import IndexerError
from indexarr.domain.ports import IndexerRegistryPort

from .outcomes import ErrorKind, classify

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    indexer_id: str
    releases: list[Release] = field(default_factory=list)
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


@dataclass(frozen=True)
class DownloadOutcome:
    indexer_id: str
    content: bytes = b""
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class IndexerSearchUseCase:
    """Runs a canonical search against one registered indexer.

    Indexer failures never propagate; they come back as ``error_kind`` on
    the outcome and are logged once here.
    """

    def __init__(self, *, indexers: IndexerRegistryPort) -> None:
        self._indexers = indexers

    async def execute(self, indexer_id: str, query: SearchQuery) -> SearchOutcome:
        try:
            indexer = self._indexers.get(indexer_id)
            releases = await indexer.search(query)
        except IndexerError as exc:
            kind = classify(exc)
            log.warning(
                "indexer_search_failed",
                indexer=indexer_id,
                error_kind=kind.value,
                error=str(exc),
            )
            return SearchOutcome(
                indexer_id=indexer_id, error_kind=kind, error_message=str(exc)
            )

        return SearchOutcome(indexer_id=indexer_id, releases=releases)

    async def download(self, indexer_id: str, link: str) -> DownloadOutcome:
        try:
            indexer = self._indexers.get(indexer_id)
            content = await indexer.download(link)
        except IndexerError as exc:
            kind = classify(exc)
            log.warning(
                "indexer_download_failed",
                indexer=indexer_id,
                error_kind=kind.value,
                error=str(exc),
            )
            return DownloadOutcome(
                indexer_id=indexer_id, error_kind=kind, error_message=str(exc)
            )

        return DownloadOutcome(indexer_id=indexer_id, content=content)
