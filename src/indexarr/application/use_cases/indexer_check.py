"""Use case for verifying an indexer's credentials and connectivity."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from indexarr.domain.indexers.exceptions import IndexerError
from indexarr.domain.ports import IndexerRegistryPort

from .outcomes import ErrorKind, classify

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckResult:
    indexer_id: str
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class IndexerCheckUseCase:
    """Logs in from scratch and runs an empty query (must find releases)."""

    def __init__(self, *, indexers: IndexerRegistryPort) -> None:
        self._indexers = indexers

    async def execute(self, indexer_id: str) -> CheckResult:
        try:
            await self._indexers.get(indexer_id).check()
        except IndexerError as exc:
            kind = classify(exc)
            log.warning(
                "indexer_check_failed",
                indexer=indexer_id,
                error_kind=kind.value,
                error=str(exc),
            )
            return CheckResult(
                indexer_id=indexer_id, error_kind=kind, error_message=str(exc)
            )

        return CheckResult(indexer_id=indexer_id)
