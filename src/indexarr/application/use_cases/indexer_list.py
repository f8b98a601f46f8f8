"""Use case for listing configured indexers and their capabilities."""

from __future__ import annotations

from typing import Any

from indexarr.domain.entities import category_name
from indexarr.domain.ports import IndexerRegistryPort


class IndexerListUseCase:
    """Collects metadata from all registered indexers."""

    def __init__(self, *, indexers: IndexerRegistryPort) -> None:
        self._indexers = indexers

    def execute(self) -> list[dict[str, Any]]:
        out: list[dict[str, Any]] = []
        for indexer in self._indexers.all():
            d = indexer.definition
            out.append(
                {
                    "id": d.id,
                    "name": d.name,
                    "description": d.description,
                    "language": d.language,
                    "privacy": d.privacy,
                    "categories": len(indexer.capabilities.categories),
                }
            )
        return out

    def capabilities(self, indexer_id: str) -> dict[str, Any]:
        caps = self._indexers.get(indexer_id).capabilities
        return {
            "search": list(caps.search_params),
            "movie-search": list(caps.movie_search_params),
            "tv-search": list(caps.tv_search_params),
            "categories": [
                {"id": c, "name": category_name(c)} for c in caps.categories
            ],
        }
