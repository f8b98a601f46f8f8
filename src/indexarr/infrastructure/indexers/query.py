"""Canonical query -> site query parameters."""

from __future__ import annotations

from urllib.parse import urlencode

from indexarr.domain.entities import SearchQuery
from indexarr.domain.indexers.base import IndexerDefinition
from indexarr.domain.ports import CategoryMapPort

QueryParams = list[tuple[str, str]]


class QueryTranslator:
    """Builds the ordered parameter list for ``GET api/torrent``.

    The result is a list of pairs rather than a dict because the category
    filter repeats its key (``categories[]=19&categories[]=6``).
    """

    def __init__(self, definition: IndexerDefinition) -> None:
        self._definition = definition

    def translate(self, query: SearchQuery, category_map: CategoryMapPort) -> QueryParams:
        d = self._definition
        params: QueryParams = [
            ("itemsPerPage", str(d.page_size)),
            ("sort", d.sort_field),
            ("direction", d.sort_direction),
        ]

        seen: set[str] = set()
        for category in query.categories:
            for code in category_map.map_canonical_category(category):
                if code in seen:
                    continue
                seen.add(code)
                params.append(("categories[]", code))

        if query.is_imdb_query:
            params.append(("imdbId", (query.imdb_id or "").strip()))
        else:
            params.append(("search", query.query_string))

        return params


def encode_params(params: QueryParams) -> str:
    """URL-encode *params*, keeping order and repeated keys."""
    return urlencode(params)
