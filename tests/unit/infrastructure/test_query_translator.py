"""Tests for QueryTranslator (ordered, repeatable query params)."""

from __future__ import annotations

from indexarr.domain.entities import SearchQuery
from indexarr.domain.indexers import CategoryMap, IndexerDefinition
from indexarr.infrastructure.indexers.query import QueryTranslator, encode_params

_DEFAULTS = [
    ("itemsPerPage", "100"),
    ("sort", "torrent.createdAt"),
    ("direction", "desc"),
]


def _translate(definition: IndexerDefinition, query: SearchQuery) -> list[tuple[str, str]]:
    return QueryTranslator(definition).translate(
        query, CategoryMap(definition.categories)
    )


class TestTranslate:
    def test_defaults_come_first(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery(term="matrix"))
        assert params[:3] == _DEFAULTS

    def test_free_text_query(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery(term="the matrix"))
        assert params == [*_DEFAULTS, ("search", "the matrix")]

    def test_imdb_query_never_emits_search(self, definition: IndexerDefinition) -> None:
        params = _translate(
            definition, SearchQuery(term="ignored", imdb_id="tt0133093")
        )
        keys = [k for k, _ in params]
        assert ("imdbId", "tt0133093") in params
        assert "search" not in keys

    def test_free_text_never_emits_imdb(self, definition: IndexerDefinition) -> None:
        keys = [k for k, _ in _translate(definition, SearchQuery(term="x"))]
        assert "imdbId" not in keys
        assert keys.count("search") == 1

    def test_empty_query_still_sends_search(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery())
        assert params[-1] == ("search", "")

    def test_categories_repeat_key(self, definition: IndexerDefinition) -> None:
        params = _translate(
            definition, SearchQuery(term="x", categories=(2040, 5040))
        )
        assert [v for k, v in params if k == "categories[]"] == ["4", "10", "19"]
        # Category filters sit between the defaults and the search term.
        assert params[3] == ("categories[]", "4")
        assert params[-1] == ("search", "x")

    def test_parent_category_expands(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery(categories=(2000,)))
        assert [v for k, v in params if k == "categories[]"] == ["4", "6"]

    def test_unmapped_categories_omitted(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery(categories=(3000, 7020)))
        assert all(k != "categories[]" for k, _ in params)

    def test_duplicate_codes_dropped(self, definition: IndexerDefinition) -> None:
        params = _translate(definition, SearchQuery(categories=(2040, 2000)))
        assert [v for k, v in params if k == "categories[]"] == ["4", "6"]

    def test_tv_episode_appended(self, definition: IndexerDefinition) -> None:
        params = _translate(
            definition, SearchQuery(term="Show", season=2, episode="3")
        )
        assert params[-1] == ("search", "Show S02E03")


def test_encode_params_keeps_order_and_repeats() -> None:
    encoded = encode_params(
        [("a", "1"), ("categories[]", "19"), ("categories[]", "6"), ("search", "a b")]
    )
    assert encoded == "a=1&categories%5B%5D=19&categories%5B%5D=6&search=a+b"
