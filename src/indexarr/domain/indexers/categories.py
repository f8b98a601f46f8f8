"""Bidirectional mapping between site category codes and canonical categories."""

from __future__ import annotations

from collections.abc import Iterable

from indexarr.domain.entities.categories import TorznabCategory

from .base import CategoryMapping


class CategoryMap:
    """Translate site category codes to canonical ids and back.

    A site code may map to several canonical categories and the other way
    round. Asking for a parent category (e.g. 2000 Movies) also yields the
    site codes mapped to any of its subcategories.
    """

    def __init__(self, mappings: Iterable[CategoryMapping] = ()) -> None:
        self._mappings: list[CategoryMapping] = []
        for mapping in mappings:
            self.add(mapping.site_code, mapping.category, mapping.description)

    def add(
        self,
        site_code: str | int,
        category: int | TorznabCategory,
        description: str = "",
    ) -> None:
        cat_id = category.id if isinstance(category, TorznabCategory) else category
        self._mappings.append(
            CategoryMapping(
                site_code=str(site_code), category=cat_id, description=description
            )
        )

    @property
    def mappings(self) -> tuple[CategoryMapping, ...]:
        return tuple(self._mappings)

    def canonical_categories(self) -> list[int]:
        """All canonical ids covered by this map, parents included, sorted."""
        ids: set[int] = set()
        for m in self._mappings:
            ids.add(m.category)
            ids.add(m.category // 1000 * 1000)
        return sorted(ids)

    def map_site_category(self, code: str | int) -> list[int]:
        code = str(code)
        out: list[int] = []
        for m in self._mappings:
            if m.site_code == code and m.category not in out:
                out.append(m.category)
        return out

    def map_canonical_category(self, category: int) -> list[str]:
        is_parent = category % 1000 == 0
        out: list[str] = []
        for m in self._mappings:
            matches = m.category == category or (
                is_parent and m.category // 1000 * 1000 == category
            )
            if matches and m.site_code not in out:
                out.append(m.site_code)
        return out
