"""Port for site <-> canonical category translation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CategoryMapPort(Protocol):
    def map_site_category(self, code: str | int) -> list[int]: ...
    def map_canonical_category(self, category: int) -> list[str]: ...
