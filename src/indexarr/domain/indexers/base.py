"""Domain models and protocols for the indexer system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol

from indexarr.domain.entities import Release, SearchQuery

IndexerPrivacy = Literal["public", "semi-private", "private"]


@dataclass(frozen=True)
class CategoryMapping:
    """One site category code mapped onto a canonical category."""

    site_code: str
    category: int
    description: str = ""


@dataclass(frozen=True)
class IndexerDefinition:
    """Static facts about one tracker site.

    Everything that differs between sites speaking the same API lives here,
    so a new site is a new definition rather than a new class.
    """

    id: str
    name: str
    base_url: str
    description: str = ""
    language: str = "en-US"
    privacy: IndexerPrivacy = "private"

    categories: tuple[CategoryMapping, ...] = ()

    # Published API limit (seconds between two requests)
    request_delay: float = 2.1

    # Search defaults
    page_size: int = 100
    sort_field: str = "torrent.createdAt"
    sort_direction: str = "desc"

    # Seeding policy attached to every release
    minimum_ratio: float = 1.0
    minimum_seed_time: int = 172_800  # 48 hours

    def site_link(self, base_url: str | None = None) -> str:
        """Base URL with exactly one trailing slash."""
        return (base_url or self.base_url).rstrip("/") + "/"


@dataclass(frozen=True)
class IndexerCapabilities:
    """Search modes and categories an indexer supports."""

    search_params: tuple[str, ...] = ("q",)
    movie_search_params: tuple[str, ...] = ("q", "imdbid")
    tv_search_params: tuple[str, ...] = ("q", "season", "ep")
    categories: tuple[int, ...] = ()

    @property
    def supports_imdb_search(self) -> bool:
        return "imdbid" in self.movie_search_params


@dataclass(frozen=True)
class ParseError:
    """Recoverable description of malformed response data.

    ``row_index`` is ``None`` when the whole body could not be read.
    """

    message: str
    raw: str
    row_index: int | None = None

    @property
    def is_batch_level(self) -> bool:
        return self.row_index is None


@dataclass
class ParseOutcome:
    releases: list[Release] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)


class IndexerProtocol(Protocol):
    """Contract every site adapter implements.

    - ``search`` returns canonical releases for a canonical query
    - ``download`` returns the raw content behind a release link
    """

    id: str
    definition: IndexerDefinition

    @property
    def capabilities(self) -> IndexerCapabilities: ...

    async def search(self, query: SearchQuery) -> list[Release]: ...

    async def download(self, link: str) -> bytes: ...

    async def check(self) -> None: ...

    async def aclose(self) -> None: ...
