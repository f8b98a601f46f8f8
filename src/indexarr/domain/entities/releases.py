from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Credentials:
    """Login secrets for one indexer instance."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Token:
    """Opaque bearer token handed out by a site's login endpoint.

    Sites do not announce an expiry; a token is considered valid until a
    request with it comes back 401.
    """

    value: str = field(repr=False)

    def bearer(self) -> str:
        return f"Bearer {self.value}"


@dataclass(frozen=True)
class SearchQuery:
    """Site-agnostic search request.

    An IMDb lookup and a free-text search are mutually exclusive: when
    ``imdb_id`` is set, ``term`` (and the episode suffix) is ignored.
    """

    term: str = ""
    imdb_id: str | None = None
    categories: tuple[int, ...] = ()

    # TV search
    season: int | None = None
    episode: str | None = None

    @property
    def is_imdb_query(self) -> bool:
        return bool(self.imdb_id and self.imdb_id.strip())

    @property
    def sanitized_term(self) -> str:
        return _WHITESPACE_RE.sub(" ", self.term).strip()

    @property
    def episode_search_string(self) -> str:
        """``S01``, ``S01E02`` or ``S01E<episode>``; empty without a season."""
        if self.season is None or self.season <= 0:
            return ""
        if not self.episode:
            return f"S{self.season:02d}"
        if self.episode.isdigit():
            return f"S{self.season:02d}E{int(self.episode):02d}"
        return f"S{self.season:02d}E{self.episode}"

    @property
    def query_string(self) -> str:
        parts = [self.sanitized_term, self.episode_search_string]
        return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class Release:
    """Canonical release record returned by every indexer."""

    title: str
    link: str
    details: str
    guid: str
    publish_date: datetime
    categories: list[int] = field(default_factory=list)
    description: str | None = None
    poster: str | None = None

    size: int = 0
    grabs: int = 0
    seeders: int = 0
    peers: int = 0

    # Ratio accounting
    download_volume_factor: float = 1.0
    upload_volume_factor: float = 1.0
    minimum_ratio: float = 1.0
    minimum_seed_time: int = 0  # seconds

    @property
    def leechers(self) -> int:
        return self.peers - self.seeders


def download_volume_factor(*, freeleech: bool, half_download: bool) -> float:
    """Free-leech wins over half-download; no flag means full accounting."""
    if freeleech:
        return 0.0
    if half_download:
        return 0.5
    return 1.0


def upload_volume_factor(*, double_upload: bool) -> float:
    return 2.0 if double_upload else 1.0
