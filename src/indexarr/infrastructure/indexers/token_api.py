"""Indexer for trackers exposing the JSON ``api/login`` + ``api/torrent`` API.

Sites differ only in their ``IndexerDefinition`` (base URL, category map,
pacing, seeding policy); the behaviour is composed from:

- ``TokenSession``           (bearer token lifecycle)
- ``QueryTranslator``        (canonical query -> ordered params)
- ``AuthenticatedRequester`` (401 -> re-login -> single retry)
- ``ResponseParser``         (JSON rows -> releases + parse errors)
"""

from __future__ import annotations

import structlog

from indexarr.domain.entities import Release, SearchQuery
from indexarr.domain.indexers.base import IndexerCapabilities, IndexerDefinition
from indexarr.domain.indexers.categories import CategoryMap
from indexarr.domain.indexers.exceptions import IndexerConfigurationError
from indexarr.domain.ports import (
    CredentialStorePort,
    ParseErrorSinkPort,
    TransportPort,
)

from .parser import ResponseParser
from .query import QueryTranslator, encode_params
from .requester import AuthenticatedRequester
from .token_session import TokenSession

log = structlog.get_logger(__name__)


class TokenApiIndexer:
    """Concrete ``IndexerProtocol`` implementation for token-API trackers."""

    def __init__(
        self,
        definition: IndexerDefinition,
        *,
        transport: TransportPort,
        credentials: CredentialStorePort,
        parse_errors: ParseErrorSinkPort,
        base_url: str | None = None,
    ) -> None:
        self.definition = definition
        self.id = definition.id
        self.site_link = definition.site_link(base_url)

        self._transport = transport
        self._parse_errors = parse_errors
        self._category_map = CategoryMap(definition.categories)
        self._translator = QueryTranslator(definition)
        self._parser = ResponseParser(
            definition, self._category_map, site_link=self.site_link
        )
        self._session = TokenSession(
            indexer_id=self.id,
            login_url=self.login_url,
            transport=transport,
            credentials=credentials,
        )
        self._requester = AuthenticatedRequester(
            indexer_id=self.id, session=self._session, transport=transport
        )
        self._log = log.bind(indexer=self.id)

    @property
    def login_url(self) -> str:
        return f"{self.site_link}api/login"

    @property
    def search_url(self) -> str:
        return f"{self.site_link}api/torrent"

    @property
    def session(self) -> TokenSession:
        return self._session

    @property
    def category_map(self) -> CategoryMap:
        return self._category_map

    @property
    def capabilities(self) -> IndexerCapabilities:
        return IndexerCapabilities(
            categories=tuple(self._category_map.canonical_categories())
        )

    def build_search_url(self, query: SearchQuery) -> str:
        params = self._translator.translate(query, self._category_map)
        return f"{self.search_url}?{encode_params(params)}"

    async def search(self, query: SearchQuery) -> list[Release]:
        url = self.build_search_url(query)
        resp = await self._requester.get(url, context="search")

        outcome = self._parser.parse(resp.text)
        for error in outcome.errors:
            self._parse_errors.report(resp.text if error.is_batch_level else error.raw, error)

        self._log.info(
            "indexer_search_complete",
            results=len(outcome.releases),
            parse_errors=len(outcome.errors),
        )
        return outcome.releases

    async def download(self, link: str) -> bytes:
        resp = await self._requester.get(link, context="download")
        self._log.info("indexer_download_complete", size=len(resp.content))
        return resp.content

    async def check(self) -> None:
        """Log in from scratch and make sure an empty query finds releases."""
        await self._session.renew(self._session.current())
        releases = await self.search(SearchQuery())
        if not releases:
            raise IndexerConfigurationError("Could not find releases.")
        self._log.info("indexer_check_passed", results=len(releases))

    async def aclose(self) -> None:
        await self._transport.aclose()
