"""Composition root: build indexers and the registry from configuration."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlparse

import structlog

from indexarr.domain.indexers.base import IndexerDefinition
from indexarr.infrastructure.common.rate_limiter import HostRateLimiter
from indexarr.infrastructure.config.schema import AppConfig, IndexerSettings
from indexarr.infrastructure.credentials import SettingsCredentialStore
from indexarr.infrastructure.http.transport import HttpxTransport
from indexarr.infrastructure.indexers.diagnostics import LoggingParseErrorSink
from indexarr.infrastructure.indexers.registry import IndexerRegistry
from indexarr.infrastructure.indexers.sites import SITE_DEFINITIONS
from indexarr.infrastructure.indexers.token_api import TokenApiIndexer

log = structlog.get_logger(__name__)


def build_indexer(
    definition: IndexerDefinition,
    settings: IndexerSettings,
    config: AppConfig,
) -> TokenApiIndexer:
    """Wire one indexer with its own paced transport and diagnostics."""
    site_link = definition.site_link(settings.base_url)
    delay = (
        settings.request_delay_seconds
        if settings.request_delay_seconds is not None
        else definition.request_delay
    )
    host = urlparse(site_link).hostname or ""

    transport = HttpxTransport(
        rate_limiter=HostRateLimiter(intervals={host: delay}),
        timeout=config.http_timeout_seconds,
        user_agent=config.http_user_agent,
        follow_redirects=config.http_follow_redirects,
    )
    sink = LoggingParseErrorSink(
        definition.id,
        dump_dir=config.parse_error_dump_dir if settings.dump_parse_errors else None,
    )
    return TokenApiIndexer(
        definition,
        transport=transport,
        credentials=SettingsCredentialStore(definition.id, settings),
        parse_errors=sink,
        base_url=settings.base_url,
    )


def build_registry(
    config: AppConfig,
    definitions: Mapping[str, IndexerDefinition] = SITE_DEFINITIONS,
) -> IndexerRegistry:
    """Register every enabled indexer from *config* that has a known definition."""
    registry = IndexerRegistry()
    for indexer_id, settings in config.enabled_indexers().items():
        definition = definitions.get(indexer_id)
        if definition is None:
            log.warning(
                "indexer_definition_unknown",
                indexer=indexer_id,
                known=sorted(definitions),
            )
            continue
        registry.register(build_indexer(definition, settings, config))

    log.info("indexers_configured", count=len(registry), ids=registry.list_ids())
    return registry
