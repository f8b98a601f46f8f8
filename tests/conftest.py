"""Shared test fixtures for the indexarr test suite."""

from __future__ import annotations

import sys

import pytest
import structlog
from fakes import FakeTransport, RecordingSink

from indexarr.domain.entities import categories as cats
from indexarr.domain.indexers import CategoryMapping, IndexerDefinition
from indexarr.infrastructure.credentials import StaticCredentialStore
from indexarr.infrastructure.indexers.token_api import TokenApiIndexer


@pytest.fixture(autouse=True)
def _structlog_to_stderr():
    """Keep log events off stdout, which the CLI reserves for JSON lines."""
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
    yield
    structlog.reset_defaults()


@pytest.fixture()
def definition() -> IndexerDefinition:
    """Small site definition without request pacing."""
    return IndexerDefinition(
        id="testzone",
        name="TestZone",
        base_url="https://tracker.example.org",
        categories=(
            CategoryMapping("4", cats.MOVIES_HD.id, "Movies HD"),
            CategoryMapping("6", cats.MOVIES_BLURAY.id, "Movies BluRay"),
            CategoryMapping("10", cats.TV_HD.id, "TV HD"),
            CategoryMapping("19", cats.TV_HD.id, "TV HD RO"),
        ),
        request_delay=0.0,
    )


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def indexer(
    definition: IndexerDefinition, transport: FakeTransport, sink: RecordingSink
) -> TokenApiIndexer:
    return TokenApiIndexer(
        definition,
        transport=transport,
        credentials=StaticCredentialStore("alice", "secret"),
        parse_errors=sink,
    )
