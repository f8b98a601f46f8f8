"""Shared fixtures for integration tests.

These tests use real infrastructure components (HttpxTransport,
TokenApiIndexer, load_config) with mocked HTTP via respx.
"""

from __future__ import annotations

import os

import pytest
import respx


@pytest.fixture()
def respx_mock() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def _clean_indexarr_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep INDEXARR_* variables from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("INDEXARR_"):
            monkeypatch.delenv(key)
