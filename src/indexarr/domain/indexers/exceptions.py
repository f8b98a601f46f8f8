"""Indexer error taxonomy."""

from __future__ import annotations


class IndexerError(Exception):
    """Base class for all indexer-related errors."""


class AuthError(IndexerError):
    """Raised when login fails or the site does not hand out a token."""


class TransportError(IndexerError):
    """Raised on unexpected HTTP status codes and network/timeout failures."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ExhaustedRetryError(IndexerError):
    """Raised when a request is still unauthorized after re-authenticating."""


class IndexerConfigurationError(IndexerError):
    """Raised when an indexer's configuration check does not pass."""


class IndexerNotFoundError(IndexerError):
    """Raised when an indexer id is not known to the registry."""


class DuplicateIndexerError(IndexerError):
    """Raised when two indexers are registered under the same id."""
