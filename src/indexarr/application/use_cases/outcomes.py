"""Explicit result values for indexer calls.

Adapters raise typed ``IndexerError`` subclasses; use cases translate them
into an ``ErrorKind`` so callers can decide per kind (skip, retry later,
alert the operator) without catching exceptions.
"""

from __future__ import annotations

import enum

from indexarr.domain.indexers.exceptions import (
    AuthError,
    ExhaustedRetryError,
    IndexerConfigurationError,
    IndexerError,
    IndexerNotFoundError,
    TransportError,
)


class ErrorKind(enum.Enum):
    AUTH = "auth"
    TRANSPORT = "transport"
    EXHAUSTED_RETRY = "exhausted_retry"
    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


_KINDS: tuple[tuple[type[IndexerError], ErrorKind], ...] = (
    (AuthError, ErrorKind.AUTH),
    (TransportError, ErrorKind.TRANSPORT),
    (ExhaustedRetryError, ErrorKind.EXHAUSTED_RETRY),
    (IndexerConfigurationError, ErrorKind.CONFIGURATION),
    (IndexerNotFoundError, ErrorKind.NOT_FOUND),
)


def classify(error: IndexerError) -> ErrorKind:
    for exc_type, kind in _KINDS:
        if isinstance(error, exc_type):
            return kind
    return ErrorKind.UNKNOWN
