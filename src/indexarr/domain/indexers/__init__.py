from .base import (
    CategoryMapping,
    IndexerCapabilities,
    IndexerDefinition,
    IndexerProtocol,
    ParseError,
    ParseOutcome,
)
from .categories import CategoryMap
from .exceptions import (
    AuthError,
    DuplicateIndexerError,
    ExhaustedRetryError,
    IndexerConfigurationError,
    IndexerError,
    IndexerNotFoundError,
    TransportError,
)

__all__ = [
    "AuthError",
    "CategoryMap",
    "CategoryMapping",
    "DuplicateIndexerError",
    "ExhaustedRetryError",
    "IndexerCapabilities",
    "IndexerConfigurationError",
    "IndexerDefinition",
    "IndexerError",
    "IndexerNotFoundError",
    "IndexerProtocol",
    "ParseError",
    "ParseOutcome",
    "TransportError",
]
