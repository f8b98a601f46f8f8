from .category_map import CategoryMapPort
from .credential_store import CredentialStorePort
from .indexer_registry import IndexerRegistryPort
from .parse_error_sink import ParseErrorSinkPort
from .transport import TransportPort, TransportResponse

__all__ = [
    "CategoryMapPort",
    "CredentialStorePort",
    "IndexerRegistryPort",
    "ParseErrorSinkPort",
    "TransportPort",
    "TransportResponse",
]
