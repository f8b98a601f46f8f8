from .diagnostics import LoggingParseErrorSink
from .parser import ResponseParser
from .query import QueryTranslator, encode_params
from .registry import IndexerRegistry
from .requester import AuthenticatedRequester
from .sites import SITE_DEFINITIONS
from .token_api import TokenApiIndexer
from .token_session import SessionState, TokenSession

__all__ = [
    "SITE_DEFINITIONS",
    "AuthenticatedRequester",
    "IndexerRegistry",
    "LoggingParseErrorSink",
    "QueryTranslator",
    "ResponseParser",
    "SessionState",
    "TokenApiIndexer",
    "TokenSession",
    "encode_params",
]
