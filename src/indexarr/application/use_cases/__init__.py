from .indexer_check import CheckResult, IndexerCheckUseCase
from .indexer_list import IndexerListUseCase
from .indexer_search import DownloadOutcome, IndexerSearchUseCase, SearchOutcome
from .outcomes import ErrorKind, classify

__all__ = [
    "CheckResult",
    "DownloadOutcome",
    "ErrorKind",
    "IndexerCheckUseCase",
    "IndexerListUseCase",
    "IndexerSearchUseCase",
    "SearchOutcome",
    "classify",
]
