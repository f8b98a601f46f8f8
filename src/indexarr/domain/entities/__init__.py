from .categories import ALL_CATEGORIES, TorznabCategory, category_name
from .releases import (
    Credentials,
    Release,
    SearchQuery,
    Token,
    download_volume_factor,
    upload_volume_factor,
)

__all__ = [
    "ALL_CATEGORIES",
    "Credentials",
    "Release",
    "SearchQuery",
    "Token",
    "TorznabCategory",
    "category_name",
    "download_volume_factor",
    "upload_volume_factor",
]
