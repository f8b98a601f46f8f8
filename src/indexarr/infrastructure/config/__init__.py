from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, IndexerSettings

__all__ = ["AppConfig", "EnvOverrides", "IndexerSettings", "load_config"]
