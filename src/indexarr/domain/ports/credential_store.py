"""Port for persisted indexer credentials."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from indexarr.domain.entities import Credentials


@runtime_checkable
class CredentialStorePort(Protocol):
    def credentials(self) -> Credentials: ...
