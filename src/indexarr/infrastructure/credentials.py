"""Credential stores backing ``CredentialStorePort``."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from indexarr.domain.entities import Credentials
from indexarr.domain.indexers.exceptions import AuthError
from indexarr.infrastructure.config.schema import IndexerSettings

_ENV_SAFE_RE = re.compile(r"[^A-Z0-9]+")


def default_env_names(indexer_id: str) -> tuple[str, str]:
    """``("INDEXARR_<ID>_USERNAME", "INDEXARR_<ID>_PASSWORD")`` for *indexer_id*."""
    key = _ENV_SAFE_RE.sub("_", indexer_id.upper()).strip("_")
    return f"INDEXARR_{key}_USERNAME", f"INDEXARR_{key}_PASSWORD"


class StaticCredentialStore:
    def __init__(self, username: str, password: str) -> None:
        self._credentials = Credentials(username=username, password=password)

    def credentials(self) -> Credentials:
        return self._credentials


class SettingsCredentialStore:
    """Resolves credentials from indexer settings and the environment.

    Resolution order per field: inline value, ``*_env`` variable, then the
    default ``INDEXARR_<ID>_*`` variable. Values are read on every call so
    that rotated secrets are picked up by the next login.
    """

    def __init__(
        self,
        indexer_id: str,
        settings: IndexerSettings,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._indexer_id = indexer_id
        self._settings = settings
        self._environ = environ

    def credentials(self) -> Credentials:
        env = os.environ if self._environ is None else self._environ
        default_user_env, default_pass_env = default_env_names(self._indexer_id)

        username = self._resolve(
            env, self._settings.username, self._settings.username_env, default_user_env
        )
        password = self._resolve(
            env, self._settings.password, self._settings.password_env, default_pass_env
        )

        if not username or not password:
            raise AuthError(
                f"Missing credentials for '{self._indexer_id}': set username/password "
                f"in the config or {default_user_env} and {default_pass_env}"
            )
        return Credentials(username=username, password=password)

    @staticmethod
    def _resolve(
        env: Mapping[str, str],
        inline: str | None,
        env_name: str | None,
        default_env_name: str,
    ) -> str | None:
        if inline:
            return inline
        if env_name and env.get(env_name):
            return env[env_name]
        return env.get(default_env_name) or None
