"""Bearer-token lifecycle for one indexer instance."""

from __future__ import annotations

import asyncio
import enum
import json

import structlog

from indexarr.domain.entities import Token
from indexarr.domain.indexers.exceptions import (
    AuthError,
    IndexerError,
    TransportError,
)
from indexarr.domain.ports import CredentialStorePort, TransportPort
from indexarr.infrastructure.http.constants import JSON_HEADERS

log = structlog.get_logger(__name__)

_GENERIC_LOGIN_FAILURE = "Login failed: the site did not return a token"


class SessionState(enum.Enum):
    NO_TOKEN = "no_token"
    AUTHENTICATING = "authenticating"
    READY = "ready"
    REAUTHENTICATING = "reauthenticating"
    FAILED = "failed"


class TokenSession:
    """Owns the cached token and serializes every login.

    There is no local expiry: a token stays cached until somebody observes
    a 401 and calls :meth:`invalidate` or :meth:`renew`.
    """

    def __init__(
        self,
        *,
        indexer_id: str,
        login_url: str,
        transport: TransportPort,
        credentials: CredentialStorePort,
    ) -> None:
        self._indexer_id = indexer_id
        self._login_url = login_url
        self._transport = transport
        self._credentials = credentials
        self._token: Token | None = None
        self._state = SessionState.NO_TOKEN
        self._lock = asyncio.Lock()
        self._log = log.bind(indexer=indexer_id)

    @property
    def state(self) -> SessionState:
        return self._state

    def current(self) -> Token | None:
        return self._token

    async def ensure(self) -> Token:
        """Return the cached token, logging in first if there is none."""
        async with self._lock:
            if self._token is not None:
                return self._token
            return await self._login(SessionState.AUTHENTICATING)

    async def renew(self, stale: Token | None) -> Token:
        """Replace *stale* with a fresh token.

        If another caller already swapped the token while we waited for the
        lock, the newer token is returned without a second login.
        """
        async with self._lock:
            if self._token is not None and self._token != stale:
                self._log.debug("indexer_token_already_renewed")
                return self._token
            self._token = None
            return await self._login(SessionState.REAUTHENTICATING)

    def invalidate(self, stale: Token | None = None) -> bool:
        """Drop the cached token (only if it is still *stale*, when given).

        Returns False when a newer token is cached and was left in place.
        """
        if stale is not None and self._token != stale:
            return False
        if self._token is not None:
            self._log.debug("indexer_token_invalidated")
        self._token = None
        self._state = SessionState.NO_TOKEN
        return True

    def mark_failed(self) -> None:
        self._state = SessionState.FAILED

    async def _login(self, state: SessionState) -> Token:
        self._state = state
        try:
            token = await self._request_token()
        except IndexerError:
            self._state = SessionState.FAILED
            raise

        self._token = token
        self._state = SessionState.READY
        self._log.info(
            "indexer_login_success", reauth=state is SessionState.REAUTHENTICATING
        )
        return token

    async def _request_token(self) -> Token:
        creds = self._credentials.credentials()
        body = json.dumps(
            {"username": creds.username.strip(), "password": creds.password.strip()}
        )
        resp = await self._transport.request(
            self._login_url, method="POST", headers=JSON_HEADERS, body=body
        )

        try:
            data = json.loads(resp.text)
        except ValueError:
            data = None

        if not isinstance(data, dict):
            if resp.status != 200:
                raise TransportError(
                    f"Unexpected login response status {resp.status}",
                    status=resp.status,
                )
            raise AuthError("Login response was not a JSON object")

        token = data.get("token")
        if not isinstance(token, str) or not token:
            message = data.get("message")
            if not isinstance(message, str) or not message.strip():
                message = _GENERIC_LOGIN_FAILURE
            self._log.warning(
                "indexer_login_failed", status=resp.status, reason=message
            )
            raise AuthError(message)

        return Token(token)
