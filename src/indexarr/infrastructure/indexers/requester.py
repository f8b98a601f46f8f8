"""Authenticated request helper shared by token-based indexers."""

from __future__ import annotations

import structlog

from indexarr.domain.entities import Token
from indexarr.domain.indexers.exceptions import ExhaustedRetryError, TransportError
from indexarr.domain.ports import TransportPort, TransportResponse

from .token_session import TokenSession

log = structlog.get_logger(__name__)

_UNAUTHORIZED = 401
_OK = 200


class AuthenticatedRequester:
    """Sends bearer-authenticated requests with one re-login on 401.

    Per call:
        1. ensure a token and send the request
        2. on 401: renew the token once and resend the same request
        3. a second 401 raises ``ExhaustedRetryError``
    Any status other than 200/401, at either attempt, raises
    ``TransportError`` without further retries.
    """

    def __init__(
        self,
        *,
        indexer_id: str,
        session: TokenSession,
        transport: TransportPort,
    ) -> None:
        self._session = session
        self._transport = transport
        self._log = log.bind(indexer=indexer_id)

    @property
    def session(self) -> TokenSession:
        return self._session

    async def get(self, url: str, *, context: str = "") -> TransportResponse:
        token = await self._session.ensure()
        resp = await self._send(url, token)

        if resp.status == _UNAUTHORIZED:
            self._log.info("indexer_token_rejected", url=url, context=context)
            token = await self._session.renew(token)
            resp = await self._send(url, token)

            if resp.status == _UNAUTHORIZED:
                if self._session.invalidate(token):
                    self._session.mark_failed()
                self._log.warning("indexer_reauth_exhausted", url=url, context=context)
                raise ExhaustedRetryError(
                    f"Still unauthorized after re-login ({context or url})"
                )

        if resp.status != _OK:
            self._log.warning(
                "indexer_unexpected_status",
                url=url,
                status=resp.status,
                context=context,
            )
            raise TransportError(
                f"Unexpected status {resp.status} in {context or 'request'}: "
                f"{resp.text[:200]}",
                status=resp.status,
            )

        return resp

    async def _send(self, url: str, token: Token) -> TransportResponse:
        return await self._transport.request(
            url, headers={"Authorization": token.bearer()}
        )
