"""Tests for HttpxTransport (httpx client wrapper with pacing)."""

from __future__ import annotations

import time

import httpx
import pytest
import respx

from indexarr.domain.indexers import TransportError
from indexarr.infrastructure.common.rate_limiter import HostRateLimiter
from indexarr.infrastructure.http.transport import HttpxTransport

_URL = "https://tracker.example.org/api/torrent"


@pytest.fixture()
async def transport() -> HttpxTransport:
    t = HttpxTransport(user_agent="TestAgent/1.0")
    yield t
    await t.aclose()


class TestRequest:
    @respx.mock
    async def test_get_returns_status_and_body(self, transport: HttpxTransport) -> None:
        respx.get(_URL).respond(200, text="[]")

        resp = await transport.request(_URL, headers={"Authorization": "Bearer t"})

        assert resp.status == 200
        assert resp.text == "[]"
        assert resp.content == b"[]"
        sent = respx.calls.last.request
        assert sent.headers["Authorization"] == "Bearer t"
        assert sent.headers["User-Agent"] == "TestAgent/1.0"

    @respx.mock
    async def test_post_sends_body(self, transport: HttpxTransport) -> None:
        route = respx.post("https://tracker.example.org/api/login").respond(
            200, json={"token": "x"}
        )

        await transport.request(
            "https://tracker.example.org/api/login",
            method="post",
            headers={"Content-Type": "application/json"},
            body='{"username": "a"}',
        )

        assert route.called
        assert route.calls.last.request.content == b'{"username": "a"}'

    @respx.mock
    async def test_error_status_is_returned_not_raised(
        self, transport: HttpxTransport
    ) -> None:
        respx.get(_URL).respond(401)
        resp = await transport.request(_URL)
        assert resp.status == 401

    @respx.mock
    async def test_binary_body(self, transport: HttpxTransport) -> None:
        respx.get(_URL + "/1/download").respond(200, content=b"\x00\x01d8:")
        resp = await transport.request(_URL + "/1/download")
        assert resp.content == b"\x00\x01d8:"

    @respx.mock
    async def test_client_reused(self, transport: HttpxTransport) -> None:
        respx.get(_URL).respond(200, text="[]")
        await transport.request(_URL)
        first = transport._client
        await transport.request(_URL)
        assert transport._client is first


class TestErrors:
    @respx.mock
    async def test_timeout_maps_to_transport_error(
        self, transport: HttpxTransport
    ) -> None:
        respx.get(_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(TransportError, match="timed out") as exc_info:
            await transport.request(_URL)
        assert exc_info.value.status is None

    @respx.mock
    async def test_connect_error_maps_to_transport_error(
        self, transport: HttpxTransport
    ) -> None:
        respx.get(_URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(TransportError, match="failed"):
            await transport.request(_URL)


@respx.mock
async def test_requests_are_paced_per_host() -> None:
    respx.get(_URL).respond(200, text="[]")
    transport = HttpxTransport(
        rate_limiter=HostRateLimiter(intervals={"tracker.example.org": 0.05})
    )
    try:
        start = time.monotonic()
        await transport.request(_URL)
        await transport.request(_URL)
        assert time.monotonic() - start >= 0.045
    finally:
        await transport.aclose()


async def test_aclose_without_client_is_noop() -> None:
    transport = HttpxTransport()
    await transport.aclose()
    assert transport._client is None


async def test_malformed_url_maps_to_transport_error(transport: HttpxTransport) -> None:
    with pytest.raises(TransportError, match="failed"):
        await transport.request("http://[::1/x")
