"""Unit tests for AiohttpTransport and HTTPResponse."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from brainz.ws.core import TransportError
from brainz.ws.runtime import AiohttpTransport, HTTPResponse


def _mock_session(status: int = 200, body: bytes = b"{}", headers: dict | None = None) -> MagicMock:
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.headers = headers or {"Content-Type": "application/json"}
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False
    mock_session.get = MagicMock(return_value=mock_response)
    return mock_session


class TestHTTPResponse:
    """Test the response value object."""

    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False)])
    def test_ok(self, status, ok):
        assert HTTPResponse(status).ok is ok

    def test_header_lookup_is_case_insensitive(self):
        response = HTTPResponse(503, headers={"Retry-After": "2"})
        assert response.header("retry-after") == "2"
        assert response.header("X-Missing") is None

    def test_text_replaces_undecodable_bytes(self):
        assert HTTPResponse(200, body=b"ok\xff").text == "ok\ufffd"


class TestAiohttpTransportSession:
    """Test session management."""

    @pytest.mark.asyncio
    async def test_session_created_lazily(self):
        transport = AiohttpTransport()
        assert transport._session is None
        session = transport.session
        assert isinstance(session, aiohttp.ClientSession)
        await transport.close()
        assert session.closed

    @pytest.mark.asyncio
    async def test_closed_session_is_recreated(self):
        transport = AiohttpTransport()
        first = transport.session
        await first.close()
        second = transport.session
        assert first is not second
        await transport.close()

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self):
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        transport = AiohttpTransport(session=session)
        await transport.close()
        session.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        async with AiohttpTransport() as transport:
            session = transport.session
        assert session.closed


class TestAiohttpTransportGet:
    """Test GET requests against a mocked session."""

    @pytest.mark.asyncio
    async def test_returns_status_body_and_headers(self):
        transport = AiohttpTransport(session=_mock_session(200, b'{"id": "x"}'))
        response = await transport.get(
            "https://musicbrainz.org/ws/2/artist/x?fmt=json",
            headers={"User-Agent": "test/1.0"},
            timeout=5.0,
        )
        assert response.status == 200
        assert response.body == b'{"id": "x"}'
        assert response.header("content-type") == "application/json"

    @pytest.mark.asyncio
    async def test_passes_headers_and_timeout(self):
        session = _mock_session()
        transport = AiohttpTransport(session=session)
        await transport.get("https://example.org/ws/2/artist", headers={"Accept": "application/json"}, timeout=7.5)
        _, kwargs = session.get.call_args
        assert kwargs["headers"] == {"Accept": "application/json"}
        assert kwargs["timeout"].total == 7.5

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self):
        transport = AiohttpTransport(session=_mock_session(503, b"busy", {"Retry-After": "1"}))
        response = await transport.get("https://example.org/ws/2/artist", headers={}, timeout=1.0)
        assert response.status == 503
        assert not response.ok

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        session = _mock_session()
        session.get = MagicMock(side_effect=asyncio.TimeoutError())
        transport = AiohttpTransport(session=session)
        with pytest.raises(TransportError, match="timed out"):
            await transport.get("https://example.org/ws/2/artist", headers={}, timeout=1.0)

    @pytest.mark.asyncio
    async def test_client_error_becomes_transport_error(self):
        session = _mock_session()
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        transport = AiohttpTransport(session=session)
        with pytest.raises(TransportError, match="refused"):
            await transport.get("https://example.org/ws/2/artist", headers={}, timeout=1.0)
