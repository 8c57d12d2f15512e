"""Unit tests for ExecutionEngine outcome classification."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from brainz.ws.core import (
    BrowseBy,
    ClientConfig,
    EntityKind,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RequestBuilder,
    ServerError,
    Subquery,
    TransportError,
    configure,
)
from brainz.ws.models import Artist, BrowseResult, Release, SearchResult
from brainz.ws.runtime import ExecutionEngine, HTTPResponse, parse_retry_after

NIRVANA_ID = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"


def _transport(*responses: HTTPResponse) -> MagicMock:
    transport = MagicMock()
    transport.get = AsyncMock(side_effect=list(responses))
    transport.close = AsyncMock()
    return transport


def _json(document: dict, status: int = 200) -> HTTPResponse:
    return HTTPResponse(status, body=json.dumps(document).encode("utf-8"))


def _lookup():
    return RequestBuilder.lookup(EntityKind.ARTIST, NIRVANA_ID).build()


class TestParseRetryAfter:
    """Test Retry-After parsing."""

    def test_seconds(self):
        assert parse_retry_after("7") == 7.0
        assert parse_retry_after(" 1.5 ") == 1.5

    def test_negative_seconds_clamped(self):
        assert parse_retry_after("-3") == 0.0

    def test_http_date(self):
        when = datetime.now(timezone.utc) + timedelta(seconds=30)
        delay = parse_retry_after(format_datetime(when, usegmt=True))
        assert delay is not None
        assert 25 <= delay <= 31

    @pytest.mark.parametrize("value", [None, "", "soon"])
    def test_missing_or_garbage(self, value):
        assert parse_retry_after(value) is None


class TestSuccessfulExecution:
    """Test decoding of 2xx responses per mode."""

    @pytest.mark.asyncio
    async def test_lookup_returns_model(self, load_json):
        transport = _transport(_json(load_json("lookup", "artist", "nirvana.json")))
        engine = ExecutionEngine(transport=transport)

        artist = await engine.execute(_lookup())

        assert isinstance(artist, Artist)
        assert artist.id == NIRVANA_ID
        url = transport.get.call_args.args[0]
        assert url == f"https://musicbrainz.org/ws/2/artist/{NIRVANA_ID}?fmt=json"

    @pytest.mark.asyncio
    async def test_browse_returns_browse_result(self, load_json):
        transport = _transport(_json(load_json("browse", "release", "by_artist.json")))
        engine = ExecutionEngine(transport=transport)
        request = RequestBuilder.browse(EntityKind.RELEASE, BrowseBy.ARTIST, NIRVANA_ID).limit(3).build()

        result = await engine.execute(request)

        assert isinstance(result, BrowseResult)
        assert all(isinstance(release, Release) for release in result.entities)

    @pytest.mark.asyncio
    async def test_search_returns_search_result(self, load_json):
        transport = _transport(_json(load_json("search", "artist", "nirvana.json")))
        engine = ExecutionEngine(transport=transport)

        result = await engine.execute(RequestBuilder.search(EntityKind.ARTIST, "artist:Nirvana").build())

        assert isinstance(result, SearchResult)
        assert result.entities[0].score == 100

    @pytest.mark.asyncio
    async def test_malformed_body(self):
        engine = ExecutionEngine(transport=_transport(HTTPResponse(200, body=b"<html>")))
        with pytest.raises(MalformedResponseError):
            await engine.execute(_lookup())


class TestErrorClassification:
    """Test mapping of non-2xx statuses to exceptions."""

    @pytest.mark.asyncio
    async def test_404_not_found(self):
        engine = ExecutionEngine(transport=_transport(HTTPResponse(404, body=b'{"error": "Not Found"}')))
        with pytest.raises(NotFoundError) as exc_info:
            await engine.execute(_lookup())
        assert exc_info.value.status_code == 404
        assert "Not Found" in exc_info.value.body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [429, 503])
    async def test_rate_limited(self, status):
        response = HTTPResponse(status, body=b"slow down", headers={"Retry-After": "2"})
        engine = ExecutionEngine(transport=_transport(response))
        with pytest.raises(RateLimitedError) as exc_info:
            await engine.execute(_lookup())
        assert exc_info.value.status_code == status
        assert exc_info.value.retry_after == 2.0

    @pytest.mark.asyncio
    async def test_rate_limited_without_header(self):
        engine = ExecutionEngine(transport=_transport(HTTPResponse(503)))
        with pytest.raises(RateLimitedError) as exc_info:
            await engine.execute(_lookup())
        assert exc_info.value.retry_after is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 500, 502])
    async def test_other_statuses_are_server_errors(self, status):
        engine = ExecutionEngine(transport=_transport(HTTPResponse(status, body=b"oops")))
        with pytest.raises(ServerError) as exc_info:
            await engine.execute(_lookup())
        assert exc_info.value.status_code == status
        assert exc_info.value.body == "oops"

    @pytest.mark.asyncio
    async def test_no_retry(self):
        transport = _transport(HTTPResponse(503), HTTPResponse(200, body=b"{}"))
        engine = ExecutionEngine(transport=transport)
        with pytest.raises(RateLimitedError):
            await engine.execute(_lookup())
        assert transport.get.await_count == 1

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        transport = MagicMock()
        transport.get = AsyncMock(side_effect=TransportError("connection refused"))
        engine = ExecutionEngine(transport=transport)
        with pytest.raises(TransportError):
            await engine.execute(_lookup())


class TestConfiguration:
    """Test configuration lookup at execution time."""

    @pytest.mark.asyncio
    async def test_reads_default_config_per_call(self, load_json):
        document = load_json("lookup", "artist", "nirvana.json")
        transport = _transport(_json(document), _json(document))
        engine = ExecutionEngine(transport=transport)

        await engine.execute(_lookup())
        configure(base_url="http://localhost:5000/ws/2", user_agent="tests/1.0 ( ci )", timeout=3.0)
        await engine.execute(_lookup())

        first, second = transport.get.call_args_list
        assert first.args[0].startswith("https://musicbrainz.org/ws/2/")
        assert second.args[0].startswith("http://localhost:5000/ws/2/")
        assert second.kwargs["headers"]["User-Agent"] == "tests/1.0 ( ci )"
        assert second.kwargs["timeout"] == 3.0

    @pytest.mark.asyncio
    async def test_injected_config_wins(self, load_json):
        transport = _transport(_json(load_json("lookup", "artist", "nirvana.json")))
        config = ClientConfig(base_url="http://mirror.example/ws/2", auth_token="secret")
        engine = ExecutionEngine(transport=transport, config=config)
        configure(base_url="http://ignored.example/ws/2")

        await engine.execute(_lookup())

        call = transport.get.call_args
        assert call.args[0].startswith("http://mirror.example/ws/2/")
        assert call.kwargs["headers"]["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_user_includes_without_token_warn(self, load_json, caplog):
        transport = _transport(_json(load_json("lookup", "artist", "nirvana.json")))
        engine = ExecutionEngine(transport=transport)
        request = RequestBuilder.lookup(EntityKind.ARTIST, NIRVANA_ID).include(Subquery.USER_TAGS).build()

        with caplog.at_level(logging.WARNING, logger="brainz.ws.runtime.engine"):
            await engine.execute(request)

        assert "without an auth token" in caplog.text

    @pytest.mark.asyncio
    async def test_user_includes_with_token_do_not_warn(self, load_json, caplog):
        transport = _transport(_json(load_json("lookup", "artist", "nirvana.json")))
        engine = ExecutionEngine(transport=transport, config=ClientConfig(auth_token="secret"))
        request = RequestBuilder.lookup(EntityKind.ARTIST, NIRVANA_ID).include(Subquery.USER_TAGS).build()

        with caplog.at_level(logging.WARNING, logger="brainz.ws.runtime.engine"):
            await engine.execute(request)

        assert "without an auth token" not in caplog.text


class TestLifecycle:
    """Test blocking execution and resource cleanup."""

    def test_execute_blocking_with_injected_transport(self, load_json):
        transport = _transport(_json(load_json("lookup", "artist", "nirvana.json")))
        engine = ExecutionEngine(transport=transport)

        artist = engine.execute_blocking(_lookup())

        assert isinstance(artist, Artist)
        transport.close.assert_not_called()

    def test_execute_blocking_uses_per_call_transport(self, load_json):
        fake = MagicMock()
        fake.get = AsyncMock(return_value=_json(load_json("lookup", "artist", "nirvana.json")))
        fake.__aenter__ = AsyncMock(return_value=fake)
        fake.__aexit__ = AsyncMock(return_value=None)

        with patch("brainz.ws.runtime.engine.AiohttpTransport", return_value=fake):
            engine = ExecutionEngine()
            artist = engine.execute_blocking(_lookup())

        assert isinstance(artist, Artist)
        fake.__aexit__.assert_awaited_once()
        assert engine._transport is None

    @pytest.mark.asyncio
    async def test_injected_transport_is_not_closed(self):
        transport = _transport()
        async with ExecutionEngine(transport=transport):
            pass
        transport.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_owned_transport_is_closed_once(self):
        fake = MagicMock()
        fake.close = AsyncMock()
        with patch("brainz.ws.runtime.engine.AiohttpTransport", return_value=fake):
            engine = ExecutionEngine()
            assert engine.transport is fake
            await engine.close()
            await engine.close()
        fake.close.assert_awaited_once()
