"""Precise unit tests for HTTPClient.

Tests focus on session management, URL joining and body decoding.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.query.runtime.rest import HTTPClient


def make_response(status: int, payload=None, text: str | None = None):
    """Build a mock aiohttp response usable as an async context manager."""
    response = AsyncMock()
    response.status = status
    if text is None:
        response.json = AsyncMock(return_value=payload)
    else:
        response.json = AsyncMock(side_effect=json.JSONDecodeError("Expecting value", text, 0))
        response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def attach_session(client: HTTPClient, response) -> MagicMock:
    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.request = MagicMock(return_value=response)
    client._session = mock_session
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_init_with_base_url(self):
        client = HTTPClient(base_url="https://bigquery.googleapis.com/bigquery/v2", timeout=30.0)
        assert client.base_url == "https://bigquery.googleapis.com/bigquery/v2"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        assert client._session is None

        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test HTTPClient request handling."""

    @pytest.mark.asyncio
    async def test_get_returns_status_and_json(self):
        client = HTTPClient(base_url="https://api.example.com")
        mock_session = attach_session(client, make_response(200, {"kind": "ok"}))

        status, body = await client.get("/test", params={"pageToken": "t1"})

        assert (status, body) == (200, {"kind": "ok"})
        mock_session.request.assert_called_once_with(
            "GET",
            "https://api.example.com/test",
            params={"pageToken": "t1"},
            json=None,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self):
        client = HTTPClient(base_url="https://api.example.com")
        mock_session = attach_session(client, make_response(200, {}))

        await client.post("/q", json={"query": "select 1"}, headers={"Authorization": "Bearer x"})

        args, kwargs = mock_session.request.call_args
        assert args == ("POST", "https://api.example.com/q")
        assert kwargs["json"] == {"query": "select 1"}
        assert kwargs["headers"] == {"Authorization": "Bearer x"}

    @pytest.mark.asyncio
    async def test_error_status_does_not_raise(self):
        client = HTTPClient()
        error = {"error": {"code": 400, "message": "Syntax error"}}
        attach_session(client, make_response(400, error))

        status, body = await client.get("https://api.example.com/test")

        assert status == 400
        assert body == error

    @pytest.mark.asyncio
    async def test_non_json_body_returned_as_text(self):
        client = HTTPClient()
        attach_session(client, make_response(502, text="<html>Bad Gateway</html>"))

        status, body = await client.get("https://api.example.com/test")

        assert status == 502
        assert body == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_absolute_url_ignores_base_url(self):
        client = HTTPClient(base_url="https://api.example.com")
        mock_session = attach_session(client, make_response(200, {}))

        await client.get("https://other.com/test")

        args, _ = mock_session.request.call_args
        assert args[1] == "https://other.com/test"
