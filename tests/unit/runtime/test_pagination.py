"""Unit tests for RowStream.

Tests focus on completeness across pages, laziness of page fetches and
where decode errors surface.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.query.connectors.bigquery.rest.endpoints import query_results
from laakhay.query.core import ProviderError, UnsupportedValueError
from laakhay.query.models import FieldSchema
from laakhay.query.runtime import (
    PageState,
    RestRunner,
    RESTTransport,
    RowStream,
    StaticTokenProvider,
    TransportResponse,
)

SCHEMA = (FieldSchema(name="n", type="INTEGER"),)


def rows(*values) -> list[dict]:
    return [{"f": [{"v": str(v)}]} for v in values]


def results_page(values, token=None) -> dict:
    page = {"kind": "bigquery#getQueryResultsResponse", "rows": rows(*values)}
    if token is not None:
        page["pageToken"] = token
    return page


@pytest.fixture
def mock_transport():
    """Create mock REST transport."""
    transport = MagicMock(spec=RESTTransport)
    transport.get = AsyncMock()
    return transport


def make_stream(transport, first_rows, token=None, schema=SCHEMA, max_results=3) -> RowStream:
    return RowStream(
        schema=schema,
        rows=first_rows,
        state=PageState(project_id="proj", job_id="job_1", page_token=token),
        runner=RestRunner(transport, StaticTokenProvider("dummy")),
        page_spec=query_results.SPEC,
        page_adapter=query_results.Adapter(),
        max_results=max_results,
    )


class TestRowStreamCompleteness:
    """Test the full row set is produced across pages."""

    @pytest.mark.asyncio
    async def test_single_page(self, mock_transport):
        stream = make_stream(mock_transport, rows(1, 2, 3))

        assert await stream.to_list() == [[1], [2], [3]]
        mock_transport.get.assert_not_called()
        assert stream.pages_fetched == 0

    @pytest.mark.asyncio
    async def test_token_chain(self, mock_transport):
        """Test N rows over m continuation pages take exactly m fetches."""
        mock_transport.get.side_effect = [
            TransportResponse(200, results_page([4, 5, 6], token="t2")),
            TransportResponse(200, results_page([7, 8], token="t3")),
            TransportResponse(200, results_page([9])),
        ]
        stream = make_stream(mock_transport, rows(1, 2, 3), token="t1")

        collected = [row async for row in stream]

        assert collected == [[n] for n in range(1, 10)]
        assert mock_transport.get.call_count == 3
        assert stream.pages_fetched == 3
        assert stream.rows_yielded == 9
        assert stream.state.page_token is None

    @pytest.mark.asyncio
    async def test_page_requests_carry_token_and_auth(self, mock_transport):
        mock_transport.get.side_effect = [
            TransportResponse(200, results_page([2], token="t2")),
            TransportResponse(200, results_page([3])),
        ]
        stream = make_stream(mock_transport, rows(1), token="t1", max_results=1)

        await stream.to_list()

        first, second = mock_transport.get.call_args_list
        assert first.args == ("/projects/proj/queries/job_1",)
        assert first.kwargs["params"] == {"maxResults": 1, "pageToken": "t1"}
        assert first.kwargs["headers"] == {"Authorization": "Bearer dummy"}
        assert second.kwargs["params"] == {"maxResults": 1, "pageToken": "t2"}

    @pytest.mark.asyncio
    async def test_empty_intermediate_page(self, mock_transport):
        """Test a page with no rows but a token keeps paging."""
        mock_transport.get.side_effect = [
            TransportResponse(200, {"kind": "bigquery#getQueryResultsResponse", "pageToken": "t2"}),
            TransportResponse(200, results_page([2])),
        ]
        stream = make_stream(mock_transport, rows(1), token="t1")

        assert await stream.to_list() == [[1], [2]]
        assert mock_transport.get.call_count == 2

    @pytest.mark.asyncio
    async def test_no_rows_no_token(self, mock_transport):
        stream = make_stream(mock_transport, [])

        assert await stream.to_list() == []
        mock_transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_continuation_pages_use_first_page_schema(self, mock_transport):
        schema = (FieldSchema(name="n", type="INTEGER"), FieldSchema(name="ok", type="BOOLEAN"))
        mock_transport.get.side_effect = [
            TransportResponse(
                200,
                {
                    "kind": "bigquery#getQueryResultsResponse",
                    "rows": [{"f": [{"v": "2"}, {"v": "false"}]}],
                },
            ),
        ]
        stream = make_stream(
            mock_transport, [{"f": [{"v": "1"}, {"v": "true"}]}], token="t1", schema=schema
        )

        assert await stream.to_list() == [[1, True], [2, False]]


class TestRowStreamLaziness:
    """Test pages are fetched only on demand."""

    @pytest.mark.asyncio
    async def test_no_fetch_until_buffer_exhausted(self, mock_transport):
        mock_transport.get.side_effect = [TransportResponse(200, results_page([3]))]
        stream = make_stream(mock_transport, rows(1, 2), token="t1")

        assert await stream.__anext__() == [1]
        assert await stream.__anext__() == [2]
        mock_transport.get.assert_not_called()

        assert await stream.__anext__() == [3]
        mock_transport.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_single_pass(self, mock_transport):
        """Test a drained stream stays drained without new requests."""
        mock_transport.get.side_effect = [TransportResponse(200, results_page([2]))]
        stream = make_stream(mock_transport, rows(1), token="t1")

        assert await stream.to_list() == [[1], [2]]
        assert await stream.to_list() == []
        assert mock_transport.get.call_count == 1


class TestRowStreamErrors:
    """Test error propagation while streaming."""

    @pytest.mark.asyncio
    async def test_decode_error_surfaces_at_its_row(self, mock_transport):
        schema = (FieldSchema(name="x", type="FLOAT"),)
        stream = make_stream(
            mock_transport,
            [{"f": [{"v": "1.5"}]}, {"f": [{"v": "NaN"}]}],
            schema=schema,
        )

        assert await stream.__anext__() == [1.5]
        with pytest.raises(UnsupportedValueError) as exc_info:
            await stream.__anext__()
        assert exc_info.value.value == "NaN"

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, mock_transport):
        mock_transport.get.side_effect = aiohttp.ClientConnectionError("connection reset")
        stream = make_stream(mock_transport, rows(1), token="t1")

        assert await stream.__anext__() == [1]
        with pytest.raises(aiohttp.ClientConnectionError):
            await stream.__anext__()
        # No retry
        assert mock_transport.get.call_count == 1

    @pytest.mark.asyncio
    async def test_error_payload_raises_provider_error(self, mock_transport):
        mock_transport.get.side_effect = [
            TransportResponse(404, {"error": {"code": 404, "message": "Not found: Job"}}),
        ]
        stream = make_stream(mock_transport, [], token="t1")

        with pytest.raises(ProviderError) as exc_info:
            await stream.to_list()
        assert exc_info.value.status_code == 404
