"""Lazy row streaming across result pages.

Architecture:
    RowStream is an async iterator over decoded rows. It starts with the
    raw rows of the first page already buffered. When the buffer runs dry
    it looks at the continuation state: with a page token it fetches the
    next page through the RestRunner and refills the buffer, without one it
    stops.

Design Decisions:
    - Explicit state: ``PageState`` (project, job, token) is replaced after
      every page, nothing is captured in closures
    - Schema from the first page: continuation pages carry no schema, so
      every page is decoded with the descriptors the stream was built with
    - Decode on pull: a row is decoded only when it is requested, so a bad
      cell surfaces exactly when its row is reached
    - Strictly sequential: one page request at a time, only on demand
    - Single pass: once exhausted the stream stays exhausted; re-running
      the query is the only way to read the rows again
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, replace
from time import perf_counter
from typing import Any

from ..codec.decode import decode_row
from ..core.exceptions import ProviderError
from ..models import FieldSchema
from .rest import ResponseAdapter, RestEndpointSpec, RestRunner
from .telemetry import log_page_error, log_page_fetched, log_stream_complete


@dataclass(frozen=True)
class PageState:
    """Continuation cursor. No ``page_token`` means no more pages."""

    project_id: str
    job_id: str
    page_token: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class Page:
    """Raw rows and next token of one continuation page."""

    rows: list[Any]
    page_token: str | None = None


class RowStream:
    """Forward-only async sequence of decoded rows spanning all pages."""

    def __init__(
        self,
        *,
        schema: Sequence[FieldSchema],
        rows: Sequence[Any],
        state: PageState | None,
        runner: RestRunner,
        page_spec: RestEndpointSpec,
        page_adapter: ResponseAdapter,
        max_results: int,
        num_rows: int | None = None,
    ) -> None:
        """Initialize stream with the first page's rows.

        Args:
            schema: Field descriptors from the first page
            rows: Raw ``{"f": [...]}`` rows of the first page
            state: Continuation state, None when there is no job to continue
            runner: Runner used for continuation page requests
            page_spec: Endpoint spec of the continuation request
            page_adapter: Adapter turning a continuation response into a Page
            max_results: Page size requested for continuation pages
            num_rows: Declared total row count (for telemetry)
        """
        self._schema = tuple(schema)
        self._buffer: deque[Any] = deque(rows)
        self._state = state
        self._runner = runner
        self._page_spec = page_spec
        self._page_adapter = page_adapter
        self._max_results = max_results
        self._num_rows = num_rows
        self._pages_fetched = 0
        self._rows_yielded = 0
        self._exhausted = False

    @property
    def state(self) -> PageState | None:
        """Current continuation state."""
        return self._state

    @property
    def pages_fetched(self) -> int:
        """Continuation pages requested so far (the first page not included)."""
        return self._pages_fetched

    @property
    def rows_yielded(self) -> int:
        return self._rows_yielded

    def __aiter__(self) -> RowStream:
        return self

    async def __anext__(self) -> list[Any]:
        while not self._buffer:
            if self._exhausted:
                raise StopAsyncIteration
            if self._state is None or self._state.page_token is None:
                self._finish()
                raise StopAsyncIteration
            await self._fetch_next_page()

        raw_row = self._buffer.popleft()
        row = decode_row(raw_row, self._schema)
        self._rows_yielded += 1
        return row

    async def to_list(self) -> list[list[Any]]:
        """Drain the remaining rows into a list."""
        return [row async for row in self]

    async def _fetch_next_page(self) -> None:
        state = self._state
        page_index = self._pages_fetched + 1
        params = {
            "project_id": state.project_id,
            "job_id": state.job_id,
            "page_token": state.page_token,
            "location": state.location,
            "max_results": self._max_results,
        }

        start = perf_counter()
        try:
            response = await self._runner.run(
                spec=self._page_spec, adapter=self._page_adapter, params=params
            )
        except Exception as e:
            log_page_error(
                job_id=state.job_id,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        latency_ms = (perf_counter() - start) * 1000.0

        self._pages_fetched = page_index
        page = response.body
        if not isinstance(page, Page):
            log_page_error(
                job_id=state.job_id,
                page_index=page_index,
                error_type="ProviderError",
                error_message=f"unexpected page payload (status {response.status})",
            )
            raise ProviderError(
                f"Unexpected response while fetching page {page_index} of job {state.job_id}",
                status_code=response.status,
            )

        self._buffer.extend(page.rows)
        self._state = replace(state, page_token=page.page_token)
        log_page_fetched(
            job_id=state.job_id,
            page_index=page_index,
            rows=len(page.rows),
            has_more=page.page_token is not None,
            latency_ms=latency_ms,
        )

    def _finish(self) -> None:
        self._exhausted = True
        log_stream_complete(
            job_id=self._state.job_id if self._state else None,
            rows_yielded=self._rows_yielded,
            pages_fetched=self._pages_fetched,
            num_rows=self._num_rows,
        )
