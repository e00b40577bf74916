"""Query result containers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .field_schema import FieldSchema

if TYPE_CHECKING:
    from ..runtime.pagination import RowStream


@dataclass(frozen=True)
class Result:
    """Decoded result of a successful query.

    Attributes:
        columns: Column names, in schema order
        job_id: Identifier of the job that produced the rows
        num_rows: Total rows across all pages, as declared by the first page
        rows: Lazy, single-pass async stream of decoded rows
        total_bytes_processed: Bytes scanned by the query, when reported
        schema_fields: Field descriptors the rows were decoded with
    """

    columns: list[str]
    job_id: str | None
    num_rows: int
    rows: RowStream
    total_bytes_processed: int | None = None
    schema_fields: tuple[FieldSchema, ...] = field(default=(), repr=False)

    async def records(self) -> AsyncIterator[dict[str, Any]]:
        """Iterate rows as ``{column: value}`` mappings.

        Consumes the same underlying stream as ``rows``.
        """
        async for row in self.rows:
            yield dict(zip(self.columns, row))


@dataclass(frozen=True)
class QueryResponse:
    """HTTP status plus decoded body.

    ``body`` is a Result when the service answered with a recognized
    results page, otherwise the JSON payload exactly as received.
    """

    status: int
    body: Result | Any
