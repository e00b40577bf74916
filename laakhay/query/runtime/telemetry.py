"""Structured logging for query and pagination operations.

This module provides telemetry hooks emitting structured logs, one event
name per operation with its details in ``extra``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_query_submitted(
    *,
    project_id: str,
    parameter_count: int,
    status: int,
    job_id: str | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log the outcome of the initial query request.

    Args:
        project_id: Project the query ran in
        parameter_count: Number of positional parameters sent
        status: HTTP status of the response
        job_id: Job identifier, when the response carried one
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "query_submitted",
        extra={
            "project_id": project_id,
            "parameter_count": parameter_count,
            "status": status,
            "job_id": job_id,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetched(
    *,
    job_id: str,
    page_index: int,
    rows: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a continuation page fetch.

    Args:
        job_id: Job the page belongs to
        page_index: One-based index of the continuation page
        rows: Number of raw rows in the page
        has_more: Whether the page carried a further page token
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "job_id": job_id,
            "page_index": page_index,
            "rows": rows,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    job_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed continuation page fetch."""
    logger.error(
        "page_error",
        extra={
            "job_id": job_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_stream_complete(
    *,
    job_id: str | None,
    rows_yielded: int,
    pages_fetched: int,
    num_rows: int | None = None,
) -> None:
    """Log exhaustion of a row stream."""
    logger.info(
        "row_stream_complete",
        extra={
            "job_id": job_id,
            "rows_yielded": rows_yielded,
            "pages_fetched": pages_fetched,
            "num_rows": num_rows,
        },
    )
