"""BigQuery REST endpoint registry.

This module exports the endpoint specifications and adapters used by the
BigQuery REST connector.
"""

from __future__ import annotations

from laakhay.query.runtime.rest import ResponseAdapter, RestEndpointSpec

from .query import SPEC as QuerySpec  # noqa: N811
from .query import Adapter as QueryAdapter
from .query import build_query_request, is_query_response
from .query_results import SPEC as QueryResultsSpec  # noqa: N811
from .query_results import Adapter as QueryResultsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "query": (QuerySpec, QueryAdapter),
    "query_results": (QueryResultsSpec, QueryResultsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "query", "query_results")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "query", "query_results")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = [
    "QueryAdapter",
    "QueryResultsAdapter",
    "QuerySpec",
    "QueryResultsSpec",
    "build_query_request",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "is_query_response",
]
