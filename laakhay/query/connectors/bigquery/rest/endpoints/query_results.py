"""BigQuery jobs.getQueryResults endpoint definition and adapter.

Used for continuation pages only: the schema is taken from the first page,
so this adapter keeps nothing but the raw rows and the next page token.
"""

from __future__ import annotations

from typing import Any

from laakhay.query.connectors.bigquery.config import (
    QUERY_RESPONSE_KIND,
    QUERY_RESULTS_KIND,
    query_results_path,
)
from laakhay.query.runtime.pagination import Page
from laakhay.query.runtime.rest import ResponseAdapter, RestEndpointSpec

_PAGE_KINDS = (QUERY_RESULTS_KIND, QUERY_RESPONSE_KIND)


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for a continuation page."""
    q: dict[str, Any] = {
        "maxResults": params["max_results"],
        "pageToken": params["page_token"],
    }
    if params.get("location"):
        q["location"] = params["location"]
    return q


# Endpoint specification
SPEC = RestEndpointSpec(
    id="query_results",
    method="GET",
    build_path=lambda params: query_results_path(params["project_id"], params["job_id"]),
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter extracting rows and the next token from a results page."""

    def parse(self, response: Any, params: dict[str, Any]) -> Page | Any:
        if not isinstance(response, dict) or response.get("kind") not in _PAGE_KINDS:
            return response
        return Page(rows=response.get("rows") or [], page_token=response.get("pageToken"))
