"""BigQuery jobs.query endpoint definition and adapter.

The request side turns SQL text, positional parameters and the connector
options into the JSON body of ``POST /projects/{project_id}/queries``.
The response side recognizes a successful first page and turns it into a
Result whose rows stream lazily across all pages.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from laakhay.query.codec import encode_parameter
from laakhay.query.connectors.bigquery.config import QUERY_RESPONSE_KIND, query_path
from laakhay.query.core import ParameterMode
from laakhay.query.models import FieldSchema, Result
from laakhay.query.runtime.pagination import PageState, RowStream
from laakhay.query.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner

from . import query_results


def build_query_request(
    sql: str,
    params: Sequence[Any] = (),
    *,
    default_dataset: str | None = None,
    use_legacy_sql: bool = False,
    max_results: int,
    timeout_ms: int,
) -> dict[str, Any]:
    """Build the jobs.query request body.

    Placeholders in ``sql`` are not counted against ``params``; a mismatch
    is reported by the service.

    Args:
        sql: Statement text, ``?`` marks positional placeholders
        params: Positional parameter values, in placeholder order
        default_dataset: Dataset unqualified table names resolve against
        use_legacy_sql: Send the legacy dialect flag
        max_results: Page size
        timeout_ms: Server-side completion wait

    Returns:
        JSON-ready request body

    Examples:
        >>> build_query_request("select 1", max_results=10, timeout_ms=0)
        {'query': 'select 1', 'useLegacySql': False, 'maxResults': 10, 'timeoutMs': 0}
    """
    body: dict[str, Any] = {"query": sql}
    if default_dataset:
        body["defaultDataset"] = {"datasetId": default_dataset}
    body["useLegacySql"] = use_legacy_sql
    body["maxResults"] = max_results
    body["timeoutMs"] = timeout_ms
    if params:
        body["parameterMode"] = ParameterMode.POSITIONAL.value
        body["queryParameters"] = [encode_parameter(value) for value in params]
    return body


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build request body from runner params."""
    return build_query_request(
        params["sql"],
        params.get("query_params") or (),
        default_dataset=params.get("default_dataset"),
        use_legacy_sql=params.get("use_legacy_sql", False),
        max_results=params["max_results"],
        timeout_ms=params["timeout_ms"],
    )


# Endpoint specification
SPEC = RestEndpointSpec(
    id="query",
    method="POST",
    build_path=lambda params: query_path(params["project_id"]),
    build_body=build_body,
)


def is_query_response(response: Any) -> bool:
    """Whether ``response`` is a recognizable first results page."""
    if not isinstance(response, dict):
        return False
    job_reference = response.get("jobReference")
    schema = response.get("schema")
    return (
        response.get("kind") == QUERY_RESPONSE_KIND
        and isinstance(job_reference, dict)
        and isinstance(job_reference.get("jobId"), str)
        and isinstance(schema, dict)
        and isinstance(schema.get("fields"), list)
        and _is_count(response.get("totalRows"))
    )


def _is_count(value: Any) -> bool:
    return isinstance(value, str) and value.isdecimal()


def _parse_count(value: Any) -> int | None:
    if not _is_count(value):
        return None
    return int(value)


class Adapter(ResponseAdapter):
    """Adapter decoding a jobs.query response into a Result.

    Responses that are not a recognizable results page (service error
    payloads included) are returned exactly as received.
    """

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def parse(self, response: Any, params: dict[str, Any]) -> Result | Any:
        """Parse the first page of a query response.

        Args:
            response: Decoded JSON body
            params: Request parameters containing project_id and max_results

        Returns:
            Result with a lazy row stream, or ``response`` unchanged
        """
        if not is_query_response(response):
            return response

        job_reference = response["jobReference"]
        schema = FieldSchema.list_from_api(response["schema"]["fields"])
        num_rows = int(response["totalRows"])
        state = PageState(
            project_id=params["project_id"],
            job_id=job_reference["jobId"],
            page_token=response.get("pageToken"),
            location=job_reference.get("location"),
        )
        rows = RowStream(
            schema=schema,
            rows=response.get("rows") or [],
            state=state,
            runner=self._runner,
            page_spec=query_results.SPEC,
            page_adapter=query_results.Adapter(),
            max_results=params["max_results"],
            num_rows=num_rows,
        )
        return Result(
            columns=[field.name for field in schema],
            job_id=state.job_id,
            num_rows=num_rows,
            rows=rows,
            total_bytes_processed=_parse_count(response.get("totalBytesProcessed")),
            schema_fields=schema,
        )
