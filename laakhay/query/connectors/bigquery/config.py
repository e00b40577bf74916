"""Shared BigQuery connector constants and configuration.

This module centralizes the REST base URL, request defaults and the
connector configuration model so endpoint modules stay small and focused.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from laakhay.query.core import ConfigurationError

BASE_URL = "https://bigquery.googleapis.com/bigquery/v2"

# Response kind tag of a jobs.query / jobs.getQueryResults success payload
QUERY_RESPONSE_KIND = "bigquery#queryResponse"
QUERY_RESULTS_KIND = "bigquery#getQueryResultsResponse"

DEFAULT_MAX_RESULTS = 10_000
DEFAULT_TIMEOUT_MS = 10_000


def query_path(project_id: str) -> str:
    """Path of the jobs.query endpoint.

    Examples:
        >>> query_path("my-project")
        '/projects/my-project/queries'
    """
    return f"/projects/{project_id}/queries"


def query_results_path(project_id: str, job_id: str) -> str:
    """Path of the jobs.getQueryResults endpoint.

    Examples:
        >>> query_results_path("my-project", "job_1")
        '/projects/my-project/queries/job_1'
    """
    return f"{query_path(project_id)}/{job_id}"


class BigQueryConfig(BaseModel):
    """Attach-time options of a BigQuery connector.

    Attributes:
        project_id: Project the queries run in (billing project)
        default_dataset_id: Dataset unqualified table names resolve against
        use_legacy_sql: Opt into the legacy SQL dialect
        max_results: Page size, for the first page and every continuation
        timeout_ms: Server-side wait for query completion before the first
            page is returned; not a client deadline
        base_url: REST API root
        request_timeout: Client-side total timeout per HTTP request, seconds
    """

    project_id: str = Field(..., min_length=1)
    default_dataset_id: str | None = None
    use_legacy_sql: bool = False
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, gt=0)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0)
    base_url: str = BASE_URL
    request_timeout: float = Field(default=30.0, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @classmethod
    def from_env(cls) -> BigQueryConfig:
        """Load config from environment variables.

        Reads BIGQUERY_PROJECT_ID (required), BIGQUERY_DATASET_ID,
        BIGQUERY_USE_LEGACY_SQL, BIGQUERY_MAX_RESULTS, BIGQUERY_TIMEOUT_MS
        and BIGQUERY_BASE_URL.
        """
        project_id = os.environ.get("BIGQUERY_PROJECT_ID", "").strip()
        if not project_id:
            raise ConfigurationError(
                "BigQuery connector missing required config: BIGQUERY_PROJECT_ID."
            )

        options: dict[str, object] = {"project_id": project_id}
        dataset = os.environ.get("BIGQUERY_DATASET_ID")
        if dataset:
            options["default_dataset_id"] = dataset
        legacy = os.environ.get("BIGQUERY_USE_LEGACY_SQL")
        if legacy:
            options["use_legacy_sql"] = legacy.strip().lower() in ("1", "true", "yes")
        for env_name, key in (
            ("BIGQUERY_MAX_RESULTS", "max_results"),
            ("BIGQUERY_TIMEOUT_MS", "timeout_ms"),
        ):
            value = os.environ.get(env_name)
            if value:
                try:
                    options[key] = int(value)
                except ValueError as e:
                    raise ConfigurationError(f"{env_name} must be an integer, got {value!r}") from e
        base_url = os.environ.get("BIGQUERY_BASE_URL")
        if base_url:
            options["base_url"] = base_url.rstrip("/")

        return cls(**options)
