"""BigQuery REST connector.

This connector runs SQL through the jobs.query endpoint and exposes the
rows of every result page as one lazy async stream.

Architecture:
    Endpoint specs and adapters come from the endpoint registry; requests
    go through RestRunner, which attaches a bearer token from the
    TokenProvider to every call, continuation pages included.
"""

from __future__ import annotations

from collections.abc import Sequence
from time import perf_counter
from typing import Any

from laakhay.query.connectors.bigquery.config import BigQueryConfig
from laakhay.query.core import BaseConnector
from laakhay.query.models import QueryResponse, Result
from laakhay.query.runtime.auth import TokenProvider
from laakhay.query.runtime.rest import RestRunner, RESTTransport
from laakhay.query.runtime.telemetry import log_query_submitted

from .endpoints import QueryAdapter, get_endpoint_adapter, get_endpoint_spec


class BigQueryRESTConnector(BaseConnector):
    """BigQuery REST connector.

    Example:
        >>> connector = BigQueryRESTConnector(
        ...     BigQueryConfig(project_id="my-project", default_dataset_id="iris_data"),
        ...     token_provider=GoogleAuthTokenProvider(),
        ... )
        >>> async with connector:
        ...     response = await connector.query("select * from iris where species = ?", ["setosa"])
        ...     async for row in response.body.rows:
        ...         print(row)
    """

    def __init__(
        self,
        config: BigQueryConfig,
        *,
        token_provider: TokenProvider,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize BigQuery REST connector.

        Args:
            config: Attach-time options (project, dataset, page size, ...)
            token_provider: Source of bearer tokens
            transport: Optional transport, created from config when omitted
        """
        super().__init__("bigquery")
        self.config = config
        self._transport = transport or RESTTransport(
            base_url=config.base_url, timeout=config.request_timeout
        )
        self._runner = RestRunner(self._transport, token_provider)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Run a registered endpoint with the connector's options applied.

        Args:
            endpoint_id: Endpoint identifier ("query" or "query_results")
            params: Request parameters

        Returns:
            RestResponse with the adapter's parsed body

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {**self._base_params(), **params}
        adapter = QueryAdapter(self._runner) if adapter_cls is QueryAdapter else adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def query(self, sql: str, params: Sequence[Any] | None = None) -> QueryResponse:
        """Run a SQL statement.

        Args:
            sql: Statement text; ``?`` marks positional placeholders
            params: Positional parameter values

        Returns:
            QueryResponse whose body is a Result on success, otherwise the
            service payload as received
        """
        self.validate_sql(sql)
        query_params = list(params or [])

        start = perf_counter()
        response = await self.fetch("query", {"sql": sql, "query_params": query_params})
        latency_ms = (perf_counter() - start) * 1000.0

        body = response.body
        log_query_submitted(
            project_id=self.config.project_id,
            parameter_count=len(query_params),
            status=response.status,
            job_id=body.job_id if isinstance(body, Result) else None,
            latency_ms=latency_ms,
        )
        return QueryResponse(status=response.status, body=body)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    def _base_params(self) -> dict[str, Any]:
        return {
            "project_id": self.config.project_id,
            "default_dataset": self.config.default_dataset_id,
            "use_legacy_sql": self.config.use_legacy_sql,
            "max_results": self.config.max_results,
            "timeout_ms": self.config.timeout_ms,
        }
