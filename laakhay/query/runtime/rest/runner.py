"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .transport import RESTTransport

if TYPE_CHECKING:
    from ..auth import TokenProvider


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


@dataclass(frozen=True)
class RestResponse:
    status: int
    body: Any


class RestRunner:
    """Executes endpoint specs, attaching a fresh bearer token to every call."""

    def __init__(self, transport: RESTTransport, token_provider: TokenProvider) -> None:
        self._t = transport
        self._tokens = token_provider

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> RestResponse:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = dict(spec.build_headers(params)) if spec.build_headers else {}

        token = await self._tokens.fetch_token()
        headers["Authorization"] = f"Bearer {token}"

        if spec.method.upper() == "GET":
            response = await self._t.get(path, params=query, headers=headers)
        else:
            response = await self._t.post(path, json_body=body, headers=headers)

        return RestResponse(status=response.status, body=adapter.parse(response.body, params))
