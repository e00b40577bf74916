"""REST transport bound to a service base URL."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .http_client import HTTPClient


@dataclass(frozen=True)
class TransportResponse:
    status: int
    body: Any


class RESTTransport:
    """Thin REST layer over HTTPClient returning status and JSON body."""

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self._client = HTTPClient(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str | None:
        return self._client.base_url

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        status, body = await self._client.get(path, params=params, headers=headers)
        return TransportResponse(status=status, body=body)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        status, body = await self._client.post(path, json=json_body, headers=headers)
        return TransportResponse(status=status, body=body)

    async def close(self) -> None:
        await self._client.close()
