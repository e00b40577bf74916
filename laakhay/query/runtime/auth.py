"""Bearer token providers.

Architecture:
    The runner asks a TokenProvider for a token before every request, the
    initial query and each continuation page alike. Caching and refresh are
    the provider's business.

See Also:
    - RestRunner: Adds the ``Authorization: Bearer <token>`` header
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

BIGQUERY_SCOPES = ("https://www.googleapis.com/auth/bigquery",)


@runtime_checkable
class TokenProvider(Protocol):
    """Source of OAuth2 bearer tokens."""

    async def fetch_token(self) -> str: ...


class StaticTokenProvider:
    """Always hands out the same token (tests, short-lived scripts)."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("Token must be a non-empty string")
        self._token = token

    async def fetch_token(self) -> str:
        return self._token


class GoogleAuthTokenProvider:
    """Token provider backed by google-auth credentials.

    Uses Application Default Credentials unless explicit credentials are
    given. Credentials are refreshed in a worker thread only when they are
    missing a token or expired.

    Requires the ``google`` extra (``google-auth[requests]``).
    """

    def __init__(
        self,
        credentials: Any | None = None,
        scopes: Sequence[str] = BIGQUERY_SCOPES,
    ) -> None:
        self._credentials = credentials
        self._scopes = tuple(scopes)
        self._lock = asyncio.Lock()

    @classmethod
    def from_service_account_file(
        cls, path: str, scopes: Sequence[str] = BIGQUERY_SCOPES
    ) -> GoogleAuthTokenProvider:
        """Create provider from a service account JSON key file."""
        from google.oauth2 import service_account

        credentials = service_account.Credentials.from_service_account_file(
            path, scopes=list(scopes)
        )
        return cls(credentials=credentials, scopes=scopes)

    async def fetch_token(self) -> str:
        async with self._lock:
            if self._credentials is None:
                self._credentials = await asyncio.to_thread(self._default_credentials)
            if not self._credentials.valid:
                await asyncio.to_thread(self._refresh)
                logger.debug("token_refreshed")
            return self._credentials.token

    def _default_credentials(self) -> Any:
        import google.auth

        credentials, _project = google.auth.default(scopes=list(self._scopes))
        return credentials

    def _refresh(self) -> None:
        from google.auth.transport.requests import Request

        self._credentials.refresh(Request())
