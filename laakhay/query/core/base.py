"""Base connector abstract class.

Architecture:
    This module defines the BaseConnector abstract base class that query
    service connectors implement. It provides:
    - Abstract methods for core operations (query, close)
    - Async context manager support

Design Decisions:
    - Abstract base class: Enforces a consistent interface across connectors
    - Async context manager: Ensures HTTP sessions are released

See Also:
    - BigQueryRESTConnector: REST implementation for BigQuery
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models import QueryResponse


class BaseConnector(ABC):
    """Abstract base class for query service connectors."""

    def __init__(self, name: str) -> None:
        """Initialize connector.

        Connectors are identified by name. Session management is left to
        subclasses.
        """
        self.name = name

    @abstractmethod
    async def query(self, sql: str, params: Sequence[Any] | None = None) -> QueryResponse:
        """Run a SQL statement, optionally with positional parameters."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections and cleanup resources."""
        pass

    def validate_sql(self, sql: str) -> None:
        """Validate statement text. Override if needed."""
        if not sql or not isinstance(sql, str):
            raise ValueError("SQL must be a non-empty string")

    async def __aenter__(self) -> BaseConnector:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
