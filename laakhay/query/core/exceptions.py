"""Custom exception hierarchy."""

from __future__ import annotations


class QueryError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(QueryError):
    """Connector configuration is missing or invalid."""

    pass


class DecodeError(QueryError):
    """A row or cell could not be decoded against its schema."""

    pass


class UnsupportedValueError(DecodeError):
    """Cell carries a value the codec refuses to represent.

    Raised for non-finite FLOAT sentinels ("NaN", "Infinity", "-Infinity").
    The offending raw value is kept verbatim on ``value``.
    """

    def __init__(self, value: str, field_name: str | None = None) -> None:
        location = f" in field {field_name!r}" if field_name else ""
        super().__init__(f"Unsupported value {value!r}{location}")
        self.value = value
        self.field_name = field_name


class ProviderError(QueryError):
    """Unexpected response from the query service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
