"""Core enumerations for schema and parameter types.

Architecture:
    Field types and modes arrive from the query service as plain strings.
    These enums give them a closed, typed vocabulary that the codec
    dispatches on, while still tolerating names the library does not know
    yet (``from_str`` returns None instead of raising).

Design Decisions:
    - String enums: values compare equal to the wire strings
    - Aliases: standard-dialect names (INT64, FLOAT64, BOOL, STRUCT) are
      members of their own, mapped onto a canonical member by ``canonical``
"""

from enum import Enum
from typing import Optional


class FieldType(str, Enum):
    """Wire type tag of a schema field or query parameter."""

    FLOAT = "FLOAT"
    FLOAT64 = "FLOAT64"
    INTEGER = "INTEGER"
    INT64 = "INT64"
    NUMERIC = "NUMERIC"
    BIGNUMERIC = "BIGNUMERIC"
    BOOLEAN = "BOOLEAN"
    BOOL = "BOOL"
    STRING = "STRING"
    BYTES = "BYTES"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    RECORD = "RECORD"
    STRUCT = "STRUCT"
    GEOGRAPHY = "GEOGRAPHY"
    JSON = "JSON"
    INTERVAL = "INTERVAL"

    @property
    def canonical(self) -> "FieldType":
        """Legacy-dialect member this type decodes as."""
        return _ALIASES.get(self, self)

    @classmethod
    def from_str(cls, value: str | None) -> Optional["FieldType"]:
        """Get type from wire string. Returns None if no match."""
        if not value:
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None


_ALIASES = {
    FieldType.FLOAT64: FieldType.FLOAT,
    FieldType.INT64: FieldType.INTEGER,
    FieldType.BOOL: FieldType.BOOLEAN,
    FieldType.STRUCT: FieldType.RECORD,
}


class FieldMode(str, Enum):
    """Repetition mode of a schema field."""

    NULLABLE = "NULLABLE"
    REQUIRED = "REQUIRED"
    REPEATED = "REPEATED"

    @classmethod
    def from_str(cls, value: str | None) -> "FieldMode":
        """Get mode from wire string, defaulting to NULLABLE."""
        if not value:
            return cls.NULLABLE
        try:
            return cls(value.upper())
        except ValueError:
            return cls.NULLABLE


class ParameterMode(str, Enum):
    """How query parameters bind to placeholders."""

    POSITIONAL = "POSITIONAL"
    NAMED = "NAMED"
