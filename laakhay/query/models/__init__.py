"""Data models for schemas and query results.

Architecture:
    Field descriptors are Pydantic v2 models, frozen so a schema read from
    the first page cannot change while later pages are decoded against it.
    Result containers are frozen dataclasses because they carry a live row
    stream that Pydantic has no reason to validate.
"""

from .field_schema import FieldSchema
from .result import QueryResponse, Result

__all__ = [
    "FieldSchema",
    "QueryResponse",
    "Result",
]
