"""Core components."""

from .base import BaseConnector
from .enums import FieldMode, FieldType, ParameterMode
from .exceptions import (
    ConfigurationError,
    DecodeError,
    ProviderError,
    QueryError,
    UnsupportedValueError,
)

__all__ = [
    "BaseConnector",
    "FieldMode",
    "FieldType",
    "ParameterMode",
    "QueryError",
    "ConfigurationError",
    "DecodeError",
    "UnsupportedValueError",
    "ProviderError",
]
