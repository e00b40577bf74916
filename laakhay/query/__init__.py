"""Laakhay Query - typed SQL query service client with lazy paginated results."""

from .codec import EncodedValue, decode, decode_row, encode, encode_parameter
from .connectors.bigquery import BASE_URL, BigQueryConfig, BigQueryRESTConnector
from .core import (
    BaseConnector,
    ConfigurationError,
    DecodeError,
    FieldMode,
    FieldType,
    ParameterMode,
    ProviderError,
    QueryError,
    UnsupportedValueError,
)
from .models import FieldSchema, QueryResponse, Result
from .runtime import (
    GoogleAuthTokenProvider,
    PageState,
    RowStream,
    StaticTokenProvider,
    TokenProvider,
)

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "FieldType",
    "FieldMode",
    "ParameterMode",
    # Connectors
    "BaseConnector",
    "BigQueryConfig",
    "BigQueryRESTConnector",
    "BASE_URL",
    # Models
    "FieldSchema",
    "QueryResponse",
    "Result",
    # Codec
    "EncodedValue",
    "encode",
    "encode_parameter",
    "decode",
    "decode_row",
    # Runtime
    "RowStream",
    "PageState",
    "TokenProvider",
    "StaticTokenProvider",
    "GoogleAuthTokenProvider",
    # Exceptions
    "QueryError",
    "ConfigurationError",
    "DecodeError",
    "UnsupportedValueError",
    "ProviderError",
]
