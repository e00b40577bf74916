"""BigQuery connector implementation."""

from .config import BASE_URL, BigQueryConfig
from .rest.provider import BigQueryRESTConnector

__all__ = [
    "BASE_URL",
    "BigQueryConfig",
    "BigQueryRESTConnector",
]
