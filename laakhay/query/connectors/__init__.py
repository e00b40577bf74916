"""Query service connectors."""

from .bigquery import BigQueryConfig, BigQueryRESTConnector

__all__ = [
    "BigQueryConfig",
    "BigQueryRESTConnector",
]
