"""BigQuery REST connector and endpoints."""

from .provider import BigQueryRESTConnector

__all__ = ["BigQueryRESTConnector"]
