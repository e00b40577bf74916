"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestResponse, RestRunner
from .transport import RESTTransport, TransportResponse

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "TransportResponse",
    "RestRunner",
    "RestEndpointSpec",
    "RestResponse",
    "ResponseAdapter",
]
