"""Runtime: REST execution, authentication and row streaming."""

from .auth import GoogleAuthTokenProvider, StaticTokenProvider, TokenProvider
from .pagination import Page, PageState, RowStream
from .rest import (
    HTTPClient,
    ResponseAdapter,
    RestEndpointSpec,
    RestResponse,
    RestRunner,
    RESTTransport,
    TransportResponse,
)

__all__ = [
    "GoogleAuthTokenProvider",
    "StaticTokenProvider",
    "TokenProvider",
    "Page",
    "PageState",
    "RowStream",
    "HTTPClient",
    "RESTTransport",
    "TransportResponse",
    "RestRunner",
    "RestEndpointSpec",
    "RestResponse",
    "ResponseAdapter",
]
