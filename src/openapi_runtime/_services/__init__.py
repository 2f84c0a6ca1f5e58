from ._base_service import BaseService
from ._http_request import BaseHttpRequest, HttpxHttpRequest
from ._request import (
    build_request,
    catch_error_codes,
    dispatch,
    request,
    request_either,
)
from ._transport import HttpxTransport, Transport, TransportOptions

__all__ = [
    "BaseService",
    "BaseHttpRequest",
    "HttpxHttpRequest",
    "HttpxTransport",
    "Transport",
    "TransportOptions",
    "build_request",
    "catch_error_codes",
    "dispatch",
    "request",
    "request_either",
]
