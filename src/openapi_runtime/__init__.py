"""Request-execution runtime for generated HTTP API clients."""

from ._client import BaseApiClient
from ._config import OpenAPIConfig
from ._services import (
    BaseHttpRequest,
    BaseService,
    HttpxHttpRequest,
    HttpxTransport,
    Transport,
    TransportOptions,
    dispatch,
    request,
    request_either,
)
from ._utils import (
    ApiRequestOptions,
    AsyncProvider,
    CancelablePromise,
    PromiseState,
    Provider,
    StaticValue,
)
from .models import (
    ApiError,
    ApiResult,
    CancelError,
    Either,
    Left,
    RequestBuildError,
    Right,
)

__all__ = [
    "ApiError",
    "ApiRequestOptions",
    "ApiResult",
    "AsyncProvider",
    "BaseApiClient",
    "BaseHttpRequest",
    "BaseService",
    "CancelError",
    "CancelablePromise",
    "Either",
    "HttpxHttpRequest",
    "HttpxTransport",
    "Left",
    "OpenAPIConfig",
    "PromiseState",
    "Provider",
    "RequestBuildError",
    "Right",
    "StaticValue",
    "Transport",
    "TransportOptions",
    "dispatch",
    "request",
    "request_either",
]
