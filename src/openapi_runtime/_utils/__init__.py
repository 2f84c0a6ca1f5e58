from ._cancelable import CancelablePromise, PromiseState
from ._logs import setup_logging
from ._request_spec import ApiRequestOptions, RequestDescriptor
from ._resolver import AsyncProvider, Provider, Resolver, StaticValue

__all__ = [
    "ApiRequestOptions",
    "AsyncProvider",
    "CancelablePromise",
    "PromiseState",
    "Provider",
    "RequestDescriptor",
    "Resolver",
    "StaticValue",
    "setup_logging",
]
