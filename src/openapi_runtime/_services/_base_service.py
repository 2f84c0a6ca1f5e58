from logging import getLogger
from typing import Any

from .._utils._cancelable import CancelablePromise
from .._utils._request_spec import ApiRequestOptions
from ..models.either import Either
from ._http_request import BaseHttpRequest


class BaseService:
    """
    Base class for generated service wrappers.

    Each operation is emitted twice, ``operation`` and ``operation_either``,
    both building the same ``ApiRequestOptions`` and delegating to the
    client's ``BaseHttpRequest``.
    """

    def __init__(self, http_request: BaseHttpRequest) -> None:
        self._logger = getLogger("openapi_runtime")
        self.http_request = http_request

    def _request(self, options: ApiRequestOptions) -> CancelablePromise[Any]:
        self._logger.debug(f"{type(self).__name__}: {options.method} {options.url}")
        return self.http_request.request(options)

    def _request_either(
        self, options: ApiRequestOptions
    ) -> CancelablePromise[Either[Any]]:
        self._logger.debug(f"{type(self).__name__}: {options.method} {options.url}")
        return self.http_request.request_either(options)
