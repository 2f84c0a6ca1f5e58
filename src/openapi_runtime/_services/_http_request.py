from abc import ABC, abstractmethod
from typing import Any, Optional

from httpx import AsyncClient

from .._config import OpenAPIConfig
from .._utils._cancelable import CancelablePromise
from .._utils._request_spec import ApiRequestOptions
from ..models.either import Either
from ..models.result import Outcome
from ._request import dispatch, to_either, unwrap
from ._transport import HttpxTransport


class BaseHttpRequest(ABC):
    """The seam between generated services and the network.

    ``dispatch`` is the single override point: both presentation modes are
    derived from it, so a subclass that swaps the transport there (e.g. to
    instrument every call a client makes) changes both at once.

    Examples:
        ```python
        class InstrumentedHttpRequest(BaseHttpRequest):
            def dispatch(self, options):
                return dispatch(self.config, options, counting_transport)

        client = ApiClient(http_request=InstrumentedHttpRequest)
        ```
    """

    def __init__(self, config: OpenAPIConfig) -> None:
        self.config = config

    @abstractmethod
    def dispatch(self, options: ApiRequestOptions) -> CancelablePromise[Outcome]: ...

    def request(self, options: ApiRequestOptions) -> CancelablePromise[Any]:
        """Resolve to the payload, raise ApiError on a non-2xx response."""
        return self.dispatch(options).then(unwrap)

    def request_either(
        self, options: ApiRequestOptions
    ) -> CancelablePromise[Either[Any]]:
        """Resolve to Right(payload) or Left(ApiError)."""
        return self.dispatch(options).then(to_either)


class HttpxHttpRequest(BaseHttpRequest):
    """Default implementation, sending through ``httpx.AsyncClient``."""

    def __init__(
        self, config: OpenAPIConfig, client: Optional[AsyncClient] = None
    ) -> None:
        super().__init__(config)
        self._transport = HttpxTransport(client)

    def dispatch(self, options: ApiRequestOptions) -> CancelablePromise[Outcome]:
        return dispatch(self.config, options, self._transport)
