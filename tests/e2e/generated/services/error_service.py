from typing import Any, Optional

from openapi_runtime import (
    ApiRequestOptions,
    BaseService,
    CancelablePromise,
    Either,
)


def _test_error_code_options(status: Optional[int]) -> ApiRequestOptions:
    return ApiRequestOptions(
        method="POST",
        url="/api/v{api-version}/error",
        query={"status": status},
        errors={
            500: "Custom message: Internal Server Error",
            501: "Custom message: Not Implemented",
            502: "Custom message: Bad Gateway",
            503: "Custom message: Service Unavailable",
        },
    )


class ErrorService(BaseService):
    def test_error_code(self, status: Optional[int]) -> CancelablePromise[Any]:
        return self._request(_test_error_code_options(status))

    def test_error_code_either(
        self, status: Optional[int]
    ) -> CancelablePromise[Either[Any]]:
        return self._request_either(_test_error_code_options(status))
