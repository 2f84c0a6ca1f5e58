from typing import Any, Optional

from openapi_runtime import (
    ApiRequestOptions,
    BaseService,
    CancelablePromise,
    Either,
)


def _call_with_parameters_options(
    parameter_header: Optional[str],
    parameter_query: Optional[str],
    parameter_form: Optional[str],
    parameter_cookie: Optional[str],
    parameter_path: Optional[str],
) -> ApiRequestOptions:
    return ApiRequestOptions(
        method="POST",
        url="/api/v{api-version}/parameters/{parameterPath}",
        path={"parameterPath": parameter_path},
        cookies={"parameterCookie": parameter_cookie},
        headers={"parameterHeader": parameter_header},
        query={"parameterQuery": parameter_query},
        form_data={"parameterForm": parameter_form},
    )


def _call_with_body_options(
    parameter_path: Optional[str], request_body: Any
) -> ApiRequestOptions:
    return ApiRequestOptions(
        method="PUT",
        url="/api/v{api-version}/parameters/{parameterPath}",
        path={"parameterPath": parameter_path},
        body=request_body,
        media_type="application/json",
    )


class ParametersService(BaseService):
    def call_with_parameters(
        self,
        parameter_header: Optional[str],
        parameter_query: Optional[str],
        parameter_form: Optional[str],
        parameter_cookie: Optional[str],
        parameter_path: Optional[str],
    ) -> CancelablePromise[Any]:
        return self._request(
            _call_with_parameters_options(
                parameter_header,
                parameter_query,
                parameter_form,
                parameter_cookie,
                parameter_path,
            )
        )

    def call_with_parameters_either(
        self,
        parameter_header: Optional[str],
        parameter_query: Optional[str],
        parameter_form: Optional[str],
        parameter_cookie: Optional[str],
        parameter_path: Optional[str],
    ) -> CancelablePromise[Either[Any]]:
        return self._request_either(
            _call_with_parameters_options(
                parameter_header,
                parameter_query,
                parameter_form,
                parameter_cookie,
                parameter_path,
            )
        )

    def call_with_body(
        self, parameter_path: Optional[str], request_body: Any
    ) -> CancelablePromise[Any]:
        return self._request(_call_with_body_options(parameter_path, request_body))

    def call_with_body_either(
        self, parameter_path: Optional[str], request_body: Any
    ) -> CancelablePromise[Either[Any]]:
        return self._request_either(
            _call_with_body_options(parameter_path, request_body)
        )
