import asyncio
from logging import getLogger
from typing import Any, Optional

from httpx import Response

from .._config import OpenAPIConfig
from .._utils._auth import resolve_authorization
from .._utils._body import get_form_data, get_headers, get_request_body
from .._utils._cancelable import CancelablePromise, OnCancel
from .._utils._logs import redact_headers
from .._utils._request_spec import ApiRequestOptions, RequestDescriptor
from .._utils._resolver import resolve
from .._utils._url import get_url
from .._utils.constants import DEFAULT_ERROR_MESSAGES, GENERIC_ERROR_MESSAGE
from ..models.either import Either, Left, Right
from ..models.errors import ApiError, RequestBuildError
from ..models.result import ApiResult, Failure, Outcome, Success
from ._transport import Transport, TransportOptions, default_transport

logger = getLogger("openapi_runtime")


def build_url(config: OpenAPIConfig, options: ApiRequestOptions) -> str:
    return get_url(
        config.base,
        options.url,
        options.path,
        options.query,
        version=config.version,
        encode_path=config.encode_path,
    )


def build_request(
    config: OpenAPIConfig,
    options: ApiRequestOptions,
    *,
    authorization: Optional[str] = None,
    default_headers: Optional[dict[str, Any]] = None,
    url: Optional[str] = None,
) -> RequestDescriptor:
    """Turn an operation call into a transport-ready request.

    Args:
        config (OpenAPIConfig): Client configuration (base URL, version, path encoder).
        options (ApiRequestOptions): The operation call.
        authorization (Optional[str]): Resolved Authorization header value.
        default_headers (Optional[dict[str, Any]]): Resolved client-level headers.
        url (Optional[str]): The already rendered URL, if the caller built it.

    Returns:
        RequestDescriptor: The request to send.

    Raises:
        RequestBuildError: If the call's parameters are incomplete or conflicting.
    """
    if options.body is not None and options.form_data is not None:
        raise RequestBuildError("body and form_data are mutually exclusive")

    if url is None:
        url = build_url(config, options)
    headers = get_headers(
        default_headers,
        options.headers,
        options.cookies,
        authorization=authorization,
        body=options.body,
        media_type=options.media_type,
    )

    if options.form_data is not None:
        return RequestDescriptor(
            method=options.method,
            url=url,
            headers=headers,
            files=get_form_data(options.form_data),
        )

    json_body, content = get_request_body(options.body, options.media_type)
    return RequestDescriptor(
        method=options.method,
        url=url,
        headers=headers,
        json=json_body,
        content=content,
    )


def _response_url(response: Response, fallback: str) -> str:
    try:
        return str(response.url)
    except RuntimeError:
        # responses built by hand in custom transports may lack a request
        return fallback


def get_response_body(response: Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            return response.json()
        except ValueError:
            logger.warning(
                f"Response declared {content_type} but is not valid JSON, returning text"
            )
    return response.text


def to_api_result(response: Response, request_url: str) -> ApiResult:
    return ApiResult(
        url=_response_url(response, request_url),
        ok=200 <= response.status_code < 300,
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers),
        body=get_response_body(response),
    )


def catch_error_codes(
    config: OpenAPIConfig, options: ApiRequestOptions, result: ApiResult
) -> Optional[ApiError]:
    """Classify a completed response.

    The message table is built from the built-in defaults, overridden by the
    client's ``error_messages``, overridden by the call's ``errors``.

    Returns:
        Optional[ApiError]: None for 2xx responses, an ApiError otherwise.
    """
    if result.ok:
        return None

    errors = {**DEFAULT_ERROR_MESSAGES, **config.error_messages, **options.errors}
    message = errors.get(result.status, GENERIC_ERROR_MESSAGE)
    return ApiError(options, result, message)


def get_payload(options: ApiRequestOptions, result: ApiResult) -> Any:
    if options.response_header is not None:
        return result.headers.get(options.response_header.lower())
    return result.body


async def _execute(
    config: OpenAPIConfig,
    options: ApiRequestOptions,
    transport: Transport,
    on_cancel: OnCancel,
    url: str,
) -> Outcome:
    authorization = await resolve_authorization(config)
    default_headers = await resolve(config.headers)
    descriptor = build_request(
        config,
        options,
        authorization=authorization,
        default_headers=default_headers,
        url=url,
    )

    signal = asyncio.Event()
    on_cancel(signal.set)

    logger.debug(f"Request: {descriptor.method} {descriptor.url}")
    logger.debug(f"HEADERS: {redact_headers(descriptor.headers)}")

    response = await transport(
        descriptor.url, TransportOptions.from_descriptor(descriptor, signal)
    )
    result = to_api_result(response, descriptor.url)

    logger.debug(f"Response: {result.status} {result.status_text} {result.url}")

    error = catch_error_codes(config, options, result)
    if error is not None:
        return Failure(error)
    return Success(get_payload(options, result))


def dispatch(
    config: OpenAPIConfig,
    options: ApiRequestOptions,
    transport: Optional[Transport] = None,
) -> CancelablePromise[Outcome]:
    """Start a call and return its cancelable, not yet presented, outcome.

    Raises:
        RequestBuildError: Immediately, before anything is scheduled, when the
            URL cannot be rendered.
    """
    send = transport or default_transport
    url = build_url(config, options)

    async def executor(on_cancel: OnCancel) -> Outcome:
        return await _execute(config, options, send, on_cancel, url)

    return CancelablePromise(executor)


def unwrap(outcome: Outcome) -> Any:
    if isinstance(outcome, Failure):
        raise outcome.error
    return outcome.payload


def to_either(outcome: Outcome) -> Either[Any]:
    if isinstance(outcome, Failure):
        return Left(outcome.error)
    return Right(outcome.payload)


def request(
    config: OpenAPIConfig,
    options: ApiRequestOptions,
    transport: Optional[Transport] = None,
) -> CancelablePromise[Any]:
    """Send a call, raising ApiError for non-2xx responses.

    Args:
        config (OpenAPIConfig): The client configuration.
        options (ApiRequestOptions): The operation call.
        transport (Optional[Transport]): Replaces the default httpx transport.

    Returns:
        CancelablePromise[Any]: Resolves to the response payload.

    Examples:
        ```python
        user = await request(config, ApiRequestOptions(method="GET", url="/users/{id}", path={"id": 1}))
        ```
    """
    return dispatch(config, options, transport).then(unwrap)


def request_either(
    config: OpenAPIConfig,
    options: ApiRequestOptions,
    transport: Optional[Transport] = None,
) -> CancelablePromise[Either[Any]]:
    """Send a call, resolving to Right(payload) or Left(ApiError).

    Transport failures and cancellation are still raised.
    """
    return dispatch(config, options, transport).then(to_either)
