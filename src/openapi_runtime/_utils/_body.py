import json
from typing import IO, Any, Optional, Union

from .constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_COOKIE,
    MEDIA_TYPE_JSON,
    MEDIA_TYPE_OCTET_STREAM,
)

BinaryContent = Union[bytes, bytearray, IO[bytes]]


def _is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) or hasattr(value, "read")


def merge_headers(*layers: Optional[dict[str, Any]]) -> dict[str, str]:
    """Merge header mappings left to right, later layers winning.

    Header names compare case-insensitively; the spelling of the winning
    layer is kept. A ``None`` value removes the header.
    """
    merged: dict[str, tuple[str, str]] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            if value is None:
                merged.pop(name.lower(), None)
                continue
            merged[name.lower()] = (name, str(value))
    return dict(merged.values())


def get_cookie_header(cookies: dict[str, Any]) -> Optional[str]:
    parts = [f"{name}={value}" for name, value in cookies.items() if value is not None]
    return "; ".join(parts) if parts else None


def get_headers(
    default_headers: Optional[dict[str, Any]],
    call_headers: dict[str, Any],
    cookies: dict[str, Any],
    *,
    authorization: Optional[str],
    body: Any = None,
    media_type: Optional[str] = None,
) -> dict[str, str]:
    headers = merge_headers(
        {HEADER_ACCEPT: MEDIA_TYPE_JSON},
        default_headers,
        call_headers,
    )

    cookie = get_cookie_header(cookies)
    if cookie is not None:
        headers = merge_headers(headers, {HEADER_COOKIE: cookie})

    if authorization is not None:
        headers = merge_headers(headers, {HEADER_AUTHORIZATION: authorization})

    if body is not None:
        content_type: Optional[str] = media_type
        if content_type is None:
            if _is_binary(body):
                content_type = MEDIA_TYPE_OCTET_STREAM
            else:
                content_type = MEDIA_TYPE_JSON
        if HEADER_CONTENT_TYPE.lower() not in {name.lower() for name in headers}:
            headers[HEADER_CONTENT_TYPE] = content_type

    return headers


def get_request_body(
    body: Any, media_type: Optional[str]
) -> tuple[Optional[Any], Optional[bytes]]:
    """Split a body into (json, content) for the transport.

    Binary bodies, and string bodies sent with an explicit non-JSON media type,
    travel as raw content. Everything else is JSON encoded.
    """
    if body is None:
        return None, None
    if isinstance(body, (bytes, bytearray)):
        return None, bytes(body)
    if hasattr(body, "read"):
        return None, body.read()
    if isinstance(body, str) and media_type is not None and "json" not in media_type:
        return None, body.encode("utf-8")
    return body, None


def get_form_data(form_data: dict[str, Any]) -> list[tuple[str, Any]]:
    """Encode form fields as multipart parts, one part per value.

    Returns:
        list[tuple[str, Any]]: Entries in the ``files=`` shape httpx expects.
        Plain fields carry no filename so they are sent as ordinary form parts.
    """
    parts: list[tuple[str, Any]] = []

    def process(key: str, value: Any) -> None:
        if isinstance(value, str):
            parts.append((key, (None, value)))
        elif _is_binary(value):
            parts.append((key, ("blob", value, MEDIA_TYPE_OCTET_STREAM)))
        else:
            parts.append((key, (None, json.dumps(value))))

    for key, value in form_data.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                process(key, item)
        else:
            process(key, value)

    return parts
