import json
from typing import Any, Callable

import httpx
import pytest
from pytest_httpx import HTTPXMock

from openapi_runtime import OpenAPIConfig

MOCK_SERVER_BASE = "http://localhost:3000/base"
MOCK_SERVER_VERSION = "1.0"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return MOCK_SERVER_BASE


@pytest.fixture
def version() -> str:
    return MOCK_SERVER_VERSION


@pytest.fixture
def secret() -> str:
    return "secret_access_token"


@pytest.fixture
def config(base_url: str, version: str, secret: str) -> OpenAPIConfig:
    return OpenAPIConfig(BASE=base_url, VERSION=version, TOKEN=secret)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables read by ``BaseApiClient.from_env``."""
    for name in (
        "OPENAPI_BASE",
        "OPENAPI_VERSION",
        "OPENAPI_TOKEN",
        "OPENAPI_USERNAME",
        "OPENAPI_PASSWORD",
    ):
        # set first so values a .env file loads later are undone as well
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def _echo(request: httpx.Request) -> httpx.Response:
    request.read()
    content_type = request.headers.get("content-type", "")
    if "json" in content_type:
        body: Any = json.loads(request.content)
    else:
        body = request.content.decode("utf-8", errors="replace")

    return httpx.Response(
        200,
        json={
            "method": request.method,
            "url": str(request.url),
            "path": request.url.path,
            "query": dict(request.url.params.multi_items()),
            "headers": dict(request.headers),
            "body": body,
        },
    )


def _error(request: httpx.Request) -> httpx.Response:
    status = int(request.url.params["status"])
    return httpx.Response(status, json={"status": status, "message": "hello world"})


def mock_server_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for the test API server.

    ``/error?status=N`` answers with status N, every other route echoes the
    request it received.
    """
    if request.url.path.endswith("/error"):
        return _error(request)
    return _echo(request)


@pytest.fixture
def mock_server(httpx_mock: HTTPXMock) -> Callable[[httpx.Request], httpx.Response]:
    httpx_mock.add_callback(mock_server_handler, is_reusable=True, is_optional=True)
    return mock_server_handler
