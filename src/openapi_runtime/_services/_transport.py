import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from httpx import AsyncClient, Response

from .._utils._request_spec import RequestDescriptor


@dataclass
class TransportOptions:
    """Everything a transport needs besides the URL.

    ``signal`` is set when the caller cancels the call. Transports that manage
    their own resources can wait on it; the in-flight task is cancelled either
    way.
    """

    method: str
    headers: dict[str, str]
    json: Optional[Any] = None
    content: Optional[bytes] = None
    files: Optional[list[tuple[str, Any]]] = None
    signal: asyncio.Event = field(default_factory=asyncio.Event)

    @classmethod
    def from_descriptor(
        cls, descriptor: RequestDescriptor, signal: asyncio.Event
    ) -> "TransportOptions":
        return cls(
            method=descriptor.method,
            headers=dict(descriptor.headers),
            json=descriptor.json,
            content=descriptor.content,
            files=descriptor.files,
            signal=signal,
        )


class Transport(Protocol):
    async def __call__(self, url: str, options: TransportOptions) -> Response: ...


class HttpxTransport:
    """Default transport, backed by ``httpx.AsyncClient``.

    Without a client, a short-lived one is opened for every call, much like a
    bare ``fetch``. Pass a client to reuse its connection pool, proxies or
    timeouts; its lifecycle stays with the caller.
    """

    def __init__(self, client: Optional[AsyncClient] = None) -> None:
        self._client = client

    async def __call__(self, url: str, options: TransportOptions) -> Response:
        if self._client is not None:
            return await self._send(self._client, url, options)

        async with AsyncClient() as client:
            return await self._send(client, url, options)

    async def _send(
        self, client: AsyncClient, url: str, options: TransportOptions
    ) -> Response:
        return await client.request(
            options.method,
            url,
            headers=options.headers,
            json=options.json,
            content=options.content,
            files=options.files,
        )


default_transport = HttpxTransport()
