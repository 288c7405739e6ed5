from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

import httpx

from skinsync.config.http_client import HttpClientConfig

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, TimeoutTypes, URLTypes

__all__ = ["AsyncClientOptions", "HttpClient", "HttpClientConfig"]


class AsyncClientOptions(TypedDict, total=False):
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport
    follow_redirects: bool


class HttpClient:
    """Async httpx client bound to a :class:`HttpClientConfig`.

    Each connect, read, write and pool phase is bounded by the configured
    timeout; failures surface as ``httpx`` exceptions without retrying.
    """

    def __init__(
        self,
        config: HttpClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "follow_redirects": True,
        }
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: URLTypes) -> httpx.Response:
        return await self._client.get(url)
