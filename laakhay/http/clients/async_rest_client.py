"""Async REST client with plain string bodies."""

from __future__ import annotations

from ..core.config import ClientConfig
from ..core.constants import JSON_CONTENT_TYPE
from ..models import FileResponse, NoBodyResponse, StringResponse
from ..runtime.async_client import AsyncHTTPClient
from ..runtime.base import PathLike


class AsyncRestClient:
    """One-call REST verbs over an AsyncHTTPClient.

    Every verb is a coroutine; failures surface when it is awaited.
    """

    def __init__(self, config: ClientConfig | None = None, *, http: AsyncHTTPClient | None = None) -> None:
        self._http = http or AsyncHTTPClient(config)
        self._http.add_header("Content-Type", JSON_CONTENT_TYPE)

    @property
    def http(self) -> AsyncHTTPClient:
        """Underlying transport."""
        return self._http

    def add_header(self, name: str, value: str) -> None:
        self._http.add_header(name, value)

    def remove_header(self, name: str) -> None:
        self._http.remove_header(name)

    async def head(self, url: str) -> NoBodyResponse:
        return await self._http.head(url)

    async def get(self, url: str) -> StringResponse:
        return await self._http.get_string(url)

    async def post(self, url: str, body: str) -> StringResponse:
        return await self._http.post_string(url, body)

    async def put(self, url: str, body: str) -> StringResponse:
        return await self._http.put_string(url, body)

    async def patch(self, url: str, body: str) -> StringResponse:
        return await self._http.patch_string(url, body)

    async def delete(self, url: str) -> StringResponse:
        return await self._http.delete_string(url)

    async def download_file(self, url: str, path: PathLike) -> FileResponse:
        return await self._http.get_file(url, path)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> AsyncRestClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
