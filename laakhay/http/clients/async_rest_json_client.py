"""Async REST client that maps JSON bodies to objects."""

from __future__ import annotations

import asyncio
from typing import Any

from ..core.config import ClientConfig
from ..core.constants import JSON_CONTENT_TYPE
from ..core.mapper import ObjectMapper, PydanticObjectMapper
from ..models import FileResponse, MappedResponse, NoBodyResponse, StringResponse
from ..runtime.async_client import AsyncHTTPClient
from ..runtime.base import PathLike
from .base import deserialize, serialize, to_mapped


class AsyncRestJsonClient:
    """Async REST verbs that serialize request objects and map response bodies.

    A mapping failure, on either side of the exchange, is raised as
    ObjectMappingError out of the awaited call. Serialization runs before
    the request is issued. When ``config.executor`` is set, response
    decoding runs in it instead of on the event loop.
    """

    def __init__(
        self,
        mapper: ObjectMapper | None = None,
        config: ClientConfig | None = None,
        *,
        http: AsyncHTTPClient | None = None,
    ) -> None:
        self._mapper = mapper or PydanticObjectMapper()
        self._http = http or AsyncHTTPClient(config)
        self._http.add_header("Content-Type", JSON_CONTENT_TYPE)

    @property
    def http(self) -> AsyncHTTPClient:
        """Underlying transport."""
        return self._http

    @property
    def mapper(self) -> ObjectMapper:
        return self._mapper

    def add_header(self, name: str, value: str) -> None:
        self._http.add_header(name, value)

    def remove_header(self, name: str) -> None:
        self._http.remove_header(name)

    async def _map(self, response: StringResponse, out_type: Any) -> MappedResponse:
        executor = self._http.config.executor
        if executor is None:
            body = deserialize(self._mapper, response.body, out_type)
        else:
            loop = asyncio.get_running_loop()
            body = await loop.run_in_executor(executor, deserialize, self._mapper, response.body, out_type)
        return to_mapped(response, body)

    async def head(self, url: str) -> NoBodyResponse:
        return await self._http.head(url)

    async def get(self, url: str, out_type: Any) -> MappedResponse:
        return await self._map(await self._http.get_string(url), out_type)

    async def post(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        payload = serialize(self._mapper, body)
        return await self._map(await self._http.post_string(url, payload), out_type)

    async def put(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        payload = serialize(self._mapper, body)
        return await self._map(await self._http.put_string(url, payload), out_type)

    async def patch(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        payload = serialize(self._mapper, body)
        return await self._map(await self._http.patch_string(url, payload), out_type)

    async def delete(self, url: str, out_type: Any) -> MappedResponse:
        return await self._map(await self._http.delete_string(url), out_type)

    async def download_file(self, url: str, path: PathLike) -> FileResponse:
        return await self._http.get_file(url, path)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> AsyncRestJsonClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
