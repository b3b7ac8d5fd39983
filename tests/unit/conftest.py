"""Stub engines shared by the unit tests.

The transports are exercised end to end with their engine session replaced:
``requests.Session`` by a MagicMock returning real ``requests.Response``
objects, ``aiohttp.ClientSession`` by a MagicMock returning async context
manager mocks.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from multidict import CIMultiDict
from requests import Response
from requests.structures import CaseInsensitiveDict

from laakhay.http.runtime import AsyncHTTPClient, SyncHTTPClient


class ChunkStream:
    """Stand-in for ``aiohttp.StreamReader``. Exception items are raised."""

    def __init__(self, chunks: list[bytes | Exception]) -> None:
        self._chunks = chunks

    async def iter_chunked(self, size: int):
        for chunk in self._chunks:
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk


@pytest.fixture
def make_sync_response():
    def _make(
        status: int = 200,
        body: bytes = b"",
        headers: dict[str, str] | None = None,
        url: str = "https://api.example.com/items",
    ) -> Response:
        response = Response()
        response.status_code = status
        response._content = body
        response._content_consumed = True
        response.headers = CaseInsensitiveDict(headers or {})
        response.url = url
        return response

    return _make


@pytest.fixture
def make_async_response():
    def _make(
        status: int = 200,
        body: bytes = b"",
        headers: list[tuple[str, str]] | None = None,
        chunks: list[bytes | Exception] | None = None,
    ) -> AsyncMock:
        response = AsyncMock()
        response.status = status
        response.headers = CIMultiDict(headers or [])
        response.read = AsyncMock(return_value=body)
        response.content = ChunkStream(chunks if chunks is not None else [body])
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=None)
        return response

    return _make


@pytest.fixture
def stub_sync_http():
    def _stub(*responses, config=None) -> SyncHTTPClient:
        client = SyncHTTPClient(config)
        session = MagicMock()
        session.request = MagicMock(side_effect=list(responses))
        client._session = session
        return client

    return _stub


@pytest.fixture
def stub_async_http():
    def _stub(*responses, config=None) -> AsyncHTTPClient:
        client = AsyncHTTPClient(config)
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.request = MagicMock(side_effect=list(responses))
        client._session = session
        return client

    return _stub
