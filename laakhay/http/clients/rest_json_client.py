"""Blocking REST client that maps JSON bodies to objects."""

from __future__ import annotations

from typing import Any

from ..core.config import ClientConfig
from ..core.constants import JSON_CONTENT_TYPE
from ..core.mapper import ObjectMapper, PydanticObjectMapper
from ..models import FileResponse, MappedResponse, NoBodyResponse
from ..runtime.base import PathLike
from ..runtime.sync_client import SyncHTTPClient
from .base import deserialize, serialize, to_mapped


class RestJsonClient:
    """REST verbs that serialize request objects and map response bodies.

    Request bodies go through ``mapper.to_json`` before anything is sent, so
    a serialization failure raises ObjectMappingError without touching the
    network. Response bodies are decoded with ``mapper.from_json`` into
    ``out_type``.

    Example:
        >>> client = RestJsonClient(PydanticObjectMapper())
        >>> response = client.get("https://api.example.com/items/1", Item)
        >>> response.body
        Item(id=1, name='a')
    """

    def __init__(
        self,
        mapper: ObjectMapper | None = None,
        config: ClientConfig | None = None,
        *,
        http: SyncHTTPClient | None = None,
    ) -> None:
        self._mapper = mapper or PydanticObjectMapper()
        self._http = http or SyncHTTPClient(config)
        self._http.add_header("Content-Type", JSON_CONTENT_TYPE)

    @property
    def http(self) -> SyncHTTPClient:
        """Underlying transport."""
        return self._http

    @property
    def mapper(self) -> ObjectMapper:
        return self._mapper

    def add_header(self, name: str, value: str) -> None:
        self._http.add_header(name, value)

    def remove_header(self, name: str) -> None:
        self._http.remove_header(name)

    def head(self, url: str) -> NoBodyResponse:
        return self._http.head(url)

    def get(self, url: str, out_type: Any) -> MappedResponse:
        response = self._http.get_string(url)
        return to_mapped(response, deserialize(self._mapper, response.body, out_type))

    def post(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        response = self._http.post_string(url, serialize(self._mapper, body))
        return to_mapped(response, deserialize(self._mapper, response.body, out_type))

    def put(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        response = self._http.put_string(url, serialize(self._mapper, body))
        return to_mapped(response, deserialize(self._mapper, response.body, out_type))

    def patch(self, url: str, body: Any, out_type: Any) -> MappedResponse:
        response = self._http.patch_string(url, serialize(self._mapper, body))
        return to_mapped(response, deserialize(self._mapper, response.body, out_type))

    def delete(self, url: str, out_type: Any) -> MappedResponse:
        response = self._http.delete_string(url)
        return to_mapped(response, deserialize(self._mapper, response.body, out_type))

    def download_file(self, url: str, path: PathLike) -> FileResponse:
        return self._http.get_file(url, path)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> RestJsonClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
