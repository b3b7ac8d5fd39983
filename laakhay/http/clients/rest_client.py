"""Blocking REST client with plain string bodies."""

from __future__ import annotations

from ..core.config import ClientConfig
from ..core.constants import JSON_CONTENT_TYPE
from ..models import FileResponse, NoBodyResponse, StringResponse
from ..runtime.base import PathLike
from ..runtime.sync_client import SyncHTTPClient


class RestClient:
    """One-call REST verbs over a SyncHTTPClient.

    Sends ``Content-Type: application/json`` by default; override it with
    ``add_header`` after construction.

    Example:
        >>> with RestClient() as client:
        ...     client.post("https://api.example.com/items", '{"name": "a"}').code
        201
    """

    def __init__(self, config: ClientConfig | None = None, *, http: SyncHTTPClient | None = None) -> None:
        self._http = http or SyncHTTPClient(config)
        self._http.add_header("Content-Type", JSON_CONTENT_TYPE)

    @property
    def http(self) -> SyncHTTPClient:
        """Underlying transport."""
        return self._http

    def add_header(self, name: str, value: str) -> None:
        self._http.add_header(name, value)

    def remove_header(self, name: str) -> None:
        self._http.remove_header(name)

    def head(self, url: str) -> NoBodyResponse:
        return self._http.head(url)

    def get(self, url: str) -> StringResponse:
        return self._http.get_string(url)

    def post(self, url: str, body: str) -> StringResponse:
        return self._http.post_string(url, body)

    def put(self, url: str, body: str) -> StringResponse:
        return self._http.put_string(url, body)

    def patch(self, url: str, body: str) -> StringResponse:
        return self._http.patch_string(url, body)

    def delete(self, url: str) -> StringResponse:
        return self._http.delete_string(url)

    def download_file(self, url: str, path: PathLike) -> FileResponse:
        """GET ``url`` and stream the body into ``path``.

        If ``path`` is an existing directory the file is created inside it,
        named by the response's Content-Disposition or the URL.
        """
        return self._http.get_file(url, path)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
