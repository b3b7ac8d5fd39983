"""Engine-independent half of the transport clients.

Architecture:
    BaseHTTPClient owns the configuration and the header store, prepares the
    outgoing headers and body, and turns a finished exchange into a response
    wrapper. Subclasses only implement ``send`` against their engine
    (requests for blocking calls, aiohttp for coroutines).

    The per-verb helpers are defined once here in terms of ``send``. On the
    async client ``send`` is a coroutine function, so every helper returns an
    awaitable there.

Design Decisions:
    - BodyMode picks both the decoding and the wrapper type, so HEAD can
      never leak a body: DISCARD builds a NoBodyResponse without reading.
    - String bodies are encoded with the configured charset here, never by
      the engine (requests would fall back to latin-1).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from email.message import Message
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import urlsplit

from ..core.config import ClientConfig
from ..core.constants import DEFAULT_USER_AGENT
from ..core.enums import BodyMode, HttpVersion
from ..core.headers import HeaderStore
from ..models import (
    BinaryResponse,
    FileResponse,
    NoBodyResponse,
    StringResponse,
)

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

DEFAULT_PORTS = {"http": 80, "https": 443}

# Lowercase names, dropped from redirect hops
CREDENTIAL_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie"})
BODY_HEADERS = frozenset({"content-type", "content-length"})

RequestBody = str | bytes | None
PathLike = str | Path


def group_headers(items: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Collect ``(name, value)`` pairs into name -> values, keeping repeats."""
    grouped: dict[str, list[str]] = {}
    for name, value in items:
        grouped.setdefault(name, []).append(value)
    return grouped


def is_downgrade(source: str, target: str) -> bool:
    """True when a redirect leaves HTTPS for plain HTTP."""
    return urlsplit(source).scheme.lower() == "https" and urlsplit(target).scheme.lower() == "http"


def redirect_request(method: str, status: int, body: bytes | None) -> tuple[str, bytes | None]:
    """Method and body for the next hop of a followed redirect.

    303 always becomes GET (HEAD stays HEAD). 301 and 302 turn POST into GET,
    as browsers and both engines do. 307 and 308 replay the request.
    """
    method = method.upper()
    if status == 303 and method != "HEAD":
        return "GET", None
    if status in (301, 302) and method == "POST":
        return "GET", None
    return method, body


def origin(url: str) -> tuple[str, str | None, int | None]:
    """Scheme, host and effective port of ``url``."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    return scheme, parts.hostname, parts.port or DEFAULT_PORTS.get(scheme)


def redirect_headers(
    headers: Mapping[str, str], source: str, target: str, *, rewritten: bool
) -> dict[str, str]:
    """Headers for the next hop of a followed redirect.

    Credentials are only sent back to the origin that received them.
    ``rewritten`` means the hop was turned into a body-less request, so the
    body's Content-Type goes too.
    """
    dropped: set[str] = set()
    if origin(source) != origin(target):
        dropped.update(CREDENTIAL_HEADERS)
    if rewritten:
        dropped.update(BODY_HEADERS)
    return {name: value for name, value in headers.items() if name.lower() not in dropped}


def attachment_filename(disposition: str | None, url: str) -> str:
    """File name for a download into a directory.

    Taken from the ``Content-Disposition`` header (RFC 6266, including
    ``filename*``), else from the last segment of the URL path. Only the base
    name is used, so the file always lands inside the directory.
    """
    name = None
    if disposition:
        message = Message()
        message["Content-Disposition"] = disposition
        name = message.get_filename()
    if not name:
        name = urlsplit(url).path
    name = PurePosixPath(name.replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise ValueError(f"Cannot determine a file name for download from {url}")
    return name


def download_target(path: PathLike, disposition: str | None, url: str) -> Path:
    """Where a ``BodyMode.FILE`` body is written.

    An existing directory receives a file named after the response, any
    other path is written to as given.
    """
    destination = Path(path)
    if destination.is_dir():
        return destination / attachment_filename(disposition, url)
    return destination


def build_response(
    mode: BodyMode,
    code: int,
    headers: dict[str, list[str]],
    payload: bytes | Path | None = None,
    charset: str = "utf-8",
) -> NoBodyResponse:
    """Wrap a finished exchange according to ``mode``."""
    if mode is BodyMode.DISCARD:
        return NoBodyResponse(code=code, headers=headers)
    if mode is BodyMode.STRING:
        return StringResponse(
            code=code, headers=headers, body=(payload or b"").decode(charset, errors="replace")
        )
    if mode is BodyMode.BINARY:
        return BinaryResponse(code=code, headers=headers, body=payload or b"")
    return FileResponse(code=code, headers=headers, body=payload)


class BaseHTTPClient:
    """Configuration, headers and verb helpers shared by both transports."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self.headers = HeaderStore({"User-Agent": DEFAULT_USER_AGENT})
        for name, value in self.config.headers.items():
            self.headers.add(name, value)

        if self.config.version is HttpVersion.HTTP_2:
            logger.warning("HTTP/2 is not supported by the engine, falling back to HTTP/1.1")

    def add_header(self, name: str, value: str) -> None:
        """Add or overwrite a header sent with every later request."""
        self.headers.add(name, value)

    def remove_header(self, name: str) -> None:
        """Stop sending a header. No effect if it was never added."""
        self.headers.remove(name)

    def send(
        self,
        method: str,
        url: str,
        *,
        body: RequestBody = None,
        mode: BodyMode = BodyMode.STRING,
        path: PathLike | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        raise NotImplementedError

    def _prepare(
        self,
        mode: BodyMode,
        path: PathLike | None,
        body: RequestBody,
        headers: Mapping[str, str] | None,
    ) -> tuple[dict[str, str], bytes | None]:
        if mode is BodyMode.FILE and path is None:
            raise ValueError("BodyMode.FILE requires a destination path")
        if isinstance(body, str):
            body = body.encode(self.config.charset)
        return self.headers.snapshot(headers), body

    def _build(
        self, mode: BodyMode, code: int, headers: dict[str, list[str]], payload: bytes | Path | None = None
    ) -> NoBodyResponse:
        return build_response(mode, code, headers, payload, self.config.charset)

    # HEAD

    def head(self, url: str) -> Any:
        return self.send("HEAD", url, mode=BodyMode.DISCARD)

    # GET

    def get_string(self, url: str) -> Any:
        return self.send("GET", url, mode=BodyMode.STRING)

    def get_binary(self, url: str) -> Any:
        return self.send("GET", url, mode=BodyMode.BINARY)

    def get_file(self, url: str, path: PathLike) -> Any:
        return self.send("GET", url, mode=BodyMode.FILE, path=path)

    # POST

    def post_string(self, url: str, body: RequestBody) -> Any:
        return self.send("POST", url, body=body, mode=BodyMode.STRING)

    def post_binary(self, url: str, body: RequestBody) -> Any:
        return self.send("POST", url, body=body, mode=BodyMode.BINARY)

    def post_file(self, url: str, path: PathLike, body: RequestBody) -> Any:
        return self.send("POST", url, body=body, mode=BodyMode.FILE, path=path)

    # PUT

    def put_string(self, url: str, body: RequestBody) -> Any:
        return self.send("PUT", url, body=body, mode=BodyMode.STRING)

    def put_binary(self, url: str, body: RequestBody) -> Any:
        return self.send("PUT", url, body=body, mode=BodyMode.BINARY)

    def put_file(self, url: str, path: PathLike, body: RequestBody) -> Any:
        return self.send("PUT", url, body=body, mode=BodyMode.FILE, path=path)

    # PATCH

    def patch_string(self, url: str, body: RequestBody) -> Any:
        return self.send("PATCH", url, body=body, mode=BodyMode.STRING)

    def patch_binary(self, url: str, body: RequestBody) -> Any:
        return self.send("PATCH", url, body=body, mode=BodyMode.BINARY)

    def patch_file(self, url: str, path: PathLike, body: RequestBody) -> Any:
        return self.send("PATCH", url, body=body, mode=BodyMode.FILE, path=path)

    # DELETE

    def delete_string(self, url: str) -> Any:
        return self.send("DELETE", url, mode=BodyMode.STRING)

    def delete_binary(self, url: str) -> Any:
        return self.send("DELETE", url, mode=BodyMode.BINARY)

    def delete_file(self, url: str, path: PathLike) -> Any:
        return self.send("DELETE", url, mode=BodyMode.FILE, path=path)
