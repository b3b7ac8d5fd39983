"""Blocking transport on top of ``requests``."""

from __future__ import annotations

import logging
import ssl
from collections.abc import Mapping
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from ..core.config import ClientConfig
from ..core.constants import CHUNK_SIZE
from ..core.enums import BodyMode, RedirectPolicy
from ..models import NoBodyResponse
from .base import BaseHTTPClient, PathLike, RequestBody, download_target, group_headers, is_downgrade

logger = logging.getLogger(__name__)


class PolicySession(requests.Session):
    """Session that refuses HTTPS -> HTTP redirects under NORMAL policy.

    Returning no target from ``get_redirect_target`` ends the redirect
    chain, so the caller receives the 3xx response itself.
    """

    def __init__(self, redirect_policy: RedirectPolicy) -> None:
        super().__init__()
        self.redirect_policy = redirect_policy

    def get_redirect_target(self, resp: requests.Response) -> str | None:
        target = super().get_redirect_target(resp)
        if (
            target
            and self.redirect_policy is RedirectPolicy.NORMAL
            and is_downgrade(resp.url, urljoin(resp.url, target))
        ):
            logger.debug("Refusing HTTPS to HTTP redirect", extra={"url": resp.url, "target": target})
            return None
        return target


class SSLContextAdapter(HTTPAdapter):
    """HTTPAdapter whose pool manager uses a caller-supplied SSLContext."""

    def __init__(self, ssl_context: ssl.SSLContext, **kwargs: Any) -> None:
        # init_poolmanager runs inside HTTPAdapter.__init__
        self._ssl_context = ssl_context
        super().__init__(**kwargs)

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        kwargs["ssl_context"] = self._ssl_context
        super().init_poolmanager(*args, **kwargs)


def response_headers(response: requests.Response) -> dict[str, list[str]]:
    """Headers as sent by the server, repeated headers kept apart.

    ``response.headers`` joins repeated headers with ``", "``; the urllib3
    header dict underneath still has every value.
    """
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return {name: list(raw_headers.getlist(name)) for name in raw_headers}
    return group_headers(response.headers.items())


class SyncHTTPClient(BaseHTTPClient):
    """Blocking HTTP client.

    Every call blocks the calling thread for the whole exchange. Engine
    failures (``requests.RequestException``) propagate unchanged.

    Example:
        >>> with SyncHTTPClient() as http:
        ...     response = http.get_string("https://example.com")
        ...     response.code
        200
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        super().__init__(config)
        self._session: requests.Session | None = None

    @property
    def session(self) -> requests.Session:
        """Get or create session."""
        if self._session is None:
            self._session = self._build_session()
        return self._session

    def _build_session(self) -> requests.Session:
        session = PolicySession(self.config.redirect_policy)
        if self.config.ssl_context is not None:
            session.mount("https://", SSLContextAdapter(self.config.ssl_context))
        return session

    def send(
        self,
        method: str,
        url: str,
        *,
        body: RequestBody = None,
        mode: BodyMode = BodyMode.STRING,
        path: PathLike | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> NoBodyResponse:
        """Execute one exchange and wrap the response according to ``mode``.

        Args:
            method: HTTP method
            url: Request URL
            body: Request body; ``str`` is encoded with the configured charset
            mode: Response decoding strategy
            path: Download destination, required for ``BodyMode.FILE``
            headers: Extra headers for this request only

        Returns:
            The wrapper matching ``mode``

        Raises:
            ValueError: ``BodyMode.FILE`` without ``path``
            requests.RequestException: The exchange failed
            OSError: The download destination cannot be written
        """
        request_headers, data = self._prepare(mode, path, body, headers)

        logger.debug("Sending request", extra={"method": method, "url": url})
        response = self.session.request(
            method,
            url,
            headers=request_headers,
            data=data,
            timeout=(self.config.timeout, None),
            allow_redirects=self.config.follows_redirects,
            stream=True,
        )
        try:
            result = self._read(response, mode, path)
        finally:
            response.close()

        logger.debug("Response received", extra={"status": result.code, "url": url})
        return result

    def _read(
        self, response: requests.Response, mode: BodyMode, path: PathLike | None
    ) -> NoBodyResponse:
        headers = response_headers(response)
        if mode is BodyMode.DISCARD:
            return self._build(mode, response.status_code, headers)
        if mode is BodyMode.FILE:
            destination = download_target(path, response.headers.get("Content-Disposition"), response.url)
            with destination.open("wb") as fh:
                try:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        fh.write(chunk)
                except BaseException:
                    fh.close()
                    destination.unlink(missing_ok=True)
                    raise
            return self._build(mode, response.status_code, headers, destination)
        return self._build(mode, response.status_code, headers, response.content)

    def close(self) -> None:
        """Close session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> SyncHTTPClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
