"""Non-blocking transport on top of ``aiohttp``."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urljoin

import aiohttp

from ..core.config import ClientConfig
from ..core.constants import CHUNK_SIZE, MAX_REDIRECTS
from ..core.enums import BodyMode, RedirectPolicy
from ..models import NoBodyResponse
from .base import (
    REDIRECT_STATUSES,
    BaseHTTPClient,
    PathLike,
    RequestBody,
    download_target,
    group_headers,
    is_downgrade,
    redirect_headers,
    redirect_request,
)

logger = logging.getLogger(__name__)


class AsyncHTTPClient(BaseHTTPClient):
    """Async HTTP client wrapper.

    ``send`` and every verb helper are coroutines. Awaiting one runs the
    exchange on aiohttp's connector; wrap it in ``asyncio.create_task`` to
    get a future that resolves independently. Engine failures
    (``aiohttp.ClientError``, ``asyncio.TimeoutError``) propagate unchanged
    out of the await.

    Blocking work (writing downloads to disk) runs in ``config.executor``,
    or the loop's default executor when none is configured.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        super().__init__(config)
        self.timeout = aiohttp.ClientTimeout(sock_connect=self.config.timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            connector = None
            if self.config.ssl_context is not None:
                connector = aiohttp.TCPConnector(ssl=self.config.ssl_context)
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                connector=connector,
                version=aiohttp.HttpVersion11,
            )
        return self._session

    async def send(
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

        Under ``RedirectPolicy.NORMAL`` redirects are followed hop by hop so
        an HTTPS -> HTTP hop can be refused; the 3xx response is returned in
        that case, and after ``MAX_REDIRECTS`` hops.

        Raises:
            ValueError: ``BodyMode.FILE`` without ``path``
            aiohttp.ClientError: The exchange failed
            asyncio.TimeoutError: Connecting timed out
            OSError: The download destination cannot be written
        """
        request_headers, data = self._prepare(mode, path, body, headers)
        policy = self.config.redirect_policy

        hops = 0
        while True:
            logger.debug("Sending request", extra={"method": method, "url": url})
            async with self.session.request(
                method,
                url,
                headers=request_headers,
                data=data,
                allow_redirects=policy is RedirectPolicy.ALWAYS,
            ) as response:
                target = None
                if policy is RedirectPolicy.NORMAL and hops < MAX_REDIRECTS:
                    target = self._redirect_target(url, response)
                if target is None:
                    result = await self._read(response, url, mode, path)
                    break
                status = response.status

            hops += 1
            next_method, data = redirect_request(method, status, data)
            request_headers = redirect_headers(
                request_headers, url, target, rewritten=next_method != method.upper()
            )
            method, url = next_method, target

        logger.debug("Response received", extra={"status": result.code, "url": url})
        return result

    @staticmethod
    def _redirect_target(url: str, response: aiohttp.ClientResponse) -> str | None:
        if response.status not in REDIRECT_STATUSES:
            return None
        location = response.headers.get("Location")
        if not location:
            return None
        target = urljoin(url, location)
        if is_downgrade(url, target):
            logger.debug("Refusing HTTPS to HTTP redirect", extra={"url": url, "target": target})
            return None
        return target

    async def _read(
        self, response: aiohttp.ClientResponse, url: str, mode: BodyMode, path: PathLike | None
    ) -> NoBodyResponse:
        headers = group_headers(response.headers.items())
        if mode is BodyMode.DISCARD:
            return self._build(mode, response.status, headers)
        if mode is BodyMode.FILE:
            destination = await self._download(response, url, path)
            return self._build(mode, response.status, headers, destination)
        return self._build(mode, response.status, headers, await response.read())

    async def _download(self, response: aiohttp.ClientResponse, url: str, path: PathLike) -> Path:
        """Stream the body to disk, removing the file if streaming fails."""
        loop = asyncio.get_running_loop()
        executor = self.config.executor
        destination = await loop.run_in_executor(
            executor, download_target, path, response.headers.get("Content-Disposition"), url
        )
        fh = await loop.run_in_executor(executor, destination.open, "wb")
        try:
            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                await loop.run_in_executor(executor, fh.write, chunk)
        except BaseException:
            # Cleanup stays on the loop so a second cancellation cannot skip it
            fh.close()
            destination.unlink(missing_ok=True)
            raise
        await loop.run_in_executor(executor, fh.close)
        return destination

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AsyncHTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
