"""Custom exception hierarchy.

Transport failures are not wrapped: ``requests.RequestException``,
``aiohttp.ClientError`` and ``asyncio.TimeoutError`` reach the caller as the
engine raised them. Filesystem failures surface as ``OSError``.
"""

from __future__ import annotations


class HTTPClientError(Exception):
    """Base exception for all library errors."""

    pass


class ObjectMappingError(HTTPClientError):
    """Object could not be serialized to, or deserialized from, JSON.

    Raised directly by the blocking clients and out of the awaited coroutine
    by the async clients, so both call styles catch the same type.
    """

    def __init__(self, message: str, target: object | None = None) -> None:
        super().__init__(message)
        self.target = target
