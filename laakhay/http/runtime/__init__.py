"""Transport clients: one configured engine handle, per-verb send helpers."""

from .async_client import AsyncHTTPClient
from .base import (
    BaseHTTPClient,
    attachment_filename,
    build_response,
    download_target,
    group_headers,
    is_downgrade,
    redirect_headers,
    redirect_request,
)
from .sync_client import SyncHTTPClient

__all__ = [
    "AsyncHTTPClient",
    "BaseHTTPClient",
    "SyncHTTPClient",
    "attachment_filename",
    "build_response",
    "download_target",
    "group_headers",
    "is_downgrade",
    "redirect_headers",
    "redirect_request",
]
