"""Library-wide defaults shared by the sync and async clients."""

from __future__ import annotations

VERSION = "0.1.0"

DEFAULT_USER_AGENT = f"laakhay-http/{VERSION}"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CHARSET = "utf-8"

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
OCTET_STREAM = "application/octet-stream"

# Hops followed by the async client's NORMAL redirect loop
MAX_REDIRECTS = 10

# Download chunk size (bytes)
CHUNK_SIZE = 64 * 1024
