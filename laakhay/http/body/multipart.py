"""multipart/form-data bodies (RFC 2046 framing).

A value that is a ``pathlib.PurePath`` is uploaded as a file part: its bytes
are read from disk and its MIME type is guessed from the file name. Any
other value is sent as a plain field (``bytes`` verbatim, everything else
through ``str()``).
"""

from __future__ import annotations

import logging
import mimetypes
import secrets
from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any

from ..core.constants import DEFAULT_CHARSET, OCTET_STREAM

logger = logging.getLogger(__name__)

CRLF = "\r\n"
DOUBLE_DASH = "--"


def generate_boundary() -> str:
    """Random 256-bit integer rendered in decimal.

    No uniqueness check is made against part contents.
    """
    return str(secrets.randbits(256))


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def guess_content_type(path: PurePath) -> str:
    """MIME type for ``path``, ``application/octet-stream`` if unknown."""
    mime, _encoding = mimetypes.guess_type(path.name)
    if mime is None:
        logger.debug("No MIME type detected, using fallback", extra={"file": path.name})
        return OCTET_STREAM
    return mime


def multipart_data(
    data: Mapping[Any, Any], boundary: str, charset: str = DEFAULT_CHARSET
) -> bytes:
    """Encode ``data`` as a multipart/form-data body.

    Args:
        data: Field name to value. ``PurePath`` values become file parts.
        boundary: Part separator, without the leading ``--``.
        charset: Encoding for the framing text and ``str`` values.

    Returns:
        The complete body, terminated by ``--boundary--``.

    Raises:
        OSError: A referenced file cannot be read.
    """
    parts: list[bytes] = []
    separator = f"{DOUBLE_DASH}{boundary}{CRLF}Content-Disposition: form-data; name=".encode(charset)

    for name, value in data.items():
        parts.append(separator)
        if isinstance(value, PurePath):
            parts.append(
                (
                    f'"{name}"; filename="{value.name}"{CRLF}'
                    f"Content-Type: {guess_content_type(value)}{CRLF}{CRLF}"
                ).encode(charset)
            )
            parts.append(Path(value).read_bytes())
            parts.append(CRLF.encode(charset))
        else:
            parts.append(f'"{name}"{CRLF}{CRLF}'.encode(charset))
            parts.append(value if isinstance(value, bytes) else str(value).encode(charset))
            parts.append(CRLF.encode(charset))

    parts.append(f"{DOUBLE_DASH}{boundary}{DOUBLE_DASH}".encode(charset))
    return b"".join(parts)
