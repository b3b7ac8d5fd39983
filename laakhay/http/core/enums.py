"""Core enumerations for client configuration and response decoding.

Key Types:
    - HttpVersion: Protocol version requested from the engine
    - RedirectPolicy: When redirects are followed
    - BodyMode: How a response body is decoded and which wrapper it produces
"""

from enum import Enum


class HttpVersion(str, Enum):
    """HTTP protocol version requested from the engine."""

    HTTP_1_1 = "HTTP/1.1"
    HTTP_2 = "HTTP/2"


class RedirectPolicy(str, Enum):
    """Redirect following policy.

    NORMAL follows every redirect except a downgrade from HTTPS to HTTP,
    in which case the 3xx response itself is returned.
    """

    NEVER = "never"
    ALWAYS = "always"
    NORMAL = "normal"


class BodyMode(str, Enum):
    """Response decoding strategy.

    Each mode maps to one response wrapper:
        DISCARD -> NoBodyResponse
        STRING  -> StringResponse
        BINARY  -> BinaryResponse
        FILE    -> FileResponse
    """

    DISCARD = "discard"
    STRING = "string"
    BINARY = "binary"
    FILE = "file"
