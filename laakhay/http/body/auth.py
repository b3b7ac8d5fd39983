"""Authorization header values."""

from __future__ import annotations

import base64


def basic_auth_header(username: str, password: str) -> str:
    """``Basic`` credentials, base64 of ``username:password`` in UTF-8."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def bearer_auth_header(token: str) -> str:
    return f"Bearer {token}"
