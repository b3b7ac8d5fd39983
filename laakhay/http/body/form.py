"""URL-encoded form bodies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

from ..core.constants import DEFAULT_CHARSET


def form_data(data: Mapping[Any, Any], charset: str = DEFAULT_CHARSET) -> str:
    """Encode ``data`` as ``application/x-www-form-urlencoded``.

    Keys and values are ``str()``-converted and percent-encoded under
    ``charset`` (space becomes ``+``). Pairs keep the mapping's iteration
    order and are joined by ``&``.

    Example:
        >>> form_data({"q": "a b", "page": 2})
        'q=a+b&page=2'
    """
    return "&".join(
        f"{quote_plus(str(key), encoding=charset)}={quote_plus(str(value), encoding=charset)}"
        for key, value in data.items()
    )
