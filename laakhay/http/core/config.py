"""Client configuration model.

One immutable record replaces the positional constructor variants: every
field is named and optional, and defaults are listed below.

    version          HttpVersion.HTTP_1_1
    redirect_policy  RedirectPolicy.NORMAL
    timeout          30.0 seconds (connect timeout)
    ssl_context      None (engine default verification)
    headers          {} (merged over the default User-Agent)
    charset          "utf-8"
    executor         None (event loop default executor)
"""

from __future__ import annotations

import codecs
import ssl
from collections.abc import Mapping
from concurrent.futures import Executor
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .constants import DEFAULT_CHARSET, DEFAULT_TIMEOUT
from .enums import HttpVersion, RedirectPolicy


class ClientConfig(BaseModel):
    """Engine and request defaults, fixed at client construction."""

    version: HttpVersion = HttpVersion.HTTP_1_1
    redirect_policy: RedirectPolicy = RedirectPolicy.NORMAL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    ssl_context: ssl.SSLContext | None = None
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    charset: str = DEFAULT_CHARSET
    executor: Executor | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, v: str) -> str:
        """Reject codec names Python cannot encode with."""
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown charset: {v}") from exc
        return v

    @field_validator("headers", mode="after")
    @classmethod
    def freeze_headers(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("headers")
    def serialize_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        return dict(headers)

    @property
    def follows_redirects(self) -> bool:
        return self.redirect_policy is not RedirectPolicy.NEVER
