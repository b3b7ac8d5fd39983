"""Immutable response wrappers.

Every wrapper carries the status code and headers exactly as the engine
reported them. Header names keep their original casing and every value of
a repeated header is kept, in arrival order. The header mapping is
read-only and its values are tuples, so a wrapper cannot be changed after
construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

T = TypeVar("T")


class NoBodyResponse(BaseModel):
    """Status and headers only. Returned for HEAD requests."""

    code: int
    headers: Mapping[str, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("headers", mode="after")
    @classmethod
    def freeze_headers(cls, v: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(v))

    @field_serializer("headers")
    def serialize_headers(self, headers: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
        return {name: list(values) for name, values in headers.items()}

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.code < 300

    def header(self, name: str) -> str | None:
        """First value of ``name``, matched case-insensitively."""
        lowered = name.lower()
        for key, values in self.headers.items():
            if key.lower() == lowered and values:
                return values[0]
        return None


class StringResponse(NoBodyResponse):
    body: str


class BinaryResponse(NoBodyResponse):
    body: bytes


class FileResponse(NoBodyResponse):
    """Body is the path the download was written to."""

    body: Path


class MappedResponse(NoBodyResponse, Generic[T]):
    """Body is the object produced by the caller's ObjectMapper."""

    body: T

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
