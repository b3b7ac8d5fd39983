"""Object mapper contract and the bundled pydantic adapter.

The JSON clients do not serialize objects themselves: they call an
``ObjectMapper`` supplied by the caller. ``PydanticObjectMapper`` covers
pydantic models, dataclasses, builtins and generic aliases such as
``list[int]``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import ObjectMappingError


@runtime_checkable
class ObjectMapper(Protocol):
    """JSON (de)serialization collaborator.

    Both methods raise ``ObjectMappingError`` on failure.
    """

    def to_json(self, obj: Any) -> str: ...

    def from_json(self, payload: str, out_type: Any) -> Any: ...


class PydanticObjectMapper:
    """ObjectMapper backed by pydantic ``TypeAdapter``."""

    def to_json(self, obj: Any) -> str:
        try:
            if isinstance(obj, BaseModel):
                return obj.model_dump_json()
            return TypeAdapter(type(obj)).dump_json(obj).decode()
        except (PydanticSerializationError, TypeError) as exc:
            raise ObjectMappingError(f"Cannot serialize {type(obj).__name__}", target=obj) from exc

    def from_json(self, payload: str, out_type: Any) -> Any:
        try:
            return TypeAdapter(out_type).validate_json(payload)
        except (ValidationError, TypeError) as exc:
            raise ObjectMappingError(f"Cannot deserialize payload into {out_type!r}", target=out_type) from exc
