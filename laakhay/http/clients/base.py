"""Helpers shared by the JSON clients."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import ObjectMappingError
from ..core.mapper import ObjectMapper
from ..models import MappedResponse, StringResponse


def serialize(mapper: ObjectMapper, obj: Any) -> str:
    """Run ``mapper.to_json``; any mapper failure becomes ObjectMappingError."""
    try:
        return mapper.to_json(obj)
    except (TypeError, ValueError) as exc:
        raise ObjectMappingError(f"Cannot serialize {type(obj).__name__}", target=obj) from exc


def deserialize(mapper: ObjectMapper, payload: str, out_type: Any) -> Any:
    """Run ``mapper.from_json``; any mapper failure becomes ObjectMappingError."""
    try:
        return mapper.from_json(payload, out_type)
    except (TypeError, ValueError) as exc:
        raise ObjectMappingError(f"Cannot deserialize payload into {out_type!r}", target=out_type) from exc


def to_mapped(response: StringResponse, body: Any) -> MappedResponse:
    return MappedResponse(code=response.code, headers=response.headers, body=body)
