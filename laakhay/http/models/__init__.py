"""Response wrapper models.

All models are Pydantic v2 and frozen; they are built once per call and
never decode anything themselves.
"""

from .responses import (
    BinaryResponse,
    FileResponse,
    MappedResponse,
    NoBodyResponse,
    StringResponse,
)

__all__ = [
    "NoBodyResponse",
    "StringResponse",
    "BinaryResponse",
    "FileResponse",
    "MappedResponse",
]
