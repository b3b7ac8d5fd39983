"""Request body and header builders."""

from .auth import basic_auth_header, bearer_auth_header
from .form import form_data
from .multipart import (
    generate_boundary,
    guess_content_type,
    multipart_content_type,
    multipart_data,
)

__all__ = [
    "basic_auth_header",
    "bearer_auth_header",
    "form_data",
    "generate_boundary",
    "guess_content_type",
    "multipart_content_type",
    "multipart_data",
]
