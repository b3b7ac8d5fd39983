"""Core components."""

from .config import ClientConfig
from .constants import (
    DEFAULT_CHARSET,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
)
from .enums import BodyMode, HttpVersion, RedirectPolicy
from .exceptions import HTTPClientError, ObjectMappingError
from .headers import HeaderStore
from .mapper import ObjectMapper, PydanticObjectMapper

__all__ = [
    "ClientConfig",
    "HeaderStore",
    "BodyMode",
    "HttpVersion",
    "RedirectPolicy",
    "HTTPClientError",
    "ObjectMappingError",
    "ObjectMapper",
    "PydanticObjectMapper",
    "DEFAULT_CHARSET",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
]
