"""Laakhay HTTP - Blocking and async REST clients over requests and aiohttp."""

from .body import (
    basic_auth_header,
    bearer_auth_header,
    form_data,
    generate_boundary,
    multipart_content_type,
    multipart_data,
)
from .clients import AsyncRestClient, AsyncRestJsonClient, RestClient, RestJsonClient
from .core import (
    BodyMode,
    ClientConfig,
    HeaderStore,
    HTTPClientError,
    HttpVersion,
    ObjectMapper,
    ObjectMappingError,
    PydanticObjectMapper,
    RedirectPolicy,
)
from .core.constants import VERSION as __version__
from .models import (
    BinaryResponse,
    FileResponse,
    MappedResponse,
    NoBodyResponse,
    StringResponse,
)
from .runtime import AsyncHTTPClient, SyncHTTPClient

__all__ = [
    "__version__",
    # Clients
    "RestClient",
    "AsyncRestClient",
    "RestJsonClient",
    "AsyncRestJsonClient",
    "SyncHTTPClient",
    "AsyncHTTPClient",
    # Configuration
    "ClientConfig",
    "HeaderStore",
    "BodyMode",
    "HttpVersion",
    "RedirectPolicy",
    # Mapping
    "ObjectMapper",
    "PydanticObjectMapper",
    # Responses
    "NoBodyResponse",
    "StringResponse",
    "BinaryResponse",
    "FileResponse",
    "MappedResponse",
    # Builders
    "form_data",
    "multipart_data",
    "multipart_content_type",
    "generate_boundary",
    "basic_auth_header",
    "bearer_auth_header",
    # Exceptions
    "HTTPClientError",
    "ObjectMappingError",
]
