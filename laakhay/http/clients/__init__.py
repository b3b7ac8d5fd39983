"""REST facades composed over the transport clients."""

from .async_rest_client import AsyncRestClient
from .async_rest_json_client import AsyncRestJsonClient
from .rest_client import RestClient
from .rest_json_client import RestJsonClient

__all__ = [
    "RestClient",
    "AsyncRestClient",
    "RestJsonClient",
    "AsyncRestJsonClient",
]
