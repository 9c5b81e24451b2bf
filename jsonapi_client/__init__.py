"""JSON:API client: deserialize documents into plain resource dicts."""

from .config import ServiceConfig
from .core.deserializer import IncludedPool, JSONAPIDeserializer, deserialize
from .core.document import deserialize_document
from .core.errors import (
    DeserializationError,
    IncludeDepthExceeded,
    JSONAPIClientError,
    JSONAPIHTTPError,
    MissingIncludedResource,
)
from .service import JSONAPIService

__version__ = "0.1.0"

__all__ = [
    "DeserializationError",
    "IncludeDepthExceeded",
    "IncludedPool",
    "JSONAPIClientError",
    "JSONAPIDeserializer",
    "JSONAPIHTTPError",
    "JSONAPIService",
    "MissingIncludedResource",
    "ServiceConfig",
    "deserialize",
    "deserialize_document",
]
