"""Core JSON:API deserialization and errors."""

from .deserializer import DEFAULT_MAX_DEPTH, IncludedPool, JSONAPIDeserializer, deserialize
from .document import deserialize_document, deserialize_resource
from .errors import (
    DeserializationError,
    IncludeDepthExceeded,
    JSONAPIClientError,
    JSONAPIHTTPError,
    MissingIncludedResource,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DeserializationError",
    "IncludeDepthExceeded",
    "IncludedPool",
    "JSONAPIClientError",
    "JSONAPIDeserializer",
    "JSONAPIHTTPError",
    "MissingIncludedResource",
    "deserialize",
    "deserialize_document",
    "deserialize_resource",
]
