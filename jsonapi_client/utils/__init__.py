"""Utilities for include paths, query parameters and media types."""

from .content_negotiation import (
    JSONAPI_MEDIA_TYPE,
    is_jsonapi_response,
    media_type,
)
from .query_params import (
    build_query_params,
    join_lineage,
    lineage_depth,
    merge_query_params,
    parse_include,
)

__all__ = [
    "JSONAPI_MEDIA_TYPE",
    "build_query_params",
    "is_jsonapi_response",
    "join_lineage",
    "lineage_depth",
    "media_type",
    "merge_query_params",
    "parse_include",
]
