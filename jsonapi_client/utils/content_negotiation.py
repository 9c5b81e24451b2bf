"""Helpers for JSON:API media types."""

from __future__ import annotations

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


def media_type(content_type: str) -> str:
    """Return the lowercased media type of a Content-Type header, without parameters."""
    return content_type.split(";", 1)[0].strip().lower()


def is_jsonapi_response(content_type: str | None) -> bool:
    """Return True when a response Content-Type announces a JSON:API body."""
    if not content_type:
        return False
    return media_type(content_type) == JSONAPI_MEDIA_TYPE
