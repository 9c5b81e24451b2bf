"""Apply the deserializer to whole JSON:API response documents."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_client.core.deserializer import (
    DEFAULT_MAX_DEPTH,
    IncludedPool,
    JSONAPIDeserializer,
)


def deserialize_resource(
    resource: Mapping[str, Any],
    included: IncludedPool,
    include: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any]:
    """Deserialize one primary resource and keep its raw relationships block."""
    result = JSONAPIDeserializer(resource, included, include, max_depth=max_depth).deserialize()
    relationships = resource.get("relationships")
    if relationships:
        result["relationships"] = relationships
    return result


def deserialize_document(
    document: Mapping[str, Any] | None,
    include: str = "",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any] | None:
    """Return ``document`` with its primary data deserialized.

    ``included``, ``meta``, ``links`` and any other top-level members are
    passed through untouched. Documents without primary data are returned
    as they are.
    """
    if document is None:
        return None
    result = dict(document)
    data = document.get("data")
    if not data:
        return result

    included = IncludedPool(document.get("included") or [])
    if isinstance(data, list):
        result["data"] = [
            deserialize_resource(item, included, include, max_depth=max_depth) for item in data
        ]
    else:
        result["data"] = deserialize_resource(data, included, include, max_depth=max_depth)
    return result
