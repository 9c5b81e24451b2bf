"""Helpers for JSON:API query parameters and include paths."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

LEGACY_SEPARATOR = "__"
PATH_SEPARATOR = "."


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_include(include: str | Iterable[str] | None) -> frozenset[str]:
    """Return the set of dotted include lineages named by ``include``.

    ``"authors,authors__addresses"`` gives ``{"authors", "authors.addresses"}``.
    The legacy ``__`` separator is only rewritten in paths, never in
    relationship names.
    """
    if not include:
        return frozenset()
    if isinstance(include, str):
        paths = _split_csv(include)
    else:
        paths = [path.strip() for path in include if path and path.strip()]
    return frozenset(path.replace(LEGACY_SEPARATOR, PATH_SEPARATOR) for path in paths)


def join_lineage(lineage: str, name: str) -> str:
    """Return the lineage of ``name`` below ``lineage``."""
    return f"{lineage}{PATH_SEPARATOR}{name}" if lineage else name


def lineage_depth(lineage: str) -> int:
    """Return how many relationships deep a lineage is."""
    return len(lineage.split(PATH_SEPARATOR)) if lineage else 0


def _csv(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return str(value)


def _sort_token(item: Any) -> str:
    if isinstance(item, Mapping):
        prefix = "-" if item.get("direction") == "desc" else ""
        return f"{prefix}{item['field']}"
    return str(item)


def merge_query_params(*param_sets: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge query parameter mappings, later mappings taking precedence."""
    merged: dict[str, Any] = {}
    for params in param_sets:
        if params:
            merged.update(params)
    return merged


def build_query_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Flatten JSON:API query parameter families into wire parameters.

    ``{"include": ["a", "b"], "page": {"size": 10}, "fields": {"article": ["name"]}}``
    becomes ``{"include": "a,b", "page[size]": "10", "fields[article]": "name"}``.
    """
    flattened: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            for member, member_value in value.items():
                if member_value is None:
                    continue
                if isinstance(member_value, Mapping):
                    # filter[field][op] syntax
                    for op_name, op_value in member_value.items():
                        flattened[f"{key}[{member}][{op_name}]"] = _csv(op_value)
                else:
                    flattened[f"{key}[{member}]"] = _csv(member_value)
        elif key == "sort" and isinstance(value, (list, tuple)):
            flattened[key] = ",".join(_sort_token(item) for item in value)
        else:
            flattened[key] = _csv(value)
    return flattened
