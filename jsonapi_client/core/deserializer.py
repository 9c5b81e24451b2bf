"""Deserialize JSON:API resource objects into plain dicts."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from jsonapi_client.core.errors import IncludeDepthExceeded, MissingIncludedResource
from jsonapi_client.utils.query_params import join_lineage, lineage_depth, parse_include

logger = logging.getLogger(__name__)

#: Deepest include lineage expanded before giving up.
DEFAULT_MAX_DEPTH = 32


class IncludedPool(Mapping[tuple[str, str], Mapping[str, Any]]):
    """Read-only lookup of included resources keyed by ``(type, id)``."""

    def __init__(self, included: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._resources: dict[tuple[str, str], Mapping[str, Any]] = {}
        for resource in included or ():
            # the first occurrence of a duplicated identifier wins
            self._resources.setdefault(self.key(resource), resource)

    @staticmethod
    def key(identifier: Mapping[str, Any]) -> tuple[str, str]:
        return str(identifier.get("type")), str(identifier.get("id"))

    def find(self, identifier: Mapping[str, Any]) -> Mapping[str, Any] | None:
        return self._resources.get(self.key(identifier))

    def __getitem__(self, key: tuple[str, str]) -> Mapping[str, Any]:
        return self._resources[key]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)


class JSONAPIDeserializer:
    """Flatten one resource object, expanding relationships named in ``include``.

    ``include`` is the raw include query parameter (``"authors,authors.addresses"``).
    A relationship is expanded only when its full lineage from the top-level
    resource is listed; otherwise the resource identifier is kept as a stub.
    ``lineage`` is the position of ``data`` in the expansion tree and is only
    set by the recursion.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        included: IncludedPool | Iterable[Mapping[str, Any]] | None,
        include: str = "",
        lineage: str = "",
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        lineages: frozenset[str] | None = None,
    ) -> None:
        self.data = data
        self.included = included if isinstance(included, IncludedPool) else IncludedPool(included)
        self.include = include or ""
        self.lineage = lineage
        self.max_depth = max_depth
        # normalized include lineages, parsed once and shared with nested resources
        self.lineages = parse_include(self.include) if lineages is None else lineages

    def deserialize(self) -> dict[str, Any]:
        """Return the resource as ``{id, type, **attributes, **relationships}``."""
        result: dict[str, Any] = {"id": self.data.get("id"), "type": self.data.get("type")}
        result.update(self.data.get("attributes") or {})
        # relationships come last so they replace attributes of the same name
        result.update(self.related_attributes())
        return result

    def related_attributes(self) -> dict[str, Any]:
        """Return every relationship as a stub, an expanded resource or None."""
        result: dict[str, Any] = {}
        relationships = self.data.get("relationships")
        if not isinstance(relationships, Mapping):
            relationships = {}
        for name, related in relationships.items():
            linkage = related.get("data") if isinstance(related, Mapping) else None
            if isinstance(linkage, list):
                result[name] = [self.find_resource(name, item) for item in linkage]
            else:
                result[name] = self.find_resource(name, linkage)
        return result

    def find_resource(self, name: str, related: Any) -> Any:
        """Expand ``related`` if its lineage is included, else return it unchanged."""
        if related is None:
            return None
        if not isinstance(related, Mapping):
            return related
        lineage = join_lineage(self.lineage, name)
        if lineage not in self.lineages:
            return related
        if lineage_depth(lineage) > self.max_depth:
            raise IncludeDepthExceeded(lineage=lineage, max_depth=self.max_depth)

        logger.debug("Expanding %s:%s at %s", related.get("type"), related.get("id"), lineage)
        child = JSONAPIDeserializer(
            self.find_included(name, related),
            self.included,
            self.include,
            lineage,
            max_depth=self.max_depth,
            lineages=self.lineages,
        )
        return child.deserialize()

    def find_included(self, name: str, related: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return the included resource for ``related`` or raise."""
        resource = self.included.find(related)
        if resource is None:
            raise MissingIncludedResource(
                relationship=name,
                owner_type=self.data.get("type"),
                related=related,
                include=self.include,
            )
        return resource


def deserialize(
    resource: Mapping[str, Any],
    included: IncludedPool | Iterable[Mapping[str, Any]] | None = None,
    include: str = "",
    lineage: str = "",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any]:
    """Deserialize a single resource object."""
    return JSONAPIDeserializer(
        resource, included, include, lineage, max_depth=max_depth
    ).deserialize()
