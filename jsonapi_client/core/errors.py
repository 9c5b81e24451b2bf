"""JSON:API client exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    import httpx

    from jsonapi_client.schemas import ErrorObject


class JSONAPIClientError(Exception):
    """Base class for every error raised by the client."""


class DeserializationError(JSONAPIClientError):
    """A document could not be turned into plain resource objects."""


class MissingIncludedResource(DeserializationError):
    """A relationship listed in ``include`` has no match in the included pool."""

    def __init__(
        self,
        *,
        relationship: str,
        owner_type: str | None,
        related: Mapping[str, Any],
        include: str,
    ) -> None:
        self.relationship = relationship
        self.owner_type = owner_type
        self.related = dict(related)
        self.include = include
        super().__init__(
            f"Resource '{related.get('type')}' ({related.get('id')}) from "
            f"'{owner_type}' as '{relationship}' should be included but is not found. "
            f'Include query param: "{include}"'
        )


class IncludeDepthExceeded(DeserializationError):
    """An include path expands relationships deeper than the configured ceiling."""

    def __init__(self, *, lineage: str, max_depth: int) -> None:
        self.lineage = lineage
        self.max_depth = max_depth
        super().__init__(
            f"Include path '{lineage}' is nested deeper than {max_depth} relationships."
        )


class JSONAPIHTTPError(JSONAPIClientError):
    """The server answered with an error status."""

    def __init__(
        self,
        response: httpx.Response,
        errors: list[ErrorObject] | None = None,
    ) -> None:
        self.response = response
        self.status_code = response.status_code
        self.errors = errors or []
        details = "; ".join(
            str(error.detail or error.title or error.code)
            for error in self.errors
            if error.detail or error.title or error.code
        )
        message = f"{response.status_code} {response.reason_phrase} for {response.request.url}"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)
