"""JSON:API service: httpx transport around the deserializer."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx
from pydantic import BaseModel

from jsonapi_client.config import ServiceConfig
from jsonapi_client.core.document import deserialize_document
from jsonapi_client.core.errors import JSONAPIHTTPError
from jsonapi_client.middleware import (
    ContentNegotiationMiddleware,
    ErrorHandlerMiddleware,
    parse_errors,
)
from jsonapi_client.utils.query_params import build_query_params, merge_query_params

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | BaseModel
ErrorCallback = Callable[[httpx.Response], Any]


class JSONAPIService:
    """Request JSON:API endpoints and return deserialized documents.

    Every successful response body is returned as a document whose ``data``
    holds plain resource dicts. Relationships named in the request's
    ``include`` parameter are expanded from ``included``; the others stay as
    resource identifiers.

    Examples:
        service = JSONAPIService("https://api.example.com", auth_token="secret")
        document = service.get("/articles/1", {"include": "authors,authors.addresses"})
        document["data"]["authors"][0]["addresses"]
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        auth_token: str | None = None,
        config: ServiceConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self.auth_token = auth_token if auth_token is not None else self.config.auth_token
        self.global_query_params: dict[str, Any] = dict(self.config.global_query_params)

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=base_url or self.config.base_url,
                timeout=self.config.timeout,
            )
        self.client = client
        self.insert_hooks()

    def insert_hooks(self) -> None:
        """Install the header and error hooks on the httpx client."""
        hooks = self.client.event_hooks
        hooks["request"] = [
            *hooks.get("request", []),
            ContentNegotiationMiddleware(
                lambda: self.auth_token,
                allow_credentials=self.config.allow_credentials,
            ),
        ]
        hooks["response"] = [
            *hooks.get("response", []),
            ErrorHandlerMiddleware(log_errors=self.config.log_errors),
        ]
        self.client.event_hooks = hooks

    def set_auth_token(self, value: str | None) -> None:
        """Set a new bearer token, or None to stop authenticating."""
        self.auth_token = value

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Payload | None = None,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """Send a request and deserialize the response document."""
        query = build_query_params(merge_query_params(self.global_query_params, params))
        include = query.get("include", "")
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_none=True)

        response = self.client.request(method, url, params=query, json=data)
        if response.is_error:
            callback = on_error or self.config.on_error
            if callback is not None:
                callback(response)
            raise JSONAPIHTTPError(response, parse_errors(response))

        if not response.content:
            return None
        document = response.json()
        if self.config.log_responses:
            logger.debug("%s %s -> %s %s", method, response.request.url, response.status_code, document)
        return deserialize_document(
            document, include, max_depth=self.config.max_include_depth
        )

    def create(
        self,
        url: str,
        data: Payload,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """Create a resource."""
        return self.request("POST", url, params=params, data=data, on_error=on_error)

    def post(
        self,
        url: str,
        data: Payload,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """POST to a non-creation endpoint, e.g. an action on a resource."""
        return self.request("POST", url, params=params, data=data, on_error=on_error)

    def list(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """List a collection."""
        return self.request("GET", url, params=params, on_error=on_error)

    def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a single resource."""
        return self.request("GET", url, params=params, on_error=on_error)

    def update(
        self,
        url: str,
        data: Payload,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> dict[str, Any] | None:
        """Update a resource."""
        return self.request("PATCH", url, params=params, data=data, on_error=on_error)

    def remove(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Delete a resource."""
        self.request("DELETE", url, params=params, on_error=on_error)

    def close(self) -> None:
        """Close the httpx client if the service created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "JSONAPIService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
