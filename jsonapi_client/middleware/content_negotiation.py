"""Request hook adding JSON:API and authentication headers."""

from typing import Callable, Optional

import httpx

from jsonapi_client.utils.content_negotiation import JSONAPI_MEDIA_TYPE


class ContentNegotiationMiddleware:
    """httpx request hook setting the JSON:API media type and bearer token."""

    def __init__(
        self,
        get_token: Callable[[], Optional[str]],
        *,
        allow_credentials: bool = False,
    ) -> None:
        """Store the token lookup; the token is read on every request."""
        self.get_token = get_token
        self.allow_credentials = allow_credentials

    def __call__(self, request: httpx.Request) -> None:
        """Set headers on an outgoing request."""
        request.headers["Content-Type"] = JSONAPI_MEDIA_TYPE
        request.headers["Accept"] = JSONAPI_MEDIA_TYPE
        if self.allow_credentials:
            request.headers["Access-Control-Allow-Credentials"] = "true"
        token = self.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
