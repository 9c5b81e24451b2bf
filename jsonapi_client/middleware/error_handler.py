"""Response hook logging failed JSON:API responses."""

import logging

import httpx

from jsonapi_client.schemas import ErrorObject, JSONAPIErrorDocument
from jsonapi_client.utils.content_negotiation import is_jsonapi_response

logger = logging.getLogger(__name__)


def parse_errors(response: httpx.Response) -> list[ErrorObject]:
    """Return the JSON:API error objects of a response, or an empty list."""
    if not response.content:
        return []
    try:
        return JSONAPIErrorDocument.model_validate(response.json()).errors
    except ValueError:
        return []


class ErrorHandlerMiddleware:
    """httpx response hook reporting error responses and unexpected media types."""

    def __init__(self, *, log_errors: bool = False) -> None:
        self.log_errors = log_errors

    def __call__(self, response: httpx.Response) -> None:
        """Inspect a response before it reaches the service."""
        if not response.is_error:
            content_type = response.headers.get("content-type")
            if content_type and not is_jsonapi_response(content_type):
                logger.warning(
                    "Unexpected media type %r from %s", content_type, response.request.url
                )
            return
        if not self.log_errors:
            return
        response.read()
        errors = parse_errors(response)
        logger.error(
            "Json:API service error: %s %s",
            [error.model_dump(exclude_none=True) for error in errors] or response.reason_phrase,
            response.request.url,
        )
