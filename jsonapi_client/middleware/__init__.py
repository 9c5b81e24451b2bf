"""httpx event hooks for JSON:API requests and responses."""

from .content_negotiation import ContentNegotiationMiddleware
from .error_handler import ErrorHandlerMiddleware, parse_errors

__all__ = ["ContentNegotiationMiddleware", "ErrorHandlerMiddleware", "parse_errors"]
