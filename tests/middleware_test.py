"""Tests for the httpx request and response hooks."""

import httpx

from jsonapi_client.middleware import (
    ContentNegotiationMiddleware,
    ErrorHandlerMiddleware,
    parse_errors,
)


def _response(status_code: int, **kwargs: object) -> httpx.Response:
    request = httpx.Request("GET", "https://api.example.com/articles")
    return httpx.Response(status_code, request=request, **kwargs)


def test_request_headers() -> None:
    tokens = iter(["first", None])
    hook = ContentNegotiationMiddleware(lambda: next(tokens))

    request = httpx.Request("GET", "https://api.example.com/articles")
    hook(request)
    assert request.headers["content-type"] == "application/vnd.api+json"
    assert request.headers["accept"] == "application/vnd.api+json"
    assert request.headers["authorization"] == "Bearer first"
    assert "access-control-allow-credentials" not in request.headers

    request = httpx.Request("GET", "https://api.example.com/articles")
    hook(request)
    assert "authorization" not in request.headers


def test_allow_credentials_header() -> None:
    request = httpx.Request("GET", "https://api.example.com/articles")
    ContentNegotiationMiddleware(lambda: None, allow_credentials=True)(request)
    assert request.headers["access-control-allow-credentials"] == "true"


def test_parse_errors() -> None:
    response = _response(
        422,
        json={"errors": [{"status": 422, "code": "invalid", "source": {"pointer": "/data"}}]},
    )
    errors = parse_errors(response)
    assert len(errors) == 1
    assert errors[0].status == 422
    assert errors[0].source == {"pointer": "/data"}


def test_parse_errors_without_jsonapi_body() -> None:
    assert parse_errors(_response(500, text="boom")) == []
    assert parse_errors(_response(500, json={"message": "boom"})) == []
    assert parse_errors(_response(500)) == []


def test_error_hook_ignores_success(caplog) -> None:
    ErrorHandlerMiddleware(log_errors=True)(
        _response(200, json={"data": None}, headers={"content-type": "application/vnd.api+json"})
    )
    assert caplog.records == []
