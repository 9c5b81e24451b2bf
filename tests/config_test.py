"""Tests for service configuration."""

import pytest
from pydantic import ValidationError

from jsonapi_client import ServiceConfig
from jsonapi_client.core.deserializer import DEFAULT_MAX_DEPTH


def test_defaults() -> None:
    config = ServiceConfig()
    assert config.base_url == ""
    assert config.auth_token is None
    assert not config.log_errors
    assert not config.log_responses
    assert config.global_query_params == {}
    assert config.max_include_depth == DEFAULT_MAX_DEPTH


def test_max_include_depth_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ServiceConfig(max_include_depth=0)


@pytest.mark.parametrize(
    ("env", "log_errors", "log_responses", "allow_credentials"),
    [
        ("", False, False, False),
        ("production", False, False, False),
        ("development", True, True, False),
        ("test", True, False, True),
        ("TEST", True, False, True),
    ],
)
def test_from_env_toggles(
    env: str, log_errors: bool, log_responses: bool, allow_credentials: bool
) -> None:
    config = ServiceConfig.from_env({"JSONAPI_ENV": env})
    assert config.log_errors is log_errors
    assert config.log_responses is log_responses
    assert config.allow_credentials is allow_credentials


def test_from_env_values() -> None:
    config = ServiceConfig.from_env(
        {
            "API_BASE_URL": "https://api.example.com",
            "API_AUTH_TOKEN": "secret",
            "API_TIMEOUT": "2.5",
        },
        prefix="API_",
        log_errors=True,
    )
    assert config.base_url == "https://api.example.com"
    assert config.auth_token == "secret"
    assert config.timeout == 2.5
    assert config.log_errors


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSONAPI_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("JSONAPI_ENV", "development")
    config = ServiceConfig.from_env()
    assert config.base_url == "https://env.example.com"
    assert config.log_responses
