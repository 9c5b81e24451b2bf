"""Configuration for the JSON:API service."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from jsonapi_client.core.deserializer import DEFAULT_MAX_DEPTH

#: Environments in which failed responses are logged.
ERROR_LOGGING_ENVIRONMENTS = {"test", "development"}


class ServiceConfig(BaseModel):
    """Explicit settings for :class:`jsonapi_client.service.JSONAPIService`.

    Nothing here is read implicitly; use :meth:`from_env` to build a
    configuration from environment variables.
    """

    base_url: str = ""
    auth_token: Optional[str] = None
    timeout: float = 30.0
    log_errors: bool = False
    log_responses: bool = False
    allow_credentials: bool = False
    global_query_params: Dict[str, Any] = Field(default_factory=dict)
    max_include_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    # Called with the failed httpx.Response before JSONAPIHTTPError is raised.
    on_error: Optional[Callable[..., Any]] = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "JSONAPI_",
        **overrides: Any,
    ) -> "ServiceConfig":
        """Build a configuration from ``<prefix>BASE_URL``, ``AUTH_TOKEN``, ``TIMEOUT`` and ``ENV``."""
        environ = os.environ if environ is None else environ
        env = environ.get(f"{prefix}ENV", "").lower()
        values: dict[str, Any] = {
            "log_errors": env in ERROR_LOGGING_ENVIRONMENTS,
            "log_responses": env == "development",
            "allow_credentials": env == "test",
        }
        if f"{prefix}BASE_URL" in environ:
            values["base_url"] = environ[f"{prefix}BASE_URL"]
        if f"{prefix}AUTH_TOKEN" in environ:
            values["auth_token"] = environ[f"{prefix}AUTH_TOKEN"]
        if f"{prefix}TIMEOUT" in environ:
            values["timeout"] = environ[f"{prefix}TIMEOUT"]
        values.update(overrides)
        return cls(**values)
