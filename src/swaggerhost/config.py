"""Application configuration defaults."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swaggerhost.models import SpecURL
from swaggerhost.schemes import SchemeConfig

DEFAULT_DIST_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist@5"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""


class SwaggerConfig(BaseModel):
    """Settings of one Swagger UI instance, read-only once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = True
    name: str = "API Documentation"
    url: str = "/openapi.json"
    client_id: str = Field("", alias="clientId")
    client_secret: str = Field("", alias="clientSecret")
    schemes: Tuple[SchemeConfig, ...] = ()
    urls: Tuple[SpecURL, ...] = ()
    base_path: str = Field("/api", alias="basePath")
    static_path: str = Field("/static", alias="staticPath")
    oauth2_redirect_path: str = Field("/oauth2-redirect.html", alias="oauth2RedirectPath")
    dist_url: str = Field(DEFAULT_DIST_URL, alias="distUrl")

    @field_validator("base_path", "static_path", "oauth2_redirect_path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        path = "/" + value.strip().strip("/")
        if path == "/":
            raise ValueError("path must not be the server root")
        return path

    @field_validator("dist_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_config(path: Path) -> SwaggerConfig:
    """Read a JSON configuration file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return SwaggerConfig.model_validate(data)
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
