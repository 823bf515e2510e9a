"""FastAPI application hosting the Swagger UI."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI

from swaggerhost.config import SwaggerConfig
from swaggerhost.registry import SchemeRegistry
from swaggerhost.web.swagger import SwaggerUI

LOGGER = logging.getLogger(__name__)


def create_app(
    config: SwaggerConfig | None = None,
    registry: SchemeRegistry | None = None,
) -> FastAPI:
    """Create the host application and install the Swagger UI into it.

    The application's own OpenAPI document is served at ``/openapi.json``
    with the registered security schemes merged in, so the default
    configuration documents the host itself.
    """
    config = config if config is not None else SwaggerConfig()
    registry = registry if registry is not None else SchemeRegistry()

    app = FastAPI(title=config.name, docs_url=None, redoc_url=None)
    app.state.scheme_registry = registry

    base_openapi = app.openapi

    def openapi() -> Dict[str, Any]:
        return registry.apply(base_openapi())

    app.openapi = openapi  # type: ignore[method-assign]

    if not config.enabled:
        LOGGER.info("Swagger UI is disabled")
        return app

    ui = SwaggerUI(config)
    ui.install(app, registry)
    app.state.swagger_ui = ui
    return app
