"""Swagger UI index page, helper page and static assets."""

from __future__ import annotations

import logging
from importlib.resources import files
from typing import Any, Awaitable, Callable, List, Protocol, Tuple

from fastapi import HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from jinja2 import Environment, StrictUndefined, Template, TemplateError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route
from starlette.types import ASGIApp

from swaggerhost.assets import AssetNotFoundError, AssetStore
from swaggerhost.config import SwaggerConfig
from swaggerhost.registry import SecuritySchemeRegistry
from swaggerhost.schemes import SchemeConfig

LOGGER = logging.getLogger(__name__)

OAUTH2_REDIRECT_ASSET = "oauth2-redirect.html"

Endpoint = Callable[[Request], Awaitable[Response]]


class Mux(Protocol):
    """Anything routes can be added to: FastAPI, Starlette or an APIRouter."""

    def add_route(
        self,
        path: str,
        route: Endpoint,
        methods: List[str] | None = None,
        name: str | None = None,
        include_in_schema: bool = True,
    ) -> None: ...

    def mount(self, path: str, app: ASGIApp, name: str | None = None) -> None: ...


def _load_template() -> Template:
    source = files("swaggerhost.web").joinpath("templates", "index.html.j2")
    env = Environment(autoescape=True, undefined=StrictUndefined)
    return env.from_string(source.read_text(encoding="utf-8"))


class SwaggerUI:
    """Swagger UI bound to one configuration.

    Use :meth:`install` to add the UI routes to an existing application, or
    :meth:`handler` to get a standalone ASGI app to mount.
    """

    def __init__(
        self,
        config: SwaggerConfig,
        assets: AssetStore | None = None,
        template: Template | None = None,
    ) -> None:
        self.config = config
        self.assets = assets if assets is not None else AssetStore()
        self.template = template if template is not None else _load_template()

    def schemes(self) -> Tuple[SchemeConfig, ...]:
        return self.config.schemes

    def install(self, mux: Mux, registry: SecuritySchemeRegistry | None = None) -> None:
        """Add the UI routes to ``mux`` and register the configured schemes.

        Schemes are validated and registered in order; the first failure is
        raised and the schemes registered before it are left in place.
        """
        base = self.config.base_path
        mux.add_route(
            base,
            self._redirect_to(base + "/"),
            methods=["GET"],
            name="swagger_redirect",
            include_in_schema=False,
        )
        mux.add_route(
            base + "/",
            self._index_endpoint(self.config.static_path, self.config.oauth2_redirect_path),
            methods=["GET"],
            name="swagger_index",
            include_in_schema=False,
        )
        mux.add_route(
            self.config.oauth2_redirect_path,
            self.oauth2_redirect,
            methods=["GET"],
            name="swagger_oauth2_redirect",
            include_in_schema=False,
        )
        mux.mount(self.config.static_path, self.assets.static_app(), name="swagger_static")
        LOGGER.info("Serving %s at %s/", self.config.name, base)

        for descriptor in self.config.schemes:
            scheme = descriptor.validate_scheme()
            if registry is None:
                continue
            registry.register(descriptor.name, scheme)
            LOGGER.info("Registered security scheme %s (%s)", descriptor.name, descriptor.type)

    def handler(self) -> Starlette:
        """Build an ASGI app serving the index and every other asset under base_path."""
        base = self.config.base_path
        index = self._index_endpoint(base, f"{base}/{OAUTH2_REDIRECT_ASSET}")
        routes = [
            Route(base, index, methods=["GET"]),
            Route(base + "/", index, methods=["GET"]),
            Route(base + "/index.html", index, methods=["GET"]),
            Mount(base, app=self.assets.static_app()),
        ]
        return Starlette(routes=routes)

    def render_index(self, asset_url: str, oauth2_redirect_url: str) -> str:
        return self.template.render(
            config=self.config,
            asset_url=asset_url,
            oauth2_redirect_url=oauth2_redirect_url,
            urls=self.spec_urls(),
        )

    def spec_urls(self) -> List[dict[str, str]]:
        """Definitions for the UI selector, primary document first.

        Empty when only the primary document is configured.
        """
        if not self.config.urls:
            return []
        primary = {"name": self.config.name, "url": self.config.url}
        return [primary] + [{"name": item.name, "url": item.url} for item in self.config.urls]

    def _index_endpoint(self, asset_path: str, oauth2_redirect_path: str) -> Endpoint:
        async def index(request: Request) -> Response:
            root = request.scope.get("root_path", "")
            try:
                html = self.render_index(root + asset_path, root + oauth2_redirect_path)
            except TemplateError as exc:
                LOGGER.exception("Unable to render the Swagger UI index: %s", exc)
                raise HTTPException(
                    status_code=500, detail="Unable to render the API documentation"
                ) from exc
            return HTMLResponse(content=html)

        return index

    async def oauth2_redirect(self, request: Request) -> Response:
        try:
            content = self.assets[OAUTH2_REDIRECT_ASSET]
        except AssetNotFoundError:
            raise HTTPException(status_code=404, detail="Not Found")
        return HTMLResponse(content=content)

    @staticmethod
    def _redirect_to(to: str) -> Endpoint:
        async def redirect(request: Request) -> Response:
            root = request.scope.get("root_path", "")
            return RedirectResponse(url=root + to, status_code=302)

        return redirect


def describe(ui: SwaggerUI) -> dict[str, Any]:
    """Summarise where the UI lives, for logging and the CLI."""
    config = ui.config
    return {
        "name": config.name,
        "index": config.base_path + "/",
        "spec": [config.url] + [item.url for item in config.urls],
        "static": config.static_path,
        "oauth2_redirect": config.oauth2_redirect_path,
        "schemes": [descriptor.name for descriptor in config.schemes],
    }
