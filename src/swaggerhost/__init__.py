"""Serve Swagger UI from inside a FastAPI / Starlette application."""

from swaggerhost.config import SwaggerConfig, load_config
from swaggerhost.registry import SchemeRegistry
from swaggerhost.schemes import SchemeConfig
from swaggerhost.web.swagger import SwaggerUI

__all__ = ["SchemeConfig", "SchemeRegistry", "SwaggerConfig", "SwaggerUI", "load_config"]
