"""Security scheme registry and OpenAPI document merging."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator, List, Protocol

from swaggerhost.models import SecurityScheme

LOGGER = logging.getLogger(__name__)


class SchemeRegistrationError(RuntimeError):
    """Raised when a scheme cannot be added to the registry."""


class SecuritySchemeRegistry(Protocol):
    def register(self, name: str, scheme: SecurityScheme) -> None: ...


class SchemeRegistry:
    """Ordered collection of named security schemes.

    Registered schemes end up in the served OpenAPI document through
    :meth:`apply`; names are unique and never replaced.
    """

    def __init__(self) -> None:
        self._schemes: Dict[str, SecurityScheme] = {}

    def register(self, name: str, scheme: SecurityScheme) -> None:
        if not name:
            raise SchemeRegistrationError("security scheme name must not be empty")
        if name in self._schemes:
            raise SchemeRegistrationError(f"security scheme {name} is already registered")
        self._schemes[name] = scheme
        LOGGER.debug("Registered security scheme %s (%s)", name, type(scheme).__name__)

    def get(self, name: str) -> SecurityScheme | None:
        return self._schemes.get(name)

    def names(self) -> List[str]:
        return list(self._schemes)

    def __contains__(self, name: object) -> bool:
        return name in self._schemes

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemes)

    def __len__(self) -> int:
        return len(self._schemes)

    def apply(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``document`` carrying the registered schemes.

        Swagger 2.0 documents (``"swagger"`` key) receive them under
        ``securityDefinitions``; anything else is treated as OpenAPI 3 and
        receives them under ``components.securitySchemes``. Schemes the
        document already declares are kept.
        """
        merged = copy.deepcopy(document)
        if not self._schemes:
            return merged

        if "swagger" in merged:
            target = merged.setdefault("securityDefinitions", {})
            for name, scheme in self._schemes.items():
                target.setdefault(name, scheme.to_swagger())
        else:
            target = merged.setdefault("components", {}).setdefault("securitySchemes", {})
            for name, scheme in self._schemes.items():
                target.setdefault(name, scheme.to_openapi())
        return merged
