"""Core swaggerhost data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class SecurityType(str, Enum):
    """Security scheme type tags, spelled as in Swagger 2.0."""

    BASIC = "basic"
    API_KEY = "apiKey"
    IMPLICIT = "implicit"
    PASSWORD = "password"
    APPLICATION = "application"
    ACCESS_CODE = "accessCode"


API_KEY_LOCATIONS = ("header", "query", "cookie")


@dataclass(frozen=True, slots=True)
class SpecURL:
    """Additional spec document listed in the UI's definition selector."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class BasicAuth:
    def to_swagger(self) -> Dict[str, Any]:
        return {"type": "basic"}

    def to_openapi(self) -> Dict[str, Any]:
        return {"type": "http", "scheme": "basic"}


@dataclass(frozen=True, slots=True)
class APIKeyAuth:
    """API key passed in a header, query parameter or cookie."""

    name: str
    location: str

    def to_swagger(self) -> Dict[str, Any]:
        return {"type": "apiKey", "name": self.name, "in": self.location}

    def to_openapi(self) -> Dict[str, Any]:
        return self.to_swagger()


@dataclass(frozen=True, slots=True)
class OAuth2Implicit:
    authorization_url: str

    def to_swagger(self) -> Dict[str, Any]:
        return {
            "type": "oauth2",
            "flow": "implicit",
            "authorizationUrl": self.authorization_url,
            "scopes": {},
        }

    def to_openapi(self) -> Dict[str, Any]:
        return _oauth2_flows(implicit={"authorizationUrl": self.authorization_url})


@dataclass(frozen=True, slots=True)
class OAuth2Password:
    token_url: str

    def to_swagger(self) -> Dict[str, Any]:
        return {"type": "oauth2", "flow": "password", "tokenUrl": self.token_url, "scopes": {}}

    def to_openapi(self) -> Dict[str, Any]:
        return _oauth2_flows(password={"tokenUrl": self.token_url})


@dataclass(frozen=True, slots=True)
class OAuth2Application:
    """Client credentials flow (``application`` in Swagger 2.0)."""

    token_url: str

    def to_swagger(self) -> Dict[str, Any]:
        return {"type": "oauth2", "flow": "application", "tokenUrl": self.token_url, "scopes": {}}

    def to_openapi(self) -> Dict[str, Any]:
        return _oauth2_flows(clientCredentials={"tokenUrl": self.token_url})


@dataclass(frozen=True, slots=True)
class OAuth2AccessCode:
    """Authorization code flow (``accessCode`` in Swagger 2.0)."""

    authorization_url: str
    token_url: str

    def to_swagger(self) -> Dict[str, Any]:
        return {
            "type": "oauth2",
            "flow": "accessCode",
            "authorizationUrl": self.authorization_url,
            "tokenUrl": self.token_url,
            "scopes": {},
        }

    def to_openapi(self) -> Dict[str, Any]:
        return _oauth2_flows(
            authorizationCode={
                "authorizationUrl": self.authorization_url,
                "tokenUrl": self.token_url,
            }
        )


SecurityScheme = Union[
    BasicAuth,
    APIKeyAuth,
    OAuth2Implicit,
    OAuth2Password,
    OAuth2Application,
    OAuth2AccessCode,
]


def _oauth2_flows(**flows: Dict[str, str]) -> Dict[str, Any]:
    return {
        "type": "oauth2",
        "flows": {name: {**flow, "scopes": {}} for name, flow in flows.items()},
    }
