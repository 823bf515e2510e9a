"""Security scheme descriptors and their validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from swaggerhost.models import (
    API_KEY_LOCATIONS,
    APIKeyAuth,
    BasicAuth,
    OAuth2AccessCode,
    OAuth2Application,
    OAuth2Implicit,
    OAuth2Password,
    SecurityScheme,
    SecurityType,
)


class SchemeValidationError(ValueError):
    """Raised when a scheme descriptor is missing or has invalid fields."""


class SchemeConfig(BaseModel):
    """Named security scheme as written in the configuration file.

    Only the fields required by ``type`` are looked at; see :meth:`validate_scheme`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    type: str = Field("", description="basic|apiKey|implicit|password|application|accessCode")
    field_name: str = Field("", alias="fieldName", description="used for apiKey")
    value_source: str = Field(
        "", alias="valueSource", description="used for apiKey, header|query|cookie"
    )
    authorization_url: str = Field("", alias="authorizationURL", description="used for OAuth2")
    token_url: str = Field("", alias="tokenURL", description="used for OAuth2")

    def validate_scheme(self) -> SecurityScheme:
        """Check the type-dependent fields and build the matching scheme object."""
        if not self.name:
            raise SchemeValidationError("name must be set")

        try:
            kind = SecurityType(self.type)
        except ValueError:
            valid = ", ".join(member.value for member in SecurityType)
            raise SchemeValidationError(
                f"scheme.type {self.type} is invalid, should be one of {valid}"
            ) from None

        if kind is SecurityType.BASIC:
            return BasicAuth()
        if kind is SecurityType.API_KEY:
            self._require(kind, "fieldName", self.field_name)
            self._require(kind, "valueSource", self.value_source)
            if self.value_source not in API_KEY_LOCATIONS:
                raise SchemeValidationError(
                    f"valueSource must be one of {', '.join(API_KEY_LOCATIONS)}, "
                    f"got {self.value_source}"
                )
            return APIKeyAuth(self.field_name, self.value_source)
        if kind is SecurityType.IMPLICIT:
            self._require(kind, "authorizationURL", self.authorization_url)
            return OAuth2Implicit(self.authorization_url)
        if kind is SecurityType.PASSWORD:
            self._require(kind, "tokenURL", self.token_url)
            return OAuth2Password(self.token_url)
        if kind is SecurityType.APPLICATION:
            self._require(kind, "tokenURL", self.token_url)
            return OAuth2Application(self.token_url)

        self._require(kind, "tokenURL", self.token_url)
        self._require(kind, "authorizationURL", self.authorization_url)
        return OAuth2AccessCode(self.authorization_url, self.token_url)

    @staticmethod
    def _require(kind: SecurityType, field: str, value: str) -> None:
        if not value:
            raise SchemeValidationError(f"{field} must be set for {kind.value}")


def validate(descriptor: SchemeConfig) -> SecurityScheme:
    """Validate ``descriptor`` and return its scheme object."""
    return descriptor.validate_scheme()
