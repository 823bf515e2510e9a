"""Tests for security scheme validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from swaggerhost.models import (
    APIKeyAuth,
    BasicAuth,
    OAuth2AccessCode,
    OAuth2Application,
    OAuth2Implicit,
    OAuth2Password,
)
from swaggerhost.schemes import SchemeConfig, SchemeValidationError, validate


VALID = {
    "basic": ({"type": "basic"}, BasicAuth()),
    "apiKey": (
        {"type": "apiKey", "fieldName": "X-Token", "valueSource": "header"},
        APIKeyAuth("X-Token", "header"),
    ),
    "implicit": (
        {"type": "implicit", "authorizationURL": "https://auth/authorize"},
        OAuth2Implicit("https://auth/authorize"),
    ),
    "password": (
        {"type": "password", "tokenURL": "https://auth/token"},
        OAuth2Password("https://auth/token"),
    ),
    "application": (
        {"type": "application", "tokenURL": "https://auth/token"},
        OAuth2Application("https://auth/token"),
    ),
    "accessCode": (
        {
            "type": "accessCode",
            "authorizationURL": "https://auth/authorize",
            "tokenURL": "https://auth/token",
        },
        OAuth2AccessCode("https://auth/authorize", "https://auth/token"),
    ),
}

REQUIRED = [
    ("apiKey", "fieldName"),
    ("apiKey", "valueSource"),
    ("implicit", "authorizationURL"),
    ("password", "tokenURL"),
    ("application", "tokenURL"),
    ("accessCode", "tokenURL"),
    ("accessCode", "authorizationURL"),
]


class TestSchemeConfig:
    """Test parsing of SchemeConfig."""

    def test_parses_json_keys(self) -> None:
        """Should accept the camelCase keys used in configuration files."""
        descriptor = SchemeConfig.model_validate(
            {"name": "token", "type": "apiKey", "fieldName": "X-Token", "valueSource": "query"}
        )
        assert descriptor.field_name == "X-Token"
        assert descriptor.value_source == "query"

    def test_accepts_field_names(self) -> None:
        """Should accept snake_case field names as well."""
        descriptor = SchemeConfig(name="oauth", type="password", token_url="https://t")
        assert descriptor.token_url == "https://t"

    def test_is_frozen(self) -> None:
        """Should reject mutation after construction."""
        descriptor = SchemeConfig(name="basic", type="basic")
        with pytest.raises(ValidationError):
            descriptor.name = "other"  # type: ignore[misc]


class TestValidate:
    """Test SchemeConfig.validate_scheme."""

    @pytest.mark.parametrize("tag", sorted(VALID))
    def test_valid_descriptor(self, tag: str) -> None:
        """Returns the scheme variant matching the type tag."""
        fields, expected = VALID[tag]
        descriptor = SchemeConfig.model_validate({"name": "auth", **fields})
        assert descriptor.validate_scheme() == expected
        assert validate(descriptor) == expected

    @pytest.mark.parametrize(("tag", "missing"), REQUIRED)
    def test_missing_required_field(self, tag: str, missing: str) -> None:
        """Names the missing field and the type tag."""
        fields = dict(VALID[tag][0])
        fields[missing] = ""
        descriptor = SchemeConfig.model_validate({"name": "auth", **fields})

        with pytest.raises(SchemeValidationError, match=f"{missing} must be set for {tag}"):
            descriptor.validate_scheme()

    def test_access_code_reports_token_url_first(self) -> None:
        """With both URLs missing, tokenURL is reported."""
        descriptor = SchemeConfig(name="auth", type="accessCode")
        with pytest.raises(SchemeValidationError, match="tokenURL"):
            descriptor.validate_scheme()

    def test_empty_name(self) -> None:
        """Rejects descriptors without a name before looking at the type."""
        descriptor = SchemeConfig(name="", type="nonsense")
        with pytest.raises(SchemeValidationError, match="name must be set"):
            descriptor.validate_scheme()

    @pytest.mark.parametrize("tag", ["", "oauth2", "Basic", "api-key"])
    def test_unknown_type_lists_valid_tags(self, tag: str) -> None:
        """Error text enumerates all six valid tags."""
        descriptor = SchemeConfig(name="auth", type=tag)
        with pytest.raises(SchemeValidationError) as excinfo:
            descriptor.validate_scheme()

        message = str(excinfo.value)
        assert "is invalid" in message
        for valid in VALID:
            assert valid in message

    def test_api_key_location_must_be_known(self) -> None:
        """valueSource outside header/query/cookie is rejected."""
        descriptor = SchemeConfig(
            name="auth", type="apiKey", field_name="X-Token", value_source="body"
        )
        with pytest.raises(SchemeValidationError, match="header, query, cookie"):
            descriptor.validate_scheme()

    @pytest.mark.parametrize("location", ["header", "query", "cookie"])
    def test_api_key_locations(self, location: str) -> None:
        descriptor = SchemeConfig(
            name="auth", type="apiKey", field_name="token", value_source=location
        )
        assert descriptor.validate_scheme() == APIKeyAuth("token", location)

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(SchemeValidationError, ValueError)
