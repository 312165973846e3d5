"""Test provider dispatch helpers."""

import pytest

from idp_config.exceptions import InternalAssertionError, InvalidProviderConfigError
from idp_config.factory import (
    build_create_request,
    build_update_request,
    provider_config_class,
    provider_config_from_response,
)
from idp_config.providers import OIDCProviderConfig, SAMLProviderConfig
from idp_config.types import AuthClientErrorCode, ProviderKind


class TestProviderConfigClass:
    """Test provider class resolution."""

    def test_saml_provider(self):
        assert provider_config_class("saml.provider") is SAMLProviderConfig

    def test_oidc_provider(self):
        assert provider_config_class("oidc.provider") is OIDCProviderConfig

    @pytest.mark.parametrize("provider_id", ["", None, "provider", "google.com", 1])
    def test_unsupported_provider(self, provider_id):
        with pytest.raises(
            InvalidProviderConfigError, match="A valid provider ID must be provided"
        ) as exc_info:
            provider_config_class(provider_id)

        assert exc_info.value.code is AuthClientErrorCode.INVALID_PROVIDER_ID

    def test_provider_kinds(self):
        assert SAMLProviderConfig.KIND is ProviderKind.SAML
        assert OIDCProviderConfig.KIND is ProviderKind.OIDC


class TestBuildCreateRequest:
    """Test full provider definitions."""

    def test_saml_request(self, saml_options):
        config_class, request = build_create_request(saml_options)

        assert config_class is SAMLProviderConfig
        assert request == SAMLProviderConfig.build_server_request(saml_options)

    def test_oidc_request(self, oidc_options):
        config_class, request = build_create_request(oidc_options)

        assert config_class is OIDCProviderConfig
        assert request["clientId"] == "CLIENT_ID"

    def test_missing_provider_id(self, oidc_options):
        del oidc_options["providerId"]

        with pytest.raises(InvalidProviderConfigError) as exc_info:
            build_create_request(oidc_options)

        assert exc_info.value.code is AuthClientErrorCode.INVALID_PROVIDER_ID

    def test_non_mapping_options(self):
        with pytest.raises(InvalidProviderConfigError):
            build_create_request(None)

    def test_strict_validation(self, saml_options):
        del saml_options["ssoURL"]

        with pytest.raises(InvalidProviderConfigError, match="ssoURL"):
            build_create_request(saml_options)


class TestBuildUpdateRequest:
    """Test partial provider updates."""

    def test_saml_update(self):
        config_class, request, update_mask = build_update_request(
            "saml.provider",
            {"enabled": False, "ssoURL": "https://example.com/new"},
        )

        assert config_class is SAMLProviderConfig
        assert request == {
            "enabled": False,
            "idpConfig": {"ssoUrl": "https://example.com/new"},
        }
        assert update_mask == ["enabled", "idpConfig.ssoUrl"]

    def test_oidc_update(self):
        config_class, request, update_mask = build_update_request(
            "oidc.provider", {"displayName": "renamed"}
        )

        assert config_class is OIDCProviderConfig
        assert request == {"displayName": "renamed"}
        assert update_mask == ["displayName"]

    def test_empty_update(self):
        _, request, update_mask = build_update_request("oidc.provider", {})

        assert request == {}
        assert update_mask == []

    def test_matching_provider_id_in_options(self):
        _, request, _ = build_update_request(
            "oidc.provider", {"providerId": "oidc.provider", "enabled": True}
        )

        assert request == {"enabled": True}

    def test_changed_provider_id(self):
        with pytest.raises(InvalidProviderConfigError, match="cannot be changed") as exc_info:
            build_update_request("oidc.provider", {"providerId": "oidc.other"})

        assert exc_info.value.code is AuthClientErrorCode.INVALID_ARGUMENT

    def test_unsupported_provider(self):
        with pytest.raises(InvalidProviderConfigError) as exc_info:
            build_update_request("provider", {"enabled": True})

        assert exc_info.value.code is AuthClientErrorCode.INVALID_PROVIDER_ID

    def test_non_mapping_options(self):
        with pytest.raises(InvalidProviderConfigError) as exc_info:
            build_update_request("saml.provider", None)

        assert exc_info.value.code is AuthClientErrorCode.INVALID_CONFIG

    def test_invalid_field(self):
        with pytest.raises(InvalidProviderConfigError) as exc_info:
            build_update_request("oidc.provider", {"issuer": "not-a-url"})

        assert exc_info.value.code is AuthClientErrorCode.INVALID_CONFIG


class TestProviderConfigFromResponse:
    """Test parsing responses of either kind."""

    def test_saml_response(self, saml_response):
        config = provider_config_from_response(saml_response)

        assert isinstance(config, SAMLProviderConfig)
        assert config.provider_id == "saml.provider"

    def test_oidc_response(self, oidc_response):
        config = provider_config_from_response(oidc_response)

        assert isinstance(config, OIDCProviderConfig)
        assert config.provider_id == "oidc.provider"

    @pytest.mark.parametrize(
        "response",
        [
            {"name": "projects/project1/tenants/t1"},
            {"name": "projects/project1/oauthIdpConfigs/saml.provider"},
            {},
            None,
        ],
    )
    def test_unrecognized_response(self, response):
        with pytest.raises(InternalAssertionError):
            provider_config_from_response(response)

    def test_malformed_response_of_known_kind(self, oidc_response):
        del oidc_response["issuer"]

        with pytest.raises(InternalAssertionError, match="OIDC"):
            provider_config_from_response(oidc_response)
