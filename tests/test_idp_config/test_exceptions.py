"""Test cases for provider config exceptions."""

import pytest

from idp_config.exceptions import (
    AuthConfigError,
    AuthError,
    ConfigurationError,
    InternalAssertionError,
    InvalidProviderConfigError,
)
from idp_config.types import AuthClientErrorCode


class TestAuthExceptions:
    """Test exception hierarchy and functionality."""

    def test_base_auth_error(self):
        """Test base AuthError exception."""
        error = AuthError("Test error", {"code": 123})

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {"code": 123}

    def test_auth_error_without_details(self):
        """Test AuthError without details."""
        error = AuthError("Test error")

        assert error.details == {}

    def test_auth_config_error_carries_code(self):
        """Test AuthConfigError keeps its code and message."""
        error = AuthConfigError(AuthClientErrorCode.INVALID_CONFIG, "Bad config")

        assert isinstance(error, AuthError)
        assert error.code is AuthClientErrorCode.INVALID_CONFIG
        assert error.code_string == "auth/invalid-config"
        assert str(error) == "Bad config"

    def test_auth_config_error_default_message(self):
        """Test AuthConfigError falls back to the code's default message."""
        error = AuthConfigError(AuthClientErrorCode.MISSING_PROVIDER_ID)

        assert error.message == "A valid provider ID must be provided in the request."

    def test_auth_config_error_accepts_code_string(self):
        """Test AuthConfigError coerces a plain code string."""
        error = AuthConfigError("missing-issuer")

        assert error.code is AuthClientErrorCode.MISSING_ISSUER

    def test_internal_assertion_error(self):
        """Test InternalAssertionError is always an internal error."""
        error = InternalAssertionError("Invalid SAML configuration response")

        assert isinstance(error, AuthConfigError)
        assert error.code is AuthClientErrorCode.INTERNAL_ERROR
        assert (
            error.message
            == "INTERNAL ASSERT FAILED: Invalid SAML configuration response"
        )

    def test_invalid_provider_config_error(self):
        """Test InvalidProviderConfigError inheritance."""
        error = InvalidProviderConfigError(AuthClientErrorCode.INVALID_PROVIDER_ID)

        assert isinstance(error, AuthConfigError)
        assert error.code_string == "auth/invalid-provider-id"

    def test_configuration_error(self):
        """Test ConfigurationError is not an AuthConfigError."""
        error = ConfigurationError("Configuration file not found")

        assert isinstance(error, AuthError)
        assert not isinstance(error, AuthConfigError)

    def test_exception_raising(self):
        """Test that exceptions can be raised and caught by base class."""
        with pytest.raises(AuthError):
            raise InvalidProviderConfigError(AuthClientErrorCode.INVALID_CONFIG)

    def test_every_code_has_default_message(self):
        """Test each error code exposes a default message."""
        for code in AuthClientErrorCode:
            assert code.default_message
