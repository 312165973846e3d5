"""Core enumerations shared by the provider config classes."""

from enum import Enum


class ProviderKind(Enum):
    """Kinds of sign-in providers handled by this library."""

    PASSWORD = "password"
    SAML = "saml"
    OIDC = "oidc"


class AuthClientErrorCode(str, Enum):
    """Error codes attached to provider configuration failures."""

    INTERNAL_ERROR = "internal-error"
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_CONFIG = "invalid-config"
    INVALID_PROVIDER_ID = "invalid-provider-id"
    MISSING_PROVIDER_ID = "missing-provider-id"
    MISSING_OAUTH_CLIENT_ID = "missing-oauth-client-id"
    INVALID_OAUTH_CLIENT_ID = "invalid-oauth-client-id"
    MISSING_ISSUER = "missing-issuer"
    MISSING_SAML_RELYING_PARTY_CONFIG = "missing-saml-relying-party-config"

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_DEFAULT_MESSAGES = {
    AuthClientErrorCode.INTERNAL_ERROR: "An internal error has occurred.",
    AuthClientErrorCode.INVALID_ARGUMENT: "Invalid argument provided.",
    AuthClientErrorCode.INVALID_CONFIG: "The provided configuration is invalid.",
    AuthClientErrorCode.INVALID_PROVIDER_ID: (
        "The providerId must be a valid supported provider identifier string."
    ),
    AuthClientErrorCode.MISSING_PROVIDER_ID: (
        "A valid provider ID must be provided in the request."
    ),
    AuthClientErrorCode.MISSING_OAUTH_CLIENT_ID: (
        "The OAuth/OIDC configuration client ID must not be empty."
    ),
    AuthClientErrorCode.INVALID_OAUTH_CLIENT_ID: (
        "The provided OAuth client ID is invalid."
    ),
    AuthClientErrorCode.MISSING_ISSUER: (
        "The OAuth/OIDC configuration issuer must not be empty."
    ),
    AuthClientErrorCode.MISSING_SAML_RELYING_PARTY_CONFIG: (
        "The SAML configuration provided is missing a relying party configuration."
    ),
}
