"""
Identity provider configuration translation and validation.

This package converts between the client-facing representation of sign-in
provider settings and the wire format of the auth management backend.

Supported providers:
- Password sign-in
- SAML federation
- OIDC federation

Every provider class offers the same operations: build from a server
response, validate client options, build a server request, and serialize back
to a plain mapping.
"""

from .exceptions import (
    AuthConfigError,
    AuthError,
    ConfigurationError,
    InternalAssertionError,
    InvalidProviderConfigError,
)
from .factory import (
    build_create_request,
    build_update_request,
    provider_config_class,
    provider_config_from_response,
)
from .providers import (
    FederatedProviderConfig,
    OIDCProviderConfig,
    PasswordSignInConfig,
    SAMLProviderConfig,
)
from .types import AuthClientErrorCode, ProviderKind
from .utils import generate_update_mask

__all__ = [
    # Provider configs
    "FederatedProviderConfig",
    "OIDCProviderConfig",
    "PasswordSignInConfig",
    "SAMLProviderConfig",
    # Dispatch
    "build_create_request",
    "build_update_request",
    "provider_config_class",
    "provider_config_from_response",
    "generate_update_mask",
    # Types
    "AuthClientErrorCode",
    "ProviderKind",
    # Exceptions
    "AuthError",
    "AuthConfigError",
    "ConfigurationError",
    "InternalAssertionError",
    "InvalidProviderConfigError",
]
