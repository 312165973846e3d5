"""Provider config classes."""

from .base import FederatedProviderConfig
from .oidc import OIDCProviderConfig
from .password import PasswordSignInConfig
from .saml import SAMLProviderConfig

__all__ = [
    "FederatedProviderConfig",
    "OIDCProviderConfig",
    "PasswordSignInConfig",
    "SAMLProviderConfig",
]
