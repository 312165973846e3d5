"""Configuration document loading for provider definitions."""

from .loader import ProviderConfigLoader, ProviderRequest, ProviderRequests
from .schema import ProviderConfigsDocument, ProviderConfigsSection

__all__ = [
    "ProviderConfigLoader",
    "ProviderRequest",
    "ProviderRequests",
    "ProviderConfigsDocument",
    "ProviderConfigsSection",
]
