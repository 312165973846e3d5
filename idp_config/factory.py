"""
Provider dispatch for federated provider configs.

Callers that accept "some federated provider" requests go through these
helpers, which pick the SAML or OIDC config class from the provider ID (for
client requests) or the resource name (for server responses).
"""

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import InternalAssertionError, InvalidProviderConfigError
from .providers.base import FederatedProviderConfig
from .providers.oidc import OIDCProviderConfig
from .providers.saml import SAMLProviderConfig
from .types import AuthClientErrorCode
from .utils import generate_update_mask, is_non_null_object, is_string

logger = logging.getLogger(__name__)

FEDERATED_PROVIDER_CLASSES: tuple[type[FederatedProviderConfig], ...] = (
    OIDCProviderConfig,
    SAMLProviderConfig,
)


def provider_config_class(provider_id: Any) -> type[FederatedProviderConfig]:
    """
    Resolve the config class for a provider ID.

    Args:
        provider_id: Provider ID such as ``saml.acme`` or ``oidc.acme``

    Returns:
        SAMLProviderConfig or OIDCProviderConfig

    Raises:
        InvalidProviderConfigError: If the ID has no supported prefix
    """
    for config_class in FEDERATED_PROVIDER_CLASSES:
        if config_class.is_provider_id(provider_id):
            return config_class

    raise InvalidProviderConfigError(
        AuthClientErrorCode.INVALID_PROVIDER_ID,
        "A valid provider ID must be provided in the request.",
        {"provider_id": provider_id},
    )


def build_create_request(
    options: Any,
) -> tuple[type[FederatedProviderConfig], dict[str, Any]]:
    """
    Validate and convert a full provider definition.

    Returns:
        Tuple of the matching config class and its server request

    Raises:
        InvalidProviderConfigError: If the provider ID is unsupported or the
            options fail strict validation
    """
    provider_id = options.get("providerId") if is_non_null_object(options) else None
    config_class = provider_config_class(provider_id)

    request = config_class.build_server_request(options)

    logger.debug("Built create request for %s", provider_id)
    return config_class, request


def build_update_request(
    provider_id: str, options: Any
) -> tuple[type[FederatedProviderConfig], dict[str, Any], list[str]]:
    """
    Validate and convert a partial update for an existing provider.

    Args:
        provider_id: ID of the provider being updated
        options: The changed fields only

    Returns:
        Tuple of the config class, the server request and its update mask

    Raises:
        InvalidProviderConfigError: If the provider ID is unsupported, the
            options name a different provider or fail partial validation
    """
    config_class = provider_config_class(provider_id)

    if is_non_null_object(options) and options.get("providerId", provider_id) != provider_id:
        raise InvalidProviderConfigError(
            AuthClientErrorCode.INVALID_ARGUMENT,
            f'"providerId" cannot be changed from "{provider_id}".',
        )

    request = config_class.build_server_request(options, ignore_missing_fields=True)
    if request is None:
        raise InvalidProviderConfigError(
            AuthClientErrorCode.INVALID_CONFIG,
            f'"{config_class.CONFIG_NAME}" must be a valid non-null object.',
        )

    update_mask = generate_update_mask(request)
    logger.debug("Built update request for %s with mask %s", provider_id, update_mask)
    return config_class, request, update_mask


def provider_config_from_response(
    response: Mapping[str, Any],
) -> FederatedProviderConfig:
    """
    Parse a federated provider response of either kind.

    The kind is picked from the resource collection in ``response["name"]``.

    Raises:
        InternalAssertionError: If the resource name matches neither kind or
            the response is malformed
    """
    name = response.get("name") if is_non_null_object(response) else None
    if is_string(name):
        for config_class in FEDERATED_PROVIDER_CLASSES:
            if config_class.provider_id_from_resource_name(name):
                return config_class.from_response(response)

    logger.warning("Unrecognized provider resource name %r", name)
    raise InternalAssertionError(
        "Invalid provider configuration response", {"field": "name"}
    )
