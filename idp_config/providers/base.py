"""Shared behaviour for provider config classes.

SAML and OIDC configs follow the same lifecycle: parse a server response,
validate client options, build a server request and serialize back to a
plain mapping. ``FederatedProviderConfig`` carries the parts of that
lifecycle which only differ by provider prefix, resource collection and
field set.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, NoReturn

from ..exceptions import InternalAssertionError, InvalidProviderConfigError
from ..types import AuthClientErrorCode, ProviderKind
from ..utils import (
    is_boolean,
    is_non_empty_string,
    is_non_null_object,
    is_string,
)

logger = logging.getLogger(__name__)


def validate_options_object(
    options: Any, config_name: str, code: AuthClientErrorCode
) -> None:
    """Raise unless ``options`` is a mapping."""
    if not is_non_null_object(options):
        raise InvalidProviderConfigError(
            code, f'"{config_name}" must be a valid non-null object.'
        )


def reject_unknown_keys(
    options: Mapping[str, Any],
    valid_keys: Iterable[str],
    config_name: str,
    code: AuthClientErrorCode,
) -> None:
    """Raise on the first key of ``options`` that is not in ``valid_keys``."""
    valid_keys = set(valid_keys)
    for key in options:
        if key not in valid_keys:
            raise InvalidProviderConfigError(
                code, f'"{key}" is not a valid {config_name} parameter.'
            )


def pick_present(options: Mapping[str, Any], fields: Mapping[str, str]) -> dict:
    """Copy the client fields present in ``options`` under their wire names."""
    return {wire: options[client] for client, wire in fields.items() if client in options}


def lookup(data: Any, path: str) -> Any:
    """Resolve a dotted path in nested mappings, returning None when absent."""
    for part in path.split("."):
        if not is_non_null_object(data):
            return None
        data = data.get(part)
    return data


def without_unset(data: dict) -> dict:
    """Drop keys whose value is None (unset optional fields)."""
    return {key: value for key, value in data.items() if value is not None}


class FederatedProviderConfig(ABC):
    """Base class for federated (SAML/OIDC) provider configs.

    Subclasses are frozen dataclasses and set the class attributes below.
    """

    KIND: ClassVar[ProviderKind]
    PROVIDER_ID_PREFIX: ClassVar[str]
    RESOURCE_COLLECTION: ClassVar[str]
    CONFIG_NAME: ClassVar[str]
    VALID_KEYS: ClassVar[frozenset[str]]
    REQUIRED_RESPONSE_FIELDS: ClassVar[tuple[str, ...]] = ()

    # Client fields copied verbatim onto every server request.
    COMMON_REQUEST_FIELDS: ClassVar[dict[str, str]] = {
        "enabled": "enabled",
        "displayName": "displayName",
    }

    _resource_name_pattern: ClassVar[re.Pattern]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        collection = getattr(cls, "RESOURCE_COLLECTION", None)
        prefix = getattr(cls, "PROVIDER_ID_PREFIX", None)
        if collection and prefix:
            # e.g. projects/project1/inboundSamlConfigs/saml.provider1
            cls._resource_name_pattern = re.compile(
                rf"/{re.escape(collection)}/({re.escape(prefix)}.*)\Z"
            )

    @classmethod
    @abstractmethod
    def from_response(cls, response: Mapping[str, Any]) -> "FederatedProviderConfig":
        """Build a config from a server response."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the plain client-facing representation."""

    @classmethod
    def provider_id_from_resource_name(cls, resource_name: str) -> str | None:
        """
        Extract the provider ID from a server resource name.

        Args:
            resource_name: Resource name such as
                ``projects/p/inboundSamlConfigs/saml.provider``

        Returns:
            The provider ID, or None if the name does not match this kind
        """
        match = cls._resource_name_pattern.search(resource_name)
        if not match:
            return None
        return match.group(1)

    @classmethod
    def is_provider_id(cls, provider_id: Any) -> bool:
        """Check whether ``provider_id`` belongs to this provider kind."""
        return is_non_empty_string(provider_id) and provider_id.startswith(
            cls.PROVIDER_ID_PREFIX
        )

    @classmethod
    def _parse_response(cls, response: Any) -> str:
        """
        Check the server response contract and resolve the provider ID.

        Raises:
            InternalAssertionError: If a required field is missing or the
                resource name does not belong to this provider kind
        """
        kind = cls.KIND.value.upper()
        error_message = f"Invalid {kind} configuration response"

        if not is_non_null_object(response):
            logger.warning("%s response is not a mapping", kind)
            raise InternalAssertionError(error_message)

        for path in cls.REQUIRED_RESPONSE_FIELDS:
            if not lookup(response, path):
                logger.warning("%s response is missing %s", kind, path)
                raise InternalAssertionError(error_message, {"field": path})

        name = response.get("name")
        provider_id = (
            cls.provider_id_from_resource_name(name) if is_string(name) else None
        )
        if not provider_id:
            logger.warning("%s response has unexpected resource name %r", kind, name)
            raise InternalAssertionError(error_message, {"field": "name"})

        return provider_id

    @classmethod
    def build_server_request(
        cls, options: Any, ignore_missing_fields: bool = False
    ) -> dict[str, Any] | None:
        """
        Convert client options into the server request shape.

        Args:
            options: Client supplied provider options
            ignore_missing_fields: Validate as a partial update

        Returns:
            The server request, or None when ``options`` is not a request for
            this provider kind (not a mapping, or no providerId in strict mode)

        Raises:
            InvalidProviderConfigError: If the options fail validation
        """
        if not is_non_null_object(options):
            return None
        if not (options.get("providerId") or ignore_missing_fields):
            return None

        cls.validate(options, ignore_missing_fields)

        request = pick_present(options, cls.COMMON_REQUEST_FIELDS)
        request.update(cls._to_server_request(options))
        logger.debug(
            "Built %s request with fields %s", cls.CONFIG_NAME, sorted(request)
        )
        return request

    @classmethod
    @abstractmethod
    def _to_server_request(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        """Map the kind specific client fields onto the wire shape."""

    @classmethod
    def validate(cls, options: Any, ignore_missing_fields: bool = False) -> None:
        """
        Validate client options for this provider kind.

        Args:
            options: Client supplied provider options
            ignore_missing_fields: Allow required fields to be absent
                (partial updates); present fields are still checked

        Raises:
            InvalidProviderConfigError: On the first invalid field
        """
        validate_options_object(
            options, cls.CONFIG_NAME, AuthClientErrorCode.INVALID_CONFIG
        )
        reject_unknown_keys(
            options,
            cls.VALID_KEYS,
            f"{cls.KIND.value.upper()} config",
            AuthClientErrorCode.INVALID_CONFIG,
        )
        cls._validate_provider_id(options, ignore_missing_fields)
        cls._validate_fields(options, ignore_missing_fields)

        if "enabled" in options and not is_boolean(options["enabled"]):
            cls._fail(AuthClientErrorCode.INVALID_CONFIG, "enabled", "a boolean")
        if "displayName" in options and not is_string(options["displayName"]):
            cls._fail(
                AuthClientErrorCode.INVALID_CONFIG, "displayName", "a valid string"
            )

    @classmethod
    @abstractmethod
    def _validate_fields(
        cls, options: Mapping[str, Any], ignore_missing_fields: bool
    ) -> None:
        """Validate the kind specific fields."""

    @classmethod
    def _validate_provider_id(
        cls, options: Mapping[str, Any], ignore_missing_fields: bool
    ) -> None:
        provider_id = options.get("providerId")
        requirement = (
            "a valid non-empty string prefixed with "
            f'"{cls.PROVIDER_ID_PREFIX}"'
        )

        if not provider_id:
            if not ignore_missing_fields:
                cls._fail(
                    AuthClientErrorCode.MISSING_PROVIDER_ID, "providerId", requirement
                )
            return

        if not cls.is_provider_id(provider_id):
            cls._fail(AuthClientErrorCode.INVALID_PROVIDER_ID, "providerId", requirement)

    @staticmethod
    def _should_check(
        options: Mapping[str, Any], key: str, ignore_missing_fields: bool
    ) -> bool:
        return not (ignore_missing_fields and key not in options)

    @classmethod
    def _fail(
        cls, code: AuthClientErrorCode, field: str, requirement: str
    ) -> NoReturn:
        raise InvalidProviderConfigError(
            code, f'"{cls.CONFIG_NAME}.{field}" must be {requirement}.'
        )
