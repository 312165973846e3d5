"""OIDC provider configuration."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..types import AuthClientErrorCode, ProviderKind
from ..utils import is_non_empty_string, is_url
from .base import FederatedProviderConfig, pick_present, without_unset


@dataclass(frozen=True)
class OIDCProviderConfig(FederatedProviderConfig):
    """An OIDC identity provider as configured on the auth backend."""

    KIND = ProviderKind.OIDC
    PROVIDER_ID_PREFIX = "oidc."
    RESOURCE_COLLECTION = "oauthIdpConfigs"
    CONFIG_NAME = "OIDCProviderConfig"
    VALID_KEYS = frozenset(
        {"enabled", "displayName", "providerId", "clientId", "issuer"}
    )
    REQUIRED_RESPONSE_FIELDS = ("issuer", "clientId")

    REQUEST_FIELDS = {"issuer": "issuer", "clientId": "clientId"}

    provider_id: str
    client_id: str
    issuer: str
    enabled: bool = False
    display_name: str | None = None

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "OIDCProviderConfig":
        """
        Build an OIDC config from an ``oauthIdpConfigs`` server response.

        Raises:
            InternalAssertionError: If issuer, clientId or an ``oidc.``
                resource name is missing
        """
        provider_id = cls._parse_response(response)
        return cls(
            provider_id=provider_id,
            client_id=response["clientId"],
            issuer=response["issuer"],
            enabled=bool(response.get("enabled")),
            display_name=response.get("displayName"),
        )

    @classmethod
    def _validate_fields(
        cls, options: Mapping[str, Any], ignore_missing_fields: bool
    ) -> None:
        if cls._should_check(options, "clientId", ignore_missing_fields):
            client_id = options.get("clientId")
            if not is_non_empty_string(client_id):
                code = (
                    AuthClientErrorCode.INVALID_OAUTH_CLIENT_ID
                    if client_id
                    else AuthClientErrorCode.MISSING_OAUTH_CLIENT_ID
                )
                cls._fail(code, "clientId", "a valid non-empty string")

        if cls._should_check(options, "issuer", ignore_missing_fields):
            issuer = options.get("issuer")
            if not is_url(issuer):
                code = (
                    AuthClientErrorCode.INVALID_CONFIG
                    if issuer
                    else AuthClientErrorCode.MISSING_ISSUER
                )
                cls._fail(code, "issuer", "a valid URL string")

    @classmethod
    def _to_server_request(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        return pick_present(options, cls.REQUEST_FIELDS)

    def to_json(self) -> dict[str, Any]:
        return without_unset(
            {
                "enabled": self.enabled,
                "displayName": self.display_name,
                "providerId": self.provider_id,
                "issuer": self.issuer,
                "clientId": self.client_id,
            }
        )
