"""SAML provider configuration."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..types import AuthClientErrorCode, ProviderKind
from ..utils import is_array, is_boolean, is_non_empty_string, is_non_null_object, is_url
from .base import FederatedProviderConfig, pick_present, without_unset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SAMLProviderConfig(FederatedProviderConfig):
    """A SAML identity provider as configured on the auth backend.

    Instances are built from server responses with :meth:`from_response`.
    Client requests are never turned into instances; they are validated and
    converted straight to the wire shape with :meth:`build_server_request`.
    """

    KIND = ProviderKind.SAML
    PROVIDER_ID_PREFIX = "saml."
    RESOURCE_COLLECTION = "inboundSamlConfigs"
    CONFIG_NAME = "SAMLProviderConfig"
    VALID_KEYS = frozenset(
        {
            "enabled",
            "displayName",
            "providerId",
            "idpEntityId",
            "ssoURL",
            "x509Certificates",
            "rpEntityId",
            "callbackURL",
            "enableRequestSigning",
        }
    )
    REQUIRED_RESPONSE_FIELDS = (
        "idpConfig.idpEntityId",
        "idpConfig.ssoUrl",
        "spConfig.spEntityId",
    )

    # Client fields of the nested idpConfig / spConfig wire objects.
    IDP_REQUEST_FIELDS = {
        "idpEntityId": "idpEntityId",
        "ssoURL": "ssoUrl",
        "enableRequestSigning": "signRequest",
    }
    SP_REQUEST_FIELDS = {
        "rpEntityId": "spEntityId",
        "callbackURL": "callbackUri",
    }

    provider_id: str
    idp_entity_id: str
    sso_url: str
    rp_entity_id: str
    callback_url: str | None = None
    enable_request_signing: bool = False
    x509_certificates: tuple[str, ...] = field(default_factory=tuple)
    enabled: bool = False
    display_name: str | None = None

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "SAMLProviderConfig":
        """
        Build a SAML config from an ``inboundSamlConfigs`` server response.

        Args:
            response: Deserialized server response

        Returns:
            The parsed config

        Raises:
            InternalAssertionError: If the response is missing idpEntityId,
                ssoUrl, spEntityId or a ``saml.`` resource name
        """
        provider_id = cls._parse_response(response)
        idp_config = response["idpConfig"]
        sp_config = response["spConfig"]

        certificates = []
        for cert in idp_config.get("idpCertificates") or []:
            if is_non_null_object(cert) and cert.get("x509Certificate"):
                certificates.append(cert["x509Certificate"])
            else:
                logger.debug("Skipping certificate entry without x509Certificate")

        return cls(
            provider_id=provider_id,
            idp_entity_id=idp_config["idpEntityId"],
            sso_url=idp_config["ssoUrl"],
            rp_entity_id=sp_config["spEntityId"],
            callback_url=sp_config.get("callbackUri"),
            enable_request_signing=bool(idp_config.get("signRequest")),
            x509_certificates=tuple(certificates),
            enabled=bool(response.get("enabled")),
            display_name=response.get("displayName"),
        )

    @classmethod
    def _validate_fields(
        cls, options: Mapping[str, Any], ignore_missing_fields: bool
    ) -> None:
        if cls._should_check(options, "idpEntityId", ignore_missing_fields):
            if not is_non_empty_string(options.get("idpEntityId")):
                cls._fail(
                    AuthClientErrorCode.INVALID_CONFIG,
                    "idpEntityId",
                    "a valid non-empty string",
                )

        if cls._should_check(options, "ssoURL", ignore_missing_fields):
            if not is_url(options.get("ssoURL")):
                cls._fail(
                    AuthClientErrorCode.INVALID_CONFIG, "ssoURL", "a valid URL string"
                )

        if cls._should_check(options, "rpEntityId", ignore_missing_fields):
            rp_entity_id = options.get("rpEntityId")
            if not is_non_empty_string(rp_entity_id):
                code = (
                    AuthClientErrorCode.INVALID_CONFIG
                    if rp_entity_id
                    else AuthClientErrorCode.MISSING_SAML_RELYING_PARTY_CONFIG
                )
                cls._fail(code, "rpEntityId", "a valid non-empty string")

        if cls._should_check(options, "callbackURL", ignore_missing_fields):
            if not is_url(options.get("callbackURL")):
                cls._fail(
                    AuthClientErrorCode.INVALID_CONFIG,
                    "callbackURL",
                    "a valid URL string",
                )

        if cls._should_check(options, "x509Certificates", ignore_missing_fields):
            certificates = options.get("x509Certificates")
            if not is_array(certificates) or not all(
                is_non_empty_string(cert) for cert in certificates
            ):
                cls._fail(
                    AuthClientErrorCode.INVALID_CONFIG,
                    "x509Certificates",
                    "a valid array of X509 certificate strings",
                )

        if "enableRequestSigning" in options and not is_boolean(
            options["enableRequestSigning"]
        ):
            cls._fail(
                AuthClientErrorCode.INVALID_CONFIG, "enableRequestSigning", "a boolean"
            )

    @classmethod
    def _to_server_request(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        request: dict[str, Any] = {}

        idp_config = pick_present(options, cls.IDP_REQUEST_FIELDS)
        if "x509Certificates" in options:
            idp_config["idpCertificates"] = [
                {"x509Certificate": cert} for cert in options["x509Certificates"]
            ]
        if idp_config:
            request["idpConfig"] = idp_config

        sp_config = pick_present(options, cls.SP_REQUEST_FIELDS)
        if sp_config:
            request["spConfig"] = sp_config

        return request

    def to_json(self) -> dict[str, Any]:
        return without_unset(
            {
                "enabled": self.enabled,
                "displayName": self.display_name,
                "providerId": self.provider_id,
                "idpEntityId": self.idp_entity_id,
                "ssoURL": self.sso_url,
                "x509Certificates": list(self.x509_certificates),
                "rpEntityId": self.rp_entity_id,
                "callbackURL": self.callback_url,
                "enableRequestSigning": self.enable_request_signing,
            }
        )
