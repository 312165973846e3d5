"""Configuration loading and processing."""

import logging
from dataclasses import dataclass, field
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import AuthConfigError, ConfigurationError
from ..factory import build_create_request
from ..providers.password import PasswordSignInConfig
from ..types import ProviderKind
from .schema import ProviderConfigsDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderRequest:
    """A validated server request for one federated provider."""

    kind: ProviderKind
    provider_id: str
    request: dict[str, Any]


@dataclass(frozen=True)
class ProviderRequests:
    """Server requests built from a provider configuration document."""

    password_sign_in: dict[str, Any] | None = None
    providers: list[ProviderRequest] = field(default_factory=list)


class ProviderConfigLoader:
    """Turns provider configuration documents into server requests.

    Documents are handed over already read; this class never touches the
    filesystem or the process environment.
    """

    @classmethod
    def load_provider_requests(cls, document: str) -> ProviderRequests:
        """Build server requests from a YAML document.

        Args:
            document: YAML text with an ``idp_config`` section

        Returns:
            ProviderRequests built from the document

        Raises:
            ConfigurationError: If the YAML is invalid or any entry is invalid
        """
        try:
            raw_config = yaml.safe_load(document)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in provider configuration: {e}")

        if not raw_config:
            raise ConfigurationError("Provider configuration is empty")

        return cls.parse_provider_requests(raw_config)

    @classmethod
    def parse_provider_requests(cls, raw_config: dict[str, Any]) -> ProviderRequests:
        """Build server requests from an already parsed document.

        Args:
            raw_config: Mapping with an ``idp_config`` section

        Returns:
            ProviderRequests in document order

        Raises:
            ConfigurationError: If the document or any entry is invalid
        """
        if not isinstance(raw_config, dict) or "idp_config" not in raw_config:
            raise ConfigurationError("No 'idp_config' section found in configuration")

        try:
            document = ProviderConfigsDocument(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid provider configuration: {e}")

        section = document.idp_config
        password_request = None
        if section.password_sign_in is not None:
            try:
                password_request = PasswordSignInConfig.build_server_request(
                    section.password_sign_in
                )
            except AuthConfigError as e:
                logger.error("Invalid password sign-in configuration: %s", e)
                raise ConfigurationError(
                    f"Invalid password_sign_in entry: {e.message}",
                    {"code": e.code_string},
                ) from e

        providers = []
        for index, options in enumerate(section.providers):
            try:
                config_class, request = build_create_request(options)
            except AuthConfigError as e:
                logger.error("Invalid provider entry %d: %s", index, e)
                raise ConfigurationError(
                    f"Invalid provider entry {index}: {e.message}",
                    {"code": e.code_string, "index": index},
                ) from e
            providers.append(
                ProviderRequest(
                    kind=config_class.KIND,
                    provider_id=options["providerId"],
                    request=request,
                )
            )

        logger.info("Loaded %d provider definitions", len(providers))
        return ProviderRequests(password_sign_in=password_request, providers=providers)
