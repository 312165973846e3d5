"""Password sign-in configuration."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..exceptions import InternalAssertionError, InvalidProviderConfigError
from ..types import AuthClientErrorCode, ProviderKind
from ..utils import is_boolean, is_non_null_object
from .base import reject_unknown_keys, validate_options_object

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PasswordSignInConfig:
    """Email/password sign-in settings.

    ``password_required`` is the inverse of the backend's
    ``enableEmailLinkSignin`` flag.
    """

    KIND = ProviderKind.PASSWORD
    CONFIG_NAME = "PasswordSignInConfig"
    VALID_KEYS = frozenset({"enabled", "passwordRequired"})

    enabled: bool
    password_required: bool

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "PasswordSignInConfig":
        """
        Build the config from a server response.

        Raises:
            InternalAssertionError: If ``allowPasswordSignup`` is missing or null
        """
        if (
            not is_non_null_object(response)
            or response.get("allowPasswordSignup") is None
        ):
            logger.warning("Password sign-in response is missing allowPasswordSignup")
            raise InternalAssertionError(
                "Invalid password sign-in configuration response"
            )

        return cls(
            enabled=bool(response["allowPasswordSignup"]),
            password_required=not response.get("enableEmailLinkSignin"),
        )

    @classmethod
    def validate(cls, options: Any) -> None:
        """Validate client options; raises InvalidProviderConfigError."""
        validate_options_object(
            options, cls.CONFIG_NAME, AuthClientErrorCode.INVALID_ARGUMENT
        )
        reject_unknown_keys(
            options, cls.VALID_KEYS, cls.CONFIG_NAME, AuthClientErrorCode.INVALID_ARGUMENT
        )

        for key in ("enabled", "passwordRequired"):
            if key in options and not is_boolean(options[key]):
                raise InvalidProviderConfigError(
                    AuthClientErrorCode.INVALID_ARGUMENT,
                    f'"{cls.CONFIG_NAME}.{key}" must be a boolean.',
                )

    @classmethod
    def build_server_request(cls, options: Any) -> dict[str, Any]:
        """Convert client options into a server request (partial update)."""
        cls.validate(options)

        request = {}
        if "enabled" in options:
            request["allowPasswordSignup"] = options["enabled"]
        if "passwordRequired" in options:
            request["enableEmailLinkSignin"] = not options["passwordRequired"]
        return request

    def to_json(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "passwordRequired": self.password_required,
        }
