"""Configuration schema models using Pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderConfigsSection(BaseModel):
    """The ``idp_config`` section of a provider configuration document.

    Entries are kept as plain mappings; their fields are checked by the
    provider config classes, not here.
    """

    model_config = ConfigDict(extra="forbid")

    password_sign_in: dict[str, Any] | None = Field(
        None, description="Password sign-in options"
    )
    providers: list[dict[str, Any]] = Field(
        default_factory=list, description="SAML and OIDC provider definitions"
    )

    @field_validator("providers")
    @classmethod
    def validate_unique_provider_ids(cls, v):
        """Reject documents defining the same provider twice."""
        seen = set()
        for entry in v:
            provider_id = entry.get("providerId")
            if not isinstance(provider_id, str):
                continue
            if provider_id in seen:
                raise ValueError(f"Duplicate provider ID: {provider_id}")
            seen.add(provider_id)
        return v


class ProviderConfigsDocument(BaseModel):
    """Top level provider configuration document."""

    idp_config: ProviderConfigsSection = Field(
        ..., description="Identity provider configuration"
    )
