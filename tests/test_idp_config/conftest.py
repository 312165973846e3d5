"""
Pytest configuration and shared fixtures for provider config tests.
"""

import pytest


@pytest.fixture
def saml_response():
    """A complete inboundSamlConfigs server response."""
    return {
        "name": "projects/project1/inboundSamlConfigs/saml.provider",
        "idpConfig": {
            "idpEntityId": "IDP_ENTITY_ID",
            "ssoUrl": "https://example.com/login",
            "signRequest": True,
            "idpCertificates": [
                {"x509Certificate": "CERT1"},
                {"x509Certificate": "CERT2"},
            ],
        },
        "spConfig": {
            "spEntityId": "RP_ENTITY_ID",
            "callbackUri": "https://projectId.firebaseapp.com/__/auth/handler",
        },
        "displayName": "samlProviderName",
        "enabled": True,
    }


@pytest.fixture
def saml_options():
    """A complete client side SAML provider definition."""
    return {
        "providerId": "saml.provider",
        "idpEntityId": "IDP_ENTITY_ID",
        "ssoURL": "https://example.com/login",
        "x509Certificates": ["CERT1", "CERT2"],
        "rpEntityId": "RP_ENTITY_ID",
        "callbackURL": "https://projectId.firebaseapp.com/__/auth/handler",
        "enableRequestSigning": True,
        "enabled": True,
        "displayName": "samlProviderName",
    }


@pytest.fixture
def oidc_response():
    """A complete oauthIdpConfigs server response."""
    return {
        "name": "projects/project1/oauthIdpConfigs/oidc.provider",
        "clientId": "CLIENT_ID",
        "issuer": "https://oidc.com/issuer",
        "displayName": "oidcProviderName",
        "enabled": True,
    }


@pytest.fixture
def oidc_options():
    """A complete client side OIDC provider definition."""
    return {
        "providerId": "oidc.provider",
        "clientId": "CLIENT_ID",
        "issuer": "https://oidc.com/issuer",
        "displayName": "oidcProviderName",
        "enabled": True,
    }
