"""Exception classes for provider configuration handling."""

from .types import AuthClientErrorCode


class AuthError(Exception):
    """Base exception for all auth configuration errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AuthConfigError(AuthError):
    """Raised when a provider configuration cannot be parsed or validated.

    Carries a categorical ``code`` alongside the human readable message so
    callers can branch on the failure kind.
    """

    def __init__(
        self,
        code: AuthClientErrorCode,
        message: str | None = None,
        details: dict | None = None,
    ):
        self.code = AuthClientErrorCode(code)
        super().__init__(message or self.code.default_message, details)

    @property
    def code_string(self) -> str:
        """Namespaced error code, e.g. ``auth/invalid-config``."""
        return f"auth/{self.code.value}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value!r}, {self.message!r})"


class InternalAssertionError(AuthConfigError):
    """Raised when a server response breaks the expected response contract."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            AuthClientErrorCode.INTERNAL_ERROR,
            f"INTERNAL ASSERT FAILED: {message}",
            details,
        )


class InvalidProviderConfigError(AuthConfigError):
    """Raised when client supplied provider options are malformed."""

    pass


class ConfigurationError(AuthError):
    """Raised when a provider configuration document cannot be loaded."""

    pass
