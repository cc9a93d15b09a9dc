"""OAuth exceptions.

Manager-level errors (configuration, lookup, malformed callbacks) and
provider-level errors (upstream communication) share the ``OAuthError``
base so hosts can catch everything the package raises in one place.
"""
from __future__ import annotations

from typing import Any


class OAuthError(Exception):
    """Base class for all multi_oauth errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a response-friendly dict."""
        return {
            "error": {
                "type": type(self).__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class OAuthNotConfiguredError(OAuthError):
    """Raised when the manager is used before ``configure()``."""

    def __init__(self):
        super().__init__("OAuth manager not configured. Call configure() first.")


class UnknownOAuthProviderError(OAuthError):
    """Raised when a provider name has no registered instance."""

    def __init__(self, provider: str):
        super().__init__(
            f'Provider "{provider}" not configured or not supported.',
            details={"provider": provider},
        )
        self.provider = provider


class MissingAuthorizationCodeError(OAuthError):
    """Raised when a callback request carries no authorization code."""

    def __init__(self):
        super().__init__("Authorization code not found in request")


class OAuthProviderError(OAuthError):
    """Raised when OAuth provider communication fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if body is not None:
            details["body"] = body
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body


class OAuthTokenError(OAuthProviderError):
    """Raised when token exchange fails."""


class OAuthUserInfoError(OAuthProviderError):
    """Raised when fetching user info fails."""


class OAuthUnsupportedOperationError(OAuthProviderError):
    """Raised for operations a provider cannot perform (Apple profile fetch)."""
