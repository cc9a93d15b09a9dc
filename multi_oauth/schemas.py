"""Shared value types for the OAuth flow."""
from __future__ import annotations

import enum
from typing import Any, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProviderName(str, enum.Enum):
    """Supported OAuth provider names."""

    GOOGLE = "google"
    FACEBOOK = "facebook"
    GITHUB = "github"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    APPLE = "apple"
    MICROSOFT = "microsoft"


class ProviderConfig(BaseModel):
    """Credentials and overrides for a single provider.

    Accepts both ``client_id`` and ``clientId`` style keys.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    client_id: str
    client_secret: str
    scope: Optional[list[str]] = None  # Overrides the provider's default scopes
    redirect_uri: Optional[str] = None  # Overrides OAuthConfig.redirect_uri


class OAuthConfig(BaseModel):
    """Root configuration handed to ``OAuthManager.configure``."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    providers: dict[ProviderName, Optional[ProviderConfig]]
    redirect_uri: str
    timeout: Optional[float] = None  # Seconds; None leaves requests unbounded


class TokenResponse(BaseModel):
    """Token endpoint response. Unknown upstream fields are preserved."""
    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None


class OAuthUser(BaseModel):
    """Normalized user profile returned by every provider."""
    id: str
    name: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    provider: str
    raw: Any = None  # Untransformed upstream profile


class OAuthRequest(Protocol):
    """Read-only view of an inbound callback request.

    Framework request objects rarely match this exactly; the manager also
    accepts plain mappings with ``query``/``body``/``url`` keys.
    """

    query: Optional[Mapping[str, Any]]
    body: Optional[Mapping[str, Any]]
    url: Optional[str]


class CallbackRequest(BaseModel):
    """Concrete callback request for hosts without a compatible request object."""
    query: Optional[dict[str, Any]] = None
    body: Optional[dict[str, Any]] = None
    url: Optional[str] = None
