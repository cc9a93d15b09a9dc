"""Microsoft identity platform (Graph /me) implementation."""
from typing import Any

from ..schemas import OAuthUser
from .base import OAuthProvider


class MicrosoftOAuthProvider(OAuthProvider):
    """Microsoft identity platform v2.0, multi-tenant ``common`` endpoint."""

    @property
    def name(self) -> str:
        return "microsoft"

    @property
    def authorization_url(self) -> str:
        return "https://login.microsoftonline.com/common/oauth2/v2.0/authorize"

    @property
    def token_url(self) -> str:
        return "https://login.microsoftonline.com/common/oauth2/v2.0/token"

    @property
    def user_info_url(self) -> str:
        return "https://graph.microsoft.com/v1.0/me"

    @property
    def default_scopes(self) -> list[str]:
        return ["openid", "profile", "email", "User.Read"]

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        """
        Extract user data from a Graph ``/me`` response.

        ``mail`` is empty for many personal and unlicensed accounts, so the
        principal name stands in for it. The photo needs a separate Graph
        call and is not fetched.
        """
        user_id = self._profile_id(user_info.get("id"))
        email = user_info.get("mail") or user_info.get("userPrincipalName")
        return OAuthUser(
            id=user_id,
            name=user_info.get("displayName") or user_info.get("userPrincipalName") or user_id,
            email=email,
            avatar=None,
            provider=self.name,
            raw=user_info,
        )
