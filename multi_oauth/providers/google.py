"""Google OAuth 2.0 / OpenID Connect implementation."""
from typing import Any

from ..schemas import OAuthUser
from .base import OAuthProvider


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 2.0 / OpenID Connect implementation."""

    @property
    def name(self) -> str:
        return "google"

    @property
    def authorization_url(self) -> str:
        return "https://accounts.google.com/o/oauth2/v2/auth"

    @property
    def token_url(self) -> str:
        return "https://oauth2.googleapis.com/token"

    @property
    def user_info_url(self) -> str:
        return "https://www.googleapis.com/oauth2/v2/userinfo"

    @property
    def default_scopes(self) -> list[str]:
        return ["openid", "profile", "email"]

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        """
        Extract user data from Google user info response.

        Expected fields:
        - id: Google account ID
        - name: Full name
        - email: User's email address
        - picture: Profile picture URL
        """
        user_id = self._profile_id(user_info.get("id"))
        return OAuthUser(
            id=user_id,
            name=user_info.get("name") or user_id,
            email=user_info.get("email"),
            avatar=user_info.get("picture"),
            provider=self.name,
            raw=user_info,
        )
