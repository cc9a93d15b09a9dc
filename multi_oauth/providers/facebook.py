"""Facebook Login (Graph API v18.0) implementation."""
from typing import Any

from ..schemas import OAuthUser
from .base import OAuthProvider


class FacebookOAuthProvider(OAuthProvider):

    @property
    def name(self) -> str:
        return "facebook"

    @property
    def authorization_url(self) -> str:
        return "https://www.facebook.com/v18.0/dialog/oauth"

    @property
    def token_url(self) -> str:
        return "https://graph.facebook.com/v18.0/oauth/access_token"

    @property
    def user_info_url(self) -> str:
        return "https://graph.facebook.com/me?fields=id,name,email,picture"

    @property
    def default_scopes(self) -> list[str]:
        return ["email", "public_profile"]

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        user_id = self._profile_id(user_info.get("id"))
        # picture is nested as {"data": {"url": ...}}
        picture = (user_info.get("picture") or {}).get("data") or {}
        return OAuthUser(
            id=user_id,
            name=user_info.get("name") or user_id,
            email=user_info.get("email"),
            avatar=picture.get("url"),
            provider=self.name,
            raw=user_info,
        )
