"""LinkedIn (OpenID Connect userinfo) implementation."""
from typing import Any

from ..schemas import OAuthUser
from .base import OAuthProvider


class LinkedInOAuthProvider(OAuthProvider):

    @property
    def name(self) -> str:
        return "linkedin"

    @property
    def authorization_url(self) -> str:
        return "https://www.linkedin.com/oauth/v2/authorization"

    @property
    def token_url(self) -> str:
        return "https://www.linkedin.com/oauth/v2/accessToken"

    @property
    def user_info_url(self) -> str:
        return "https://api.linkedin.com/v2/userinfo"

    @property
    def default_scopes(self) -> list[str]:
        return ["openid", "profile", "email"]

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        user_id = self._profile_id(user_info.get("sub"))
        return OAuthUser(
            id=user_id,
            name=user_info.get("name") or user_id,
            email=user_info.get("email"),
            avatar=user_info.get("picture"),
            provider=self.name,
            raw=user_info,
        )
