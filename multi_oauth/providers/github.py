"""GitHub OAuth App implementation."""
import logging
from typing import Any

import httpx

from ..schemas import OAuthUser
from .base import OAuthProvider

logger = logging.getLogger(__name__)

GITHUB_EMAILS_URL = "https://api.github.com/user/emails"


class GitHubOAuthProvider(OAuthProvider):
    """GitHub OAuth App implementation.

    GitHub omits ``email`` from ``/user`` when the address is private, so
    the profile fetch falls back to the ``/user/emails`` listing.
    """

    @property
    def name(self) -> str:
        return "github"

    @property
    def authorization_url(self) -> str:
        return "https://github.com/login/oauth/authorize"

    @property
    def token_url(self) -> str:
        return "https://github.com/login/oauth/access_token"

    @property
    def user_info_url(self) -> str:
        return "https://api.github.com/user"

    @property
    def default_scopes(self) -> list[str]:
        return ["user:email"]

    def _auth_headers(self, access_token: str) -> dict[str, str]:
        # GitHub's REST API rejects requests without a User-Agent
        headers = super()._auth_headers(access_token)
        headers["User-Agent"] = "multi-oauth"
        return headers

    async def get_user_info(self, access_token: str) -> dict[str, Any]:
        async with self._client() as client:
            profile = await self._fetch_user_info(client, access_token)
            if not profile.get("email"):
                email = await self._fetch_primary_email(client, access_token)
                if email:
                    profile["email"] = email
        return profile

    async def _fetch_primary_email(
        self, client: httpx.AsyncClient, access_token: str
    ) -> str | None:
        """
        Pick the primary address from ``/user/emails``, else the first one.

        Failures here are not fatal: the user simply has no email.
        """
        try:
            response = await client.get(GITHUB_EMAILS_URL, headers=self._auth_headers(access_token))
        except httpx.RequestError as e:
            logger.warning(f"GitHub emails request failed: {e}")
            return None

        if not response.is_success:
            logger.warning(f"GitHub emails fetch failed | status={response.status_code}")
            return None

        try:
            emails = response.json()
        except ValueError:
            logger.warning("GitHub emails response is not valid JSON")
            return None
        if not isinstance(emails, list) or not emails:
            return None

        primary = next((e for e in emails if e.get("primary")), None)
        if primary and primary.get("email"):
            return primary["email"]
        return emails[0].get("email")

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        """
        Extract user data from GitHub ``/user`` response.

        Numeric ``id`` is coerced to str; ``name`` falls back to ``login``.
        """
        user_id = self._profile_id(user_info.get("id"))
        return OAuthUser(
            id=user_id,
            name=user_info.get("name") or user_info.get("login") or user_id,
            email=user_info.get("email"),
            avatar=user_info.get("avatar_url"),
            provider=self.name,
            raw=user_info,
        )
