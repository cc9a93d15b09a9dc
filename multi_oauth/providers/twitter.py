"""Twitter (X) OAuth 2.0 implementation."""
import base64
from typing import Any

from ..pkce import compute_code_challenge
from ..schemas import OAuthUser, TokenResponse
from .base import OAuthProvider

# Used when the host does not run its own PKCE flow
DEFAULT_CODE_VERIFIER = "challenge"


class TwitterOAuthProvider(OAuthProvider):
    """
    Twitter OAuth 2.0 with PKCE.

    Twitter requires a PKCE challenge on every authorization request and
    authenticates the token exchange with HTTP Basic credentials instead of
    a client_secret form field.

    Pass the same ``code_verifier`` to ``get_authorization_url`` and
    ``exchange_code_for_token`` to get an S256 challenge. Without one the
    fixed ``plain`` verifier is used on both legs.
    """

    @property
    def name(self) -> str:
        return "twitter"

    @property
    def authorization_url(self) -> str:
        return "https://twitter.com/i/oauth2/authorize"

    @property
    def token_url(self) -> str:
        return "https://api.twitter.com/2/oauth2/token"

    @property
    def user_info_url(self) -> str:
        return "https://api.twitter.com/2/users/me?user.fields=id,name,username,profile_image_url"

    @property
    def default_scopes(self) -> list[str]:
        return ["tweet.read", "users.read"]

    def _extra_authorization_params(self, code_verifier: str | None) -> dict[str, str]:
        if not code_verifier:
            return {
                "code_challenge": DEFAULT_CODE_VERIFIER,
                "code_challenge_method": "plain",
            }
        return {
            "code_challenge": compute_code_challenge(code_verifier),
            "code_challenge_method": "S256",
        }

    def _basic_credentials(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode()
        return base64.b64encode(raw).decode()

    async def exchange_code_for_token(
        self, code: str, code_verifier: str | None = None
    ) -> TokenResponse:
        data = {
            "client_id": self.client_id,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
            "code_verifier": code_verifier or DEFAULT_CODE_VERIFIER,
        }
        headers = {"Authorization": f"Basic {self._basic_credentials()}"}
        return await self._request_token(code, data, headers=headers)

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        """
        Extract user data from the ``/2/users/me`` envelope.

        The profile sits under ``data``. API v2 does not expose email.
        """
        user = user_info.get("data") or {}
        user_id = self._profile_id(user.get("id"))
        return OAuthUser(
            id=user_id,
            name=user.get("name") or user.get("username") or user_id,
            email=None,
            avatar=user.get("profile_image_url"),
            provider=self.name,
            raw=user_info,
        )
