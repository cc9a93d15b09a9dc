"""Sign in with Apple implementation."""
from typing import Any

from ..exceptions import OAuthUnsupportedOperationError
from ..schemas import OAuthUser
from .base import OAuthProvider

APPLE_PLACEHOLDER_NAME = "Apple User"


class AppleOAuthProvider(OAuthProvider):
    """
    Sign in with Apple.

    Apple has no user info endpoint: identity claims arrive in the signed
    ``id_token`` returned with the access token. Verifying that token is
    out of scope here, so ``get_user_info`` (and therefore
    ``authenticate``) always raises. Hosts that verify the id_token
    themselves can feed its claims to ``extract_user_data``.
    """

    @property
    def name(self) -> str:
        return "apple"

    @property
    def authorization_url(self) -> str:
        return "https://appleid.apple.com/auth/authorize"

    @property
    def token_url(self) -> str:
        return "https://appleid.apple.com/auth/token"

    @property
    def user_info_url(self) -> str:
        return ""

    @property
    def default_scopes(self) -> list[str]:
        return ["name", "email"]

    def _extra_authorization_params(self, code_verifier: str | None) -> dict[str, str]:
        # Requesting name/email scopes requires the code to be POSTed back
        params = super()._extra_authorization_params(code_verifier)
        params["response_mode"] = "form_post"
        return params

    async def get_user_info(self, access_token: str) -> dict[str, Any]:
        raise OAuthUnsupportedOperationError(
            "Apple provider requires ID token decoding. Please use a JWT library."
        )

    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        user_id = self._profile_id(user_info.get("sub"))
        return OAuthUser(
            id=user_id,
            name=user_info.get("name") or APPLE_PLACEHOLDER_NAME,
            email=user_info.get("email"),
            avatar=None,
            provider=self.name,
            raw=user_info,
        )
