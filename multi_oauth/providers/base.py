"""Abstract base class for OAuth 2.0 providers.

Implements the OAuth 2.0 authorization code flow.
Subclasses must implement provider-specific details.
"""
import hashlib
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from ..exceptions import OAuthTokenError, OAuthUserInfoError
from ..pkce import compute_code_challenge
from ..schemas import OAuthUser, ProviderConfig, TokenResponse

logger = logging.getLogger(__name__)


def _code_hash(code: str) -> str:
    return hashlib.sha256(code.encode()).hexdigest()[:12]


class OAuthProvider(ABC):
    """
    Abstract base class for OAuth 2.0 providers.

    Implements the OAuth 2.0 authorization code flow.
    Subclasses must implement provider-specific details.
    """

    def __init__(
        self,
        config: ProviderConfig,
        redirect_uri: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize OAuth provider.

        Args:
            config: Client credentials and optional scope/redirect overrides
            redirect_uri: Global callback URL, used unless config overrides it
            http_client: Shared client; when None each request opens its own
            timeout: Timeout for internally created clients (None = unbounded)
        """
        self.config = config
        self.client_id = config.client_id
        self.client_secret = config.client_secret
        self.redirect_uri = config.redirect_uri or redirect_uri
        self.timeout = timeout
        self._http_client = http_client

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable provider identifier."""
        pass

    @property
    @abstractmethod
    def authorization_url(self) -> str:
        """Provider's authorization endpoint."""
        pass

    @property
    @abstractmethod
    def token_url(self) -> str:
        """Provider's token exchange endpoint."""
        pass

    @property
    @abstractmethod
    def user_info_url(self) -> str:
        """Provider's user info endpoint ("" when there is none)."""
        pass

    @property
    @abstractmethod
    def default_scopes(self) -> list[str]:
        """Scopes requested when the host does not override them."""
        pass

    @property
    def scopes(self) -> list[str]:
        if self.config.scope is not None:
            return list(self.config.scope)
        return self.default_scopes

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    def _extra_authorization_params(self, code_verifier: str | None) -> dict[str, str]:
        """Provider-specific authorization parameters.

        The default adds an S256 PKCE challenge when the host supplies a verifier.
        """
        if not code_verifier:
            return {}
        return {
            "code_challenge": compute_code_challenge(code_verifier),
            "code_challenge_method": "S256",
        }

    def get_authorization_url(
        self, state: str | None = None, code_verifier: str | None = None
    ) -> str:
        """
        Generate authorization URL for OAuth flow.

        Args:
            state: CSRF protection token, round-tripped by the provider
            code_verifier: Optional PKCE verifier the host keeps until callback

        Returns:
            Full authorization URL with query parameters
        """
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.scopes),
        }
        params.update(self._extra_authorization_params(code_verifier))
        if state:
            params["state"] = state

        return f"{self.authorization_url}?{urlencode(params)}"

    async def exchange_code_for_token(
        self, code: str, code_verifier: str | None = None
    ) -> TokenResponse:
        """
        Exchange authorization code for access token.

        Args:
            code: Authorization code from OAuth callback
            code_verifier: PKCE verifier, sent only when given

        Returns:
            Parsed token response

        Raises:
            OAuthTokenError: If token exchange fails
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
        }
        if code_verifier:
            data["code_verifier"] = code_verifier

        return await self._request_token(code, data, headers={})

    async def _request_token(
        self, code: str, data: dict[str, str], headers: dict[str, str]
    ) -> TokenResponse:
        """POST a form-encoded token request and parse the response."""
        code_hash = _code_hash(code)
        # Log sanitized exchange metadata (no secrets)
        logger.info(
            f"Token exchange attempt | "
            f"provider={self.name} "
            f"code_hash={code_hash} "
            f"client_id={self.client_id} "
            f"redirect_uri={self.redirect_uri}"
        )
        request_headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
            **headers,
        }

        async with self._client() as client:
            try:
                response = await client.post(self.token_url, data=data, headers=request_headers)
            except httpx.RequestError as e:
                logger.error(f"Token exchange request failed | provider={self.name} error={e}")
                raise OAuthTokenError("Failed to connect to OAuth provider") from e

        if not response.is_success:
            logger.error(
                f"Token exchange failed | "
                f"provider={self.name} "
                f"code_hash={code_hash} "
                f"status={response.status_code} "
                f"response={response.text}"
            )
            raise OAuthTokenError(
                f"Token exchange failed: {response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            token = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # Some providers (GitHub) report errors with a 200 status
            logger.error(
                f"Token exchange returned no access token | "
                f"provider={self.name} code_hash={code_hash} response={response.text}"
            )
            raise OAuthTokenError(
                "No access token in response",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info(f"Token exchange SUCCESS | provider={self.name} code_hash={code_hash}")
        return token

    def _auth_headers(self, access_token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }

    async def get_user_info(self, access_token: str) -> dict[str, Any]:
        """
        Fetch user information using access token.

        Args:
            access_token: OAuth access token

        Returns:
            User profile information

        Raises:
            OAuthUserInfoError: If fetching user info fails
        """
        async with self._client() as client:
            return await self._fetch_user_info(client, access_token)

    async def _fetch_user_info(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        try:
            response = await client.get(self.user_info_url, headers=self._auth_headers(access_token))
        except httpx.RequestError as e:
            logger.error(f"User info request failed | provider={self.name} error={e}")
            raise OAuthUserInfoError("Failed to connect to OAuth provider") from e

        if not response.is_success:
            logger.error(
                f"User info fetch failed | provider={self.name} "
                f"status={response.status_code} response={response.text}"
            )
            raise OAuthUserInfoError(
                f"Failed to fetch user profile: {response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            raise OAuthUserInfoError(
                "User profile response is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e

    async def authenticate(self, code: str, code_verifier: str | None = None) -> OAuthUser:
        """
        Complete OAuth flow for an authorization code.

        1. Exchange code for access token
        2. Fetch user info from provider
        3. Normalize the profile

        Raises:
            OAuthProviderError: If any step fails
        """
        token = await self.exchange_code_for_token(code, code_verifier=code_verifier)
        user_info = await self.get_user_info(token.access_token)
        return self.extract_user_data(user_info)

    def _profile_id(self, value: Any) -> str:
        """Stringify the upstream id; a profile without one is unusable."""
        if value is None or value == "":
            raise OAuthUserInfoError(f"{self.name} profile has no user id")
        return str(value)

    @abstractmethod
    def extract_user_data(self, user_info: dict[str, Any]) -> OAuthUser:
        """
        Map the provider's profile to an OAuthUser.

        Must not perform I/O. Missing optional fields are left as None.

        Args:
            user_info: Raw user info from provider

        Returns:
            Normalized user with ``raw`` set to user_info
        """
        pass
