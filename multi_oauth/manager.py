"""OAuth manager: provider registry and callback orchestration.

Responsibilities:
- Turn an OAuthConfig into live provider instances
- Dispatch authorization URL and callback calls by provider name
- Pull the authorization code out of heterogeneous request objects

Each manager owns its registry; there is no process-wide instance.
Calling ``configure()`` while callbacks are in flight is a caller-level
race: in-flight flows keep the provider they already resolved.
"""
import logging
from typing import Any, Mapping
from urllib.parse import parse_qs, urlsplit

import httpx

from .exceptions import (
    MissingAuthorizationCodeError,
    OAuthNotConfiguredError,
    UnknownOAuthProviderError,
)
from .providers import PROVIDER_REGISTRY, OAuthProvider
from .schemas import OAuthConfig, OAuthUser, ProviderConfig, ProviderName

logger = logging.getLogger(__name__)


def _field(request: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute-style request object."""
    if isinstance(request, Mapping):
        return request.get(key)
    return getattr(request, key, None)


def _code_from_mapping(source: Any) -> str | None:
    if isinstance(source, Mapping):
        code = source.get("code")
    else:
        code = getattr(source, "code", None)
    if isinstance(code, (list, tuple)):
        code = code[0] if code else None
    return code or None


def _code_from_url(url: Any) -> str | None:
    """Read the ``code`` query parameter; malformed URLs yield None."""
    if not isinstance(url, str) or not url:
        return None
    try:
        query = urlsplit(url).query
        values = parse_qs(query, strict_parsing=False).get("code")
    except ValueError:
        logger.debug("Ignoring malformed callback URL")
        return None
    return values[0] if values and values[0] else None


def extract_code(request: Any) -> str | None:
    """
    Locate the authorization code in a callback request.

    Checked in order: ``query["code"]``, ``body["code"]`` (form_post
    callbacks such as Apple), then the ``code`` parameter of ``url``.
    """
    code = _code_from_mapping(_field(request, "query"))
    if code:
        return code

    code = _code_from_mapping(_field(request, "body"))
    if code:
        return code

    return _code_from_url(_field(request, "url"))


class OAuthManager:
    """
    Registry and dispatcher for configured OAuth providers.

    Usage:
        manager = OAuthManager()
        manager.configure({"providers": {"google": {...}}, "redirect_uri": "..."})
        url = manager.authorization_url("google", state=state)
        user = await manager.handle_callback("google", request)
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        """
        Initialize an unconfigured manager.

        Args:
            http_client: Optional shared client handed to every provider
        """
        self._http_client = http_client
        self._config: OAuthConfig | None = None
        self._providers: dict[ProviderName, OAuthProvider] = {}

    @property
    def config(self) -> OAuthConfig | None:
        return self._config

    def configure(self, config: OAuthConfig | Mapping[str, Any]) -> None:
        """
        Replace the registry with providers built from ``config``.

        Providers mapped to None are skipped. A provider-level redirect_uri
        wins over the global one.
        """
        if not isinstance(config, OAuthConfig):
            config = OAuthConfig.model_validate(config)

        providers: dict[ProviderName, OAuthProvider] = {}
        for provider_name, provider_config in config.providers.items():
            if provider_config is None:
                continue
            providers[provider_name] = self._create_provider(provider_name, provider_config, config)

        self._config = config
        self._providers = providers

    def _create_provider(
        self, name: ProviderName, provider_config: ProviderConfig, config: OAuthConfig
    ) -> OAuthProvider:
        provider_cls = PROVIDER_REGISTRY[name]
        provider = provider_cls(
            provider_config,
            config.redirect_uri,
            http_client=self._http_client,
            timeout=config.timeout,
        )
        logger.info(f"Registered OAuth provider: {name.value}")
        return provider

    def get_provider(self, name: str) -> OAuthProvider:
        """
        Get registered OAuth provider.

        Raises:
            OAuthNotConfiguredError: If configure() was never called
            UnknownOAuthProviderError: If provider not registered
        """
        if self._config is None:
            raise OAuthNotConfiguredError()

        try:
            key = ProviderName(name)
        except ValueError:
            raise UnknownOAuthProviderError(str(name)) from None

        provider = self._providers.get(key)
        if provider is None:
            raise UnknownOAuthProviderError(key.value)
        return provider

    def authorization_url(
        self,
        provider_name: str,
        state: str | None = None,
        code_verifier: str | None = None,
    ) -> str:
        """Build the redirect URL for ``provider_name``."""
        provider = self.get_provider(provider_name)
        return provider.get_authorization_url(state=state, code_verifier=code_verifier)

    async def handle_callback(
        self,
        provider_name: str,
        request: Any,
        code_verifier: str | None = None,
    ) -> OAuthUser:
        """
        Authenticate the user behind an OAuth callback.

        Args:
            provider_name: Provider the callback belongs to
            request: Object or mapping exposing ``query``, ``body`` and/or ``url``
            code_verifier: PKCE verifier used when building the authorization URL

        Returns:
            Normalized user profile

        Raises:
            MissingAuthorizationCodeError: If no code can be extracted
            OAuthProviderError: If token exchange or profile fetch fails
        """
        provider = self.get_provider(provider_name)

        code = extract_code(request)
        if not code:
            raise MissingAuthorizationCodeError()

        user = await provider.authenticate(code, code_verifier=code_verifier)
        logger.info(f"User authenticated via {provider.name}: id={user.id}")
        return user

    def configured_providers(self) -> set[str]:
        return {name.value for name in self._providers}
