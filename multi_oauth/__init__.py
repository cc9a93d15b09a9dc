"""Multi-provider OAuth 2.0 client.

One configuration, one call to get an authorization URL, one call to turn
a callback into a normalized user, whichever provider the user picked.

Providers:
- Google, Facebook, LinkedIn, Microsoft (standard authorization code flow)
- GitHub (private email lookup)
- Twitter (PKCE + Basic auth token exchange)
- Apple (form_post callbacks; profile retrieval unsupported)
"""
from .exceptions import (
    MissingAuthorizationCodeError,
    OAuthError,
    OAuthNotConfiguredError,
    OAuthProviderError,
    OAuthTokenError,
    OAuthUnsupportedOperationError,
    OAuthUserInfoError,
    UnknownOAuthProviderError,
)
from .core.logger import JsonFormatter, init_logging
from .factory import create_oauth_manager
from .manager import OAuthManager, extract_code
from .pkce import PkcePair, generate_pkce_pair
from .providers import (
    PROVIDER_REGISTRY,
    AppleOAuthProvider,
    FacebookOAuthProvider,
    GitHubOAuthProvider,
    GoogleOAuthProvider,
    LinkedInOAuthProvider,
    MicrosoftOAuthProvider,
    OAuthProvider,
    TwitterOAuthProvider,
)
from .schemas import (
    CallbackRequest,
    OAuthConfig,
    OAuthRequest,
    OAuthUser,
    ProviderConfig,
    ProviderName,
    TokenResponse,
)

__all__ = [
    # Exceptions
    "OAuthError",
    "OAuthNotConfiguredError",
    "UnknownOAuthProviderError",
    "MissingAuthorizationCodeError",
    "OAuthProviderError",
    "OAuthTokenError",
    "OAuthUserInfoError",
    "OAuthUnsupportedOperationError",
    # Types
    "CallbackRequest",
    "OAuthConfig",
    "OAuthRequest",
    "OAuthUser",
    "ProviderConfig",
    "ProviderName",
    "TokenResponse",
    # Providers
    "OAuthProvider",
    "GoogleOAuthProvider",
    "FacebookOAuthProvider",
    "GitHubOAuthProvider",
    "TwitterOAuthProvider",
    "LinkedInOAuthProvider",
    "AppleOAuthProvider",
    "MicrosoftOAuthProvider",
    "PROVIDER_REGISTRY",
    # Manager
    "OAuthManager",
    "extract_code",
    "create_oauth_manager",
    # Logging
    "JsonFormatter",
    "init_logging",
    # PKCE
    "PkcePair",
    "generate_pkce_pair",
]
