"""OAuth providers module."""
from ..schemas import ProviderName
from .apple import AppleOAuthProvider
from .base import OAuthProvider
from .facebook import FacebookOAuthProvider
from .github import GitHubOAuthProvider
from .google import GoogleOAuthProvider
from .linkedin import LinkedInOAuthProvider
from .microsoft import MicrosoftOAuthProvider
from .twitter import TwitterOAuthProvider

PROVIDER_REGISTRY: dict[ProviderName, type[OAuthProvider]] = {
    ProviderName.GOOGLE: GoogleOAuthProvider,
    ProviderName.FACEBOOK: FacebookOAuthProvider,
    ProviderName.GITHUB: GitHubOAuthProvider,
    ProviderName.TWITTER: TwitterOAuthProvider,
    ProviderName.LINKEDIN: LinkedInOAuthProvider,
    ProviderName.APPLE: AppleOAuthProvider,
    ProviderName.MICROSOFT: MicrosoftOAuthProvider,
}

__all__ = [
    "OAuthProvider",
    "GoogleOAuthProvider",
    "FacebookOAuthProvider",
    "GitHubOAuthProvider",
    "TwitterOAuthProvider",
    "LinkedInOAuthProvider",
    "AppleOAuthProvider",
    "MicrosoftOAuthProvider",
    "PROVIDER_REGISTRY",
]
