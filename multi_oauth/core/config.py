from __future__ import annotations

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from multi_oauth.schemas import OAuthConfig, ProviderConfig, ProviderName


class OAuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Global callback URL (each provider may override it)
    OAUTH_REDIRECT_URI: str = "http://localhost:3000/auth/callback"
    OAUTH_HTTP_TIMEOUT: float | None = None

    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    GOOGLE_REDIRECT_URI: str | None = None

    FACEBOOK_CLIENT_ID: str | None = None
    FACEBOOK_CLIENT_SECRET: str | None = None
    FACEBOOK_REDIRECT_URI: str | None = None

    GITHUB_CLIENT_ID: str | None = None
    GITHUB_CLIENT_SECRET: str | None = None
    GITHUB_REDIRECT_URI: str | None = None

    TWITTER_CLIENT_ID: str | None = None
    TWITTER_CLIENT_SECRET: str | None = None
    TWITTER_REDIRECT_URI: str | None = None

    LINKEDIN_CLIENT_ID: str | None = None
    LINKEDIN_CLIENT_SECRET: str | None = None
    LINKEDIN_REDIRECT_URI: str | None = None

    # Apple's "client secret" is a signed JWT generated by the host
    APPLE_CLIENT_ID: str | None = None
    APPLE_CLIENT_SECRET: str | None = None
    APPLE_REDIRECT_URI: str | None = None

    MICROSOFT_CLIENT_ID: str | None = None
    MICROSOFT_CLIENT_SECRET: str | None = None
    MICROSOFT_REDIRECT_URI: str | None = None

    @model_validator(mode="after")
    def _validate_credential_pairs(self) -> OAuthSettings:
        half_configured = []
        for name in ProviderName:
            prefix = name.value.upper()
            client_id = getattr(self, f"{prefix}_CLIENT_ID")
            client_secret = getattr(self, f"{prefix}_CLIENT_SECRET")
            if bool(client_id) != bool(client_secret):
                half_configured.append(prefix)
        if half_configured:
            raise ValueError(
                "Provider credentials need both CLIENT_ID and CLIENT_SECRET: "
                + ", ".join(half_configured)
            )
        return self

    def provider_config(self, name: ProviderName) -> ProviderConfig | None:
        prefix = name.value.upper()
        client_id = getattr(self, f"{prefix}_CLIENT_ID")
        client_secret = getattr(self, f"{prefix}_CLIENT_SECRET")
        if not (client_id and client_secret):
            return None
        return ProviderConfig(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=getattr(self, f"{prefix}_REDIRECT_URI"),
        )

    def to_oauth_config(self) -> OAuthConfig:
        """Build an OAuthConfig holding every fully configured provider."""
        providers = {
            name: config
            for name in ProviderName
            if (config := self.provider_config(name)) is not None
        }
        return OAuthConfig(
            providers=providers,
            redirect_uri=self.OAUTH_REDIRECT_URI,
            timeout=self.OAUTH_HTTP_TIMEOUT,
        )


@lru_cache
def get_settings() -> OAuthSettings:
    return OAuthSettings()
