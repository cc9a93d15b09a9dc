"""Factory function for creating a configured OAuth manager."""
import logging

import httpx

from .core.config import OAuthSettings, get_settings
from .manager import OAuthManager

logger = logging.getLogger(__name__)


def create_oauth_manager(
    settings: OAuthSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> OAuthManager:
    """
    Factory function to create a configured OAuth manager.

    Registers every provider whose client ID and secret are set.

    Args:
        settings: Settings to read credentials from (defaults to environment)
        http_client: Optional shared HTTP client for all providers

    Returns:
        Configured OAuthManager instance
    """
    settings = settings or get_settings()
    manager = OAuthManager(http_client=http_client)
    manager.configure(settings.to_oauth_config())

    enabled = sorted(manager.configured_providers())
    if enabled:
        logger.info(f"OAuth providers enabled: {', '.join(enabled)}")
    else:
        logger.warning("No OAuth providers configured (missing client ID/secret)")

    return manager
