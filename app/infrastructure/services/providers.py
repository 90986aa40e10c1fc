"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.clients.http import HttpTransport
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_http_transport() -> HttpTransport:
    """
    Get application-scoped HTTP transport singleton.

    Returns:
        HttpTransport: Pooled transport configured from translator settings.
    """
    translator = get_settings().translator
    return HttpTransport(
        timeout=translator.TRANSLATOR_TIMEOUT_SECONDS,
        user_agent=translator.TRANSLATOR_USER_AGENT,
    )
