"""Translation cache factory."""

from typing import Optional

from infrastructure.cache.base import TranslationCache
from infrastructure.cache.memory import InMemoryCache
from infrastructure.services import get_settings
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Singleton cache instance
_cache_instance: Optional[TranslationCache] = None


def get_cache() -> TranslationCache:
    """Get the translation cache singleton.

    Returns:
        InMemoryCache using the configured TTL.
    """
    global _cache_instance

    if _cache_instance is not None:
        return _cache_instance

    ttl = get_settings().cache.CACHE_TTL_SECONDS
    _cache_instance = InMemoryCache(default_ttl_seconds=ttl)
    logger.info("initialized_translation_cache", backend="memory", ttl_seconds=ttl)

    return _cache_instance


def reset_cache() -> None:
    """Reset the cache singleton (for testing only).

    Ensures a fresh cache instance between test runs.
    """
    global _cache_instance
    _cache_instance = None
    logger.debug("reset_cache_singleton")
