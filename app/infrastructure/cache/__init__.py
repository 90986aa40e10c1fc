"""Infrastructure translation cache.

Memoizes translation results per (source, target, text) triple with a
time-to-live (24 hours by default).

Usage:

    from infrastructure.cache import CacheKeyBuilder, get_cache

    cache = get_cache()
    key = CacheKeyBuilder.translation("auto", "fr", "hello")

    cached = cache.get(key)
    if cached:
        return cached

    result = fetch(...)
    cache.set(key, result)
"""

from infrastructure.cache.base import TranslationCache
from infrastructure.cache.factory import get_cache, reset_cache
from infrastructure.cache.key_builder import CacheKeyBuilder
from infrastructure.cache.memory import InMemoryCache

__all__ = [
    "TranslationCache",
    "InMemoryCache",
    "CacheKeyBuilder",
    "get_cache",
    "reset_cache",
]
