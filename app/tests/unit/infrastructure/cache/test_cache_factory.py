"""Unit tests for the cache key builder and cache factory."""

import pytest

from infrastructure.cache import (
    CacheKeyBuilder,
    InMemoryCache,
    get_cache,
    reset_cache,
)
from infrastructure.services import get_settings

pytestmark = pytest.mark.unit


class TestCacheKeyBuilder:
    """Test cache key generation."""

    def test_translation_key(self):
        """Language parts are length-prefixed and joined with dashes."""
        assert CacheKeyBuilder.translation("auto", "fr", "hello") == "4:auto-2:fr-hello"

    def test_text_with_dashes(self):
        assert CacheKeyBuilder.translation("en", "de", "a-b") == "2:en-2:de-a-b"

    def test_dashed_codes_do_not_collide(self):
        """A dash inside a language code cannot shift into the text."""
        regional = CacheKeyBuilder.translation("auto", "zh-tw", "x")
        alias = CacheKeyBuilder.translation("auto", "zh", "tw-x")

        assert regional != alias

    def test_deterministic(self):
        first = CacheKeyBuilder.translation("en", "fr", "Hello world")
        second = CacheKeyBuilder.translation("en", "fr", "Hello world")
        assert first == second


class TestCacheFactory:
    """Test the cache singleton."""

    def test_returns_memory_cache_with_configured_ttl(self):
        """Factory builds an InMemoryCache from settings."""
        cache = get_cache()

        assert isinstance(cache, InMemoryCache)
        assert cache.default_ttl_seconds == get_settings().cache.CACHE_TTL_SECONDS

    def test_singleton(self):
        assert get_cache() is get_cache()

    def test_reset(self):
        """reset_cache forces a new instance."""
        first = get_cache()
        first.set("k", "v")

        reset_cache()

        second = get_cache()
        assert second is not first
        assert second.get("k") is None
