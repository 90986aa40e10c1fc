"""In-process TTL cache."""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from infrastructure.cache.base import TranslationCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TTL_SECONDS = 86400


class InMemoryCache(TranslationCache):
    """Single-owner in-memory cache with expiry-on-read.

    Expired entries are dropped when they are read, and every write sweeps
    whatever else has expired so the store cannot grow with dead entries.

    Attributes:
        default_ttl_seconds: TTL applied when set() is called without one.
    """

    def __init__(
        self,
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            default_ttl_seconds: TTL for entries stored without an explicit TTL.
            clock: Monotonic time source, injectable for tests.
        """
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be greater than zero")
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        expires_at, value = entry
        if expires_at <= self._clock():
            del self._entries[key]
            self._misses += 1
            logger.debug("cache_entry_expired", key=key)
            return None

        self._hits += 1
        return value

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self.default_ttl_seconds
        now = self._clock()
        self._sweep(now)
        self._entries[key] = (now + ttl, value)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "memory",
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "default_ttl_seconds": self.default_ttl_seconds,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("cache_swept", expired_count=len(expired))
