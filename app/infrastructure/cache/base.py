"""Translation cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TranslationCache(ABC):
    """Abstract base class for result cache implementations.

    Defines the key-value contract used to memoize translation results.
    Entries carry a time-to-live after which they are no longer returned.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the cached value for a key.

        Args:
            key: Cache key (see CacheKeyBuilder).

        Returns:
            Cached value or None if not found/expired.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """Cache a value under the given key.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl_seconds: Time-to-live in seconds. Falls back to the
                implementation's default when omitted.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key if present."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass
