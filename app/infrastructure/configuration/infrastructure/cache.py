"""Translation cache infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class CacheSettings(InfrastructureSettings):
    """Result cache configuration.

    Environment Variables:
        CACHE_TTL_SECONDS: Time-to-live for cached translations (default: 86400s = 24h)

    Example:
        ```python
        from infrastructure.configuration import settings

        ttl = settings.cache.CACHE_TTL_SECONDS
        ```
    """

    CACHE_TTL_SECONDS: int = Field(default=86400, alias="CACHE_TTL_SECONDS", gt=0)
