"""Token seed (TKK) sources and the hourly seed state.

The upstream front-end embeds a seed pair ``a.b`` in its page and rotates it
every hour. SeedState keeps the current pair for the running hour and asks
its SeedSource for a new one when the hour changes, falling back to a
static pair when the source has nothing.
"""

import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from infrastructure.logging import get_module_logger

logger = get_module_logger()

SEED_BUCKET_SECONDS = 3600

_SEED_PATTERN = re.compile(r"(?:tkk|TKK)\s*[:=]\s*['\"](\d+)\.(-?\d+)['\"]")


@dataclass(frozen=True)
class SeedPair:
    """Two integers parameterizing the token algorithm.

    Attributes:
        a: Initial accumulator (upstream uses the hour number)
        b: Final XOR key
    """

    a: int
    b: int

    @classmethod
    def parse(cls, value: str) -> "SeedPair":
        """Parse the upstream ``"a.b"`` form. A bare ``"a"`` means b = 0.

        Raises:
            ValueError: If either part is not an integer
        """
        head, _, tail = value.strip().partition(".")
        return cls(a=int(head), b=int(tail) if tail else 0)

    def __str__(self) -> str:
        return f"{self.a}.{self.b}"


FALLBACK_SEED = SeedPair(0, 0)


class SeedSource(ABC):
    """Where fresh seed pairs come from."""

    @abstractmethod
    def fetch(self) -> Optional[SeedPair]:
        """Return the current upstream seed, or None if unavailable."""
        pass


class StaticSeedSource(SeedSource):
    """Always returns the same pair. Used when refresh is disabled and in tests."""

    def __init__(self, pair: SeedPair = FALLBACK_SEED):
        self.pair = pair

    def fetch(self) -> Optional[SeedPair]:
        return self.pair


class HttpSeedSource(SeedSource):
    """Scrapes the seed from the translator front page.

    Pass the transport's session to share its pool and headers. A session
    created here is owned by the source and released by close().
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

    def fetch(self) -> Optional[SeedPair]:
        log = logger.bind(url=self.url)
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            log.warning("seed_fetch_failed", error=str(e))
            return None

        match = _SEED_PATTERN.search(response.text)
        if match is None:
            log.warning("seed_not_found_in_page")
            return None

        return SeedPair(a=int(match.group(1)), b=int(match.group(2)))

    def close(self) -> None:
        """Close the session if this source created it."""
        if self._owns_session:
            self._session.close()


class SeedState:
    """Process-wide seed with an hourly refresh.

    The source is consulted at most once per hour bucket, including when it
    fails. Refreshing twice for the same bucket is harmless, so no locking
    is done.

    Attributes:
        fallback: Pair used when the source returns nothing
    """

    def __init__(
        self,
        source: Optional[SeedSource] = None,
        fallback: SeedPair = FALLBACK_SEED,
        clock: Optional[Callable[[], float]] = None,
    ):
        """Initialize seed state.

        Args:
            source: Seed source, or None to always use the fallback
            fallback: Pair used when the source has nothing
            clock: Wall-clock seconds; defaults to time.time
        """
        self._source = source
        self.fallback = fallback
        self._clock = clock
        self._pair = fallback
        self._bucket: Optional[int] = None

    @property
    def bucket(self) -> Optional[int]:
        """Hour bucket of the current pair, None before the first refresh."""
        return self._bucket

    def _current_bucket(self) -> int:
        now = self._clock() if self._clock is not None else time.time()
        return int(now // SEED_BUCKET_SECONDS)

    def current(self) -> SeedPair:
        """Return the pair for the running hour, refreshing if needed."""
        bucket = self._current_bucket()
        if bucket != self._bucket:
            self.refresh(bucket)
        return self._pair

    def refresh(self, bucket: Optional[int] = None) -> SeedPair:
        """Fetch a new pair now regardless of the bucket."""
        pair = self._source.fetch() if self._source is not None else None
        if pair is None:
            pair = self.fallback
            logger.info("seed_fallback_used", seed=str(pair))
        else:
            logger.info("seed_refreshed", seed=str(pair))

        self._pair = pair
        self._bucket = bucket if bucket is not None else self._current_bucket()
        return pair
