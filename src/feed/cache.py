"""In-memory feed cache with a fixed expiration window."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from src.ingestion.schemas import Feed

logger = logging.getLogger(__name__)

FEED_KEY = "feed"


@dataclass(frozen=True)
class _Entry:
    value: Feed
    expires_at: float


class FeedCache:
    """Single-slot TTL cache for the aggregated feed.

    The expiry is fixed when a feed is stored; reads never extend it.
    Values are replaced wholesale on set, never mutated.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._slots: dict[str, _Entry] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str = FEED_KEY) -> Feed | None:
        """Return the stored feed, or None when absent or expired."""
        entry = self._slots.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            logger.debug("Feed cache entry expired")
            del self._slots[key]
            return None
        return entry.value

    def set(self, value: Feed, key: str = FEED_KEY) -> None:
        """Store a feed and restart its expiration window."""
        if self._ttl <= 0:
            return
        self._slots[key] = _Entry(value=value, expires_at=self._clock() + self._ttl)


class NullFeedCache(FeedCache):
    """Cache that never stores anything; every build goes upstream."""

    def __init__(self) -> None:
        super().__init__(ttl_seconds=0)

    def get(self, key: str = FEED_KEY) -> Feed | None:
        return None
