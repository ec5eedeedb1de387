"""
Feed service - builds the aggregated scam feed from all collectors.

Runs the collectors concurrently, isolates per-source failures, merges
results in fixed source order, dedupes by source URL and caches the
result.

Features:
- Failure-isolating concurrent join (one source down never sinks the feed)
- Cache-first reads with a fixed expiration window
- Optional single-flight rebuild for concurrent cache misses
- Metrics collection
"""

import asyncio
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog

from src.feed.cache import FeedCache
from src.feed.config import FeedConfig
from src.ingestion.base_collector import BaseCollector
from src.ingestion.ftc_collector import FTCCollector
from src.ingestion.http_client import HTMLFetcher
from src.ingestion.ic3_collector import IC3Collector
from src.ingestion.schemas import Feed, ScamRecord, SourceTag
from src.ingestion.ssa_collector import SSACollector
from src.observability.metrics import get_metrics

logger = structlog.get_logger(__name__)


def create_collectors(fetcher: HTMLFetcher, limit: int = 12) -> list[BaseCollector]:
    """Build the collectors in feed order: FTC, then IC3, then SSA OIG."""
    return [
        FTCCollector(fetcher, limit=limit),
        IC3Collector(fetcher, limit=limit),
        SSACollector(fetcher, limit=limit),
    ]


@dataclass
class CollectorOutcome:
    """Settled result of one collector: records on success, error on failure."""

    source: SourceTag
    records: list[ScamRecord] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def dedupe_records(records: Iterable[ScamRecord]) -> list[ScamRecord]:
    """Drop records without a source URL or with one already seen, keeping the first."""
    seen: set[str] = set()
    deduped: list[ScamRecord] = []
    for record in records:
        if not record.source_url or record.source_url in seen:
            continue
        seen.add(record.source_url)
        deduped.append(record)
    return deduped


class FeedService:
    """
    Service that builds and caches the aggregated scam feed.

    Usage:
        async with FeedService() as service:
            feed = await service.build_feed()
    """

    def __init__(
        self,
        collectors: Sequence[BaseCollector] | None = None,
        cache: FeedCache | None = None,
        fetcher: HTMLFetcher | None = None,
        config: FeedConfig | None = None,
    ):
        """
        Initialize feed service.

        Args:
            collectors: Source collectors in feed order (or create the defaults)
            cache: Feed cache (or create one from config)
            fetcher: Shared HTML fetcher for the default collectors
            config: Feed configuration (or load from environment)
        """
        self._config = config or FeedConfig()
        self._metrics = get_metrics()

        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or HTMLFetcher(user_agent=self._config.user_agent)

        if collectors is not None:
            self._collectors = list(collectors)
        else:
            self._collectors = create_collectors(
                self._fetcher, limit=self._config.per_source_limit
            )

        self._cache = cache if cache is not None else FeedCache(
            ttl_seconds=self._config.cache_ttl_seconds
        )
        self._rebuild_lock = asyncio.Lock() if self._config.single_flight else None

        logger.info(
            "Feed service initialized",
            sources=[c.source_tag.value for c in self._collectors],
            cache_ttl_seconds=self._cache.ttl_seconds,
        )

    async def __aenter__(self) -> "FeedService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the fetcher if this service created it."""
        if self._owns_fetcher:
            await self._fetcher.aclose()

    @property
    def cache(self) -> FeedCache:
        return self._cache

    @property
    def collectors(self) -> list[BaseCollector]:
        return self._collectors

    async def build_feed(self) -> Feed:
        """
        Return the cached feed, rebuilding it from all sources on a miss.

        Returns:
            The current Feed (possibly with zero scams if every source failed)
        """
        cached = self._cache.get()
        if cached is not None:
            self._metrics.record_cache(hit=True)
            logger.debug("Feed cache hit", generated_at=cached.generated_at.isoformat())
            return cached

        self._metrics.record_cache(hit=False)

        if self._rebuild_lock is None:
            return await self._rebuild()

        async with self._rebuild_lock:
            # Another caller may have finished a rebuild while we waited
            cached = self._cache.get()
            if cached is not None:
                return cached
            return await self._rebuild()

    async def collect_all(self) -> list[CollectorOutcome]:
        """
        Run every collector concurrently and settle each one independently.

        Returns:
            One outcome per collector, in collector order
        """
        results = await asyncio.gather(
            *(collector.collect() for collector in self._collectors),
            return_exceptions=True,
        )

        outcomes: list[CollectorOutcome] = []
        for collector, result in zip(self._collectors, results):
            if isinstance(result, Exception):
                logger.error(
                    "Collector failed",
                    source=collector.source_tag.value,
                    error=str(result),
                    error_type=type(result).__name__,
                )
                self._metrics.record_source_failure(collector.source_tag)
                outcomes.append(CollectorOutcome(source=collector.source_tag, error=result))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(CollectorOutcome(source=collector.source_tag, records=result))

        return outcomes

    async def _rebuild(self) -> Feed:
        start_time = time.monotonic()

        outcomes = await self.collect_all()
        merged = [record for outcome in outcomes if outcome.ok for record in outcome.records]

        feed = Feed(
            generated_at=datetime.now(timezone.utc),
            scams=tuple(dedupe_records(merged)),
        )
        self._cache.set(feed)

        elapsed = time.monotonic() - start_time
        self._metrics.record_build(latency=elapsed, size=len(feed.scams))

        logger.info(
            "Feed built",
            scams=len(feed.scams),
            failed_sources=[o.source.value for o in outcomes if not o.ok],
            elapsed_seconds=round(elapsed, 2),
        )
        return feed
