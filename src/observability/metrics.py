"""
Prometheus metrics for monitoring the scam feed pipeline.

Defines and exposes metrics for:
- Upstream fetch outcomes (listing and article pages)
- Per-source collector failures and yields
- Feed cache hit rate
- Feed build latency and size

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import logging

from prometheus_client import (
    REGISTRY,
    Counter,
    Gauge,
    Histogram,
    start_http_server,
)

from src.config.settings import get_settings
from src.ingestion.schemas import SourceTag

logger = logging.getLogger(__name__)

# Upstream government pages are slow; buckets skew long
BUILD_LATENCY_BUCKETS = (0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0)


class MetricsCollector:
    """
    Prometheus metrics collector for the scam feed pipeline.

    Usage:
        metrics = MetricsCollector()
        metrics.start_server()

        metrics.record_fetch("listing", success=True)
        metrics.record_cache(hit=False)
    """

    def __init__(self):
        """Initialize Prometheus metrics."""

        self.fetches = Counter(
            "scam_feed_fetches_total",
            "Total upstream page fetches",
            ["kind", "status"],  # kind: listing, article; status: success, error
        )

        self.source_failures = Counter(
            "scam_feed_source_failures_total",
            "Collectors whose listing fetch or pipeline failed",
            ["source"],
        )

        self.records_collected = Counter(
            "scam_feed_records_collected_total",
            "Scam records produced by collectors",
            ["source"],
        )

        self.articles_skipped = Counter(
            "scam_feed_articles_skipped_total",
            "Candidate articles dropped after a fetch or parse failure",
            ["source"],
        )

        self.cache_requests = Counter(
            "scam_feed_cache_requests_total",
            "Feed cache lookups",
            ["result"],  # hit, miss
        )

        self.build_latency = Histogram(
            "scam_feed_build_latency_seconds",
            "Time to build the aggregated feed from all sources",
            buckets=BUILD_LATENCY_BUCKETS,
        )

        self.feed_size = Gauge(
            "scam_feed_feed_size",
            "Number of scams in the most recently built feed",
        )

        logger.info("Prometheus metrics initialized")

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to expose metrics on (default from settings)
        """
        settings = get_settings()
        port = port or settings.metrics_port

        start_http_server(port, registry=REGISTRY)
        logger.info(f"Prometheus metrics server started on port {port}")

    # Convenience methods

    def record_fetch(self, kind: str, success: bool) -> None:
        """Record one upstream page fetch."""
        self.fetches.labels(kind=kind, status="success" if success else "error").inc()

    def record_collected(self, source: SourceTag | str, count: int) -> None:
        source_str = source.value if isinstance(source, SourceTag) else source
        self.records_collected.labels(source=source_str).inc(count)

    def record_skipped(self, source: SourceTag | str) -> None:
        source_str = source.value if isinstance(source, SourceTag) else source
        self.articles_skipped.labels(source=source_str).inc()

    def record_source_failure(self, source: SourceTag | str) -> None:
        source_str = source.value if isinstance(source, SourceTag) else source
        self.source_failures.labels(source=source_str).inc()

    def record_cache(self, hit: bool) -> None:
        self.cache_requests.labels(result="hit" if hit else "miss").inc()

    def record_build(self, latency: float, size: int) -> None:
        """
        Record a completed feed build.

        Args:
            latency: Build duration in seconds
            size: Number of scams in the feed
        """
        self.build_latency.observe(latency)
        self.feed_size.set(size)


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
