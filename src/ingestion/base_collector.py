"""
Base collector interface and shared pipeline for upstream alert sources.

Each source collector declares its listing page, link selection rules,
description strategies and fixed safety copy. The base class runs the
two-phase pipeline:
- Link discovery on the listing page (failure here fails the collector)
- Sequential article enrichment (failure here skips only that article)
"""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from src.ingestion.extraction import (
    DescriptionStrategy,
    dedupe_links,
    extract_description,
    extract_links,
    simplify_text,
)
from src.ingestion.http_client import FetchError, HTMLFetcher
from src.ingestion.schemas import CandidateLink, ScamRecord, SourceTag
from src.observability.metrics import get_metrics

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 12

GENERIC_AVOID_TIPS: tuple[str, ...] = (
    "Don’t click links or call numbers from unexpected messages.",
    "Hang up. Then call the organization using a trusted number (card, bill, official website).",
    "Never share passwords or one-time codes.",
    "If pressured to act immediately, stop—scammers use urgency.",
    "Talk to a trusted family member or caregiver before sending money.",
)


@dataclass
class CollectorStats:
    """Statistics for a collector run."""

    links_found: int = 0
    records_built: int = 0
    articles_skipped: int = 0
    start_time: float = field(default_factory=time.monotonic)

    @property
    def elapsed_seconds(self) -> float:
        return time.monotonic() - self.start_time


class BaseCollector(ABC):
    """
    Abstract base class for upstream alert collectors.

    Subclasses must implement:
        - source_tag, source_name, category: record identity
        - listing_url, origin, link_selector: where and how to find articles
        - description_strategies: ordered extraction fallbacks
        - fallback_summary, red_flags: fixed per-source copy

    Subclasses may override:
        - accept_link(): source-specific URL filter
        - avoid_tips: defaults to GENERIC_AVOID_TIPS
    """

    def __init__(self, fetcher: HTMLFetcher, limit: int = DEFAULT_LIMIT):
        """
        Initialize collector.

        Args:
            fetcher: Shared HTML fetcher
            limit: Maximum candidate articles taken from the listing page
        """
        self._fetcher = fetcher
        self._limit = limit
        self._stats = CollectorStats()

    # Identity

    @property
    @abstractmethod
    def source_tag(self) -> SourceTag:
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        ...

    @property
    @abstractmethod
    def category(self) -> str:
        ...

    # Link discovery rules

    @property
    @abstractmethod
    def listing_url(self) -> str:
        ...

    @property
    @abstractmethod
    def origin(self) -> str:
        ...

    @property
    @abstractmethod
    def link_selector(self) -> str:
        ...

    def accept_link(self, href: str, url: str) -> bool:
        """Source-specific filter applied after the CSS selector."""
        return True

    # Enrichment rules

    @property
    @abstractmethod
    def description_strategies(self) -> Sequence[DescriptionStrategy]:
        ...

    @property
    @abstractmethod
    def fallback_summary(self) -> str:
        ...

    @property
    @abstractmethod
    def red_flags(self) -> Sequence[str]:
        ...

    @property
    def avoid_tips(self) -> Sequence[str]:
        return GENERIC_AVOID_TIPS

    @property
    def name(self) -> str:
        """Human-readable collector name."""
        return f"{self.source_tag.value}_collector"

    @property
    def stats(self) -> CollectorStats:
        """Get current collector statistics."""
        return self._stats

    # Pipeline

    async def collect(self) -> list[ScamRecord]:
        """
        Collect normalized scam records from this source.

        Returns:
            Records in listing order, at most `limit` of them

        Raises:
            FetchError: If the listing page cannot be fetched
        """
        self._stats = CollectorStats()
        metrics = get_metrics()

        logger.info(f"Starting collection for {self.name}")

        try:
            listing = await self._fetcher.fetch(self.listing_url)
        except FetchError:
            metrics.record_fetch("listing", success=False)
            raise
        metrics.record_fetch("listing", success=True)

        candidates = self.discover(listing)
        self._stats.links_found = len(candidates)

        records: list[ScamRecord] = []
        for link in candidates:
            record = await self._enrich(link)
            if record is not None:
                records.append(record)

        self._stats.records_built = len(records)
        metrics.record_collected(self.source_tag, len(records))

        logger.info(
            f"{self.name} completed: "
            f"links={self._stats.links_found}, "
            f"records={self._stats.records_built}, "
            f"skipped={self._stats.articles_skipped}, "
            f"elapsed={self._stats.elapsed_seconds:.2f}s"
        )
        return records

    def discover(self, listing_markup: str) -> list[CandidateLink]:
        """Extract, filter, dedupe and cap candidate links from a listing page."""
        links = extract_links(
            listing_markup,
            selector=self.link_selector,
            origin=self.origin,
            accept=self.accept_link,
        )
        return dedupe_links(links, limit=self._limit)

    async def _enrich(self, link: CandidateLink) -> ScamRecord | None:
        """Fetch one article and build its record; None if anything fails."""
        try:
            markup = await self._fetcher.fetch(link.url)
        except Exception as e:
            get_metrics().record_fetch("article", success=False)
            self._skip(link, e)
            return None
        get_metrics().record_fetch("article", success=True)

        try:
            description = extract_description(markup, self.description_strategies)
            return self.build_record(link, description)
        except Exception as e:
            self._skip(link, e)
            return None

    def _skip(self, link: CandidateLink, error: Exception) -> None:
        self._stats.articles_skipped += 1
        get_metrics().record_skipped(self.source_tag)
        logger.warning(f"{self.name} skipped {link.url}: {error}")

    def build_record(self, link: CandidateLink, description: str | None) -> ScamRecord:
        """Map a candidate link and its extracted description onto a ScamRecord."""
        return ScamRecord(
            id=f"{self.source_tag.value}:{link.url}",
            title=link.title,
            category=self.category,
            source=self.source_name,
            source_url=link.url,
            looks_like=simplify_text(description or self.fallback_summary),
            avoid=list(self.avoid_tips),
            red_flags=list(self.red_flags),
            published=None,
        )
