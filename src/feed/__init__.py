"""Feed: aggregation, caching and deterministic daily selection."""

from src.feed.cache import FeedCache, NullFeedCache
from src.feed.config import FeedConfig
from src.feed.picker import fnv1a32, pick_index_for_date, today_string
from src.feed.service import CollectorOutcome, FeedService, create_collectors

__all__ = [
    "CollectorOutcome",
    "FeedCache",
    "FeedConfig",
    "FeedService",
    "NullFeedCache",
    "create_collectors",
    "fnv1a32",
    "pick_index_for_date",
    "today_string",
]
