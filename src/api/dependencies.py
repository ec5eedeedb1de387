"""
Dependency injection for FastAPI endpoints.
"""

from src.feed.config import FeedConfig
from src.feed.service import FeedService

# Global service instance (initialized on first request)
_feed_service: FeedService | None = None


async def get_feed_service() -> FeedService:
    """
    Get feed service instance.

    Creates a process-wide singleton so the feed cache survives across
    requests.
    """
    global _feed_service

    if _feed_service is None:
        _feed_service = FeedService(config=FeedConfig())

    return _feed_service


async def cleanup_dependencies() -> None:
    """Close the shared feed service and its HTTP client."""
    global _feed_service

    if _feed_service is not None:
        await _feed_service.close()
        _feed_service = None
