"""Configuration for feed building and caching."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.ingestion.http_client import DEFAULT_USER_AGENT


class FeedConfig(BaseSettings):
    """Settings for upstream collection and the in-memory feed cache."""

    model_config = SettingsConfigDict(
        env_prefix="FEED_",
        case_sensitive=False,
        extra="ignore",
    )

    cache_ttl_seconds: int = Field(
        default=3600,
        ge=0,
        description="Lifetime of a built feed in seconds (0 = no caching)",
    )
    per_source_limit: int = Field(
        default=12,
        ge=1,
        description="Maximum candidate articles taken from each listing page",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent sent on every upstream request",
    )
    single_flight: bool = Field(
        default=True,
        description="Share one rebuild between concurrent cache-miss callers",
    )
