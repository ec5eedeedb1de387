"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the scam-of-the-day service.

    All settings can be overridden via environment variables.
    Prefix is not used to allow standard env var names (e.g., PORT).
    Feed-specific tuning lives in src.feed.config.FeedConfig.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Observability
    metrics_enabled: bool = False
    metrics_port: int = Field(default=8000, ge=1, le=65535)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
