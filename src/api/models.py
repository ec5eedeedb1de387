"""
Request and response models for the scam feed API.
"""

from pydantic import BaseModel, Field

from src.ingestion.schemas import Feed, ScamRecord

# The feed model is served as-is (camelCase aliases)
FeedResponse = Feed


class ScamOfDayResponse(BaseModel):
    """Response model for the scam of the day."""

    date: str = Field(..., description="Date string used for the pick, echoed verbatim")
    index: int = Field(..., ge=0, description="Index of the pick within the feed")
    total: int = Field(..., ge=1, description="Number of scams in the feed")
    scam: ScamRecord


class ErrorResponse(BaseModel):
    """Error body returned by the feed endpoints."""

    error: str = Field(..., description="Human-readable error summary")
    details: str | None = Field(default=None, description="Stringified underlying exception")
