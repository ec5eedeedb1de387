"""Data ingestion module - fetcher, markup extraction, source collectors and schemas."""

from src.ingestion.schemas import (
    CandidateLink,
    Feed,
    ScamRecord,
    SourceTag,
)

__all__ = [
    "SourceTag",
    "CandidateLink",
    "ScamRecord",
    "Feed",
]
