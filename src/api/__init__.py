"""
FastAPI scam feed service.

Provides REST API for the aggregated feed:
- GET /api/scams - Full deduplicated feed
- GET /api/scam-of-day - Deterministic pick for a calendar date
"""

from src.api.app import create_app

__all__ = ["create_app"]
