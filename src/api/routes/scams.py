"""
Scam feed endpoints.
"""

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_feed_service
from src.api.models import ErrorResponse, FeedResponse, ScamOfDayResponse
from src.feed.picker import pick_index_for_date, today_string
from src.feed.service import FeedService

router = APIRouter(prefix="/api")
logger = structlog.get_logger(__name__)


@router.get(
    "/scams",
    response_model=FeedResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Full scam feed",
    description="All scams from every source, deduplicated by source URL. Cached for an hour.",
)
async def list_scams(
    service: FeedService = Depends(get_feed_service),
):
    try:
        return await service.build_feed()
    except Exception as e:
        logger.error("Failed to build feed", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to build feed", "details": str(e)},
        )


@router.get(
    "/scam-of-day",
    response_model=ScamOfDayResponse,
    responses={500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Scam of the day",
    description="Deterministic pick from the feed for a date (default: today, server local time).",
)
async def scam_of_day(
    date: str | None = Query(
        default=None,
        description="Date string (YYYY-MM-DD); used verbatim as the pick seed",
    ),
    service: FeedService = Depends(get_feed_service),
):
    try:
        date_str = date or today_string()
        feed = await service.build_feed()
        scams = feed.scams
        if not scams:
            return JSONResponse(
                status_code=503,
                content={"error": "No scams available right now."},
            )

        index = pick_index_for_date(date_str, len(scams))
        return ScamOfDayResponse(
            date=date_str,
            index=index,
            total=len(scams),
            scam=scams[index],
        )
    except Exception as e:
        logger.error("Failed to get scam of day", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to get scam of day", "details": str(e)},
        )
