"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.dependencies import cleanup_dependencies
from src.api.routes import scams
from src.observability.logging import bind_context, clear_context

logger = structlog.get_logger(__name__)

ROOT_MESSAGE = "Scam of the Day backend running. Try /api/scam-of-day"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Scam of the Day API starting up")

    yield

    logger.info("Scam of the Day API shutting down")
    await cleanup_dependencies()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Scam of the Day API",
        description="""
Aggregated scam alerts from public government sources.

## Sources

- **FTC**: Consumer Alerts
- **FBI IC3**: Public Service Announcements
- **SSA OIG**: Scam Alerts

The feed is rebuilt at most once an hour. The scam of the day is a
deterministic pick for the requested date.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[{"name": "scams", "description": "Scam feed and daily pick"}],
    )

    # Request logging and correlation ID middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        bind_context(request_id=request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            clear_context()

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)},
        )

    app.include_router(scams.router, tags=["scams"])

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    async def root():
        return ROOT_MESSAGE

    return app
