"""
Structured logging for the scam feed service.

JSON lines in production, colored console output elsewhere. Request
handlers bind a request id through structlog contextvars so every line
logged while serving a request carries it.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from src.config.settings import Settings, get_settings

# Libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def _renderer(settings: Settings) -> list[Processor]:
    if settings.is_production:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog and stdlib logging once at process start.

    Args:
        settings: Settings to read environment and level from (default: get_settings())
    """
    settings = settings or get_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(settings),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Collectors log through the stdlib; send them to stdout too
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs (e.g. request_id) to every subsequent log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
