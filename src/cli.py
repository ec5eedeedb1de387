"""
Command-line interface for scam-of-the-day.

Provides commands to run the API server, build the feed once and
inspect the daily pick.

Usage:
    scam-of-the-day serve           # Run the HTTP API
    scam-of-the-day feed --pretty   # Build the feed and print it as JSON
    scam-of-the-day pick 31         # Index of today's pick in a 31-scam feed
"""

import asyncio
import json
import os

import click

from src.config.settings import get_settings
from src.observability.logging import setup_logging
from src.observability.metrics import get_metrics


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Scam of the Day - aggregated government scam alerts."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.option("--host", default=None, help="API host (default from HOST)")
@click.option("--port", default=None, type=int, help="API port (default from PORT)")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    if settings.metrics_enabled:
        get_metrics().start_server()
        click.echo(f"Metrics available on http://localhost:{settings.metrics_port}/metrics")

    click.echo(f"Backend running at http://localhost:{port}")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


@main.command()
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
def feed(pretty: bool) -> None:
    """Build the feed once from all sources and print it."""
    from src.feed.service import FeedService

    async def run():
        async with FeedService() as service:
            return await service.build_feed()

    result = asyncio.run(run())
    payload = result.model_dump(mode="json", by_alias=True)
    click.echo(json.dumps(payload, indent=2 if pretty else None, ensure_ascii=False))

    if not result.scams:
        click.echo(click.style("No scams collected from any source", fg="red"), err=True)
        raise SystemExit(1)


@main.command()
@click.argument("count", type=click.IntRange(min=0))
@click.option("--date", "date_str", default=None, help="Date string (default: today)")
def pick(count: int, date_str: str | None) -> None:
    """Print the scam-of-the-day index for a feed of COUNT scams."""
    from src.feed.picker import pick_index_for_date, today_string

    date_str = date_str or today_string()
    click.echo(f"{date_str}: {pick_index_for_date(date_str, count)}")


if __name__ == "__main__":
    main()
