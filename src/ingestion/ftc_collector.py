"""
FTC consumer alerts collector.

Scrapes https://consumer.ftc.gov/consumer-alerts. The listing page links
every alert under /consumer-alerts/<year>/<month>/<slug>; article pages
usually carry a meta description, with the body in an <article>.
"""

from collections.abc import Sequence

from src.ingestion.base_collector import BaseCollector
from src.ingestion.extraction import DescriptionStrategy, first_paragraph, meta_description
from src.ingestion.schemas import SourceTag

FTC_ORIGIN = "https://consumer.ftc.gov"
FTC_LISTING_URL = f"{FTC_ORIGIN}/consumer-alerts"

FTC_RED_FLAGS: tuple[str, ...] = (
    "Unexpected contact",
    "Urgency or threats",
    "Request for money, gift cards, or crypto",
    "Asks for personal info or one-time codes",
)


class FTCCollector(BaseCollector):
    """Collector for FTC Consumer Alerts."""

    source_tag = SourceTag.FTC
    source_name = "FTC"
    category = "FTC Consumer Alert"

    listing_url = FTC_LISTING_URL
    origin = FTC_ORIGIN
    link_selector = "a[href*='/consumer-alerts/']"

    fallback_summary = "Consumer scam alert from the FTC."
    red_flags = FTC_RED_FLAGS

    @property
    def description_strategies(self) -> Sequence[DescriptionStrategy]:
        return (meta_description, first_paragraph("article"), first_paragraph("main"))

    def accept_link(self, href: str, url: str) -> bool:
        return "/consumer-alerts/" in url
