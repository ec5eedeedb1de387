"""
FBI IC3 public service announcement collector.

Scrapes https://www.ic3.gov/PSA. Individual announcements live under
/PSA/<year>/<id>; the listing page also links archive and index pages
under /PSA/, which the year filter drops.
"""

from collections.abc import Sequence

from src.ingestion.base_collector import BaseCollector
from src.ingestion.extraction import DescriptionStrategy, first_paragraph, meta_description
from src.ingestion.schemas import SourceTag

IC3_ORIGIN = "https://www.ic3.gov"
IC3_LISTING_URL = f"{IC3_ORIGIN}/PSA"

IC3_RED_FLAGS: tuple[str, ...] = (
    "Impersonation of government or bank",
    "Requests for wire transfer, gift cards, or crypto",
    "Links to lookalike websites",
    "Pressure to act fast",
)


class IC3Collector(BaseCollector):
    """Collector for FBI IC3 public service announcements."""

    source_tag = SourceTag.IC3
    source_name = "FBI IC3"
    category = "FBI IC3 PSA"

    listing_url = IC3_LISTING_URL
    origin = IC3_ORIGIN
    link_selector = "a[href*='/PSA/']"

    fallback_summary = "Public safety scam advisory from FBI IC3."
    red_flags = IC3_RED_FLAGS

    @property
    def description_strategies(self) -> Sequence[DescriptionStrategy]:
        return (meta_description, first_paragraph("main"), first_paragraph("article"))

    def accept_link(self, href: str, url: str) -> bool:
        # Announcements are filed by year: /PSA/2024/PSA240101
        return "/PSA/20" in href
