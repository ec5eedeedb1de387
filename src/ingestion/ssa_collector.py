"""
SSA Office of the Inspector General scam alert collector.

Scrapes https://oig.ssa.gov/scam-alerts/. Alerts are Social Security
impersonation schemes, so records carry SSA-specific avoid tips instead
of the generic list.
"""

from collections.abc import Sequence

from src.ingestion.base_collector import BaseCollector
from src.ingestion.extraction import DescriptionStrategy, first_paragraph, meta_description
from src.ingestion.schemas import SourceTag

SSA_ORIGIN = "https://oig.ssa.gov"
SSA_LISTING_URL = f"{SSA_ORIGIN}/scam-alerts/"

SSA_RED_FLAGS: tuple[str, ...] = (
    "Threats of arrest or benefit suspension",
    "Demands for gift cards, crypto, or wire transfer",
    "Caller claims to be SSA/police and uses ‘badge numbers’",
)

SSA_AVOID_TIPS: tuple[str, ...] = (
    "Social Security will not threaten you or demand immediate payment.",
    "Do not share your Social Security number or banking info with unexpected callers.",
    "Hang up and use official numbers from SSA.gov or your statement.",
    "Talk to a trusted family member or caregiver before sending money.",
)


class SSACollector(BaseCollector):
    """Collector for SSA OIG scam alerts."""

    source_tag = SourceTag.SSA
    source_name = "SSA OIG"
    category = "SSA OIG Scam Alert"

    listing_url = SSA_LISTING_URL
    origin = SSA_ORIGIN
    link_selector = "a[href*='/scam-alerts/']"

    fallback_summary = "Scam alert related to Social Security impersonation/fraud."
    red_flags = SSA_RED_FLAGS
    avoid_tips = SSA_AVOID_TIPS

    @property
    def description_strategies(self) -> Sequence[DescriptionStrategy]:
        return (meta_description, first_paragraph("main"), first_paragraph("article"))

    def accept_link(self, href: str, url: str) -> bool:
        # The listing page links back to itself from the nav
        return not href.endswith("/scam-alerts/")
