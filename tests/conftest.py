"""Pytest fixtures for scam-of-the-day tests."""

from datetime import datetime, timezone

import pytest

from src.ingestion.schemas import Feed, ScamRecord, SourceTag

# Listing pages mimic the parts of the real upstream markup the
# collectors rely on: nav self-links, duplicate anchors, empty anchors
# and unrelated links mixed in with article links.

FTC_LISTING_HTML = """
<html><body>
  <nav><a href="/consumer-alerts">Consumer Alerts</a></nav>
  <main>
    <h2><a href="/consumer-alerts/2024/01/gift-card-scams-are-back">
      Gift card
      scams are back
    </a></h2>
    <a href="/consumer-alerts/2024/01/gift-card-scams-are-back">Gift card scams are back</a>
    <a href="https://consumer.ftc.gov/consumer-alerts/2024/01/tech-support-scams">Tech support scams</a>
    <a href="/consumer-alerts/2024/01/no-title"></a>
    <a href="/features/scam-alerts">Scam alerts feature</a>
  </main>
</body></html>
"""

IC3_LISTING_HTML = """
<html><body>
  <main>
    <a href="/PSA/2024/PSA240105">Scammers Impersonate FBI Agents</a>
    <a href="/PSA/Archive">PSA Archive</a>
    <a href="https://www.ic3.gov/PSA/2023/PSA231201">Holiday Shopping Scams</a>
  </main>
</body></html>
"""

SSA_LISTING_HTML = """
<html><body>
  <header><a href="https://oig.ssa.gov/scam-alerts/">Scam Alerts</a></header>
  <main>
    <a href="/scam-alerts/2024-01-10/fake-ssa-letters/">Fake SSA Letters</a>
    <a href="/scam-alerts/2024-01-03/badge-number-calls/">Badge Number Calls</a>
  </main>
</body></html>
"""

META_ARTICLE_HTML = """
<html><head>
  <meta name="description" content="Scammers   want “gift cards” and it’s urgent.">
</head><body><article><p>Body paragraph.</p></article></body></html>
"""

ARTICLE_PARAGRAPH_HTML = """
<html><body>
  <main><p>Main region paragraph.</p></main>
  <article><p>  First article
     paragraph. </p><p>Second article paragraph.</p></article>
</body></html>
"""

MAIN_ONLY_HTML = """
<html><body><main><div><p>Only the main region has text.</p></div></main></body></html>
"""

EMPTY_ARTICLE_HTML = "<html><body><div>No paragraphs here.</div></body></html>"


class FakeClock:
    """Manually advanced monotonic clock for cache expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _make_record(
    url: str,
    source: SourceTag = SourceTag.FTC,
    title: str = "Sample scam",
    **overrides,
) -> ScamRecord:
    """Helper to create a ScamRecord with sensible defaults."""
    fields = {
        "id": f"{source.value}:{url}",
        "title": title,
        "category": "FTC Consumer Alert",
        "source": "FTC",
        "source_url": url,
        "looks_like": "A scam that looks like this.",
        "avoid": ["Hang up."],
        "red_flags": ["Urgency"],
    }
    fields.update(overrides)
    return ScamRecord(**fields)


@pytest.fixture
def sample_records() -> list[ScamRecord]:
    """Five records spread across the three sources."""
    return [
        _make_record("https://consumer.ftc.gov/consumer-alerts/2024/01/a", title="A"),
        _make_record("https://consumer.ftc.gov/consumer-alerts/2024/01/b", title="B"),
        _make_record("https://www.ic3.gov/PSA/2024/PSA240101", SourceTag.IC3, title="C"),
        _make_record("https://www.ic3.gov/PSA/2024/PSA240102", SourceTag.IC3, title="D"),
        _make_record("https://oig.ssa.gov/scam-alerts/2024-01-01/e/", SourceTag.SSA, title="E"),
    ]


@pytest.fixture
def sample_feed(sample_records: list[ScamRecord]) -> Feed:
    return Feed(
        generated_at=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        scams=tuple(sample_records),
    )
