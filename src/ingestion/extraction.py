"""
Markup extraction for upstream alert pages.

Two concerns live here, both free of network access so they can be
exercised against canned HTML:

- Link discovery: pull (title, absolute URL) candidates out of a listing
  page, filter them per source, dedupe by URL and cap the count.
- Description extraction: an ordered list of strategies, each returning
  an optional string; the first non-empty result wins.

Upstream markup changes degrade results (fewer links, fallback text)
rather than raising.
"""

import re
from collections.abc import Callable, Iterable, Sequence

from bs4 import BeautifulSoup

from src.ingestion.schemas import CandidateLink

MAX_SUMMARY_LENGTH = 360
ELLIPSIS = "…"

_CURLY_DOUBLE_QUOTES = re.compile("[“”]")
_CURLY_SINGLE_QUOTE = re.compile("’")
_TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*$")

# (href, absolute_url) -> keep?
LinkFilter = Callable[[str, str], bool]
DescriptionStrategy = Callable[[BeautifulSoup], str | None]


def parse_html(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


# Text normalization


def strip(text: str | None) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    return " ".join((text or "").split())


def simplify_text(text: str | None, max_len: int = MAX_SUMMARY_LENGTH) -> str:
    """
    Normalize a description for display.

    Collapses whitespace, straightens curly quotes and, when longer than
    max_len, cuts back to the last whitespace boundary before max_len and
    appends an ellipsis.

    Args:
        text: Raw description text
        max_len: Maximum length before the ellipsis marker

    Returns:
        Normalized text of at most max_len + 1 characters
    """
    t = strip(text)
    t = _CURLY_DOUBLE_QUOTES.sub('"', t)
    t = _CURLY_SINGLE_QUOTE.sub("'", t)
    if len(t) > max_len:
        t = _TRAILING_PARTIAL_WORD.sub("", t[:max_len]) + ELLIPSIS
    return t


# Link discovery


def absolute_url(href: str, origin: str) -> str:
    """Prefix a relative href with the source origin."""
    if href.startswith("http"):
        return href
    return f"{origin}{href}"


def extract_links(
    markup: str,
    selector: str,
    origin: str,
    accept: LinkFilter | None = None,
) -> list[CandidateLink]:
    """
    Extract candidate article links from a listing page.

    Args:
        markup: Listing page HTML
        selector: CSS selector for anchor elements
        origin: Scheme and host used to absolutize relative hrefs
        accept: Optional source-specific filter on (href, absolute_url)

    Returns:
        Links in document order, duplicates included
    """
    soup = parse_html(markup)
    links: list[CandidateLink] = []

    for anchor in soup.select(selector):
        href = anchor.get("href")
        title = strip(anchor.get_text())
        if not href or not title:
            continue

        url = absolute_url(href, origin)
        if accept is not None and not accept(href, url):
            continue

        links.append(CandidateLink(title=title, url=url))

    return links


def dedupe_links(links: Iterable[CandidateLink], limit: int | None = None) -> list[CandidateLink]:
    """Drop repeated URLs keeping first-seen order, then truncate to limit."""
    seen: set[str] = set()
    deduped: list[CandidateLink] = []
    for link in links:
        if link.url in seen:
            continue
        seen.add(link.url)
        deduped.append(link)
    return deduped[:limit] if limit is not None else deduped


# Description extraction


def meta_description(soup: BeautifulSoup) -> str | None:
    """Page-level <meta name="description"> content."""
    tag = soup.select_one("meta[name='description']")
    if tag is None:
        return None
    content = tag.get("content")
    return content or None


def first_paragraph(container: str) -> DescriptionStrategy:
    """Build a strategy returning the first <p> inside the given region."""

    def _strategy(soup: BeautifulSoup) -> str | None:
        paragraph = soup.select_one(f"{container} p")
        if paragraph is None:
            return None
        return strip(paragraph.get_text()) or None

    _strategy.__name__ = f"first_paragraph_{container}"
    return _strategy


def extract_description(markup: str, strategies: Sequence[DescriptionStrategy]) -> str | None:
    """
    Run description strategies in order against an article page.

    Returns:
        The first non-blank result, or None when every strategy comes up empty
    """
    soup = parse_html(markup)
    for strategy in strategies:
        value = strategy(soup)
        if value and value.strip():
            return value
    return None
