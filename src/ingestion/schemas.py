"""
Canonical scam record schema for the feed pipeline.

CRITICAL: Field aliases are the public JSON contract served by the API
(camelCase, e.g. sourceUrl, looksLike, redFlags). All collectors MUST
output this exact structure.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def iso_z(dt: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SourceTag(str, Enum):
    """Upstream alert sources. The value prefixes every record id."""

    FTC = "ftc"
    IC3 = "ic3"
    SSA = "ssa"


@dataclass(frozen=True)
class CandidateLink:
    """An article link discovered on a listing page."""

    title: str
    url: str


class ScamRecord(BaseModel):
    """
    Normalized scam alert.

    Every collector maps an upstream article onto this shape. A record is
    either built with all fields populated (falling back to generic text
    and tips) or not built at all.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(
        ...,
        description="Unique ID in format: {source_tag}:{source_url}",
        examples=["ftc:https://consumer.ftc.gov/consumer-alerts/2024/01/example"],
    )
    title: str = Field(..., min_length=1, description="Whitespace-normalized headline")
    category: str = Field(..., description="Human-readable alert type")
    source: str = Field(..., description="Short name of the issuing organization")
    source_url: str = Field(..., min_length=1, description="Canonical article URL; dedup key")
    looks_like: str = Field(..., description="Normalized summary, at most 360 chars plus ellipsis")
    avoid: list[str] = Field(default_factory=list, description="Ordered safety tips")
    red_flags: list[str] = Field(default_factory=list, description="Ordered warning signs")
    published: datetime | None = Field(
        default=None,
        description="Reserved; upstream pages do not expose a reliable publish date",
    )


class Feed(BaseModel):
    """Aggregated, deduplicated scam feed. Immutable once built."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    generated_at: datetime = Field(
        default_factory=_utc_now,
        description="UTC wall-clock time the feed was built",
    )
    scams: tuple[ScamRecord, ...] = Field(default_factory=tuple)

    @field_serializer("generated_at")
    def _serialize_generated_at(self, value: datetime) -> str:
        return iso_z(value)
