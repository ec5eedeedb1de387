"""
Deterministic scam-of-the-day selection.

The pick is a 32-bit FNV-1a hash of the date string modulo the feed
size, so it is stable for a given (date, size) pair but moves when the
feed grows or shrinks.
"""

from datetime import date

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
_UINT32_MASK = 0xFFFFFFFF


def fnv1a32(value: str) -> int:
    """
    32-bit FNV-1a over the UTF-16 code units of a string, as an unsigned int.

    Characters outside the Basic Multilingual Plane contribute their two
    surrogate units, so picks match clients hashing JavaScript strings.
    """
    data = value.encode("utf-16-le", "surrogatepass")
    h = FNV32_OFFSET_BASIS
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV32_PRIME) & _UINT32_MASK
    return h


def pick_index_for_date(date_str: str, count: int) -> int:
    """
    Pick a feed index for a calendar date.

    Args:
        date_str: Date string, used verbatim (e.g. "2024-01-01")
        count: Number of scams in the feed

    Returns:
        Index in [0, count), or 0 when count is 0
    """
    if not count:
        return 0
    return fnv1a32(date_str) % count


def today_string(today: date | None = None) -> str:
    """Local calendar date as YYYY-MM-DD."""
    return (today or date.today()).strftime("%Y-%m-%d")
