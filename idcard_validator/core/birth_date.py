"""Birth date plausibility check."""

from __future__ import annotations

from datetime import UTC, datetime


def parse_birth_code(date8: str) -> datetime | None:
    """Parse an 8-digit YYYYMMDD code as midnight UTC.

    Returns None for dates that do not exist on the calendar, such as
    month 13 or 29 February of a non-leap year. strptime rejects these
    instead of rolling them over into the following month.
    """
    serialized = f"{date8[:4]}-{date8[4:6]}-{date8[6:]}"
    try:
        parsed = datetime.strptime(serialized, "%Y-%m-%d")
    except ValueError:
        return None
    return parsed.replace(tzinfo=UTC)


def is_valid_birth_date(date8: str, now: datetime | None = None) -> bool:
    """Validate that a YYYYMMDD birth code is a real date not in the future.

    No lower bound is applied.
    """
    birth = parse_birth_code(date8)
    if birth is None:
        return False
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return birth <= now
