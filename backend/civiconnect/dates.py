"""Event date normalization.

Event dates are compared as strings (``filterDate`` lower bound, ascending
sort), which only matches chronological order for zero-padded ISO values.
Every date entering the store goes through :func:`normalize_event_date`.
"""
import re
from datetime import date, datetime, timezone

# Day-first format found in early event data, e.g. "15-03-2025".
LEGACY_DATE = re.compile(r"^(\d{2})-(\d{2})-(\d{4})$")


def normalize_event_date(value: str) -> str:
    """Return ``value`` as ``YYYY-MM-DD`` or a full ISO-8601 datetime.

    Datetimes carrying an offset are converted to UTC so that string order
    stays chronological across offsets.

    Raises ValueError for anything that is not a recognisable date.
    """
    value = value.strip()
    legacy = LEGACY_DATE.match(value)
    if legacy:
        day, month, year = legacy.groups()
        return date(int(year), int(month), int(day)).isoformat()
    if len(value) == 10:
        return date.fromisoformat(value).isoformat()
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.isoformat()


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()
