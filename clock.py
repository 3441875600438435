"""Single source of "now" for persisted timestamps.

All stored datetimes are naive UTC.
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
