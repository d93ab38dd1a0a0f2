"""Date helpers for the start/end query parameters."""

from __future__ import annotations

from datetime import datetime, timedelta


def yesterday_simple_date(now: datetime | None = None) -> str:
    """Return the day 24h before ``now`` as e.g. ``1970-12-31``."""
    dt = (now or datetime.now()) - timedelta(hours=24)
    return "%d-%02d-%02d" % (dt.year, dt.month, dt.day)
