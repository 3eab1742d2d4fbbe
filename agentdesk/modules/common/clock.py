"""UTC helpers shared by the modules that store or compare dates."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    SQLite hands back naive datetimes for ``DateTime(timezone=True)`` columns;
    everything stored by this service is UTC, so naive values are tagged as such.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_bounds(
    start_date: Optional[date], end_date: Optional[date]
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Translate inclusive calendar days into a half-open ``[lower, upper)`` UTC range."""
    lower = datetime.combine(start_date, time.min, tzinfo=timezone.utc) if start_date else None
    upper = (
        datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
        if end_date
        else None
    )
    return lower, upper
