# missionboard/utils/dates.py
"""
Date helpers shared by the event and billing code.

All datetimes handled by the service are UTC. Some backends (SQLite) hand
back naive values, so comparisons go through `ensure_utc` first.
"""

import calendar
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return `value` as an aware UTC datetime (naive values are taken as UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def add_months(start: datetime, months: int) -> datetime:
    """
    Add calendar months, clamping the day to the end of the target month.

    Jan 31 + 1 month => Feb 29 in leap years, Feb 28 otherwise.
    """
    total = start.month - 1 + months
    year = start.year + total // 12
    month = total % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return start.replace(year=year, month=month, day=min(start.day, last_day))


def add_years(start: datetime, years: int) -> datetime:
    # Feb 29 lands on Feb 28 in non-leap years
    return add_months(start, years * 12)


def end_of_month(value: datetime) -> datetime:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=last_day, hour=23, minute=59, second=59, microsecond=999999)
