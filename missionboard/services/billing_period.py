# missionboard/services/billing_period.py
from datetime import datetime
from typing import Optional, Tuple

from missionboard.constants.statuses import BillingInterval
from missionboard.middleware.error_handler import ValidationError
from missionboard.utils.dates import add_months, add_years, ensure_utc, utcnow


def calculate_period(
    interval: str, start: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """
    Returns `(current_period_start, current_period_end)` for a plan interval.

    The period starts at `start` (default: now) and ends one calendar month
    or one year later, with the day clamped to the end of shorter months.
    Raises `ValidationError` for an interval we do not bill on.
    """
    period_start = ensure_utc(start) if start else utcnow()

    if interval == BillingInterval.MONTHLY:
        return period_start, add_months(period_start, 1)
    if interval == BillingInterval.YEARLY:
        return period_start, add_years(period_start, 1)

    raise ValidationError(f"Unsupported billing interval: {interval}", field="interval")
