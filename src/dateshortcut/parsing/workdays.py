"""Business-day helpers: closest workday and nth weekday of a month.

Business days are Monday to Friday. No holiday calendar is applied.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from dateshortcut.errors import WeekdayNotFoundError

SATURDAY = 5
SUNDAY = 6


def is_business_day(value: datetime) -> bool:
    return value.weekday() < SATURDAY


def closest_workday(value: datetime) -> datetime:
    """Move Saturday back to Friday and Sunday forward to Monday."""
    weekday = value.weekday()
    if weekday == SATURDAY:
        return value - timedelta(days=1)
    if weekday == SUNDAY:
        return value + timedelta(days=1)
    return value


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix: 1st, 2nd, 3rd, 4th, 11th, 21st."""
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def find_nth_weekday(value: datetime, n: int, from_end: bool = False) -> datetime:
    """Return the ``n``-th business day (1-indexed) of ``value``'s month.

    Args:
        value: Any date in the target month; its time of day is kept
        n: Ordinal of the business day to find
        from_end: Count backwards from the last day of the month

    Raises:
        WeekdayNotFoundError: The month has fewer than ``n`` business days
    """
    days_in_month = calendar.monthrange(value.year, value.month)[1]
    days = range(days_in_month, 0, -1) if from_end else range(1, days_in_month + 1)

    count = 0
    for day in days:
        candidate = value.replace(day=day)
        if is_business_day(candidate):
            count += 1
            if count == n:
                return candidate

    raise WeekdayNotFoundError(f"{n}{ordinal_suffix(n)}", f"{value.year:04d}-{value.month:02d}")


__all__ = [
    "is_business_day",
    "closest_workday",
    "ordinal_suffix",
    "find_nth_weekday",
]
