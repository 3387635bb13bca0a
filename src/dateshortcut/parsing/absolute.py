"""Absolute-date matching at the head of the shortcut (``23.03``, ``5/20/25``)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from dateshortcut.errors import DateOutOfRangeError
from dateshortcut.locales.models import FieldOrder, Localization

logger = logging.getLogger(__name__)

CENTURY_BASE = 2000


def calendar_date(year: int, month: int, day: int) -> datetime:
    """Build a UTC midnight from 1-indexed fields, rolling over out-of-range values.

    ``calendar_date(2024, 13, 1)`` is 2025-01-01 and ``calendar_date(2024, 2, 30)``
    is 2024-03-01, the same normalisation plain calendar-field arithmetic does.
    """
    start = datetime(year, 1, 1, tzinfo=timezone.utc)
    return start + relativedelta(months=month - 1) + timedelta(days=day - 1)


def match_absolute_date(
    text: str,
    localization: Localization,
    reference: datetime,
) -> Tuple[Optional[datetime], str]:
    """Match the first locale date pattern against the start of ``text``.

    Args:
        text: Date part of the shortcut, today keyword already consumed
        localization: Locale providing the ordered date patterns
        reference: Reference instant supplying the default year

    Returns:
        ``(date, remainder)``; ``date`` is None when no pattern matches
    """
    for pattern in localization.date_patterns:
        match = pattern.match(text)
        if not match:
            continue

        groups = match.groups()
        first, second = groups[0], groups[1]
        year_text = groups[2] if len(groups) > 2 else None
        if pattern.field_order is FieldOrder.DAY_FIRST:
            day, month = int(first), int(second)
        else:
            month, day = int(first), int(second)

        year = reference.year
        if year_text:
            year = int(year_text)
            if len(year_text) <= 2:
                year += CENTURY_BASE

        try:
            resolved = calendar_date(year, month, day)
        except (ValueError, OverflowError) as exc:
            raise DateOutOfRangeError(match.group(0)) from exc

        remainder = text[match.end():].lstrip()
        logger.debug(f"Matched absolute date '{match.group(0)}' -> {resolved.date().isoformat()}")
        return resolved, remainder

    return None, text


__all__ = ["CENTURY_BASE", "calendar_date", "match_absolute_date"]
