"""Time-of-day handling: default time parsing and trailing time extraction.

A shortcut may end in a time expression (``17:30``, ``5:30pm``, ``9``).
The time is split off before any date logic runs, so the date part never
sees it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Pattern, Tuple

from dateshortcut.errors import (
    InvalidAmPmHourError,
    InvalidDefaultTimeFormatError,
    InvalidDefaultTimeValueError,
    InvalidHourError,
    InvalidTimeFormatError,
)
from dateshortcut.locales.models import Localization

logger = logging.getLogger(__name__)

_DEFAULT_TIME_COMPONENT = re.compile(r"^\d+$")


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock time applied to the resolved date."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    def apply(self, value: datetime) -> datetime:
        return value.replace(hour=self.hour, minute=self.minute, second=self.second, microsecond=0)

    def isoformat(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def parse_default_time(value: str) -> TimeOfDay:
    """Parse a configured default time in ``HH``, ``HH:MM`` or ``HH:MM:SS`` form.

    Raises:
        InvalidDefaultTimeFormatError: Wrong number of components or a
            component that is not a number
        InvalidDefaultTimeValueError: Hour outside 0-23 or minute/second
            outside 0-59
    """
    components = value.strip().split(":")
    if not 1 <= len(components) <= 3 or not all(
        _DEFAULT_TIME_COMPONENT.match(part.strip()) for part in components
    ):
        raise InvalidDefaultTimeFormatError(value)

    numbers = [int(part) for part in components] + [0, 0]
    hour, minute, second = numbers[:3]
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        raise InvalidDefaultTimeValueError(value)

    return TimeOfDay(hour, minute, second)


def build_time_pattern(localization: Localization) -> Pattern[str]:
    """Compile the trailing time regex for a locale's AM/PM markers."""
    markers = sorted({*localization.am, *localization.pm}, key=len, reverse=True)
    marker_group = ""
    if markers:
        alternatives = "|".join(re.escape(marker) for marker in markers)
        marker_group = rf"\s*(?P<marker>{alternatives})?"

    return re.compile(
        r"(?:^|\s+)(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?(?::(?P<second>\d{2}))?"
        + marker_group
        + r"$",
        re.IGNORECASE,
    )


def extract_time(
    text: str,
    localization: Localization,
    pattern: Optional[Pattern[str]] = None,
) -> Tuple[Optional[TimeOfDay], str]:
    """Split a trailing time expression off the shortcut.

    Args:
        text: Trimmed shortcut
        localization: Locale providing the AM/PM markers
        pattern: Pre-compiled result of ``build_time_pattern``

    Returns:
        ``(time, remainder)``; ``time`` is None and ``remainder`` is the
        whole text when no time expression ends the string
    """
    pattern = pattern or build_time_pattern(localization)
    match = pattern.search(text)
    if not match:
        return None, text

    raw_hour = match.group("hour")
    hour = int(raw_hour)
    minute = int(match.group("minute") or 0)
    second = int(match.group("second") or 0)
    marker = match.groupdict().get("marker")

    if minute > 59 or second > 59:
        raise InvalidTimeFormatError(text, match.group(0).strip())

    if marker:
        if hour < 1 or hour > 12:
            raise InvalidAmPmHourError(raw_hour)
        is_pm = marker.lower() in localization.pm
        if is_pm and hour != 12:
            hour += 12
        elif not is_pm and hour == 12:
            hour = 0  # 12am is midnight

    if hour > 23:
        raise InvalidHourError(raw_hour)

    remainder = text[: match.start()].strip()
    time_of_day = TimeOfDay(hour, minute, second)
    logger.debug(f"Extracted time {time_of_day.isoformat()} from '{text}', remainder '{remainder}'")
    return time_of_day, remainder


__all__ = ["TimeOfDay", "parse_default_time", "build_time_pattern", "extract_time"]
