"""Shortcut parser entry point.

Resolves inputs like ``"t+3d."``, ``"23.03 + 2woche"`` or ``"5:30pm"`` to
a timezone-aware UTC ``datetime`` relative to a fixed reference instant.

Pipeline (fixed order):
1. Split a trailing time expression off the input
2. Pick the base date (reference instant, or its midnight when a date part exists)
3. Consume one today keyword
4. Match an absolute date at the head of the remainder
5. Strip a trailing ``.`` workday marker
6. Apply relative adjustments left to right
7. Shift off weekends if the workday marker was present
8. Apply the explicit time, else the default time
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional, Pattern, Tuple

from dateshortcut.errors import DateOutOfRangeError, EmptyShortcutError
from dateshortcut.locales.models import Localization, UnitType
from dateshortcut.locales.registry import DEFAULT_LOCALE, LocaleSpec, resolve_locale
from dateshortcut.parsing.absolute import match_absolute_date
from dateshortcut.parsing.relative import apply_relative_parts
from dateshortcut.parsing.time_of_day import (
    TimeOfDay,
    build_time_pattern,
    extract_time,
    parse_default_time,
)
from dateshortcut.parsing.units import build_unit_map
from dateshortcut.parsing.workdays import closest_workday

logger = logging.getLogger(__name__)

WORKDAY_MARKER = "."


def to_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class ParserConfiguration:
    """Everything a parse needs, resolved once at construction."""

    localization: Localization
    from_date: datetime
    default_time: Optional[TimeOfDay] = None
    unit_map: Mapping[str, UnitType] = field(default_factory=dict, repr=False)
    time_pattern: Optional[Pattern[str]] = field(default=None, repr=False)

    @classmethod
    def build(
        cls,
        *,
        from_date: Optional[datetime] = None,
        locale: LocaleSpec = DEFAULT_LOCALE,
        default_time: Optional[str] = None,
    ) -> "ParserConfiguration":
        localization = resolve_locale(locale)
        return cls(
            localization=localization,
            from_date=to_utc(from_date) if from_date is not None else datetime.now(timezone.utc),
            default_time=parse_default_time(default_time) if default_time else None,
            unit_map=build_unit_map(localization),
            time_pattern=build_time_pattern(localization),
        )


class DateShortcutParser:
    """Parse date shortcuts against a fixed reference instant.

    Instances hold only immutable configuration and can be shared between
    threads.

    Example:
        >>> parser = DateShortcutParser(from_date=datetime(2024, 5, 15, 10), locale="en")
        >>> parser.parse("t+3d.").date().isoformat()
        '2024-05-17'
    """

    def __init__(
        self,
        from_date: Optional[datetime] = None,
        locale: LocaleSpec = DEFAULT_LOCALE,
        default_time: Optional[str] = None,
    ) -> None:
        """Initialize the parser.

        Args:
            from_date: Reference instant (defaults to now, UTC)
            locale: Built-in tag (``en``, ``de``, ``fr``, ``tr``), a registered
                tag, a ``Localization`` or a mapping with its fields
            default_time: ``HH[:MM[:SS]]`` applied when the shortcut has no time

        Raises:
            UnknownLocaleError: Locale tag is not registered
            InvalidDefaultTimeFormatError: ``default_time`` is malformed
            InvalidDefaultTimeValueError: ``default_time`` is out of range
        """
        self.config = ParserConfiguration.build(
            from_date=from_date,
            locale=locale,
            default_time=default_time,
        )

    @property
    def localization(self) -> Localization:
        return self.config.localization

    @property
    def from_date(self) -> datetime:
        return self.config.from_date

    @property
    def default_time(self) -> Optional[TimeOfDay]:
        return self.config.default_time

    def parse(self, shortcut: str) -> datetime:
        """Resolve a shortcut to a UTC datetime.

        Args:
            shortcut: Text such as ``"t"``, ``"1y 2m -3d"`` or ``"05/20 + 2w. 9am"``

        Returns:
            Timezone-aware UTC datetime

        Raises:
            EmptyShortcutError: Input is empty or whitespace
            InvalidTimeFormatError, InvalidHourError, InvalidAmPmHourError:
                Malformed trailing time
            InvalidPartFormatError, UnknownUnitError: Malformed relative part
            WeekdayNotFoundError: Weekday ordinal exceeds the month
            DateOutOfRangeError: Result is outside the supported calendar
        """
        text = shortcut.strip().lower()
        if not text:
            raise EmptyShortcutError(shortcut)

        time_of_day, date_text = extract_time(
            text, self.config.localization, self.config.time_pattern
        )

        if date_text:
            current = self._resolve_date(date_text)
        else:
            current = self.config.from_date

        if time_of_day is not None:
            current = time_of_day.apply(current)
        elif self.config.default_time is not None:
            current = self.config.default_time.apply(current)

        logger.debug(f"Parsed '{shortcut}' -> {current.isoformat()}")
        return current

    def _resolve_date(self, text: str) -> datetime:
        localization = self.config.localization
        current = self.config.from_date.replace(hour=0, minute=0, second=0, microsecond=0)

        remaining = self._consume_today_keyword(text)

        absolute, remaining = match_absolute_date(remaining, localization, self.config.from_date)
        if absolute is not None:
            current = absolute

        remaining, adjust_to_workday = self._strip_workday_marker(remaining)

        current = apply_relative_parts(current, remaining, self.config.unit_map)

        if adjust_to_workday:
            try:
                current = closest_workday(current)
            except OverflowError as exc:
                raise DateOutOfRangeError(WORKDAY_MARKER) from exc
        return current

    def _consume_today_keyword(self, text: str) -> str:
        for keyword in self.config.localization.today_keywords_longest_first():
            if text.startswith(keyword):
                return text[len(keyword):]
        return text

    @staticmethod
    def _strip_workday_marker(text: str) -> Tuple[str, bool]:
        stripped = text.strip()
        if stripped.endswith(WORKDAY_MARKER):
            return stripped[: -len(WORKDAY_MARKER)], True
        return text, False


def parse_shortcut(
    shortcut: str,
    *,
    from_date: Optional[datetime] = None,
    locale: LocaleSpec = DEFAULT_LOCALE,
    default_time: Optional[str] = None,
) -> datetime:
    """One-off parse without keeping a parser around."""
    parser = DateShortcutParser(from_date=from_date, locale=locale, default_time=default_time)
    return parser.parse(shortcut)


__all__ = [
    "WORKDAY_MARKER",
    "ParserConfiguration",
    "DateShortcutParser",
    "parse_shortcut",
    "to_utc",
]
