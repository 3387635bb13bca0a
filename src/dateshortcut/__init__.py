"""Resolve typed date shortcuts such as ``t+3d.`` or ``23.03 + 2woche 9:00``."""

from dateshortcut.errors import (
    DateOutOfRangeError,
    EmptyShortcutError,
    InvalidAmPmHourError,
    InvalidDefaultTimeFormatError,
    InvalidDefaultTimeValueError,
    InvalidHourError,
    InvalidPartFormatError,
    InvalidTimeFormatError,
    ShortcutError,
    UnknownLocaleError,
    UnknownUnitError,
    WeekdayNotFoundError,
)
from dateshortcut.locales import (
    DatePattern,
    FieldOrder,
    Localization,
    UnitType,
    available_locales,
    register_locale,
)
from dateshortcut.parsing import DateShortcutParser, TimeOfDay, parse_shortcut

__version__ = "0.1.0"

__all__ = [
    "DateShortcutParser",
    "parse_shortcut",
    "TimeOfDay",
    "DatePattern",
    "FieldOrder",
    "Localization",
    "UnitType",
    "available_locales",
    "register_locale",
    "ShortcutError",
    "EmptyShortcutError",
    "UnknownLocaleError",
    "InvalidDefaultTimeFormatError",
    "InvalidDefaultTimeValueError",
    "InvalidTimeFormatError",
    "InvalidHourError",
    "InvalidAmPmHourError",
    "InvalidPartFormatError",
    "UnknownUnitError",
    "WeekdayNotFoundError",
    "DateOutOfRangeError",
]
