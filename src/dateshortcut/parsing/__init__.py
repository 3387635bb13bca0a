"""Shortcut-to-date resolution engine."""

from dateshortcut.parsing.absolute import calendar_date, match_absolute_date
from dateshortcut.parsing.parser import (
    DateShortcutParser,
    ParserConfiguration,
    parse_shortcut,
    to_utc,
)
from dateshortcut.parsing.relative import (
    RelativePart,
    apply_relative_parts,
    parse_part,
    tokenize,
)
from dateshortcut.parsing.time_of_day import (
    TimeOfDay,
    extract_time,
    parse_default_time,
)
from dateshortcut.parsing.units import build_unit_map, resolve_unit
from dateshortcut.parsing.workdays import (
    closest_workday,
    find_nth_weekday,
    is_business_day,
    ordinal_suffix,
)

__all__ = [
    # Entry point
    "DateShortcutParser",
    "ParserConfiguration",
    "parse_shortcut",
    "to_utc",
    # Time
    "TimeOfDay",
    "extract_time",
    "parse_default_time",
    # Absolute dates
    "calendar_date",
    "match_absolute_date",
    # Relative parts
    "RelativePart",
    "apply_relative_parts",
    "parse_part",
    "tokenize",
    # Units
    "build_unit_map",
    "resolve_unit",
    # Workdays
    "closest_workday",
    "find_nth_weekday",
    "is_business_day",
    "ordinal_suffix",
]
