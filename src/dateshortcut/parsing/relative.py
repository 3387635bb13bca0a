"""Relative adjustments: ``+3d``, ``-1w``, ``2m``, ``1wd``, ``-2wd``.

The remainder of a shortcut is split into signed tokens that are applied to
the running date strictly left to right.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Mapping

from dateutil.relativedelta import relativedelta

from dateshortcut.errors import (
    DateOutOfRangeError,
    InvalidPartFormatError,
    UnknownUnitError,
)
from dateshortcut.locales.models import UnitType
from dateshortcut.parsing.units import resolve_unit
from dateshortcut.parsing.workdays import find_nth_weekday

logger = logging.getLogger(__name__)

SIGNS = ("+", "-")

_SIGN_PATTERN = re.compile(r"([+-])")
# Letters include non-ASCII ones ("gün", "année"); digits and "_" are excluded
_PART_PATTERN = re.compile(r"^(?P<sign>[+-])?(?P<magnitude>\d*)(?P<keyword>[^\W\d_]+)$")


@dataclass(frozen=True)
class RelativePart:
    """One signed adjustment token."""

    raw: str
    sign: str
    magnitude: int
    keyword: str

    @property
    def amount(self) -> int:
        return -self.magnitude if self.sign == "-" else self.magnitude

    @property
    def from_end(self) -> bool:
        return self.sign == "-"


def tokenize(text: str) -> List[str]:
    """Split the remainder into signed tokens.

    ``"+ 1d"`` and ``"+1d"`` both give ``["+1d"]``; ``"1y-3d"`` gives
    ``["1y", "-3d"]``.

    Raises:
        InvalidPartFormatError: A sign has no token to attach to
    """
    raw_parts = _SIGN_PATTERN.sub(r" \1", text).split()
    parts: List[str] = []
    index = 0
    while index < len(raw_parts):
        token = raw_parts[index]
        if token in SIGNS:
            if index + 1 >= len(raw_parts):
                raise InvalidPartFormatError(token)
            token += raw_parts[index + 1]
            index += 1
        parts.append(token)
        index += 1
    return parts


def parse_part(token: str) -> RelativePart:
    match = _PART_PATTERN.match(token)
    if not match:
        raise InvalidPartFormatError(token)
    magnitude = match.group("magnitude")
    return RelativePart(
        raw=token,
        sign=match.group("sign") or "+",
        magnitude=int(magnitude) if magnitude else 1,
        keyword=match.group("keyword").lower(),
    )


def shift_years(value: datetime, amount: int) -> datetime:
    """Add years without clamping: Feb 29 moves to Mar 1 in a non-leap year."""
    return value.replace(year=value.year + amount, day=1) + timedelta(days=value.day - 1)


def apply_part(value: datetime, part: RelativePart, unit: UnitType) -> datetime:
    """Apply one resolved adjustment to ``value``."""
    if unit is UnitType.TODAY:
        return value
    try:
        if unit is UnitType.YEAR:
            return shift_years(value, part.amount)
        if unit is UnitType.MONTH:
            # relativedelta clamps to the last day of the target month
            return value + relativedelta(months=part.amount)
        if unit is UnitType.WEEK:
            return value + timedelta(weeks=part.amount)
        if unit is UnitType.DAY:
            return value + timedelta(days=part.amount)
    except (ValueError, OverflowError) as exc:
        raise DateOutOfRangeError(part.raw) from exc
    if unit is UnitType.WEEKDAY:
        return find_nth_weekday(value, part.magnitude, from_end=part.from_end)
    raise UnknownUnitError(part.keyword)


def apply_relative_parts(
    value: datetime,
    text: str,
    unit_map: Mapping[str, UnitType],
) -> datetime:
    """Apply every token of ``text`` to ``value`` in order.

    Args:
        value: Running date
        text: Remainder after the today keyword, absolute date and workday
            marker were consumed
        unit_map: Keyword lookup built by ``build_unit_map``

    Returns:
        The adjusted date

    Raises:
        InvalidPartFormatError: Token is not ``[+-][digits]letters``
        UnknownUnitError: Keyword is not known in the locale
        WeekdayNotFoundError: Weekday ordinal exceeds the month
    """
    for token in tokenize(text):
        part = parse_part(token)
        unit = resolve_unit(unit_map, part.keyword)
        if unit is None:
            raise UnknownUnitError(part.keyword)
        value = apply_part(value, part, unit)
        logger.debug(f"Applied '{part.raw}' ({unit.value}) -> {value.isoformat()}")
    return value


__all__ = [
    "RelativePart",
    "tokenize",
    "parse_part",
    "shift_years",
    "apply_part",
    "apply_relative_parts",
]
