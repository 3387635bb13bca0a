"""Locale data models for the shortcut parser.

A locale is plain data: keyword lists per relative unit, optional AM/PM
markers and an ordered list of absolute-date patterns. New languages are
added by building a ``Localization``, never by subclassing the parser.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional, Pattern, Tuple

from pydantic import BaseModel, Field, field_validator


class UnitType(str, Enum):
    """Semantic unit a keyword resolves to.

    Declaration order doubles as the tie-break when one keyword is listed
    under several units: the earlier unit wins.
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    TODAY = "today"
    WEEKDAY = "weekday"


class FieldOrder(str, Enum):
    """Order of the first two captured groups of a date pattern."""

    DAY_FIRST = "day_first"      # dd.mm[.yyyy]
    MONTH_FIRST = "month_first"  # mm/dd[/yyyy]


class DatePattern(BaseModel):
    """Absolute-date matcher tried against the head of the shortcut.

    Group 1 and 2 are day/month in ``field_order``; an optional group 3
    holds a 2- or 4-digit year.
    """

    regex: Pattern[str] = Field(..., description="Pattern anchored at the start of the text")
    field_order: FieldOrder = Field(
        FieldOrder.DAY_FIRST, alias="format", description="Order of day and month groups"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("field_order", mode="before")
    @classmethod
    def _accept_format_strings(cls, v: Any) -> Any:
        # Format strings like "dd.mm.yyyy" / "mm/dd/yyyy" are accepted too
        if isinstance(v, str) and v.lower() not in {o.value for o in FieldOrder}:
            lowered = v.lower()
            if lowered.startswith("dd"):
                return FieldOrder.DAY_FIRST
            if lowered.startswith("mm"):
                return FieldOrder.MONTH_FIRST
            raise ValueError(f"Unsupported date pattern format: {v}")
        return v

    @field_validator("regex")
    @classmethod
    def _require_day_month_groups(cls, v: Pattern[str]) -> Pattern[str]:
        if v.groups < 2:
            raise ValueError("date pattern needs capture groups for day and month")
        return v

    def match(self, text: str) -> Optional[re.Match[str]]:
        return self.regex.match(text)


def _normalize_keywords(values: Any) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    keywords = []
    for value in values:
        keyword = str(value).strip().lower()
        if not keyword:
            raise ValueError("keywords must not be empty")
        if keyword.isdigit():
            raise ValueError(f"keyword must not be numeric: {keyword}")
        if keyword not in keywords:
            keywords.append(keyword)
    return tuple(keywords)


class Localization(BaseModel):
    """Keyword table for one language."""

    name: str = Field("custom", description="Locale tag, informational only")
    year: Tuple[str, ...] = Field(default_factory=tuple)
    month: Tuple[str, ...] = Field(default_factory=tuple)
    week: Tuple[str, ...] = Field(default_factory=tuple)
    day: Tuple[str, ...] = Field(default_factory=tuple)
    today: Tuple[str, ...] = Field(default_factory=tuple)
    weekday: Tuple[str, ...] = Field(default_factory=tuple)
    am: Tuple[str, ...] = Field(default_factory=tuple, description="12-hour AM markers")
    pm: Tuple[str, ...] = Field(default_factory=tuple, description="12-hour PM markers")
    date_patterns: Tuple[DatePattern, ...] = Field(default_factory=tuple, alias="datePatterns")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("year", "month", "week", "day", "today", "weekday", "am", "pm", mode="before")
    @classmethod
    def _validate_keywords(cls, v: Any) -> Tuple[str, ...]:
        return _normalize_keywords(v)

    @field_validator("date_patterns", mode="before")
    @classmethod
    def _default_patterns(cls, v: Any) -> Any:
        return () if v is None else v

    def keywords_for(self, unit: UnitType) -> Tuple[str, ...]:
        return getattr(self, unit.value)

    def today_keywords_longest_first(self) -> Tuple[str, ...]:
        """Today aliases ordered so a short alias never shadows a longer one."""
        return tuple(sorted(self.today, key=len, reverse=True))

    @property
    def has_am_pm(self) -> bool:
        return bool(self.am or self.pm)


__all__ = ["UnitType", "FieldOrder", "DatePattern", "Localization"]
