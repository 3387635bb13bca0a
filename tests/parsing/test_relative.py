"""Unit tests for relative-adjustment tokenizing and application."""

from datetime import datetime, timezone

import pytest

from dateshortcut.errors import InvalidPartFormatError, UnknownUnitError
from dateshortcut.locales.models import UnitType
from dateshortcut.locales.registry import ENGLISH
from dateshortcut.parsing.relative import (
    RelativePart,
    apply_part,
    apply_relative_parts,
    parse_part,
    shift_years,
    tokenize,
)
from dateshortcut.parsing.units import build_unit_map


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def unit_map():
    return build_unit_map(ENGLISH)


class TestTokenize:
    """Whitespace and sign handling."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", []),
            ("1y 2m -3d", ["1y", "2m", "-3d"]),
            ("  2m   -1d ", ["2m", "-1d"]),
            ("+ 1d", ["+1d"]),
            ("1y-3d+1w", ["1y", "-3d", "+1w"]),
            ("t t", ["t", "t"]),
        ],
    )
    def test_tokens(self, text, expected):
        assert tokenize(text) == expected

    @pytest.mark.parametrize("text", ["+", "1d -", "1d - "])
    def test_dangling_sign(self, text):
        with pytest.raises(InvalidPartFormatError) as exc_info:
            tokenize(text)
        assert exc_info.value.part in {"+", "-"}

    def test_double_sign_is_glued_and_rejected_later(self):
        assert tokenize("+ + 1d") == ["++", "1d"]
        with pytest.raises(InvalidPartFormatError):
            parse_part("++")


class TestParsePart:
    """Signed-magnitude-unit token shape."""

    def test_full_token(self):
        assert parse_part("-12wd") == RelativePart(raw="-12wd", sign="-", magnitude=12, keyword="wd")

    def test_defaults(self):
        part = parse_part("d")
        assert (part.sign, part.magnitude, part.amount) == ("+", 1, 1)

    def test_negative_amount(self):
        assert parse_part("-3d").amount == -3
        assert parse_part("-3d").from_end is True

    def test_non_ascii_letters(self):
        assert parse_part("2gün").keyword == "gün"

    @pytest.mark.parametrize("token", ["3", "3d4", "d3", "3_d", "3d.", "+-1d"])
    def test_invalid_shapes(self, token):
        with pytest.raises(InvalidPartFormatError, match=token.replace("+", "\\+")):
            parse_part(token)


class TestApply:
    """Unit semantics."""

    def test_today_is_noop(self):
        value = utc(2024, 5, 15)
        assert apply_part(value, parse_part("5t"), UnitType.TODAY) == value

    def test_year_shift_without_clamping(self):
        assert shift_years(utc(2024, 2, 29), 1) == utc(2025, 3, 1)
        assert shift_years(utc(2024, 2, 29), -4) == utc(2020, 2, 29)

    def test_month_clamps(self):
        assert apply_part(utc(2024, 1, 31), parse_part("1m"), UnitType.MONTH) == utc(2024, 2, 29)

    def test_month_rolls_year(self):
        assert apply_part(utc(2024, 11, 15), parse_part("3m"), UnitType.MONTH) == utc(2025, 2, 15)

    def test_week(self):
        assert apply_part(utc(2024, 5, 15), parse_part("-2w"), UnitType.WEEK) == utc(2024, 5, 1)

    def test_weekday_from_end(self):
        assert apply_part(utc(2024, 5, 15), parse_part("-2wd"), UnitType.WEEKDAY) == utc(2024, 5, 30)

    def test_sequence_is_left_to_right(self, unit_map):
        # Clamping happens on the running date: Jan 31 -> Feb 29 -> Mar 29
        assert apply_relative_parts(utc(2024, 1, 31), "1m 1m", unit_map) == utc(2024, 3, 29)
        assert apply_relative_parts(utc(2024, 1, 31), "2m", unit_map) == utc(2024, 3, 31)

    def test_unknown_unit(self, unit_map):
        with pytest.raises(UnknownUnitError) as exc_info:
            apply_relative_parts(utc(2024, 5, 15), "1d 2q", unit_map)
        assert exc_info.value.unit == "q"

    def test_keyword_lookup_is_case_insensitive(self, unit_map):
        assert apply_relative_parts(utc(2024, 5, 15), "1D", unit_map) == utc(2024, 5, 16)
