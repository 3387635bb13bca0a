"""Tests for absolute-date matching."""

from datetime import datetime, timezone

import pytest

from dateshortcut.locales.registry import ENGLISH, FRENCH, GERMAN
from dateshortcut.parsing.absolute import calendar_date, match_absolute_date


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def ref():
    return utc(2024, 5, 15, 10)


class TestCalendarDate:
    def test_plain(self):
        assert calendar_date(2024, 3, 23) == utc(2024, 3, 23)

    def test_day_rollover(self):
        assert calendar_date(2024, 2, 30) == utc(2024, 3, 1)
        assert calendar_date(2023, 2, 29) == utc(2023, 3, 1)

    def test_month_rollover(self):
        assert calendar_date(2024, 13, 1) == utc(2025, 1, 1)

    def test_zero_day_is_previous_month_end(self):
        assert calendar_date(2024, 3, 0) == utc(2024, 2, 29)


class TestMatchAbsoluteDate:
    """Locale-specific date patterns at the head of the text."""

    def test_month_first(self, ref):
        assert match_absolute_date("05/20", ENGLISH, ref) == (utc(2024, 5, 20), "")

    def test_day_first_slash(self, ref):
        assert match_absolute_date("20/05", FRENCH, ref) == (utc(2024, 5, 20), "")

    def test_dotted_with_remainder(self, ref):
        assert match_absolute_date("23.03 + 2woche", GERMAN, ref) == (utc(2024, 3, 23), "+ 2woche")

    @pytest.mark.parametrize(
        "text,year",
        [("23.03.25", 2025), ("23.03.2026", 2026), ("23.03.7", 2024)],
    )
    def test_year_handling(self, ref, text, year):
        # "7" is not a valid year group, so the default year applies and ".7" is left over
        result, _ = match_absolute_date(text, GERMAN, ref)
        assert result == utc(year, 3, 23)

    def test_single_digit_year_stays_in_remainder(self, ref):
        assert match_absolute_date("23.03.7", GERMAN, ref)[1] == ".7"

    def test_out_of_range_fields_roll_over(self, ref):
        assert match_absolute_date("02/30", ENGLISH, ref)[0] == utc(2024, 3, 1)
        assert match_absolute_date("13/01", ENGLISH, ref)[0] == utc(2025, 1, 1)

    @pytest.mark.parametrize("text", ["", "3d", "+1w", "2024-05-20"])
    def test_no_match(self, ref, text):
        assert match_absolute_date(text, ENGLISH, ref) == (None, text)

    def test_pattern_of_other_locale_ignored(self, ref):
        assert match_absolute_date("23.03", ENGLISH, ref) == (None, "23.03")
