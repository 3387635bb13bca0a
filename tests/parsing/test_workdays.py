"""Tests for business-day helpers."""

from datetime import datetime, timezone

import pytest

from dateshortcut.errors import WeekdayNotFoundError
from dateshortcut.parsing.workdays import (
    closest_workday,
    find_nth_weekday,
    is_business_day,
    ordinal_suffix,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestClosestWorkday:
    """Weekend reflection."""

    @pytest.mark.parametrize("day", [13, 14, 15, 16, 17])
    def test_business_days_are_fixed_points(self, day):
        assert closest_workday(utc(2024, 5, day)) == utc(2024, 5, day)

    def test_saturday_moves_back(self):
        assert closest_workday(utc(2024, 5, 18)) == utc(2024, 5, 17)

    def test_sunday_moves_forward(self):
        assert closest_workday(utc(2024, 5, 19)) == utc(2024, 5, 20)

    def test_crosses_month_boundary(self):
        # 2024-06-01 is a Saturday
        assert closest_workday(utc(2024, 6, 1)) == utc(2024, 5, 31)

    def test_result_is_always_business_day(self):
        for day in range(1, 32):
            assert is_business_day(closest_workday(utc(2024, 5, day)))


class TestFindNthWeekday:
    """Ordinal business day of a month. February 2023 has exactly 20."""

    def test_first_and_last(self):
        february = utc(2023, 2, 14)
        assert find_nth_weekday(february, 1) == utc(2023, 2, 1)
        assert find_nth_weekday(february, 1, from_end=True) == utc(2023, 2, 28)

    def test_boundaries(self):
        february = utc(2023, 2, 14)
        assert find_nth_weekday(february, 20) == utc(2023, 2, 28)
        assert find_nth_weekday(february, 20, from_end=True) == utc(2023, 2, 1)

    @pytest.mark.parametrize("from_end", [False, True])
    def test_past_the_end(self, from_end):
        with pytest.raises(WeekdayNotFoundError) as exc_info:
            find_nth_weekday(utc(2023, 2, 14), 21, from_end=from_end)
        assert "21st" in str(exc_info.value)
        assert "2023-02" in str(exc_info.value)

    def test_skips_leading_weekend(self):
        # June 2024 starts on a Saturday
        assert find_nth_weekday(utc(2024, 6, 20), 1) == utc(2024, 6, 3)

    def test_keeps_time_of_day(self):
        value = datetime(2024, 5, 15, 9, 30, tzinfo=timezone.utc)
        assert find_nth_weekday(value, 2) == datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "n,suffix",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"), (21, "st"), (111, "th")],
)
def test_ordinal_suffix(n, suffix):
    assert ordinal_suffix(n) == suffix
