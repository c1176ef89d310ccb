# tests/utils/test_dates.py
from datetime import datetime, timedelta, timezone

from missionboard.utils.dates import add_months, add_years, end_of_month, ensure_utc


class TestAddMonths:
    def test_plain_month(self):
        start = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        assert add_months(start, 1) == datetime(2024, 4, 15, 10, 30, tzinfo=timezone.utc)

    def test_clamps_to_leap_day(self):
        start = datetime(2024, 1, 31, tzinfo=timezone.utc)
        assert add_months(start, 1) == datetime(2024, 2, 29, tzinfo=timezone.utc)

    def test_clamps_to_february_28(self):
        start = datetime(2023, 1, 31, tzinfo=timezone.utc)
        assert add_months(start, 1) == datetime(2023, 2, 28, tzinfo=timezone.utc)

    def test_rolls_over_year(self):
        start = datetime(2024, 12, 31, tzinfo=timezone.utc)
        assert add_months(start, 1) == datetime(2025, 1, 31, tzinfo=timezone.utc)


def test_add_years_from_leap_day():
    start = datetime(2024, 2, 29, tzinfo=timezone.utc)
    assert add_years(start, 1) == datetime(2025, 2, 28, tzinfo=timezone.utc)


def test_ensure_utc_treats_naive_as_utc():
    naive = datetime(2024, 5, 1, 12, 0)
    assert ensure_utc(naive) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_ensure_utc_converts_offsets():
    plus_two = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = ensure_utc(plus_two)
    assert converted.tzinfo == timezone.utc
    assert converted.hour == 12


def test_end_of_month():
    value = datetime(2024, 2, 10, 8, 0, tzinfo=timezone.utc)
    last = end_of_month(value)
    assert (last.year, last.month, last.day) == (2024, 2, 29)
    assert (last.hour, last.minute, last.second) == (23, 59, 59)
