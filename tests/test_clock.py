"""Tests for calendar boundaries."""

from datetime import date

from app.core.clock import Clock

from conftest import FixedClock


class TestWeekBounds:
    def test_monday(self):
        assert FixedClock(date(2026, 1, 5)).week_bounds() == (date(2026, 1, 5), date(2026, 1, 11))

    def test_sunday_belongs_to_previous_monday(self):
        assert FixedClock(date(2026, 1, 11)).week_bounds() == (date(2026, 1, 5), date(2026, 1, 11))

    def test_week_across_year_end(self):
        assert FixedClock(date(2026, 1, 1)).week_bounds() == (date(2025, 12, 29), date(2026, 1, 4))


class TestMonthBounds:
    def test_leap_february(self):
        assert Clock.month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_december(self):
        assert Clock.month_bounds(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))


class TestClock:
    def test_today_uses_timezone(self):
        clock = Clock("Pacific/Kiritimati")
        assert clock.today() == clock.now().date()
        assert clock.now().utcoffset() is not None
