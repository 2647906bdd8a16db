"""Tests for the streak recomputation."""

from dataclasses import dataclass
from datetime import date, timedelta

from app.services.streaks import compute_streaks, count_streak_ending


@dataclass
class Day:
    date: date
    dance_time_in_min: int
    calories_burned: int = 0


TODAY = date(2026, 1, 10)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


class TestCountStreakEnding:
    def test_consecutive_days(self):
        active = {days_ago(2), days_ago(1), TODAY}
        assert count_streak_ending(active, TODAY) == 3

    def test_end_not_active(self):
        assert count_streak_ending({days_ago(1)}, TODAY) == 0

    def test_gap_stops_walk(self):
        active = {days_ago(3), days_ago(1), TODAY}
        assert count_streak_ending(active, TODAY) == 2

    def test_no_end_date(self):
        assert count_streak_ending({TODAY}, None) == 0


class TestComputeStreaks:
    def test_empty_history(self):
        result = compute_streaks([], today=TODAY)
        assert result.current_streak == 0
        assert result.longest_streak == 0
        assert result.total_active_days == 0
        assert result.total_minutes == 0
        assert result.total_calories == 0
        assert result.last_active_date is None
        assert result.trailing_streak == 0

    def test_three_consecutive_days(self):
        records = [
            Day(days_ago(2), 30, 100),
            Day(days_ago(1), 20, 80),
            Day(TODAY, 25, 90),
        ]
        result = compute_streaks(records, today=TODAY)
        assert result.total_minutes == 75
        assert result.total_calories == 270
        assert result.total_active_days == 3
        assert result.current_streak == 3
        assert result.longest_streak == 3

    def test_skipped_day_breaks_streak(self):
        records = [Day(days_ago(2), 30, 100), Day(TODAY, 25, 90)]
        result = compute_streaks(records, today=TODAY)
        assert result.current_streak == 1
        assert result.longest_streak == 1

    def test_unordered_input_is_sorted(self):
        records = [Day(TODAY, 5), Day(days_ago(2), 5), Day(days_ago(1), 5)]
        result = compute_streaks(records, today=TODAY)
        assert result.longest_streak == 3

    def test_longest_streak_in_the_past(self):
        records = [Day(days_ago(n), 10) for n in (9, 8, 7, 6)] + [Day(days_ago(1), 10), Day(TODAY, 10)]
        result = compute_streaks(records, today=TODAY)
        assert result.current_streak == 2
        assert result.longest_streak == 4
        assert result.total_active_days == 6

    def test_today_inactive_means_no_current_streak(self):
        records = [Day(days_ago(2), 10), Day(days_ago(1), 10)]
        result = compute_streaks(records, today=TODAY)
        assert result.current_streak == 0
        assert result.longest_streak == 2
        assert result.trailing_streak == 2
        assert result.last_active_date == days_ago(1)

    def test_zero_minute_day_breaks_streak(self):
        records = [Day(days_ago(2), 10), Day(days_ago(1), 0, 40), Day(TODAY, 10)]
        result = compute_streaks(records, today=TODAY)
        assert result.longest_streak == 1
        assert result.current_streak == 1
        assert result.total_active_days == 2
        assert result.total_calories == 40

    def test_same_day_duplicates_counted_once(self):
        records = [Day(days_ago(1), 10), Day(TODAY, 10), Day(TODAY, 15)]
        result = compute_streaks(records, today=TODAY)
        assert result.total_active_days == 2
        assert result.longest_streak == 2
        assert result.total_minutes == 35

    def test_current_never_exceeds_longest(self):
        records = [Day(days_ago(n), 1) for n in range(5)]
        result = compute_streaks(records, today=TODAY)
        assert result.current_streak <= result.longest_streak
