"""Streak and lifetime-total calculation over a user's daily dance history."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Protocol, Set


class DailyActivity(Protocol):
    date: date
    dance_time_in_min: int
    calories_burned: int


@dataclass
class StreakSummary:
    current_streak: int
    longest_streak: int
    total_active_days: int
    total_minutes: int
    total_calories: int
    last_active_date: Optional[date]
    # Streak ending on last_active_date; comparable with a stored rollup.
    trailing_streak: int


def is_active(record: DailyActivity) -> bool:
    return record.dance_time_in_min > 0


def count_streak_ending(active_dates: Set[date], end: Optional[date]) -> int:
    """Count consecutive active days walking backwards from end."""
    if end is None:
        return 0

    streak = 0
    current = end
    while current in active_dates:
        streak += 1
        current -= timedelta(days=1)
    return streak


def compute_streaks(records: Iterable[DailyActivity], today: date) -> StreakSummary:
    """Recompute streaks and totals from the full history.

    Rules:
    - A day is active when its minutes are above zero
    - Next-day active record extends the running streak, same day holds it,
      a larger gap restarts it at 1
    - A zero-minute record breaks the running streak
    - Current streak counts back from today and is 0 if today is inactive
    """
    ordered = sorted(records, key=lambda r: r.date)

    total_minutes = 0
    total_calories = 0
    active_dates: Set[date] = set()
    longest = 0
    running = 0
    previous: Optional[date] = None

    for record in ordered:
        total_minutes += record.dance_time_in_min
        total_calories += record.calories_burned

        if is_active(record):
            if previous is None:
                running = 1
            else:
                gap = (record.date - previous).days
                if gap == 1:
                    running += 1
                elif gap != 0:
                    running = 1
            previous = record.date
            active_dates.add(record.date)
        else:
            running = 0
            previous = None

        longest = max(longest, running)

    last_active = max(active_dates) if active_dates else None

    return StreakSummary(
        current_streak=count_streak_ending(active_dates, today),
        longest_streak=longest,
        total_active_days=len(active_dates),
        total_minutes=total_minutes,
        total_calories=total_calories,
        last_active_date=last_active,
        trailing_streak=count_streak_ending(active_dates, last_active),
    )
