# app/core/clock.py
from datetime import date, datetime, timedelta
from typing import Tuple
import calendar

from zoneinfo import ZoneInfo

from fastapi import Depends

from app.core.config import Settings, get_settings


class Clock:
    """Calendar source for "today", week and month boundaries.

    Everything that needs the current day asks a Clock, so tests can pin it.
    """

    def __init__(self, tz_name: str = "UTC"):
        self.tz = ZoneInfo(tz_name)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()

    def week_bounds(self) -> Tuple[date, date]:
        """Monday and Sunday of the ISO week containing today."""
        today = self.today()
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)

    @staticmethod
    def month_bounds(year: int, month: int) -> Tuple[date, date]:
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, 1), date(year, month, last_day)


def get_clock(app_settings: Settings = Depends(get_settings)) -> Clock:
    """Clock dependency built from the application's configured timezone."""
    return Clock(app_settings.TIMEZONE)
