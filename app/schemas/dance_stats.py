# schemas/dance_stats.py
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt


# =====================================================================
# ENUMS
# =====================================================================

class StatsPeriod(str, Enum):
    """Reporting windows for dance stats."""

    day = "day"
    week = "week"
    month = "month"
    total = "total"


# =====================================================================
# REQUESTS
# =====================================================================

class DanceSessionRequest(BaseModel):
    """Activity submitted for today."""

    dance_time_in_min: StrictInt = Field(..., description="Minutes danced in this session")
    calories_burned: StrictInt = Field(..., description="Kilocalories burned in this session")

    model_config = ConfigDict(
        json_schema_extra={"example": {"dance_time_in_min": 30, "calories_burned": 120}}
    )


# =====================================================================
# RESPONSES
# =====================================================================

class DanceStatOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    date: date
    dance_time_in_min: int
    calories_burned: int
    is_dance_day: bool
    created_at: datetime
    updated_at: datetime


class UserTotalStatsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    total_dance_time_in_min: int
    total_calories_burned: int
    total_dance_days: int
    current_streak: int
    longest_streak: int
    last_dance_date: Optional[date] = None


class DanceSessionResponse(BaseModel):
    message: str
    daily_stat: DanceStatOut
    total_stats: UserTotalStatsOut


class DailyStatEntry(BaseModel):
    """One day inside a period report."""
    model_config = ConfigDict(from_attributes=True)

    date: date
    dance_time_in_min: int
    calories_burned: int


class PeriodStatsResponse(BaseModel):
    period: StatsPeriod
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    month: Optional[int] = None
    year: Optional[int] = None
    records: List[DailyStatEntry]
    total_dance_time: int
    total_calories_burned: int


class TotalStatsResponse(BaseModel):
    """Lifetime stats recomputed from the full history."""

    total_dance_days: int
    total_dance_time_in_min: int
    total_calories_burned: int
    current_streak: int
    longest_streak: int
    last_dance_date: Optional[date] = None
