# schemas/daily_goal.py
from typing import Optional
from uuid import UUID
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class DailyGoalCreate(BaseModel):
    energy: int = Field(..., gt=0, description="Kilocalories to burn per day")
    workout: int = Field(..., gt=0, description="Minutes to dance per day")


class DailyGoalUpdate(BaseModel):
    energy: Optional[int] = Field(None, gt=0)
    workout: Optional[int] = Field(None, gt=0)


class DailyGoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    energy: int
    workout: int
    created_at: datetime
    updated_at: datetime


class DailyGoalProgress(BaseModel):
    """Today's dancing measured against the daily goal."""

    date: date
    energy_goal: int
    calories_burned: int
    energy_completion: float
    workout_goal: int
    dance_time_in_min: int
    workout_completion: float
    achieved: bool
