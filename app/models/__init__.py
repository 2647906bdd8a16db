# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all and app-wide imports work
from .dance_stats import DanceStat, UserTotalStats
from .daily_goal import DailyGoal
from .weight import Weight, WeightRecord, WeightUnit

__all__ = [
    "Base",
    "DanceStat",
    "UserTotalStats",
    "DailyGoal",
    "Weight",
    "WeightRecord",
    "WeightUnit",
]
