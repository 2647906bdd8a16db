# app/schemas/__init__.py

from .common import SuccessResponse
from .dance_stats import (
    StatsPeriod,
    DanceSessionRequest,
    DanceStatOut,
    UserTotalStatsOut,
    DanceSessionResponse,
    DailyStatEntry,
    PeriodStatsResponse,
    TotalStatsResponse,
)
from .daily_goal import (
    DailyGoalCreate,
    DailyGoalUpdate,
    DailyGoalOut,
    DailyGoalProgress,
)
from .weight import (
    WeightUnit,
    WeightCreate,
    WeightUpdate,
    WeightRecordCreate,
    WeightRecordOut,
    WeightOut,
)


__all__ = [
    "SuccessResponse",

    # Dance stats
    "StatsPeriod", "DanceSessionRequest", "DanceStatOut", "UserTotalStatsOut",
    "DanceSessionResponse", "DailyStatEntry", "PeriodStatsResponse", "TotalStatsResponse",

    # Daily goals
    "DailyGoalCreate", "DailyGoalUpdate", "DailyGoalOut", "DailyGoalProgress",

    # Weight
    "WeightUnit", "WeightCreate", "WeightUpdate", "WeightRecordCreate",
    "WeightRecordOut", "WeightOut",
]
