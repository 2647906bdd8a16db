from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.core.config import Settings, get_db, get_settings
from app.core.security import get_current_user_id
from app.services.dance_stats import DanceStatsService
from app.schemas.dance_stats import (
    DanceSessionRequest,
    DanceSessionResponse,
    DanceStatOut,
    PeriodStatsResponse,
    StatsPeriod,
    TotalStatsResponse,
    UserTotalStatsOut,
)


# ====================================================
# DEPENDENCIES
# ====================================================


def get_dance_stats_service(
    clock: Clock = Depends(get_clock),
    app_settings: Settings = Depends(get_settings),
) -> DanceStatsService:
    return DanceStatsService(clock=clock, max_retries=app_settings.ROLLUP_MAX_RETRIES)


# ====================================================
# ROUTER
# ====================================================


router = APIRouter(prefix="/dance-stats", tags=["Dance Stats"])


@router.post("/record", response_model=DanceSessionResponse)
def record_dance_session(
    request: DanceSessionRequest,
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Add a dance session to today's stats and update lifetime totals.

    Several sessions on the same day add up in one daily record.
    """
    daily_stat, total_stats = service.record_activity(
        db,
        user_id=user_id,
        dance_time_in_min=request.dance_time_in_min,
        calories_burned=request.calories_burned,
    )
    return {
        "message": "Dance session recorded successfully",
        "daily_stat": daily_stat,
        "total_stats": total_stats,
    }


@router.get("/stats", response_model=PeriodStatsResponse)
def get_stats(
    period: StatsPeriod = Query(StatsPeriod.day, description="day, week, month or total"),
    month: Optional[int] = Query(None, description="Month for the month period (1-12)"),
    year: Optional[int] = Query(None, description="Year for the month period"),
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Daily records and totals for a reporting period."""
    return service.get_period_stats(
        db, user_id=user_id, period=period, month=month, year=year
    )


@router.get("/daily", response_model=DanceStatOut)
def get_daily_stats(
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Today's record."""
    return service.get_daily_stats(db, user_id=user_id)


@router.get("/weekly", response_model=PeriodStatsResponse)
def get_weekly_stats(
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Records of the current Monday-Sunday week."""
    return service.get_period_stats(db, user_id=user_id, period=StatsPeriod.week)


@router.get("/monthly", response_model=PeriodStatsResponse)
def get_monthly_stats(
    month: Optional[int] = Query(None, description="Month (1-12), defaults to current"),
    year: Optional[int] = Query(None, description="Year, defaults to current"),
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    return service.get_period_stats(
        db, user_id=user_id, period=StatsPeriod.month, month=month, year=year
    )


@router.get("/total", response_model=TotalStatsResponse)
def get_total_stats(
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Lifetime stats recomputed from the full history.

    A user without history gets zeros.
    """
    return service.get_total_stats(db, user_id=user_id)


@router.get("/rollup", response_model=UserTotalStatsOut)
def get_rollup(
    user_id: UUID = Depends(get_current_user_id),
    service: DanceStatsService = Depends(get_dance_stats_service),
    db: Session = Depends(get_db),
):
    """Stored lifetime rollup, as updated on each recorded session."""
    return service.get_rollup(db, user_id=user_id)
