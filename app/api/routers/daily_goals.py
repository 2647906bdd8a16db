# app/api/routers/daily_goals.py
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.daily_goal import DailyGoalService
from app.schemas.common import SuccessResponse
from app.schemas.daily_goal import (
    DailyGoalCreate,
    DailyGoalUpdate,
    DailyGoalOut,
    DailyGoalProgress,
)


def get_daily_goal_service(clock: Clock = Depends(get_clock)) -> DailyGoalService:
    return DailyGoalService(clock=clock)


router = APIRouter(prefix="/daily-goals", tags=["Daily Goals"])


@router.post(
    "",
    response_model=DailyGoalOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create my daily goal",
)
def create_daily_goal(
    goal_in: DailyGoalCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: DailyGoalService = Depends(get_daily_goal_service),
    db: Session = Depends(get_db),
):
    """
    Create the daily goal for the authenticated user.

    - energy: kilocalories to burn per day
    - workout: minutes to dance per day

    Can only be created once per user.
    """
    return service.create_goal(db, user_id=user_id, goal_in=goal_in)


@router.get("/me", response_model=DailyGoalOut, summary="Get my daily goal")
def get_my_daily_goal(
    user_id: UUID = Depends(get_current_user_id),
    service: DailyGoalService = Depends(get_daily_goal_service),
    db: Session = Depends(get_db),
):
    return service.get_my_goal(db, user_id=user_id)


@router.get(
    "/me/progress",
    response_model=DailyGoalProgress,
    summary="Get today's progress towards my daily goal",
)
def get_my_daily_goal_progress(
    user_id: UUID = Depends(get_current_user_id),
    service: DailyGoalService = Depends(get_daily_goal_service),
    db: Session = Depends(get_db),
):
    """Completion ratios are capped at 1.0."""
    return service.get_progress(db, user_id=user_id)


@router.put("/{goal_id}", response_model=DailyGoalOut, summary="Update my daily goal")
def update_daily_goal(
    goal_id: UUID,
    goal_in: DailyGoalUpdate,
    user_id: UUID = Depends(get_current_user_id),
    service: DailyGoalService = Depends(get_daily_goal_service),
    db: Session = Depends(get_db),
):
    return service.update_goal(db, goal_id=goal_id, user_id=user_id, goal_in=goal_in)


@router.delete("/{goal_id}", response_model=SuccessResponse, summary="Delete my daily goal")
def delete_daily_goal(
    goal_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: DailyGoalService = Depends(get_daily_goal_service),
    db: Session = Depends(get_db),
):
    service.delete_goal(db, goal_id=goal_id, user_id=user_id)
    return SuccessResponse(message="Daily goal deleted successfully")
