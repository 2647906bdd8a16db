# services/daily_goal.py
from typing import Any, Dict, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.clock import Clock
from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from app.crud.daily_goal import crud_daily_goal
from app.crud.dance_stats import crud_dance_stats
from app.models.daily_goal import DailyGoal
from app.schemas.daily_goal import DailyGoalCreate, DailyGoalUpdate


class DailyGoalService:
    """Service layer for a user's daily energy and workout goal."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or Clock(settings.TIMEZONE)
        self.crud = crud_daily_goal

    def _get_owned(self, db: Session, *, goal_id: UUID, user_id: UUID) -> DailyGoal:
        goal = self.crud.get(db, goal_id=goal_id)
        if not goal:
            raise NotFoundError("Daily goal not found")
        if goal.user_id != user_id:
            raise PermissionDeniedError("You are not allowed to change this daily goal")
        return goal

    def create_goal(
        self, db: Session, *, user_id: UUID, goal_in: DailyGoalCreate
    ) -> DailyGoal:
        """Create the user's goal; a user has at most one."""
        if self.crud.get_by_user_id(db, user_id=user_id):
            raise ConflictError("Daily goal already exists. You can only update it.")
        return self.crud.create(db, user_id=user_id, obj_in=goal_in)

    def get_my_goal(self, db: Session, *, user_id: UUID) -> DailyGoal:
        goal = self.crud.get_by_user_id(db, user_id=user_id)
        if not goal:
            raise NotFoundError("Daily goal not found for this user")
        return goal

    def update_goal(
        self, db: Session, *, goal_id: UUID, user_id: UUID, goal_in: DailyGoalUpdate
    ) -> DailyGoal:
        goal = self._get_owned(db, goal_id=goal_id, user_id=user_id)
        return self.crud.update(db, db_obj=goal, obj_in=goal_in)

    def delete_goal(self, db: Session, *, goal_id: UUID, user_id: UUID) -> None:
        goal = self._get_owned(db, goal_id=goal_id, user_id=user_id)
        self.crud.delete(db, db_obj=goal)

    def get_progress(self, db: Session, *, user_id: UUID) -> Dict[str, Any]:
        """Compare today's dance record with the goal."""
        goal = self.get_my_goal(db, user_id=user_id)
        today = self.clock.today()
        stat = crud_dance_stats.get_by_user_and_date(db, user_id=user_id, day=today)

        calories = stat.calories_burned if stat else 0
        minutes = stat.dance_time_in_min if stat else 0
        energy_completion = min(calories / goal.energy, 1.0)
        workout_completion = min(minutes / goal.workout, 1.0)

        return {
            "date": today,
            "energy_goal": goal.energy,
            "calories_burned": calories,
            "energy_completion": round(energy_completion, 2),
            "workout_goal": goal.workout,
            "dance_time_in_min": minutes,
            "workout_completion": round(workout_completion, 2),
            "achieved": calories >= goal.energy and minutes >= goal.workout,
        }
