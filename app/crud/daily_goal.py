# crud/daily_goal.py
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.daily_goal import DailyGoal
from app.schemas.daily_goal import DailyGoalCreate, DailyGoalUpdate


class CRUDDailyGoal:
    """CRUD operations for DailyGoal model."""

    def create(self, db: Session, *, user_id: UUID, obj_in: DailyGoalCreate) -> DailyGoal:
        db_obj = DailyGoal(user_id=user_id, **obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, *, goal_id: UUID) -> Optional[DailyGoal]:
        return db.query(DailyGoal).filter(DailyGoal.id == goal_id).first()

    def get_by_user_id(self, db: Session, *, user_id: UUID) -> Optional[DailyGoal]:
        return db.query(DailyGoal).filter(DailyGoal.user_id == user_id).first()

    def update(
        self, db: Session, *, db_obj: DailyGoal, obj_in: DailyGoalUpdate
    ) -> DailyGoal:
        """Apply only the fields that were sent."""
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: DailyGoal) -> None:
        db.delete(db_obj)
        db.commit()


crud_daily_goal = CRUDDailyGoal()
