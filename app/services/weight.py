# services/weight.py
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.clock import Clock
from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from app.crud.weight import crud_weight
from app.models.weight import Weight
from app.schemas.weight import WeightCreate, WeightRecordCreate, WeightUpdate


class WeightService:
    """Service layer for weight goals and weigh-in history."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or Clock(settings.TIMEZONE)
        self.crud = crud_weight

    def _get_owned(self, db: Session, *, weight_id: UUID, user_id: UUID) -> Weight:
        weight = self.crud.get(db, weight_id=weight_id)
        if not weight:
            raise NotFoundError("Weight not found")
        if weight.user_id != user_id:
            raise PermissionDeniedError("You are not allowed to change this weight")
        return weight

    def create_weight(
        self, db: Session, *, user_id: UUID, weight_in: WeightCreate
    ) -> Weight:
        if self.crud.get_by_user_id(db, user_id=user_id):
            raise ConflictError("Weight already exists. You can only update it.")
        return self.crud.create(db, user_id=user_id, obj_in=weight_in)

    def get_my_weight(self, db: Session, *, user_id: UUID) -> Weight:
        weight = self.crud.get_by_user_id(db, user_id=user_id)
        if not weight:
            raise NotFoundError("Weight not found for this user")
        return weight

    def update_weight(
        self, db: Session, *, weight_id: UUID, user_id: UUID, weight_in: WeightUpdate
    ) -> Weight:
        weight = self._get_owned(db, weight_id=weight_id, user_id=user_id)
        return self.crud.update(db, db_obj=weight, obj_in=weight_in)

    def delete_weight(self, db: Session, *, weight_id: UUID, user_id: UUID) -> None:
        weight = self._get_owned(db, weight_id=weight_id, user_id=user_id)
        self.crud.delete(db, db_obj=weight)

    def add_record(
        self, db: Session, *, weight_id: UUID, user_id: UUID, record_in: WeightRecordCreate
    ) -> Weight:
        """Log today's weigh-in, replacing an earlier one in the same unit."""
        weight = self._get_owned(db, weight_id=weight_id, user_id=user_id)
        return self.crud.upsert_record(
            db,
            db_obj=weight,
            day=self.clock.today(),
            value=record_in.value,
            unit=record_in.unit,
        )
