# crud/weight.py
from typing import Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from app.models.weight import Weight, WeightRecord, WeightUnit
from app.schemas.weight import WeightCreate, WeightUpdate


class CRUDWeight:
    """CRUD operations for Weight and its daily history."""

    # =====================================================================
    # WEIGHT PROFILE
    # =====================================================================

    def create(self, db: Session, *, user_id: UUID, obj_in: WeightCreate) -> Weight:
        db_obj = Weight(
            user_id=user_id,
            starting=obj_in.starting,
            target=obj_in.target,
            unit=obj_in.unit,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, *, weight_id: UUID) -> Optional[Weight]:
        return db.query(Weight).filter(Weight.id == weight_id).first()

    def get_by_user_id(self, db: Session, *, user_id: UUID) -> Optional[Weight]:
        return db.query(Weight).filter(Weight.user_id == user_id).first()

    def update(self, db: Session, *, db_obj: Weight, obj_in: WeightUpdate) -> Weight:
        """Apply only the fields that were sent."""
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Weight) -> None:
        db.delete(db_obj)
        db.commit()

    # =====================================================================
    # HISTORY
    # =====================================================================

    def get_record(
        self, db: Session, *, weight_id: UUID, day: date, unit: WeightUnit
    ) -> Optional[WeightRecord]:
        return (
            db.query(WeightRecord)
            .filter(WeightRecord.weight_id == weight_id)
            .filter(WeightRecord.date == day)
            .filter(WeightRecord.unit == unit)
            .first()
        )

    def upsert_record(
        self, db: Session, *, db_obj: Weight, day: date, value: float, unit: WeightUnit
    ) -> Weight:
        """Store the reading for the day, replacing one with the same unit."""
        record = self.get_record(db, weight_id=db_obj.id, day=day, unit=unit)
        if record:
            record.value = value
        else:
            db_obj.history.append(WeightRecord(date=day, value=value, unit=unit))
        db.commit()
        db.refresh(db_obj)
        return db_obj


crud_weight = CRUDWeight()
