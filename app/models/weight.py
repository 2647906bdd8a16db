# models/weight.py
import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, Date, DateTime, Float, ForeignKey, Uuid, UniqueConstraint, Enum as SqlEnum
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class WeightUnit(str, enum.Enum):
    kg = "kg"
    lb = "lb"


class Weight(Base):
    __tablename__ = "weights"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, nullable=False, unique=True, index=True)

    starting = Column(Float, nullable=False)
    target = Column(Float, nullable=False)
    unit = Column(SqlEnum(WeightUnit), nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    history = relationship(
        "WeightRecord",
        back_populates="weight",
        cascade="all, delete-orphan",
        order_by="WeightRecord.date",
    )


class WeightRecord(Base):
    """A single weigh-in; at most one per day and unit."""

    __tablename__ = "weight_records"
    __table_args__ = (
        UniqueConstraint("weight_id", "date", "unit", name="uq_weight_records_day_unit"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    weight_id = Column(Uuid, ForeignKey("weights.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    value = Column(Float, nullable=False)
    unit = Column(SqlEnum(WeightUnit), nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    weight = relationship("Weight", back_populates="history")
