# models/daily_goal.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, Uuid
from app.core.config import Base


class DailyGoal(Base):
    __tablename__ = "daily_goals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, nullable=False, unique=True, index=True)

    energy = Column(Integer, nullable=False)  # kcal to burn per day
    workout = Column(Integer, nullable=False)  # minutes to dance per day

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
