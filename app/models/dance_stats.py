# models/dance_stats.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, BigInteger, Boolean, Date, DateTime, Integer, Uuid, UniqueConstraint
)
from app.core.config import Base


class DanceStat(Base):
    """One user's dance activity for a single calendar day."""

    __tablename__ = "dance_stats"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_dance_stats_user_date"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    dance_time_in_min = Column(Integer, nullable=False, default=0)
    calories_burned = Column(Integer, nullable=False, default=0)
    is_dance_day = Column(Boolean, nullable=False, default=False)

    version_id = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __mapper_args__ = {"version_id_col": version_id}


class UserTotalStats(Base):
    """Lifetime rollup over a user's dance stats, updated on every submission."""

    __tablename__ = "user_total_stats"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid, nullable=False, unique=True, index=True)

    total_dance_time_in_min = Column(BigInteger, nullable=False, default=0)
    total_calories_burned = Column(BigInteger, nullable=False, default=0)
    total_dance_days = Column(Integer, nullable=False, default=0)
    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)
    last_dance_date = Column(Date, nullable=True)

    version_id = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __mapper_args__ = {"version_id_col": version_id}
