# crud/dance_stats.py
from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from app.models.dance_stats import DanceStat, UserTotalStats


class CRUDDanceStats:
    """Storage access for daily dance stats and the per-user rollup.

    Nothing here commits; the service owns the transaction.
    """

    # =====================================================================
    # DAILY RECORDS
    # =====================================================================

    def get_by_user_and_date(
        self, db: Session, *, user_id: UUID, day: date
    ) -> Optional[DanceStat]:
        """Get the dance stat for a specific user and date"""
        return (
            db.query(DanceStat)
            .filter(DanceStat.user_id == user_id)
            .filter(DanceStat.date == day)
            .first()
        )

    def create_day(self, db: Session, *, user_id: UUID, day: date) -> DanceStat:
        """Insert an empty record for the day and flush it."""
        stat = DanceStat(
            user_id=user_id,
            date=day,
            dance_time_in_min=0,
            calories_burned=0,
            is_dance_day=False,
        )
        db.add(stat)
        db.flush()
        return stat

    def get_by_date_range(
        self, db: Session, *, user_id: UUID, start_date: date, end_date: date
    ) -> List[DanceStat]:
        """Get dance stats within an inclusive date range, oldest first"""
        return (
            db.query(DanceStat)
            .filter(DanceStat.user_id == user_id)
            .filter(DanceStat.date >= start_date)
            .filter(DanceStat.date <= end_date)
            .order_by(DanceStat.date.asc())
            .all()
        )

    def get_all_by_user(self, db: Session, *, user_id: UUID) -> List[DanceStat]:
        """Get the full history of a user, oldest first"""
        return (
            db.query(DanceStat)
            .filter(DanceStat.user_id == user_id)
            .order_by(DanceStat.date.asc())
            .all()
        )

    # =====================================================================
    # ROLLUP
    # =====================================================================

    def get_totals(self, db: Session, *, user_id: UUID) -> Optional[UserTotalStats]:
        return (
            db.query(UserTotalStats)
            .filter(UserTotalStats.user_id == user_id)
            .first()
        )

    def create_totals(self, db: Session, *, user_id: UUID) -> UserTotalStats:
        """Insert a zeroed rollup for the user and flush it."""
        totals = UserTotalStats(
            user_id=user_id,
            total_dance_time_in_min=0,
            total_calories_burned=0,
            total_dance_days=0,
            current_streak=0,
            longest_streak=0,
            last_dance_date=None,
        )
        db.add(totals)
        db.flush()
        return totals


# Instantiate a reusable object
crud_dance_stats = CRUDDanceStats()
