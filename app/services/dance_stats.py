import logging
from typing import Any, Dict, Optional, Tuple
from uuid import UUID
from datetime import date, timedelta

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.clock import Clock
from app.core.config import settings
from app.core.exceptions import (
    InconsistencyError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from app.crud.dance_stats import crud_dance_stats
from app.models.dance_stats import DanceStat, UserTotalStats
from app.schemas.dance_stats import StatsPeriod
from app.services.streaks import StreakSummary, compute_streaks

logger = logging.getLogger(__name__)

# Upper bounds for one submitted session
MAX_SESSION_MINUTES = 24 * 60
MAX_SESSION_CALORIES = 20_000


class DanceStatsService:
    """
    Dance activity aggregation: daily records, the lifetime rollup,
    streaks and period reports.
    """

    def __init__(self, clock: Optional[Clock] = None, max_retries: Optional[int] = None):
        self.clock = clock or Clock(settings.TIMEZONE)
        self.max_retries = (
            settings.ROLLUP_MAX_RETRIES if max_retries is None else max_retries
        )
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.crud = crud_dance_stats

    # ====================================================
    # VALIDATION
    # ====================================================

    @staticmethod
    def _validate_amount(name: str, value: Any, limit: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be a whole number")
        if value < 0:
            raise ValidationError(f"{name} must not be negative")
        if value > limit:
            raise ValidationError(f"{name} must not exceed {limit} per session")
        return value

    # ====================================================
    # RECORDING
    # ====================================================

    def record_activity(
        self,
        db: Session,
        *,
        user_id: UUID,
        dance_time_in_min: int,
        calories_burned: int,
    ) -> Tuple[DanceStat, UserTotalStats]:
        """
        Add a dance session to today's record and update the rollup.

        The read-compute-write runs under optimistic concurrency: a version
        conflict or a duplicate insert rolls back and starts over.

        Raises:
            ValidationError: negative, oversized or non-integer amounts
            ServiceError: store failure or retries exhausted
        """
        minutes = self._validate_amount(
            "dance_time_in_min", dance_time_in_min, MAX_SESSION_MINUTES
        )
        calories = self._validate_amount(
            "calories_burned", calories_burned, MAX_SESSION_CALORIES
        )

        for attempt in range(1, self.max_retries + 1):
            try:
                result = self._apply_activity(
                    db, user_id=user_id, minutes=minutes, calories=calories
                )
            except (StaleDataError, IntegrityError) as exc:
                db.rollback()
                logger.warning(
                    "Write conflict recording dance session for user %s "
                    "(attempt %d/%d): %s",
                    user_id, attempt, self.max_retries, exc.__class__.__name__,
                )
                continue
            except SQLAlchemyError as exc:
                db.rollback()
                raise ServiceError("Could not record dance session") from exc

            logger.debug(
                "Recorded %d min / %d kcal for user %s", minutes, calories, user_id
            )
            return result

        raise ServiceError(
            f"Could not record dance session after {self.max_retries} attempts"
        )

    def _apply_activity(
        self, db: Session, *, user_id: UUID, minutes: int, calories: int
    ) -> Tuple[DanceStat, UserTotalStats]:
        today = self.clock.today()

        daily_stat = self.crud.get_by_user_and_date(db, user_id=user_id, day=today)
        was_active = bool(daily_stat and daily_stat.is_dance_day)
        if daily_stat is None:
            daily_stat = self.crud.create_day(db, user_id=user_id, day=today)

        daily_stat.dance_time_in_min += minutes
        daily_stat.calories_burned += calories
        daily_stat.is_dance_day = daily_stat.dance_time_in_min > 0

        totals = self.crud.get_totals(db, user_id=user_id)
        if totals is None:
            totals = self.crud.create_totals(db, user_id=user_id)

        totals.total_dance_time_in_min += minutes
        totals.total_calories_burned += calories

        # Streak fields only move when today turns active
        if daily_stat.is_dance_day and not was_active:
            totals.total_dance_days += 1

            yesterday = self.crud.get_by_user_and_date(
                db, user_id=user_id, day=today - timedelta(days=1)
            )
            if yesterday and yesterday.is_dance_day:
                totals.current_streak += 1
            else:
                totals.current_streak = 1
            totals.last_dance_date = today

        if totals.current_streak > totals.longest_streak:
            totals.longest_streak = totals.current_streak

        db.commit()
        db.refresh(daily_stat)
        db.refresh(totals)
        return daily_stat, totals

    # ====================================================
    # SINGLE READS
    # ====================================================

    def get_daily_stats(self, db: Session, *, user_id: UUID) -> DanceStat:
        """Today's record."""
        stat = self.crud.get_by_user_and_date(db, user_id=user_id, day=self.clock.today())
        if not stat:
            raise NotFoundError("No dance stats recorded today")
        return stat

    def get_rollup(self, db: Session, *, user_id: UUID) -> UserTotalStats:
        """The stored rollup, as last written."""
        totals = self.crud.get_totals(db, user_id=user_id)
        if not totals:
            raise NotFoundError("No dance stats recorded yet")
        return totals

    # ====================================================
    # PERIOD REPORTS
    # ====================================================

    def aggregate(
        self,
        db: Session,
        *,
        user_id: UUID,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> Dict[str, Any]:
        """Sum minutes and calories over an inclusive range.

        A missing bound on both sides means the whole history.
        """
        if start_date is None and end_date is None:
            records = self.crud.get_all_by_user(db, user_id=user_id)
        else:
            if start_date is None or end_date is None:
                raise ValidationError("Both start and end date are required")
            if start_date > end_date:
                raise ValidationError("Start date must not be after end date")
            records = self.crud.get_by_date_range(
                db, user_id=user_id, start_date=start_date, end_date=end_date
            )

        return {
            "records": records,
            "total_dance_time": sum(r.dance_time_in_min for r in records),
            "total_calories_burned": sum(r.calories_burned for r in records),
        }

    def resolve_period(
        self,
        period: StatsPeriod,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Tuple[Optional[date], Optional[date]]:
        """Turn a reporting period into date bounds."""
        if period == StatsPeriod.day:
            today = self.clock.today()
            return today, today
        if period == StatsPeriod.week:
            return self.clock.week_bounds()
        if period == StatsPeriod.month:
            today = self.clock.today()
            month = today.month if month is None else month
            year = today.year if year is None else year
            if not 1 <= month <= 12:
                raise ValidationError("month must be between 1 and 12")
            if not 1 <= year <= 9999:
                raise ValidationError("year must be between 1 and 9999")
            return self.clock.month_bounds(year, month)
        return None, None

    def get_period_stats(
        self,
        db: Session,
        *,
        user_id: UUID,
        period: StatsPeriod,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Dict[str, Any]:
        start_date, end_date = self.resolve_period(period, month=month, year=year)
        result = self.aggregate(
            db, user_id=user_id, start_date=start_date, end_date=end_date
        )
        result.update({"period": period, "start_date": start_date, "end_date": end_date})
        if period == StatsPeriod.month:
            result.update({"month": start_date.month, "year": start_date.year})
        return result

    # ====================================================
    # LIFETIME STATS AND RECONCILIATION
    # ====================================================

    def compute_streaks(self, db: Session, *, user_id: UUID) -> StreakSummary:
        """Recompute everything from the stored history."""
        records = self.crud.get_all_by_user(db, user_id=user_id)
        return compute_streaks(records, today=self.clock.today())

    def get_total_stats(self, db: Session, *, user_id: UUID) -> Dict[str, Any]:
        """Lifetime stats from a full recomputation.

        The stored rollup is checked against it on the way and rewritten if
        it drifted.
        """
        summary = self.compute_streaks(db, user_id=user_id)

        try:
            self._check_rollup(db, user_id=user_id, summary=summary)
        except InconsistencyError as exc:
            logger.warning("%s; rewriting from history", exc)
            self._rewrite_rollup(db, user_id=user_id, summary=summary)

        return {
            "total_dance_days": summary.total_active_days,
            "total_dance_time_in_min": summary.total_minutes,
            "total_calories_burned": summary.total_calories,
            "current_streak": summary.current_streak,
            "longest_streak": summary.longest_streak,
            "last_dance_date": summary.last_active_date,
        }

    def _check_rollup(
        self, db: Session, *, user_id: UUID, summary: StreakSummary
    ) -> None:
        totals = self.crud.get_totals(db, user_id=user_id)
        if totals is None:
            if summary.last_active_date is None and summary.total_minutes == 0 \
                    and summary.total_calories == 0:
                return
            raise InconsistencyError(user_id, {"rollup": (None, "present")})

        expected = {
            "total_dance_time_in_min": summary.total_minutes,
            "total_calories_burned": summary.total_calories,
            "total_dance_days": summary.total_active_days,
            "current_streak": summary.trailing_streak,
            "longest_streak": summary.longest_streak,
            "last_dance_date": summary.last_active_date,
        }
        differences = {
            field: (getattr(totals, field), value)
            for field, value in expected.items()
            if getattr(totals, field) != value
        }
        if differences:
            raise InconsistencyError(user_id, differences)

    def _rewrite_rollup(
        self, db: Session, *, user_id: UUID, summary: StreakSummary
    ) -> None:
        try:
            totals = self.crud.get_totals(db, user_id=user_id)
            if totals is None:
                totals = self.crud.create_totals(db, user_id=user_id)

            totals.total_dance_time_in_min = summary.total_minutes
            totals.total_calories_burned = summary.total_calories
            totals.total_dance_days = summary.total_active_days
            totals.current_streak = summary.trailing_streak
            totals.longest_streak = summary.longest_streak
            totals.last_dance_date = summary.last_active_date
            db.commit()
        except (StaleDataError, IntegrityError):
            # A concurrent write got there first; the next read reconciles again
            db.rollback()
            logger.warning("Skipped rollup rewrite for user %s after a write conflict", user_id)
        except SQLAlchemyError as exc:
            db.rollback()
            raise ServiceError("Could not rewrite dance stats rollup") from exc