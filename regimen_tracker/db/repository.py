"""Persistence of cycles and day logs."""

import logging
from datetime import date
from typing import List, Optional

from ..catalog import AdvancedSupplementType, DayType, MealType, SupplementType, TimingSlot
from ..regimen.cycle import Cycle
from ..regimen.day_log import DayLog
from ..regimen.items import AdvancedSupplementItem, MealItem, SupplementItem
from .database import Database
from .models import (
    AdvancedSupplementLogRecord,
    CycleRecord,
    DayLogRecord,
    MealLogRecord,
    SupplementLogRecord,
)


class RegimenRepository:
    """Load and store regimen aggregates.

    Every public method is its own unit of work: it opens a session, commits
    on success and rolls back on error. Stored enum strings are decoded with
    the catalog fallbacks, so a corrupt row still loads.
    """

    def __init__(self, db: Database):
        self.db = db
        self.logger = logging.getLogger(__name__)

    # Cycles

    def get_active_cycle(self) -> Optional[Cycle]:
        with self.db.get_session() as session:
            record = (
                session.query(CycleRecord)
                .filter(CycleRecord.is_active.is_(True))
                .order_by(CycleRecord.start_date.desc())
                .first()
            )
            return self._cycle_from_record(record) if record else None

    def list_cycles(self) -> List[Cycle]:
        with self.db.get_session() as session:
            records = session.query(CycleRecord).order_by(CycleRecord.start_date).all()
            return [self._cycle_from_record(record) for record in records]

    def add_cycle(self, cycle: Cycle) -> Cycle:
        with self.db.get_session() as session:
            session.add(CycleRecord(
                id=cycle.id,
                start_date=cycle.start_date,
                end_date=cycle.end_date,
                is_active=cycle.is_active,
            ))
        return cycle

    def save_cycle(self, cycle: Cycle) -> None:
        with self.db.get_session() as session:
            record = session.get(CycleRecord, cycle.id)
            if record is None:
                raise LookupError(f"Cycle {cycle.id} is not stored")
            record.start_date = cycle.start_date
            record.end_date = cycle.end_date
            record.is_active = cycle.is_active

    def deactivate_cycles(self) -> int:
        """Mark every active cycle inactive; returns how many were changed."""
        with self.db.get_session() as session:
            return (
                session.query(CycleRecord)
                .filter(CycleRecord.is_active.is_(True))
                .update({CycleRecord.is_active: False}, synchronize_session=False)
            )

    # Day logs

    def get_day_log(self, day: date) -> Optional[DayLog]:
        with self.db.get_session() as session:
            record = session.query(DayLogRecord).filter(DayLogRecord.date == day).first()
            return self._day_log_from_record(record) if record else None

    def recent_day_logs(self, limit: Optional[int] = None) -> List[DayLog]:
        """Stored day logs, most recent first."""
        with self.db.get_session() as session:
            query = session.query(DayLogRecord).order_by(DayLogRecord.date.desc())
            if limit is not None:
                query = query.limit(limit)
            return [self._day_log_from_record(record) for record in query.all()]

    def count_day_logs(self) -> int:
        with self.db.get_session() as session:
            return session.query(DayLogRecord).count()

    def add_day_log(self, day_log: DayLog) -> DayLog:
        with self.db.get_session() as session:
            session.add(self._record_from_day_log(day_log))
        return day_log

    def save_day_log(self, day_log: DayLog) -> None:
        """Persist metric, day type and item state changes of a stored day log."""
        with self.db.get_session() as session:
            record = session.get(DayLogRecord, day_log.id)
            if record is None:
                session.add(self._record_from_day_log(day_log))
                return

            record.day_type = day_log.day_type.value
            record.cycle_week = day_log.cycle_week
            record.water_intake = day_log.water_intake
            record.sleep_hours = day_log.sleep_hours
            record.weight = day_log.weight

            meals = {meal.id: meal for meal in record.meals}
            for item in day_log.meals:
                stored = meals.get(item.id)
                if stored is not None:
                    stored.scheduled_time = item.scheduled_time
                    self._copy_completion(item, stored)

            for stored_items, items in (
                (record.supplements, day_log.supplements),
                (record.advanced_supplements, day_log.advanced_supplements),
            ):
                by_id = {stored.id: stored for stored in stored_items}
                for item in items:
                    stored = by_id.get(item.id)
                    if stored is not None:
                        self._copy_completion(item, stored)

    def delete_day_log(self, day: date) -> bool:
        """Delete a day log and its items; returns False if none was stored."""
        with self.db.get_session() as session:
            record = session.query(DayLogRecord).filter(DayLogRecord.date == day).first()
            if record is None:
                return False
            session.delete(record)
        self.logger.info(f"Deleted day log for {day.isoformat()}")
        return True

    def delete_all(self) -> None:
        """Remove every day log, item and cycle."""
        with self.db.get_session() as session:
            for record in session.query(DayLogRecord).all():
                session.delete(record)
            session.query(CycleRecord).delete()
        self.logger.info("Deleted all regimen data")

    # Mapping

    @staticmethod
    def _copy_completion(item, stored) -> None:
        stored.is_completed = item.is_completed
        stored.completed_at = item.completed_at

    @staticmethod
    def _cycle_from_record(record: CycleRecord) -> Cycle:
        return Cycle(id=record.id, start_date=record.start_date, is_active=record.is_active)

    @staticmethod
    def _day_log_from_record(record: DayLogRecord) -> DayLog:
        return DayLog(
            id=record.id,
            date=record.date,
            day_type=DayType.decode(record.day_type),
            cycle_week=record.cycle_week,
            water_intake=record.water_intake or 0.0,
            sleep_hours=record.sleep_hours or 0.0,
            weight=record.weight,
            meals=[
                MealItem(
                    id=meal.id,
                    meal_type=MealType.decode(meal.meal_type),
                    scheduled_time=meal.scheduled_time,
                    is_completed=meal.is_completed,
                    completed_at=meal.completed_at,
                )
                for meal in record.meals
            ],
            supplements=[
                SupplementItem(
                    id=supplement.id,
                    supplement_type=SupplementType.decode(supplement.supplement_type),
                    timing_slot=TimingSlot.decode(supplement.timing_slot),
                    dosage=supplement.dosage,
                    is_completed=supplement.is_completed,
                    completed_at=supplement.completed_at,
                )
                for supplement in record.supplements
            ],
            advanced_supplements=[
                AdvancedSupplementItem(
                    id=supplement.id,
                    supplement_type=AdvancedSupplementType.decode(supplement.supplement_type),
                    dosage=supplement.dosage,
                    is_completed=supplement.is_completed,
                    completed_at=supplement.completed_at,
                )
                for supplement in record.advanced_supplements
            ],
        )

    @staticmethod
    def _record_from_day_log(day_log: DayLog) -> DayLogRecord:
        record = DayLogRecord(
            id=day_log.id,
            date=day_log.date,
            day_type=day_log.day_type.value,
            cycle_week=day_log.cycle_week,
            water_intake=day_log.water_intake,
            sleep_hours=day_log.sleep_hours,
            weight=day_log.weight,
        )
        record.meals = [
            MealLogRecord(
                id=meal.id,
                position=position,
                meal_type=meal.meal_type.value,
                scheduled_time=meal.scheduled_time,
                is_completed=meal.is_completed,
                completed_at=meal.completed_at,
            )
            for position, meal in enumerate(day_log.meals)
        ]
        record.supplements = [
            SupplementLogRecord(
                id=supplement.id,
                position=position,
                supplement_type=supplement.supplement_type.value,
                timing_slot=supplement.timing_slot.value,
                dosage=supplement.dosage,
                is_completed=supplement.is_completed,
                completed_at=supplement.completed_at,
            )
            for position, supplement in enumerate(day_log.supplements)
        ]
        record.advanced_supplements = [
            AdvancedSupplementLogRecord(
                id=supplement.id,
                position=position,
                supplement_type=supplement.supplement_type.value,
                dosage=supplement.dosage,
                is_completed=supplement.is_completed,
                completed_at=supplement.completed_at,
            )
            for position, supplement in enumerate(day_log.advanced_supplements)
        ]
        return record
