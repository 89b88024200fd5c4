"""Regimen tracking service: engine operations backed by the repository."""

import logging
from datetime import date, datetime
from typing import List, Optional

from ..catalog import DayType
from ..errors import DayLogNotFoundError, NoActiveCycleError
from .cycle import Cycle
from .day_log import DayLog
from .items import AnyItem
from .generator import RegimenGenerator


class RegimenTracker:
    """Load-or-create cycles and day logs and apply user actions to them.

    ``now`` is always passed in by the caller; nothing here reads the clock.
    """

    def __init__(self, repository, generator: Optional[RegimenGenerator] = None):
        self.repository = repository
        self.generator = generator or RegimenGenerator()
        self.logger = logging.getLogger(__name__)

    # Cycle

    def active_cycle(self) -> Optional[Cycle]:
        return self.repository.get_active_cycle()

    def get_or_create_cycle(self, now: datetime) -> Cycle:
        """Return the active cycle, starting one at ``now`` on first use."""
        cycle = self.repository.get_active_cycle()
        if cycle is None:
            cycle = self.repository.add_cycle(Cycle(start_date=now))
            self.logger.info(f"Started first cycle on {now:%Y-%m-%d}")
        return cycle

    def start_new_cycle(self, now: datetime) -> Cycle:
        """End every active cycle and start a new one at ``now``."""
        ended = self.repository.deactivate_cycles()
        cycle = self.repository.add_cycle(Cycle(start_date=now))
        self.logger.info(f"Started new cycle on {now:%Y-%m-%d} (ended {ended} active cycle(s))")
        return cycle

    def set_cycle_start(self, start_date: datetime) -> Cycle:
        cycle = self.repository.get_active_cycle()
        if cycle is None:
            raise NoActiveCycleError("No active cycle to edit")
        cycle.start_date = start_date
        self.repository.save_cycle(cycle)
        return cycle

    # Day logs

    def day_log(self, day: date, now: datetime, day_type: Optional[DayType] = None) -> DayLog:
        """Fetch the day log for ``day``, creating and populating it if absent.

        A new log captures the active cycle's week at ``now``. ``day_type``
        only applies to a newly created log.
        """
        existing = self.repository.get_day_log(day)
        if existing is not None:
            return existing

        cycle = self.get_or_create_cycle(now)
        day_log = DayLog.create(day, cycle.current_week(now), day_type=day_type, generator=self.generator)
        return self.repository.add_day_log(day_log)

    def _stored_day_log(self, day: date) -> DayLog:
        day_log = self.repository.get_day_log(day)
        if day_log is None:
            raise DayLogNotFoundError(f"No day log for {day.isoformat()}")
        return day_log

    def toggle_item(self, day: date, item_id: str, now: datetime) -> AnyItem:
        day_log = self._stored_day_log(day)
        item = day_log.toggle_item(item_id, now)
        self.repository.save_day_log(day_log)
        return item

    def add_water(self, day: date, delta: float) -> DayLog:
        day_log = self._stored_day_log(day)
        day_log.add_water(delta)
        self.repository.save_day_log(day_log)
        return day_log

    def set_sleep_hours(self, day: date, hours: float) -> DayLog:
        day_log = self._stored_day_log(day)
        day_log.set_sleep_hours(hours)
        self.repository.save_day_log(day_log)
        return day_log

    def set_weight(self, day: date, weight: Optional[float]) -> DayLog:
        day_log = self._stored_day_log(day)
        day_log.set_weight(weight)
        self.repository.save_day_log(day_log)
        return day_log

    def change_day_type(self, day: date, day_type: DayType) -> DayLog:
        day_log = self._stored_day_log(day)
        day_log.change_day_type(day_type)
        self.repository.save_day_log(day_log)
        return day_log

    def reset_day(self, day: date) -> DayLog:
        day_log = self._stored_day_log(day)
        day_log.reset()
        self.repository.save_day_log(day_log)
        self.logger.info(f"Reset day log for {day.isoformat()}")
        return day_log

    def delete_day(self, day: date) -> bool:
        return self.repository.delete_day_log(day)

    def history(self, limit: Optional[int] = None) -> List[DayLog]:
        return self.repository.recent_day_logs(limit)

    def delete_all(self) -> None:
        self.repository.delete_all()
