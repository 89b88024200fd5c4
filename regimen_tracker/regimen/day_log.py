"""Per-day log aggregate: generated items, metrics and completion state."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterator, List, Optional, Tuple

from ..catalog import DayType, MealType, SleepStatus, default_day_type
from ..errors import ItemNotFoundError
from .generator import RegimenGenerator
from .items import AdvancedSupplementItem, AnyItem, MealItem, SupplementItem, new_id

logger = logging.getLogger(__name__)


@dataclass
class DayLog:
    """Everything tracked for one calendar day.

    The day log owns its items; items hold no reference back to it. Callers
    address an item through the day log and the item id.
    """

    date: date
    day_type: DayType
    cycle_week: Optional[int] = None
    water_intake: float = 0.0  # liters
    sleep_hours: float = 0.0
    weight: Optional[float] = None  # kg
    meals: List[MealItem] = field(default_factory=list)
    supplements: List[SupplementItem] = field(default_factory=list)
    advanced_supplements: List[AdvancedSupplementItem] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    @classmethod
    def create(
        cls,
        day: date,
        cycle_week: Optional[int],
        day_type: Optional[DayType] = None,
        generator: Optional[RegimenGenerator] = None,
    ) -> "DayLog":
        """Create a day log and populate its items.

        This is the only place items come into existence. The day type
        defaults to the weekday-derived type and ``cycle_week`` is captured
        as-is; it is never recomputed later.
        """
        generator = generator or RegimenGenerator()
        day_type = day_type or default_day_type(day)
        regimen = generator.generate(day, day_type, cycle_week)

        day_log = cls(
            date=day,
            day_type=day_type,
            cycle_week=cycle_week,
            meals=regimen.meals,
            supplements=regimen.supplements,
            advanced_supplements=regimen.advanced_supplements,
        )
        logger.info(
            f"Created day log for {day.isoformat()} ({day_type.value}, week {cycle_week}): "
            f"{len(day_log.meals)} meals, {len(day_log.supplements)} supplements, "
            f"{len(day_log.advanced_supplements)} advanced supplements"
        )
        return day_log

    # Items

    def items(self) -> Iterator[AnyItem]:
        yield from self.meals
        yield from self.supplements
        yield from self.advanced_supplements

    def find_item(self, item_id: str) -> AnyItem:
        for item in self.items():
            if item.id == item_id:
                return item
        raise ItemNotFoundError(f"No item {item_id!r} in day log for {self.date.isoformat()}")

    def toggle_item(self, item_id: str, now: datetime) -> AnyItem:
        item = self.find_item(item_id)
        item.toggle(now)
        return item

    # Metrics

    def add_water(self, delta: float) -> float:
        self.water_intake = max(0.0, self.water_intake + delta)
        return self.water_intake

    def set_sleep_hours(self, hours: float) -> None:
        self.sleep_hours = max(0.0, hours)

    def set_weight(self, weight: Optional[float]) -> None:
        self.weight = weight

    def change_day_type(self, day_type: DayType) -> None:
        """Switch the day type and reschedule the existing meals.

        The item set is left untouched: meals that only exist for the new
        type are not added, and meals the new type lacks stay in the log
        without a scheduled time.
        """
        self.day_type = day_type
        for meal in self.meals:
            meal.scheduled_time = meal.meal_type.scheduled_time(day_type)

    def reset(self) -> None:
        """Clear completion state and metrics, keeping the same items."""
        for item in self.items():
            item.clear()
        self.water_intake = 0.0
        self.sleep_hours = 0.0
        self.weight = None

    # Read-only projections

    @property
    def completed_meals_count(self) -> int:
        return sum(1 for meal in self.meals if meal.is_completed)

    @property
    def total_meals_count(self) -> int:
        return len(self.meals)

    @property
    def completed_supplements_count(self) -> int:
        return sum(1 for supplement in self.supplements if supplement.is_completed)

    @property
    def total_supplements_count(self) -> int:
        return len(self.supplements)

    @property
    def completed_advanced_supplements_count(self) -> int:
        return sum(1 for supplement in self.advanced_supplements if supplement.is_completed)

    @property
    def total_advanced_supplements_count(self) -> int:
        return len(self.advanced_supplements)

    @property
    def sleep_status(self) -> SleepStatus:
        return SleepStatus.from_hours(self.sleep_hours)

    def meal_schedule(self) -> List[Tuple[MealType, Optional[str]]]:
        """(meal type, HH:MM or None) pairs for reminder planning."""
        return [(meal.meal_type, meal.scheduled_time) for meal in self.meals]

    def __repr__(self):
        return f"<DayLog(date={self.date}, day_type={self.day_type.value}, week={self.cycle_week})>"
