"""Daily regimen generation from day type and cycle week."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..catalog import AdvancedSupplementType, DayType, MealType, SupplementType, clamp_week
from .items import AdvancedSupplementItem, MealItem, SupplementItem


@dataclass
class GeneratedRegimen:
    """Items scheduled for one day, each list in canonical kind order."""

    meals: List[MealItem]
    supplements: List[SupplementItem]
    advanced_supplements: List[AdvancedSupplementItem]


class RegimenGenerator:
    """Build the meal, supplement and advanced supplement items due on a day."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def generate(self, day: date, day_type: DayType, cycle_week: Optional[int]) -> GeneratedRegimen:
        """Generate the full item set for a day.

        Args:
            day: Calendar date being generated
            day_type: Training slot of the day, drives meal times
            cycle_week: Week of the active cycle (1-8); None counts as week 1

        Returns:
            GeneratedRegimen with fresh, incomplete items
        """
        week = clamp_week(cycle_week or 1)
        regimen = GeneratedRegimen(
            meals=self.generate_meals(day_type),
            supplements=self.generate_supplements(),
            advanced_supplements=self.generate_advanced_supplements(week),
        )
        self.logger.debug(
            f"Generated regimen for {day.isoformat()} ({day_type.value}, week {week})"
        )
        return regimen

    def generate_meals(self, day_type: DayType) -> List[MealItem]:
        return [
            MealItem(meal_type=meal_type, scheduled_time=meal_type.scheduled_time(day_type))
            for meal_type in MealType
            if meal_type.is_available(day_type)
        ]

    def generate_supplements(self) -> List[SupplementItem]:
        # One item per (supplement, timing slot) pair
        return [
            SupplementItem(supplement_type=supplement_type, timing_slot=slot, dosage=supplement_type.dosage)
            for supplement_type in SupplementType
            for slot in supplement_type.timing_slots
        ]

    def generate_advanced_supplements(self, week: int) -> List[AdvancedSupplementItem]:
        items = []
        for supplement_type in AdvancedSupplementType:
            dosage = supplement_type.dosage(week)
            if supplement_type.is_active(week) and dosage is not None:
                items.append(AdvancedSupplementItem(supplement_type=supplement_type, dosage=dosage))
        return items
