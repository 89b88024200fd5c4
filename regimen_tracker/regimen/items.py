"""Checkable items of a day log."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from ..catalog import AdvancedSupplementType, MealType, SupplementType, TimingSlot


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class LogItem:
    """Completion state shared by every scheduled item."""

    id: str = field(default_factory=new_id, kw_only=True)
    is_completed: bool = field(default=False, kw_only=True)
    completed_at: Optional[datetime] = field(default=None, kw_only=True)

    def toggle(self, now: datetime) -> None:
        """Flip completion, stamping or clearing ``completed_at`` with it."""
        self.is_completed = not self.is_completed
        self.completed_at = now if self.is_completed else None

    def clear(self) -> None:
        self.is_completed = False
        self.completed_at = None


@dataclass
class MealItem(LogItem):
    meal_type: MealType
    scheduled_time: Optional[str]  # HH:MM, None when the day type has no slot for this meal

    @property
    def label(self) -> str:
        return self.meal_type.display_name


@dataclass
class SupplementItem(LogItem):
    supplement_type: SupplementType
    timing_slot: TimingSlot
    dosage: str

    @property
    def label(self) -> str:
        return f"{self.supplement_type.display_name} ({self.timing_slot.display_name})"


@dataclass
class AdvancedSupplementItem(LogItem):
    supplement_type: AdvancedSupplementType
    dosage: str

    @property
    def label(self) -> str:
        return self.supplement_type.display_name


AnyItem = Union[MealItem, SupplementItem, AdvancedSupplementItem]
