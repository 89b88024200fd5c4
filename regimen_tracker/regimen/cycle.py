"""Eight-week dosing cycle and its clock-relative progress."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, NamedTuple

from ..catalog import CYCLE_LENGTH_DAYS, CYCLE_WEEKS

BLOOD_WORK_MILESTONES = (
    (4, "Week 4 blood work (mid-cycle)"),
    (8, "Week 8 blood work (end of cycle)"),
    (12, "Week 12 blood work (post-cycle)"),
)


class BloodWorkMilestone(NamedTuple):
    """A recommended blood test, relative to the cycle start."""

    week: int
    date: datetime
    label: str


@dataclass
class Cycle:
    """One 8-week dosing period.

    Every derived value takes ``now`` explicitly and is clamped into the
    valid range, so a cycle never reports a day outside 1-56 or a week
    outside 1-8 even before its start or long after its end.
    """

    start_date: datetime
    is_active: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def end_date(self) -> datetime:
        return self.start_date + timedelta(days=CYCLE_LENGTH_DAYS)

    def days_since_start(self, now: datetime) -> int:
        """Whole days elapsed since the start date (negative before it)."""
        return (now - self.start_date).days

    def current_day(self, now: datetime) -> int:
        """Day within the cycle (1-56)."""
        return min(max(self.days_since_start(now) + 1, 1), CYCLE_LENGTH_DAYS)

    def current_week(self, now: datetime) -> int:
        """Week within the cycle (1-8)."""
        return min(max(self.days_since_start(now) // 7 + 1, 1), CYCLE_WEEKS)

    def progress(self, now: datetime) -> float:
        """Fraction of the cycle done (0.0 - 1.0)."""
        return self.current_day(now) / CYCLE_LENGTH_DAYS

    def days_remaining(self, now: datetime) -> int:
        return max(CYCLE_LENGTH_DAYS - self.current_day(now), 0)

    def is_completed(self, now: datetime) -> bool:
        return now >= self.end_date

    def blood_work_dates(self) -> List[BloodWorkMilestone]:
        """Blood work checkpoints at weeks 4, 8 and 12.

        Week 12 falls after the cycle ends; it is the post-cycle check.
        """
        return [
            BloodWorkMilestone(week, self.start_date + timedelta(weeks=week), label)
            for week, label in BLOOD_WORK_MILESTONES
        ]

    def __repr__(self):
        return f"<Cycle(id={self.id}, start_date={self.start_date:%Y-%m-%d}, is_active={self.is_active})>"
