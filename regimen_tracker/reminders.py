"""Reminder planning from day schedules and cycle milestones.

Delivery is out of scope: the planner only produces :class:`Reminder`
definitions, and a :class:`ReminderSink` decides what to do with them.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Protocol

from .catalog import AdvancedSupplementType
from .config import Config, config as default_config

logger = logging.getLogger(__name__)

WATER_REMINDER_BODY = "Drink some water! Goal: 3L/day"


@dataclass(frozen=True)
class Reminder:
    """A reminder to deliver at ``at``; repeating reminders recur daily at that clock time."""

    identifier: str
    title: str
    body: str
    at: datetime
    repeats: bool = False


class ReminderSink(Protocol):
    """Delivery port for planned reminders."""

    def schedule(self, reminder: Reminder) -> None:
        ...

    def cancel_all(self) -> None:
        ...


def publish(sink: ReminderSink, reminders: Iterable[Reminder]) -> int:
    """Replace everything pending on ``sink`` with ``reminders``."""
    sink.cancel_all()
    count = 0
    for reminder in reminders:
        sink.schedule(reminder)
        count += 1
    logger.debug(f"Published {count} reminders")
    return count


def _parse_clock(value: str) -> Optional[time]:
    try:
        hour, minute = (int(part) for part in value.split(":"))
        return time(hour, minute)
    except ValueError:
        return None


class ReminderPlanner:
    """Turn a day's schedule and a cycle's milestones into reminders."""

    def __init__(self, settings: Config = default_config):
        self.settings = settings

    def _at(self, day: date, clock: time, offset_minutes: int = 0) -> datetime:
        return datetime.combine(day, clock) + timedelta(minutes=offset_minutes)

    def plan_daily(self, day: date, cycle_week: Optional[int] = None) -> List[Reminder]:
        """Recurring morning, evening, supplement and water reminders.

        The supplement reminder names the advanced supplements active in
        ``cycle_week``; None counts as week 1.
        """
        if not self.settings.NOTIFICATIONS_ENABLED:
            return []

        morning = self.settings.get_reminder_time("morning")
        evening = self.settings.get_reminder_time("evening")

        reminders = [
            Reminder(
                identifier="morning-reminder",
                title="Good morning! 💪",
                body="Don't forget your morning supplements.",
                at=self._at(day, morning),
                repeats=True,
            ),
            Reminder(
                identifier="evening-reminder",
                title="Daily check-in 📊",
                body="Did you track all your meals and supplements today?",
                at=self._at(day, evening),
                repeats=True,
            ),
        ]

        # Display setting only: hidden supplements still count in the score
        if not self.settings.HIDE_ADVANCED_SUPPLEMENTS:
            week = cycle_week or 1
            names = ", ".join(kind.display_name for kind in AdvancedSupplementType if kind.is_active(week))
            reminders.append(Reminder(
                identifier="supplement-reminder",
                title="Today's supplements 💊",
                body=f"Time for your supplements: {names}",
                at=self._at(day, morning, self.settings.SUPPLEMENT_REMINDER_OFFSET_MINUTES),
                repeats=True,
            ))

        for hour in self.settings.get_water_reminder_hours():
            reminders.append(Reminder(
                identifier=f"water-reminder-{hour}",
                title="Hydration 💧",
                body=WATER_REMINDER_BODY,
                at=self._at(day, time(hour, 0)),
                repeats=True,
            ))

        return reminders

    def plan_meals(self, day_log) -> List[Reminder]:
        """One-shot reminders ahead of each scheduled meal of a day log."""
        lead = self.settings.MEAL_REMINDER_LEAD_MINUTES
        reminders = []
        for meal_type, scheduled_time in day_log.meal_schedule():
            if scheduled_time is None:
                continue
            clock = _parse_clock(scheduled_time)
            if clock is None:
                logger.debug(f"Skipping {meal_type.value} reminder, unparseable time {scheduled_time!r}")
                continue
            content = meal_type.content
            preview = content if len(content) <= 50 else f"{content[:50]}..."
            reminders.append(Reminder(
                identifier=f"meal-{meal_type.value}",
                title=f"{meal_type.display_name} 🍽️",
                body=f"Get your meal ready: {preview}",
                at=self._at(day_log.date, clock, -lead),
            ))
        return reminders

    def plan_blood_work(self, cycle, now: Optional[datetime] = None) -> List[Reminder]:
        """One-shot reminders a few days before each blood work milestone.

        With ``now`` given, reminders already in the past are dropped.
        """
        days_before = self.settings.BLOOD_WORK_REMINDER_DAYS_BEFORE
        reminders = []
        for milestone in cycle.blood_work_dates():
            at = milestone.date - timedelta(days=days_before)
            if now is not None and at < now:
                continue
            reminders.append(Reminder(
                identifier=f"bloodwork-w{milestone.week}",
                title=f"Week {milestone.week} blood work 🩸",
                body=f"Your blood work is due in {days_before} days: {milestone.label}",
                at=at,
            ))
        return reminders

    def plan(self, day_log, cycle=None, now: Optional[datetime] = None) -> List[Reminder]:
        """Every reminder for a day, in delivery order."""
        if not self.settings.NOTIFICATIONS_ENABLED:
            return []
        reminders = self.plan_daily(day_log.date, day_log.cycle_week) + self.plan_meals(day_log)
        if cycle is not None:
            reminders += self.plan_blood_work(cycle, now)
        return sorted(reminders, key=lambda reminder: reminder.at)
