"""Daily completion score."""

import math
from enum import Enum

from ..catalog import SleepStatus

WATER_GOAL_LITERS = 3.0

# Meals 40%, supplements 25%, advanced supplements 15%, water 10%, sleep 10%
MEAL_WEIGHT = 0.40
SUPPLEMENT_WEIGHT = 0.25
ADVANCED_SUPPLEMENT_WEIGHT = 0.15
WATER_WEIGHT = 0.10
SLEEP_WEIGHT = 0.10

SLEEP_SCORES = {
    SleepStatus.OPTIMAL: 1.0,
    SleepStatus.ACCEPTABLE: 0.7,
    SleepStatus.INSUFFICIENT: 0.3,
}


class ScoreBand(Enum):
    """Qualitative band of a percentage score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_WORK = "Needs work"

    @classmethod
    def from_percent(cls, percent: int) -> "ScoreBand":
        if percent >= 80:
            return cls.EXCELLENT
        if percent >= 50:
            return cls.GOOD
        return cls.NEEDS_WORK

    @property
    def color(self) -> str:
        return {"Excellent": "green", "Good": "yellow", "Needs work": "red"}[self.value]


def _ratio(completed: int, total: int) -> float:
    return completed / total if total > 0 else 0.0


def water_score(water_intake: float) -> float:
    return min(water_intake / WATER_GOAL_LITERS, 1.0)


def sleep_score(sleep_hours: float) -> float:
    return SLEEP_SCORES[SleepStatus.from_hours(sleep_hours)]


def score_components(day_log) -> dict:
    """Per-category scores in [0, 1], before weighting."""
    return {
        "meals": _ratio(day_log.completed_meals_count, day_log.total_meals_count),
        "supplements": _ratio(day_log.completed_supplements_count, day_log.total_supplements_count),
        "advanced_supplements": _ratio(
            day_log.completed_advanced_supplements_count, day_log.total_advanced_supplements_count
        ),
        "water": water_score(day_log.water_intake),
        "sleep": sleep_score(day_log.sleep_hours),
    }


def daily_score(day_log) -> float:
    """Weighted completion score of a day log in [0, 1].

    Empty categories count as 0. Advanced supplements are always scored,
    whether or not they are displayed.
    """
    components = score_components(day_log)
    score = math.fsum([
        MEAL_WEIGHT * components["meals"],
        SUPPLEMENT_WEIGHT * components["supplements"],
        ADVANCED_SUPPLEMENT_WEIGHT * components["advanced_supplements"],
        WATER_WEIGHT * components["water"],
        SLEEP_WEIGHT * components["sleep"],
    ])
    return min(max(score, 0.0), 1.0)


def score_percent(score: float) -> int:
    """Percentage for display, truncated toward zero."""
    return int(score * 100)
