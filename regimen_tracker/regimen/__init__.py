"""Regimen generation and scoring engine."""

from .cycle import BloodWorkMilestone, Cycle
from .day_log import DayLog
from .items import AdvancedSupplementItem, MealItem, SupplementItem
from .generator import GeneratedRegimen, RegimenGenerator
from .scoring import ScoreBand, daily_score, score_percent

__all__ = [
    "BloodWorkMilestone",
    "Cycle",
    "DayLog",
    "MealItem",
    "SupplementItem",
    "AdvancedSupplementItem",
    "GeneratedRegimen",
    "RegimenGenerator",
    "ScoreBand",
    "daily_score",
    "score_percent",
]
