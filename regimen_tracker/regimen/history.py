"""History summaries over stored day logs."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from .day_log import DayLog
from .scoring import ScoreBand, daily_score, score_percent


@dataclass
class WeeklySummary:
    """Summary of the most recent tracked days."""

    days_tracked: int
    average_percent: int
    band: ScoreBand


@dataclass
class WeightTrend:
    """Weight change between the oldest and latest of the recent weigh-ins."""

    change: float  # kg, latest - oldest
    latest: float
    oldest: float

    @property
    def is_gain(self) -> bool:
        return self.change >= 0


def _most_recent_first(day_logs: Sequence[DayLog]) -> List[DayLog]:
    return sorted(day_logs, key=lambda log: log.date, reverse=True)


def average_score(day_logs: Sequence[DayLog]) -> int:
    """Average of the truncated daily percentages (integer division)."""
    if not day_logs:
        return 0
    total = sum(score_percent(daily_score(log)) for log in day_logs)
    return total // len(day_logs)


def weekly_summary(day_logs: Sequence[DayLog], days: int = 7) -> WeeklySummary:
    recent = _most_recent_first(day_logs)[:days]
    average = average_score(recent)
    return WeeklySummary(days_tracked=len(recent), average_percent=average, band=ScoreBand.from_percent(average))


def weight_series(day_logs: Sequence[DayLog], limit: int = 14) -> List[Tuple[date, float]]:
    """Most recent weigh-ins in chronological order."""
    weighed = [log for log in _most_recent_first(day_logs) if log.weight is not None][:limit]
    return [(log.date, log.weight) for log in reversed(weighed)]


def weight_trend(day_logs: Sequence[DayLog], window: int = 7) -> Optional[WeightTrend]:
    """Change across the most recent ``window`` weigh-ins; None with fewer than two."""
    weights = [log.weight for log in _most_recent_first(day_logs) if log.weight is not None][:window]
    if len(weights) < 2:
        return None
    latest, oldest = weights[0], weights[-1]
    return WeightTrend(change=latest - oldest, latest=latest, oldest=oldest)
