"""Tests for daily score calculation."""

import pytest
from datetime import date, datetime

from regimen_tracker.catalog import DayType
from regimen_tracker.regimen.day_log import DayLog
from regimen_tracker.regimen.scoring import (
    ScoreBand,
    daily_score,
    score_components,
    score_percent,
    sleep_score,
    water_score,
)

NOW = datetime(2024, 1, 1, 12, 0)


def complete(items, count):
    for item in items[:count]:
        item.toggle(NOW)


class TestDailyScore:
    """Test the weighted daily score."""

    def setup_method(self):
        """Set up test fixtures."""
        self.day_log = DayLog.create(date(2024, 1, 1), cycle_week=2, day_type=DayType.EVENING)

    def test_fresh_day_scores_zero_except_sleep_floor(self):
        """A fresh day only gets the insufficient-sleep floor."""
        assert daily_score(self.day_log) == pytest.approx(0.03)

    def test_fresh_day_components_are_zero(self):
        components = score_components(self.day_log)
        assert components["meals"] == 0
        assert components["supplements"] == 0
        assert components["advanced_supplements"] == 0
        assert components["water"] == 0

    def test_everything_done_scores_one(self):
        for item in list(self.day_log.items()):
            item.toggle(NOW)
        self.day_log.add_water(3.0)
        self.day_log.set_sleep_hours(8)

        assert daily_score(self.day_log) == 1.0
        assert score_percent(daily_score(self.day_log)) == 100

    def test_mixed_day_scenario(self):
        """5/8 meals, 6/9 supplements, 2/3 advanced, 2L water, 6.5h sleep -> 65%."""
        complete(self.day_log.meals, 5)
        complete(self.day_log.supplements, 6)
        complete(self.day_log.advanced_supplements, 2)
        self.day_log.add_water(2.0)
        self.day_log.set_sleep_hours(6.5)

        score = daily_score(self.day_log)

        assert score == pytest.approx(0.6533, abs=1e-3)
        assert score_percent(score) == 65

    def test_empty_categories_do_not_divide_by_zero(self):
        empty = DayLog(date=date(2024, 1, 1), day_type=DayType.REST, water_intake=3.0, sleep_hours=7.0)
        assert daily_score(empty) == pytest.approx(0.2)

    def test_advanced_supplements_always_count(self):
        complete(self.day_log.advanced_supplements, 3)
        assert daily_score(self.day_log) == pytest.approx(0.15 + 0.03)

    def test_water_and_sleep_scores(self):
        assert water_score(1.5) == pytest.approx(0.5)
        assert water_score(4.5) == 1.0
        assert sleep_score(0) == 0.3
        assert sleep_score(6.5) == 0.7
        assert sleep_score(9.0) == 1.0
        assert sleep_score(10) == 0.3

    def test_percent_truncates(self):
        assert score_percent(0.6599) == 65
        assert score_percent(0.999) == 99
        assert score_percent(0.0) == 0


class TestScoreBand:
    """Test score band thresholds."""

    @pytest.mark.parametrize("percent, band", [
        (100, ScoreBand.EXCELLENT),
        (80, ScoreBand.EXCELLENT),
        (79, ScoreBand.GOOD),
        (50, ScoreBand.GOOD),
        (49, ScoreBand.NEEDS_WORK),
        (0, ScoreBand.NEEDS_WORK),
    ])
    def test_from_percent(self, percent, band):
        assert ScoreBand.from_percent(percent) == band
