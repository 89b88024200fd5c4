"""Tests for the command-line interface."""

import pytest
from datetime import date
from click.testing import CliRunner
from rich.console import Console

from regimen_tracker import cli as cli_module
from regimen_tracker.cli import cli
from regimen_tracker.db import Database, RegimenRepository
from regimen_tracker.catalog import DayType


DAY = "2024-01-02"  # Tuesday


@pytest.fixture
def db(monkeypatch):
    database = Database("sqlite://")
    database.create_tables()
    monkeypatch.setattr(cli_module, "get_db", lambda: database)
    # Wide enough that table cells are not wrapped
    monkeypatch.setattr(cli_module, "console", Console(width=200))
    yield database
    database.close()


@pytest.fixture
def runner():
    return CliRunner()


def stored_day(db, day=date(2024, 1, 2)):
    return RegimenRepository(db).get_day_log(day)


class TestCli:
    """Test CLI commands against an in-memory database."""

    def test_today_creates_day_log(self, runner, db):
        result = runner.invoke(cli, ["today", "--date", DAY])

        assert result.exit_code == 0
        assert "Daily score" in result.output
        day_log = stored_day(db)
        assert day_log.day_type == DayType.REST
        assert day_log.total_meals_count == 6

    def test_today_shows_supplement_notes(self, runner, db):
        result = runner.invoke(cli, ["today", "--date", DAY])

        assert result.exit_code == 0
        assert "Note" in result.output
        assert "With avocado (Meal 2)" in result.output

    def test_today_after_change_to_rest_shows_unscheduled_meals(self, runner, db):
        runner.invoke(cli, ["today", "--date", "2024-01-01"])  # Monday, evening training
        runner.invoke(cli, ["day-type", "REST", "--date", "2024-01-01"])

        result = runner.invoke(cli, ["today", "--date", "2024-01-01"])

        assert result.exit_code == 0
        assert "Pre-training" in result.output
        assert "19:50" not in result.output

    def test_today_with_day_type(self, runner, db):
        result = runner.invoke(cli, ["today", "--date", DAY, "--day-type", "midday"])

        assert result.exit_code == 0
        assert stored_day(db).day_type == DayType.MIDDAY

    def test_toggle_by_prefix(self, runner, db):
        runner.invoke(cli, ["today", "--date", DAY])
        meal = stored_day(db).meals[0]

        result = runner.invoke(cli, ["toggle", meal.id[:8], "--date", DAY])

        assert result.exit_code == 0
        assert "marked" in result.output
        assert stored_day(db).meals[0].is_completed

    def test_toggle_unknown_item(self, runner, db):
        result = runner.invoke(cli, ["toggle", "zzzz", "--date", DAY])

        assert result.exit_code != 0
        assert "No item matches" in result.output

    def test_water_sleep_weight(self, runner, db):
        runner.invoke(cli, ["water", "0.5", "--date", DAY])
        runner.invoke(cli, ["water", "0.75", "--date", DAY])
        runner.invoke(cli, ["sleep", "7.5", "--date", DAY])
        result = runner.invoke(cli, ["weight", "81.3", "--date", DAY])

        assert result.exit_code == 0
        day_log = stored_day(db)
        assert day_log.water_intake == pytest.approx(1.25)
        assert day_log.sleep_hours == 7.5
        assert day_log.weight == 81.3

        runner.invoke(cli, ["weight", "--clear", "--date", DAY])
        assert stored_day(db).weight is None

    def test_weight_requires_value(self, runner, db):
        result = runner.invoke(cli, ["weight", "--date", DAY])
        assert result.exit_code != 0

    def test_day_type_change(self, runner, db):
        runner.invoke(cli, ["today", "--date", DAY])

        result = runner.invoke(cli, ["day-type", "EVENING", "--date", DAY])

        assert result.exit_code == 0
        assert "Training meals are not added" in result.output
        assert stored_day(db).day_type == DayType.EVENING

    def test_reset_day_needs_confirmation(self, runner, db):
        runner.invoke(cli, ["water", "2", "--date", DAY])

        runner.invoke(cli, ["reset-day", "--date", DAY], input="n\n")
        assert stored_day(db).water_intake == 2

        result = runner.invoke(cli, ["reset-day", "--date", DAY], input="y\n")
        assert "Day reset" in result.output
        assert stored_day(db).water_intake == 0

    def test_delete_day(self, runner, db):
        runner.invoke(cli, ["today", "--date", DAY])

        result = runner.invoke(cli, ["delete-day", "--date", DAY], input="y\n")

        assert "Day deleted" in result.output
        assert stored_day(db) is None

    def test_cycle_commands(self, runner, db):
        result = runner.invoke(cli, ["cycle"])
        assert "No active cycle" in result.output

        runner.invoke(cli, ["new-cycle"], input="y\n")
        result = runner.invoke(cli, ["cycle-start", "2024-01-01"])
        assert "2024-01-01" in result.output

        result = runner.invoke(cli, ["cycle"])
        assert result.exit_code == 0
        assert "Blood Work" in result.output

    def test_history_and_status(self, runner, db):
        result = runner.invoke(cli, ["history"])
        assert "No history yet" in result.output

        runner.invoke(cli, ["weight", "80", "--date", "2024-01-01"])
        runner.invoke(cli, ["weight", "79.5", "--date", DAY])

        result = runner.invoke(cli, ["history"])
        assert result.exit_code == 0
        assert "2 weigh-ins" in result.output

        result = runner.invoke(cli, ["status"])
        assert "Days tracked: 2" in result.output

    def test_wipe(self, runner, db):
        runner.invoke(cli, ["today", "--date", DAY])

        runner.invoke(cli, ["wipe"], input="y\n")

        assert stored_day(db) is None
        assert RegimenRepository(db).get_active_cycle() is None
