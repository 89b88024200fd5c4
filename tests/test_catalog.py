"""Tests for the static regimen catalog."""

import pytest
from datetime import date

from regimen_tracker.catalog import (
    AdvancedSupplementType,
    DayType,
    MealType,
    SleepStatus,
    SupplementType,
    TimingSlot,
    default_day_type,
)


class TestDayType:
    """Test day type defaults and decoding."""

    @pytest.mark.parametrize("day, expected", [
        (date(2024, 1, 1), DayType.EVENING),    # Monday
        (date(2024, 1, 2), DayType.REST),       # Tuesday
        (date(2024, 1, 3), DayType.EVENING),    # Wednesday
        (date(2024, 1, 4), DayType.EVENING),    # Thursday
        (date(2024, 1, 5), DayType.MIDDAY),     # Friday
        (date(2024, 1, 6), DayType.AFTERNOON),  # Saturday
        (date(2024, 1, 7), DayType.REST),       # Sunday
    ])
    def test_default_day_type_by_weekday(self, day, expected):
        """Test the weekday to day type mapping."""
        assert default_day_type(day) == expected

    def test_decode_known_value(self):
        assert DayType.decode("AFTERNOON") == DayType.AFTERNOON

    def test_decode_unknown_value_falls_back_to_evening(self):
        """Corrupt stored values decode to the documented default."""
        assert DayType.decode("APRÈS-MIDI") == DayType.EVENING
        assert DayType.decode(None) == DayType.EVENING

    def test_decode_fallbacks_for_other_enums(self):
        assert MealType.decode("BRUNCH") == MealType.MEAL_1
        assert SupplementType.decode("IRON") == SupplementType.ZINC
        assert TimingSlot.decode("NIGHT") == TimingSlot.MORNING
        assert AdvancedSupplementType.decode("") == AdvancedSupplementType.RAD140


class TestMealType:
    """Test the meal time table."""

    def test_canonical_order(self):
        assert [meal.value for meal in MealType] == [
            "MEAL_1", "MEAL_2", "MEAL_3", "MEAL_4",
            "PRE_TRAINING", "POST_TRAINING", "MEAL_5", "BEFORE_SLEEP",
        ]

    def test_training_meals_unavailable_on_rest_days(self):
        assert not MealType.PRE_TRAINING.is_available(DayType.REST)
        assert not MealType.POST_TRAINING.is_available(DayType.REST)
        assert MealType.PRE_TRAINING.scheduled_time(DayType.REST) is None
        assert MealType.MEAL_5.is_available(DayType.REST)

    def test_every_meal_available_on_training_days(self):
        for day_type in (DayType.EVENING, DayType.MIDDAY, DayType.AFTERNOON):
            assert all(meal.is_available(day_type) for meal in MealType)
            assert all(meal.scheduled_time(day_type) for meal in MealType)

    def test_scheduled_times(self):
        """Test a sample of the literal schedule table."""
        assert MealType.PRE_TRAINING.scheduled_time(DayType.EVENING) == "19:50"
        assert MealType.POST_TRAINING.scheduled_time(DayType.MIDDAY) == "13:45"
        assert MealType.MEAL_4.scheduled_time(DayType.AFTERNOON) == "19:00"
        assert MealType.MEAL_1.scheduled_time(DayType.REST) == "08:00"
        assert MealType.BEFORE_SLEEP.scheduled_time(DayType.EVENING) == "23:30"


class TestSupplements:
    """Test supplement attributes."""

    def test_timing_slots_yield_nine_pairs(self):
        assert sum(len(kind.timing_slots) for kind in SupplementType) == 9
        assert SupplementType.FISH_OIL.timing_slots == [TimingSlot.MORNING, TimingSlot.MIDDAY, TimingSlot.EVENING]

    def test_fixed_dosages(self):
        assert SupplementType.ZINC.dosage == "25-30mg"
        assert SupplementType.NAC.dosage == "500mg"


class TestAdvancedSupplementType:
    """Test week-gated dosages."""

    @pytest.mark.parametrize("week, rad, albuterol, enclomiphene", [
        (1, "10mg", "4mg", None),
        (2, "10mg", "4mg", None),
        (3, "10mg", "8mg", None),
        (4, "10mg", "8mg", None),
        (5, "15mg", "8mg", "12.5mg"),
        (6, "15mg", "8mg", "12.5mg"),
        (7, "15mg", "10mg", "12.5mg"),
        (8, "15mg", "10mg", "12.5mg"),
    ])
    def test_dosage_by_week(self, week, rad, albuterol, enclomiphene):
        assert AdvancedSupplementType.RAD140.dosage(week) == rad
        assert AdvancedSupplementType.CARDARINE.dosage(week) == "20mg"
        assert AdvancedSupplementType.ALBUTEROL.dosage(week) == albuterol
        assert AdvancedSupplementType.ENCLOMIPHENE.dosage(week) == enclomiphene

    def test_enclomiphene_active_from_week_five(self):
        assert not AdvancedSupplementType.ENCLOMIPHENE.is_active(4)
        assert AdvancedSupplementType.ENCLOMIPHENE.is_active(5)
        assert all(AdvancedSupplementType.CARDARINE.is_active(week) for week in range(1, 9))

    def test_out_of_range_weeks_are_clamped(self):
        assert AdvancedSupplementType.RAD140.dosage(0) == "10mg"
        assert AdvancedSupplementType.ALBUTEROL.dosage(12) == "10mg"
        assert AdvancedSupplementType.ENCLOMIPHENE.is_active(20)

    def test_timing_note(self):
        assert AdvancedSupplementType.RAD140.timing == "On waking"


class TestSleepStatus:
    """Test sleep classification boundaries."""

    @pytest.mark.parametrize("hours, expected", [
        (0, SleepStatus.INSUFFICIENT),
        (5.9, SleepStatus.INSUFFICIENT),
        (6.0, SleepStatus.ACCEPTABLE),
        (6.99, SleepStatus.ACCEPTABLE),
        (7.0, SleepStatus.OPTIMAL),
        (9.0, SleepStatus.OPTIMAL),
        (9.5, SleepStatus.INSUFFICIENT),
    ])
    def test_from_hours(self, hours, expected):
        assert SleepStatus.from_hours(hours) == expected
