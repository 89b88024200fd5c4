"""Tests for daily regimen generation."""

import pytest
from datetime import date

from regimen_tracker.catalog import AdvancedSupplementType, DayType, MealType, SupplementType, TimingSlot
from regimen_tracker.regimen.generator import RegimenGenerator


class TestRegimenGenerator:
    """Test item generation by day type and cycle week."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = RegimenGenerator()
        self.day = date(2024, 1, 1)

    def test_rest_day_has_no_training_meals(self):
        regimen = self.generator.generate(self.day, DayType.REST, 1)
        kinds = [meal.meal_type for meal in regimen.meals]

        assert len(kinds) == 6
        assert MealType.PRE_TRAINING not in kinds
        assert MealType.POST_TRAINING not in kinds

    @pytest.mark.parametrize("day_type", [DayType.EVENING, DayType.MIDDAY, DayType.AFTERNOON])
    def test_training_days_have_eight_meals(self, day_type):
        regimen = self.generator.generate(self.day, day_type, 3)

        assert [meal.meal_type for meal in regimen.meals] == list(MealType)
        for meal in regimen.meals:
            assert meal.scheduled_time == meal.meal_type.scheduled_time(day_type)

    @pytest.mark.parametrize("day_type", list(DayType))
    @pytest.mark.parametrize("week", [1, 4, 5, 8])
    def test_always_nine_supplements(self, day_type, week):
        regimen = self.generator.generate(self.day, day_type, week)
        assert len(regimen.supplements) == 9

    def test_supplement_items_follow_kind_and_slot_order(self):
        regimen = self.generator.generate(self.day, DayType.EVENING, 1)
        pairs = [(item.supplement_type, item.timing_slot) for item in regimen.supplements]

        assert pairs[0] == (SupplementType.ZINC, TimingSlot.EVENING)
        assert pairs[2:5] == [
            (SupplementType.FISH_OIL, TimingSlot.MORNING),
            (SupplementType.FISH_OIL, TimingSlot.MIDDAY),
            (SupplementType.FISH_OIL, TimingSlot.EVENING),
        ]
        assert all(item.dosage == item.supplement_type.dosage for item in regimen.supplements)

    @pytest.mark.parametrize("week, expected", [(1, 3), (4, 3), (5, 4), (8, 4)])
    def test_advanced_supplement_count_by_week(self, week, expected):
        regimen = self.generator.generate(self.day, DayType.EVENING, week)
        assert len(regimen.advanced_supplements) == expected

    def test_week_five_dosages(self):
        regimen = self.generator.generate(self.day, DayType.EVENING, 5)
        dosages = {item.supplement_type: item.dosage for item in regimen.advanced_supplements}

        assert dosages[AdvancedSupplementType.ENCLOMIPHENE] == "12.5mg"
        assert dosages[AdvancedSupplementType.RAD140] == "15mg"

    def test_missing_week_counts_as_week_one(self):
        regimen = self.generator.generate(self.day, DayType.EVENING, None)
        dosages = {item.supplement_type: item.dosage for item in regimen.advanced_supplements}

        assert AdvancedSupplementType.ENCLOMIPHENE not in dosages
        assert dosages[AdvancedSupplementType.ALBUTEROL] == "4mg"

    def test_generated_items_start_incomplete_with_unique_ids(self):
        regimen = self.generator.generate(self.day, DayType.MIDDAY, 6)
        items = regimen.meals + regimen.supplements + regimen.advanced_supplements

        assert not any(item.is_completed for item in items)
        assert all(item.completed_at is None for item in items)
        assert len({item.id for item in items}) == len(items)
