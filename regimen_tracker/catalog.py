"""Static regimen catalog: day types, meals, supplements and cycle dosages."""

import logging
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

CYCLE_WEEKS = 8
CYCLE_LENGTH_DAYS = CYCLE_WEEKS * 7
ADVANCED_TIMING_NOTE = "On waking"


class _DecodableEnum(Enum):
    """String-valued enum that decodes stored values with a fallback variant."""

    @classmethod
    def default(cls):
        raise NotImplementedError

    @classmethod
    def decode(cls, raw: Optional[str]):
        """Map a stored raw value to a member, falling back to the default variant."""
        try:
            return cls(raw)
        except ValueError:
            fallback = cls.default()
            logger.debug(f"Unknown {cls.__name__} value {raw!r}, falling back to {fallback.value}")
            return fallback


class DayType(_DecodableEnum):
    """Training slot of a calendar day."""

    EVENING = "EVENING"  # Training at 20:00 (Mon, Wed, Thu)
    MIDDAY = "MIDDAY"  # Training at 12:30 (Fri)
    AFTERNOON = "AFTERNOON"  # Training at 17:00 (Sat)
    REST = "REST"  # Rest day (Tue, Sun)

    @classmethod
    def default(cls) -> "DayType":
        return cls.EVENING

    @property
    def display_name(self) -> str:
        return _DAY_TYPE_DISPLAY[self]


_DAY_TYPE_DISPLAY: Dict[DayType, str] = {
    DayType.EVENING: "Evening (20:00)",
    DayType.MIDDAY: "Midday (12:30)",
    DayType.AFTERNOON: "Afternoon (17:00)",
    DayType.REST: "Rest",
}

# date.weekday(): Monday == 0
_WEEKDAY_DAY_TYPES = {
    0: DayType.EVENING,
    1: DayType.REST,
    2: DayType.EVENING,
    3: DayType.EVENING,
    4: DayType.MIDDAY,
    5: DayType.AFTERNOON,
    6: DayType.REST,
}


def default_day_type(day: date) -> DayType:
    """Default day type for a calendar date, derived from its weekday."""
    return _WEEKDAY_DAY_TYPES[day.weekday()]


class MealType(_DecodableEnum):
    """Meal kinds in canonical display order."""

    MEAL_1 = "MEAL_1"
    MEAL_2 = "MEAL_2"
    MEAL_3 = "MEAL_3"
    MEAL_4 = "MEAL_4"
    PRE_TRAINING = "PRE_TRAINING"
    POST_TRAINING = "POST_TRAINING"
    MEAL_5 = "MEAL_5"
    BEFORE_SLEEP = "BEFORE_SLEEP"

    @classmethod
    def default(cls) -> "MealType":
        return cls.MEAL_1

    @property
    def display_name(self) -> str:
        return _MEAL_DETAILS[self][0]

    @property
    def content(self) -> str:
        return _MEAL_DETAILS[self][1]

    @property
    def icon(self) -> str:
        return _MEAL_DETAILS[self][2]

    @property
    def is_training_meal(self) -> bool:
        return self in (MealType.PRE_TRAINING, MealType.POST_TRAINING)

    def is_available(self, day_type: DayType) -> bool:
        """Rest days have no pre/post-training meals."""
        return not (day_type == DayType.REST and self.is_training_meal)

    def scheduled_time(self, day_type: DayType) -> Optional[str]:
        """Clock time (HH:MM) of this meal on the given day type, None when unavailable."""
        return MEAL_SCHEDULE[day_type].get(self)


_MEAL_DETAILS: Dict[MealType, Tuple[str, str, str]] = {
    MealType.MEAL_1: ("Meal 1", "Warm water + lemon + 2 lean steaks 5% + 3 egg whites", "sunrise"),
    MealType.MEAL_2: ("Meal 2", "140g chicken + ½ avocado", "sun.min"),
    MealType.MEAL_3: ("Meal 3", "140g chicken + 100g cooked basmati rice", "sun.max"),
    MealType.MEAL_4: ("Meal 4", "6 egg whites + 3 rice cakes", "cloud.sun"),
    MealType.PRE_TRAINING: ("Pre-training", "1 banana + 1 scoop whey isolate", "figure.run"),
    MealType.POST_TRAINING: ("Post-training", "2 fruit compotes + 2 scoops whey isolate", "figure.cooldown"),
    MealType.MEAL_5: ("Meal 5", "2 lean steaks 5% + 200g cruciferous vegetables", "moon.haze"),
    MealType.BEFORE_SLEEP: ("Before sleep", "0% fromage blanc + tuna + spinach + pecans", "moon.zzz"),
}

MEAL_SCHEDULE: Dict[DayType, Dict[MealType, str]] = {
    DayType.EVENING: {
        MealType.MEAL_1: "07:00",
        MealType.MEAL_2: "10:00",
        MealType.MEAL_3: "13:00",
        MealType.MEAL_4: "16:00",
        MealType.PRE_TRAINING: "19:50",
        MealType.POST_TRAINING: "21:15",
        MealType.MEAL_5: "22:00",
        MealType.BEFORE_SLEEP: "23:30",
    },
    DayType.MIDDAY: {
        MealType.MEAL_1: "07:00",
        MealType.MEAL_2: "09:30",
        MealType.MEAL_3: "12:00",
        MealType.MEAL_4: "16:00",
        MealType.PRE_TRAINING: "12:20",
        MealType.POST_TRAINING: "13:45",
        MealType.MEAL_5: "19:00",
        MealType.BEFORE_SLEEP: "22:00",
    },
    DayType.AFTERNOON: {
        MealType.MEAL_1: "07:00",
        MealType.MEAL_2: "10:00",
        MealType.MEAL_3: "13:00",
        MealType.MEAL_4: "19:00",
        MealType.PRE_TRAINING: "16:50",
        MealType.POST_TRAINING: "18:15",
        MealType.MEAL_5: "21:00",
        MealType.BEFORE_SLEEP: "23:00",
    },
    DayType.REST: {
        MealType.MEAL_1: "08:00",
        MealType.MEAL_2: "10:30",
        MealType.MEAL_3: "13:00",
        MealType.MEAL_4: "16:00",
        MealType.MEAL_5: "19:00",
        MealType.BEFORE_SLEEP: "22:00",
    },
}


class TimingSlot(_DecodableEnum):
    """Time-of-day slot for standard supplements."""

    MORNING = "MORNING"
    MIDDAY = "MIDDAY"
    EVENING = "EVENING"

    @classmethod
    def default(cls) -> "TimingSlot":
        return cls.MORNING

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class SupplementType(_DecodableEnum):
    """Standard daily supplements."""

    ZINC = "ZINC"
    VITAMIN_D3 = "VITAMIN_D3"
    FISH_OIL = "FISH_OIL"
    NAC = "NAC"
    TAURINE = "TAURINE"
    MAGNESIUM = "MAGNESIUM"

    @classmethod
    def default(cls) -> "SupplementType":
        return cls.ZINC

    @property
    def display_name(self) -> str:
        return _SUPPLEMENT_DETAILS[self]["name"]

    @property
    def dosage(self) -> str:
        return _SUPPLEMENT_DETAILS[self]["dosage"]

    @property
    def timing_slots(self) -> List[TimingSlot]:
        return list(_SUPPLEMENT_DETAILS[self]["slots"])

    @property
    def icon(self) -> str:
        return _SUPPLEMENT_DETAILS[self]["icon"]

    @property
    def note(self) -> Optional[str]:
        return _SUPPLEMENT_DETAILS[self]["note"]


_SUPPLEMENT_DETAILS = {
    SupplementType.ZINC: {
        "name": "Zinc (picolinate)",
        "dosage": "25-30mg",
        "slots": (TimingSlot.EVENING,),
        "icon": "pill",
        "note": "Before sleep",
    },
    SupplementType.VITAMIN_D3: {
        "name": "Vitamin D3",
        "dosage": "5000-10000 IU",
        "slots": (TimingSlot.MORNING,),
        "icon": "sun.max",
        "note": "With avocado (Meal 2)",
    },
    SupplementType.FISH_OIL: {
        "name": "Fish Oil (Omega 3)",
        "dosage": "2 capsules",
        "slots": (TimingSlot.MORNING, TimingSlot.MIDDAY, TimingSlot.EVENING),
        "icon": "drop",
        "note": None,
    },
    SupplementType.NAC: {
        "name": "NAC",
        "dosage": "500mg",
        "slots": (TimingSlot.MORNING, TimingSlot.EVENING),
        "icon": "cross.vial",
        "note": None,
    },
    SupplementType.TAURINE: {
        "name": "Taurine",
        "dosage": "3-5g",
        "slots": (TimingSlot.MORNING,),
        "icon": "bolt",
        "note": None,
    },
    SupplementType.MAGNESIUM: {
        "name": "Magnesium B6",
        "dosage": "1 dose",
        "slots": (TimingSlot.EVENING,),
        "icon": "moon.stars",
        "note": "Before sleep",
    },
}


def clamp_week(week: int) -> int:
    """Clamp a cycle week into 1..CYCLE_WEEKS."""
    return min(max(week, 1), CYCLE_WEEKS)


class AdvancedSupplementType(_DecodableEnum):
    """Cycle-dependent compounds whose activity and dosage depend on the cycle week."""

    RAD140 = "RAD140"
    CARDARINE = "CARDARINE"
    ALBUTEROL = "ALBUTEROL"
    ENCLOMIPHENE = "ENCLOMIPHENE"

    @classmethod
    def default(cls) -> "AdvancedSupplementType":
        return cls.RAD140

    @property
    def display_name(self) -> str:
        return _ADVANCED_DISPLAY[self][0]

    @property
    def icon(self) -> str:
        return _ADVANCED_DISPLAY[self][1]

    @property
    def timing(self) -> str:
        return ADVANCED_TIMING_NOTE

    def dosage(self, week: int) -> Optional[str]:
        """Dosage for a cycle week (1-8), None when inactive that week."""
        week = clamp_week(week)
        if self == AdvancedSupplementType.RAD140:
            return "10mg" if week <= 4 else "15mg"
        if self == AdvancedSupplementType.CARDARINE:
            return "20mg"
        if self == AdvancedSupplementType.ALBUTEROL:
            if week <= 2:
                return "4mg"
            if week <= 6:
                return "8mg"
            return "10mg"
        return "12.5mg" if week >= 5 else None

    def is_active(self, week: int) -> bool:
        """Enclomiphene starts in week 5; everything else runs the whole cycle."""
        if self == AdvancedSupplementType.ENCLOMIPHENE:
            return clamp_week(week) >= 5
        return True


_ADVANCED_DISPLAY = {
    AdvancedSupplementType.RAD140: ("RAD-140", "bolt.circle"),
    AdvancedSupplementType.CARDARINE: ("Cardarine", "flame"),
    AdvancedSupplementType.ALBUTEROL: ("Albuterol", "wind"),
    AdvancedSupplementType.ENCLOMIPHENE: ("Enclomiphene", "arrow.up.heart"),
}


class SleepStatus(Enum):
    """Sleep duration classification."""

    OPTIMAL = "optimal"  # 7-9h
    ACCEPTABLE = "acceptable"  # 6-7h
    INSUFFICIENT = "insufficient"  # <6h or >9h

    @classmethod
    def from_hours(cls, hours: float) -> "SleepStatus":
        if 7.0 <= hours <= 9.0:
            return cls.OPTIMAL
        if 6.0 <= hours < 7.0:
            return cls.ACCEPTABLE
        return cls.INSUFFICIENT

    @property
    def color(self) -> str:
        return {"optimal": "green", "acceptable": "yellow", "insufficient": "red"}[self.value]
