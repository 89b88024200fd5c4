"""Configuration management for the Regimen Tracker."""

import logging
import os
from datetime import time
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Application configuration."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./regimen_tracker.db")

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Nutrition targets (display only)
    CALORIES_GOAL: int = int(os.getenv("CALORIES_GOAL", "2280"))
    PROTEIN_GOAL: int = int(os.getenv("PROTEIN_GOAL", "316"))  # grams
    CARBS_GOAL: int = int(os.getenv("CARBS_GOAL", "120"))  # grams
    FATS_GOAL: int = int(os.getenv("FATS_GOAL", "60"))  # grams

    # Display
    HIDE_ADVANCED_SUPPLEMENTS: bool = os.getenv("HIDE_ADVANCED_SUPPLEMENTS", "false").lower() == "true"

    # Reminders
    NOTIFICATIONS_ENABLED: bool = os.getenv("NOTIFICATIONS_ENABLED", "false").lower() == "true"
    MORNING_REMINDER_TIME: str = os.getenv("MORNING_REMINDER_TIME", "07:00")
    EVENING_REMINDER_TIME: str = os.getenv("EVENING_REMINDER_TIME", "21:00")
    WATER_REMINDER_HOURS: str = os.getenv("WATER_REMINDER_HOURS", "10,12,14,16,18")
    MEAL_REMINDER_LEAD_MINUTES: int = int(os.getenv("MEAL_REMINDER_LEAD_MINUTES", "15"))
    SUPPLEMENT_REMINDER_OFFSET_MINUTES: int = int(os.getenv("SUPPLEMENT_REMINDER_OFFSET_MINUTES", "30"))
    BLOOD_WORK_REMINDER_DAYS_BEFORE: int = int(os.getenv("BLOOD_WORK_REMINDER_DAYS_BEFORE", "2"))

    REMINDER_TIME_DEFAULTS = {
        "morning": time(7, 0),
        "evening": time(21, 0),
    }

    @classmethod
    def get_water_reminder_hours(cls) -> list:
        """Parse and return the hours at which water reminders fire.

        Returns:
            Sorted list of integers in 0-23
        """
        if not cls.WATER_REMINDER_HOURS:
            return []

        hours = []
        for hour_str in cls.WATER_REMINDER_HOURS.split(','):
            try:
                hour = int(hour_str.strip())
                if 0 <= hour <= 23:
                    hours.append(hour)
            except ValueError:
                continue

        return sorted(set(hours))

    @classmethod
    def get_reminder_time(cls, name: str) -> time:
        """Get the configured morning/evening reminder time, falling back to the default."""
        raw = cls.MORNING_REMINDER_TIME if name == "morning" else cls.EVENING_REMINDER_TIME
        default = cls.REMINDER_TIME_DEFAULTS.get(name, time(7, 0))
        try:
            hour, minute = (int(part) for part in raw.strip().split(":"))
            return time(hour, minute)
        except ValueError:
            logger.warning(f"Invalid {name} reminder time {raw!r}, using {default.strftime('%H:%M')}")
            return default


config = Config()
