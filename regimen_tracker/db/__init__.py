"""Database module for the Regimen Tracker."""

from .database import Database, get_db
from .models import CycleRecord, DayLogRecord
from .repository import RegimenRepository

__all__ = ["Database", "get_db", "CycleRecord", "DayLogRecord", "RegimenRepository"]
