"""Regimen Tracker - daily meal, supplement and dosing cycle tracking."""

__version__ = "1.0.0"
