"""
lstc-calendar Models

Domain models for date classification:
- CalendarEntry: a single date-matching rule
- Weekday, DayType: enumerations
"""
from __future__ import annotations

from .entry import CalendarEntry
from .enums import DayType, Weekday

__all__ = [
    "CalendarEntry",
    "DayType",
    "Weekday",
]
