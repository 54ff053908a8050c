"""
lstc-calendar Built-in Calendars

Ready-made calendars written as calendar entries, classifying dates
with DayType.

Provides:
- working_week_calendar: Monday-Friday workdays, weekend on Sat/Sun
- england_and_wales_calendar: UK bank holidays with substitute days
- us_federal_calendar: US federal holidays with observed days

Usage:
    from lstc_calendar.calendars import england_and_wales_calendar

    calendar = england_and_wales_calendar(easter_years=range(2024, 2027))
    calendar.classify(date(2024, 5, 27))  # DayType.BANK_HOLIDAY
"""
from __future__ import annotations

from .base import working_week_calendar
from .england_and_wales import england_and_wales_calendar
from .us_federal import us_federal_calendar

__all__ = [
    "working_week_calendar",
    "england_and_wales_calendar",
    "us_federal_calendar",
]
