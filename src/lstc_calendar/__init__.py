"""
lstc-calendar - Rule-Based Date Classification

lstc-calendar classifies single dates ("workday", "weekend",
"bank holiday", or any label you choose) by evaluating an ordered set of
declarative date-matching rules.

Core Principle: "Later rules override earlier ones."

Key Features:
- Exact year/month/day matching
- Week-of-month buckets counted from the start or the end of the month
- ISO week-of-year matching
- Day-of-week sets
- Day offsets for observed/lieu days
- YAML/JSON calendar packs

Quick Start:
    from datetime import date
    from lstc_calendar import Calendar, DayType, Weekday

    calendar = Calendar[DayType]()
    calendar.add_entry(DayType.WORKDAY)
    calendar.add_entry(DayType.WEEKEND, days_of_week=[Weekday.SAT, Weekday.SUN])
    calendar.add_entry(
        DayType.BANK_HOLIDAY, month=5, week_of_month=-1, days_of_week=[Weekday.MON]
    )

    calendar.classify(date(2024, 5, 27))   # DayType.BANK_HOLIDAY
    calendar.classify_ymd(2024, 2, 11)     # DayType.WEEKEND

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import (
    england_and_wales_calendar,
    us_federal_calendar,
    working_week_calendar,
)
from .engine import Calendar
from .exceptions import (
    CalendarError,
    CalendarFrozenError,
    InvalidDateError,
    InvalidEntryError,
    PackLoadError,
    PackNotFoundError,
    PackValidationError,
    PackVersionMismatch,
)
from .models import CalendarEntry, DayType, Weekday
from .packs import (
    CalendarPackLoader,
    dump_calendar_pack,
    dump_calendar_pack_to_string,
    list_builtin_packs,
    load_builtin_pack,
    load_calendar_pack,
    load_calendar_pack_from_string,
)

__all__ = [
    "__version__",
    # Engine
    "Calendar",
    "CalendarEntry",
    # Enums
    "DayType",
    "Weekday",
    # Built-in calendars
    "working_week_calendar",
    "england_and_wales_calendar",
    "us_federal_calendar",
    # Packs
    "CalendarPackLoader",
    "load_calendar_pack",
    "load_calendar_pack_from_string",
    "load_builtin_pack",
    "list_builtin_packs",
    "dump_calendar_pack",
    "dump_calendar_pack_to_string",
    # Exceptions
    "CalendarError",
    "InvalidDateError",
    "InvalidEntryError",
    "CalendarFrozenError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
    "PackNotFoundError",
]
