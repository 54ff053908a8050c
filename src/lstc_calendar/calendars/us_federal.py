"""
US Federal Holiday Calendar

Federal holidays as calendar entries:
- New Year's Day (January 1)
- Martin Luther King Jr. Day (3rd Monday in January)
- Presidents' Day (3rd Monday in February)
- Memorial Day (Last Monday in May)
- Juneteenth (June 19) - optional, federal since 2021
- Independence Day (July 4)
- Labor Day (1st Monday in September)
- Columbus Day (2nd Monday in October) - optional
- Veterans Day (November 11)
- Thanksgiving Day (4th Thursday in November)
- Christmas Day (December 25)

Observed holidays: When a holiday falls on Saturday, it's observed on Friday
(offset=-1). When it falls on Sunday, it's observed on Monday (offset=1).
"""
from __future__ import annotations

from ..engine import Calendar
from ..models import DayType, Weekday
from .base import working_week_calendar

_FIXED_HOLIDAYS = [
    (1, 1),    # New Year's Day
    (7, 4),    # Independence Day
    (11, 11),  # Veterans Day
    (12, 25),  # Christmas Day
]

# (month, week_of_month, weekday)
_FLOATING_HOLIDAYS = [
    (1, 3, Weekday.MON),   # Martin Luther King Jr. Day
    (2, 3, Weekday.MON),   # Presidents' Day
    (5, -1, Weekday.MON),  # Memorial Day
    (9, 1, Weekday.MON),   # Labor Day
    (11, 4, Weekday.THU),  # Thanksgiving Day
]


def us_federal_calendar(
    include_juneteenth: bool = True,
    include_columbus_day: bool = True,
) -> Calendar[DayType]:
    """
    Build the US federal holiday calendar.

    Args:
        include_juneteenth: Add June 19 (federal holiday since 2021)
        include_columbus_day: Add Columbus Day (some jurisdictions don't observe)
    """
    calendar = working_week_calendar()
    holiday = DayType.BANK_HOLIDAY

    fixed = list(_FIXED_HOLIDAYS)
    if include_juneteenth:
        fixed.append((6, 19))

    for month, day in fixed:
        calendar.add_entry_ymd(holiday, month=month, day=day)
        calendar.add_entry(holiday, month=month, day=day, days_of_week=[Weekday.SAT], offset=-1)
        calendar.add_entry(holiday, month=month, day=day, days_of_week=[Weekday.SUN], offset=1)

    floating = list(_FLOATING_HOLIDAYS)
    if include_columbus_day:
        floating.append((10, 2, Weekday.MON))

    for month, week, weekday in floating:
        calendar.add_entry(holiday, month=month, week_of_month=week, days_of_week=[weekday])

    return calendar
