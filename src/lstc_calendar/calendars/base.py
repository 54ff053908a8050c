"""
Base calendars shared by the built-in holiday calendars.
"""
from __future__ import annotations

from ..engine import Calendar
from ..models import DayType, Weekday


def working_week_calendar() -> Calendar[DayType]:
    """
    Monday to Friday working week with no holidays.

    Every date is a workday unless it falls on a Saturday or Sunday.
    Holiday calendars build on top of this by adding entries.
    """
    calendar: Calendar[DayType] = Calendar()
    calendar.add_entry(DayType.WORKDAY)
    calendar.add_entry(DayType.WEEKEND, days_of_week=[Weekday.SAT, Weekday.SUN])
    return calendar
