"""
England and Wales Bank Holiday Calendar

Bank holidays as calendar entries:
- New Year's Day (January 1)
- Good Friday (Friday before Easter Sunday)
- Easter Monday (Monday after Easter Sunday)
- Early May Bank Holiday (1st Monday in May)
- Spring Bank Holiday (last Monday in May)
- Summer Bank Holiday (last Monday in August)
- Christmas Day (December 25)
- Boxing Day (December 26)

Substitute days: a bank holiday on a weekend moves to the next
weekday that is not already a bank holiday. Christmas and Boxing Day
both use offset=2 on {Sat, Sun}: Christmas on Saturday gives Monday 27
and Tuesday 28, Christmas on Sunday gives Boxing Day on Monday 26 and
the Christmas substitute on Tuesday 27.

Easter moves every year and cannot be written as entry fields, so
Good Friday and Easter Monday are added as exact dates for each year
passed in ``easter_years``.

Reference: Banking and Financial Dealings Act 1971, Schedule 1
"""
from __future__ import annotations

from datetime import timedelta
from typing import Iterable

from ..dates import calculate_easter
from ..engine import Calendar
from ..models import DayType, Weekday
from .base import working_week_calendar


def england_and_wales_calendar(easter_years: Iterable[int] = ()) -> Calendar[DayType]:
    """
    Build the England and Wales bank holiday calendar.

    Args:
        easter_years: Years to add Good Friday and Easter Monday for

    Returns:
        Calendar classifying every date as workday, weekend or bank holiday
    """
    calendar = working_week_calendar()
    holiday = DayType.BANK_HOLIDAY

    # New Year's Day, substitute on Monday 2nd or 3rd
    calendar.add_entry(holiday, month=1, day=1)
    calendar.add_entry(holiday, month=1, day=1, days_of_week=[Weekday.SAT], offset=2)
    calendar.add_entry(holiday, month=1, day=1, days_of_week=[Weekday.SUN], offset=1)

    # May and August Mondays
    calendar.add_entry(holiday, month=5, week_of_month=1, days_of_week=[Weekday.MON])
    calendar.add_entry(holiday, month=5, week_of_month=-1, days_of_week=[Weekday.MON])
    calendar.add_entry(holiday, month=8, week_of_month=-1, days_of_week=[Weekday.MON])

    # Christmas and Boxing Day with substitutes
    calendar.add_entry_ymd(holiday, month=12, day=25)
    calendar.add_entry_ymd(holiday, month=12, day=26)
    calendar.add_entry(
        holiday, month=12, day=25, days_of_week=[Weekday.SAT, Weekday.SUN], offset=2
    )
    calendar.add_entry(
        holiday, month=12, day=26, days_of_week=[Weekday.SAT, Weekday.SUN], offset=2
    )

    for year in easter_years:
        easter = calculate_easter(year)
        for d in (easter - timedelta(days=2), easter + timedelta(days=1)):
            calendar.add_entry_ymd(holiday, year=d.year, month=d.month, day=d.day)

    return calendar
