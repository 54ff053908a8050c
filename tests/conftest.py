"""
Pytest configuration and fixtures for lstc-calendar tests.

Provides helper factories and common calendars used across test modules.
"""
from datetime import date
from enum import Enum
from typing import Optional

import pytest

from lstc_calendar import Calendar, CalendarEntry, Weekday


# =============================================================================
# Classifications
# =============================================================================

class Day(str, Enum):
    """Classification used by the engine tests."""
    WORKDAY = "workday"
    WEEKEND = "weekend"
    BANK_HOLIDAY = "bank_holiday"
    XMAS = "x-mas"
    XING = "x-ing"
    XMAS_LIEU = "x-mas lieu"
    XING_LIEU = "x-ing lieu"


WEEKEND = [Weekday.SAT, Weekday.SUN]


# =============================================================================
# Factory Helpers
# =============================================================================

def make_entry(
    classification=Day.BANK_HOLIDAY,
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    week_of_month: Optional[int] = None,
    week_of_year: Optional[int] = None,
    days_of_week=None,
    offset: int = 0,
) -> CalendarEntry:
    """Create a CalendarEntry; weekdays may be given as any iterable."""
    return CalendarEntry(
        classification=classification,
        year=year,
        month=month,
        day=day,
        week_of_month=week_of_month,
        week_of_year=week_of_year,
        days_of_week=frozenset(days_of_week) if days_of_week is not None else None,
        offset=offset,
    )


def make_bank_holiday_calendar() -> Calendar:
    """Workdays, weekends and the two late-spring UK bank holidays."""
    calendar: Calendar = Calendar()
    calendar.add_entry(Day.WORKDAY)
    calendar.add_entry(Day.WEEKEND, days_of_week=WEEKEND)
    calendar.add_entry(
        Day.BANK_HOLIDAY, month=5, week_of_month=1, days_of_week=[Weekday.MON]
    )
    calendar.add_entry(
        Day.BANK_HOLIDAY, month=5, week_of_month=-1, days_of_week=[Weekday.MON]
    )
    return calendar


def make_christmas_calendar() -> Calendar:
    """Christmas and Boxing Day with weekend substitute days."""
    calendar: Calendar = Calendar()
    calendar.add_entry(Day.WORKDAY)
    calendar.add_entry(Day.WEEKEND, days_of_week=WEEKEND)
    calendar.add_entry_ymd(Day.XMAS, month=12, day=25)
    calendar.add_entry_ymd(Day.XING, month=12, day=26)
    calendar.add_entry(Day.XMAS_LIEU, month=12, day=25, days_of_week=WEEKEND, offset=2)
    calendar.add_entry(Day.XING_LIEU, month=12, day=26, days_of_week=WEEKEND, offset=2)
    return calendar


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def empty_calendar() -> Calendar:
    return Calendar()


@pytest.fixture
def bank_holiday_calendar() -> Calendar:
    return make_bank_holiday_calendar()


@pytest.fixture
def christmas_calendar() -> Calendar:
    return make_christmas_calendar()


@pytest.fixture
def sample_dates() -> list[date]:
    """A spread of dates across centuries, leap days and month ends."""
    return [
        date(2024, 2, 11),
        date(2000, 1, 11),
        date(1955, 11, 5),
        date(2015, 11, 5),
        date(1885, 11, 5),
        date(2024, 2, 29),
        date(2023, 12, 31),
    ]
