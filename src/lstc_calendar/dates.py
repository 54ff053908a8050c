"""
lstc-calendar Date Arithmetic

Helpers used by calendar entries to decompose a date into the
quantities rules are matched against.

Week-of-month buckets are non-overlapping 7-day windows counted from
day 1 of the month (positive) or from the last day of the month
(negative). They are NOT aligned to calendar week boundaries: the 1st
to the 7th is always bucket 1, whatever weekday the month starts on.
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta

from .exceptions import InvalidDateError


def make_date(year: int, month: int, day: int) -> date:
    """
    Build a date from its parts.

    Raises:
        InvalidDateError: If the triple is not a real calendar date
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidDateError(
            message=f"Invalid date {year}-{month}-{day}: {e}",
            details={"year": year, "month": month, "day": day},
        ) from e


def shift_back(d: date, days: int) -> date:
    """Move a date back by a (signed) number of days."""
    return d - timedelta(days=days)


def days_until_next_month(d: date) -> int:
    """
    Days from ``d`` to the first of the following month.

    Always >= 1: the last day of a month returns 1. Counted within the
    month so December 9999 stays inside the supported date range.
    """
    return monthrange(d.year, d.month)[1] - d.day + 1


def week_of_month(d: date) -> int:
    """1-based 7-day bucket of ``d`` counted forward from day 1."""
    return (d.day - 1) // 7 + 1


def week_of_month_from_end(d: date) -> int:
    """1-based 7-day bucket of ``d`` counted backward from month end."""
    return (days_until_next_month(d) - 1) // 7 + 1


def iso_week_of_year(d: date) -> int:
    """ISO 8601 week number (1-53)."""
    return d.isocalendar()[1]


def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    Easter-relative holidays cannot be written as calendar entry fields,
    so built-in calendars use this to add exact-date entries per year.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)
