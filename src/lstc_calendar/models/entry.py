"""
lstc-calendar Calendar Entry

A CalendarEntry is a single date-matching rule: a set of optional
constraints over a date plus the classification handed back when the
rule matches.

Key semantics:
- All present fields must hold (conjunction); absent fields match anything
- The date under test is shifted back by ``offset`` days before matching
- week_of_month == 0 never matches
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from ..dates import (
    iso_week_of_year,
    shift_back,
    week_of_month,
    week_of_month_from_end,
)
from .enums import Weekday

T = TypeVar("T")


@dataclass(frozen=True)
class CalendarEntry(Generic[T]):
    """
    A date-matching rule with an attached classification.

    Attributes:
        classification: Value returned by the calendar when this entry matches
        year: Exact year
        month: Exact month (1-12)
        day: Exact day of the month (1-31)
        week_of_month: Signed 7-day bucket within the month. Positive N is
            the Nth bucket from day 1, negative N the Nth bucket back from
            the last day of the month. Zero never matches.
        week_of_year: ISO 8601 week number
        days_of_week: Weekdays the date must fall on (None = any)
        offset: Days to move the date back before matching. Models
            observed/lieu days: an entry for Dec 25 on {Sat, Sun} with
            offset=2 matches the Monday two days after a weekend Christmas.
        description: Human-readable note; never used for matching
    """
    classification: T
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    week_of_month: Optional[int] = None
    week_of_year: Optional[int] = None
    days_of_week: Optional[frozenset[Weekday]] = None
    offset: int = 0
    description: Optional[str] = field(default=None, compare=False)

    def matches(self, d: date) -> bool:
        """Check whether this entry applies to a date."""
        try:
            d = shift_back(d, self.offset)
        except OverflowError:
            # Shifted outside date.min..date.max: nothing to match against
            return False

        if self.year is not None and self.year != d.year:
            return False
        if self.month is not None and self.month != d.month:
            return False
        if self.day is not None and self.day != d.day:
            return False
        if self.week_of_month is not None and not self._matches_week_of_month(d):
            return False
        if self.days_of_week is not None and Weekday.from_date(d) not in self.days_of_week:
            return False
        if self.week_of_year is not None and self.week_of_year != iso_week_of_year(d):
            return False
        return True

    def _matches_week_of_month(self, d: date) -> bool:
        w = self.week_of_month
        if w > 0:
            return w == week_of_month(d)
        if w < 0:
            return -w == week_of_month_from_end(d)
        return False

    @property
    def is_unconditional(self) -> bool:
        """True if the entry has no date constraints at all."""
        return all(
            value is None
            for value in (
                self.year,
                self.month,
                self.day,
                self.week_of_month,
                self.week_of_year,
                self.days_of_week,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a record with only the present fields.

        Weekdays are written in Monday-first order. The classification is
        written as-is; Enum values are unwrapped to their ``.value``.
        """
        classification = self.classification
        if isinstance(classification, Enum):
            classification = classification.value

        record: dict[str, Any] = {"classification": classification}
        for name in ("year", "month", "day", "week_of_month", "week_of_year"):
            value = getattr(self, name)
            if value is not None:
                record[name] = value
        if self.days_of_week is not None:
            record["days_of_week"] = [
                wd.value for wd in sorted(self.days_of_week, key=lambda wd: wd.number)
            ]
        if self.offset:
            record["offset"] = self.offset
        if self.description:
            record["description"] = self.description
        return record
