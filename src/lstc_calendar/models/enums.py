"""
lstc-calendar Enumerations

All enums inherit from (str, Enum) for YAML/JSON serialization compatibility.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Union


# =============================================================================
# Weekday
# =============================================================================

_WEEKDAY_ALIASES = {
    "mon": "mon", "monday": "mon",
    "tue": "tue", "tues": "tue", "tuesday": "tue",
    "wed": "wed", "wednesday": "wed",
    "thu": "thu", "thur": "thu", "thurs": "thu", "thursday": "thu",
    "fri": "fri", "friday": "fri",
    "sat": "sat", "saturday": "sat",
    "sun": "sun", "sunday": "sun",
}


class Weekday(str, Enum):
    """
    Day of the week.

    Declaration order matches ``date.weekday()`` (Monday=0, Sunday=6).
    """
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"

    @property
    def number(self) -> int:
        """Index compatible with ``date.weekday()`` (0=Monday)."""
        return _WEEKDAY_ORDER.index(self)

    @classmethod
    def from_date(cls, d: date) -> Weekday:
        """Get the weekday of a date."""
        return _WEEKDAY_ORDER[d.weekday()]

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        """Get the weekday for a ``date.weekday()`` index."""
        if not 0 <= index <= 6:
            raise ValueError(f"Weekday index must be 0-6, got {index}")
        return _WEEKDAY_ORDER[index]

    @classmethod
    def parse(cls, value: Union[Weekday, str, int]) -> Weekday:
        """
        Coerce a weekday-like value to a Weekday.

        Accepts Weekday members, names in any case ("Mon", "monday", "SUN")
        and ``date.weekday()`` indices.

        Raises:
            ValueError: If the value does not name a weekday
        """
        if isinstance(value, Weekday):
            return value
        # bool is an int subclass; True is not a weekday
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_index(value)
        if isinstance(value, str):
            key = _WEEKDAY_ALIASES.get(value.strip().lower())
            if key is not None:
                return cls(key)
        raise ValueError(f"Not a weekday: {value!r}")


_WEEKDAY_ORDER = tuple(Weekday)


# =============================================================================
# Day Types
# =============================================================================

class DayType(str, Enum):
    """Common classifications used by the built-in calendars."""
    WORKDAY = "workday"
    WEEKEND = "weekend"
    BANK_HOLIDAY = "bank_holiday"
