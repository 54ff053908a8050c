"""
lstc-calendar Calendar Engine

The Calendar is an ordered set of CalendarEntry rules that classifies
single dates.

Precedence:
- Entries are evaluated in REVERSE insertion order
- The first matching entry wins

This lets a calendar be layered: add broad rules first ("every day is
a workday"), then progressively more specific overrides ("weekends",
"bank holidays", "lieu days for weekend bank holidays").

Threading:
- classify() never mutates the calendar and is safe to call from many
  threads once construction is finished
- Adding entries is unsynchronized. Serialize construction yourself, or
  call freeze() and share the frozen snapshot
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Generic, Iterable, Iterator, Optional, TypeVar, Union

from ..dates import make_date
from ..exceptions import CalendarFrozenError, InvalidEntryError
from ..models import CalendarEntry, Weekday

logger = logging.getLogger(__name__)

T = TypeVar("T")

WeekdayLike = Union[Weekday, str, int]


def _check_int(name: str, value: Optional[int], optional: bool = True) -> None:
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEntryError(
            message=f"{name} must be an int, got {type(value).__name__}",
            details={"field": name, "value": repr(value)},
        )


def _normalize_weekdays(
    days_of_week: Optional[Union[WeekdayLike, Iterable[WeekdayLike]]],
) -> Optional[frozenset[Weekday]]:
    """Coerce weekday-like values to a frozenset of Weekday."""
    if days_of_week is None:
        return None
    if isinstance(days_of_week, (str, int)):
        days_of_week = [days_of_week]
    try:
        return frozenset(Weekday.parse(wd) for wd in days_of_week)
    except (TypeError, ValueError) as e:
        raise InvalidEntryError(
            message=f"Invalid days_of_week: {e}",
            details={"field": "days_of_week", "value": repr(days_of_week)},
        ) from e


class Calendar(Generic[T]):
    """
    Ordered rule set classifying dates.

    Usage:
        calendar = Calendar[DayType]()
        calendar.add_entry(DayType.WORKDAY)
        calendar.add_entry(DayType.WEEKEND, days_of_week=[Weekday.SAT, Weekday.SUN])
        calendar.classify(date(2024, 2, 11))  # DayType.WEEKEND
    """

    def __init__(self, entries: Iterable[CalendarEntry[T]] = ()) -> None:
        """
        Initialize the calendar.

        Args:
            entries: Initial entries, in insertion order (last one wins)
        """
        self._entries: list[CalendarEntry[T]] = []
        self._frozen = False
        for entry in entries:
            self.insert(entry)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def insert(self, entry: CalendarEntry[T]) -> CalendarEntry[T]:
        """
        Add a prebuilt entry with the highest priority.

        Raises:
            CalendarFrozenError: If the calendar has been frozen
        """
        if self._frozen:
            raise CalendarFrozenError(
                message="Cannot add entries to a frozen calendar",
                details={"entries": len(self._entries)},
            )
        if entry.week_of_month == 0:
            logger.warning(
                "Calendar entry %r has week_of_month=0 and will never match",
                entry.classification,
            )
        self._entries.append(entry)
        return entry

    def add_entry(
        self,
        classification: T,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        week_of_month: Optional[int] = None,
        week_of_year: Optional[int] = None,
        days_of_week: Optional[Union[WeekdayLike, Iterable[WeekdayLike]]] = None,
        offset: int = 0,
        description: Optional[str] = None,
    ) -> CalendarEntry[T]:
        """
        Build an entry and add it with the highest priority.

        Args:
            classification: Value returned when the entry matches
            year: Exact year
            month: Exact month (1-12)
            day: Exact day of the month
            week_of_month: Signed 7-day bucket (negative counts from month end)
            week_of_year: ISO 8601 week number
            days_of_week: Weekdays (Weekday members, names or indices)
            offset: Days to move the date back before matching
            description: Human-readable note, not used for matching

        Returns:
            The entry that was added

        Raises:
            InvalidEntryError: If a field has the wrong type or an unknown weekday
            CalendarFrozenError: If the calendar has been frozen
        """
        for name, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("week_of_month", week_of_month),
            ("week_of_year", week_of_year),
        ):
            _check_int(name, value)
        _check_int("offset", offset, optional=False)

        entry = CalendarEntry(
            classification=classification,
            year=year,
            month=month,
            day=day,
            week_of_month=week_of_month,
            week_of_year=week_of_year,
            days_of_week=_normalize_weekdays(days_of_week),
            offset=offset,
            description=description,
        )
        return self.insert(entry)

    def add_entry_ymd(
        self,
        classification: T,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> CalendarEntry[T]:
        """Add an entry constrained only by exact date parts."""
        return self.add_entry(classification, year=year, month=month, day=day)

    def freeze(self) -> Calendar[T]:
        """
        Get an immutable snapshot of this calendar.

        The snapshot rejects further entries and is safe to share between
        threads. Entries added to this calendar afterwards do not appear
        in the snapshot.
        """
        if self._frozen:
            return self
        snapshot: Calendar[T] = Calendar()
        snapshot._entries = list(self._entries)
        snapshot._frozen = True
        return snapshot

    @property
    def frozen(self) -> bool:
        """True if entries can no longer be added."""
        return self._frozen

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def find_match(self, d: date) -> Optional[tuple[int, CalendarEntry[T]]]:
        """
        Find the entry that classifies a date, with its position.

        Returns:
            (1-based insertion position, entry) of the most recently added
            matching entry, or None
        """
        for index in range(len(self._entries) - 1, -1, -1):
            entry = self._entries[index]
            if entry.matches(d):
                logger.debug(
                    "Classified %s as %r (entry #%d)",
                    d, entry.classification, index + 1,
                )
                return index + 1, entry
        logger.debug("No calendar entry matches %s", d)
        return None

    def find_entry(self, d: date) -> Optional[CalendarEntry[T]]:
        """
        Find the entry that classifies a date.

        Returns:
            The most recently added matching entry, or None
        """
        match = self.find_match(d)
        if match is None:
            return None
        return match[1]

    def classify(self, d: date) -> Optional[T]:
        """
        Classify a date.

        Returns:
            Classification of the first matching entry in reverse
            insertion order, or None if nothing matches
        """
        entry = self.find_entry(d)
        if entry is None:
            return None
        return entry.classification

    def classify_ymd(self, year: int, month: int, day: int) -> Optional[T]:
        """
        Classify a date given as parts.

        Raises:
            InvalidDateError: If the parts do not form a real date
        """
        return self.classify(make_date(year, month, day))

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> tuple[CalendarEntry[T], ...]:
        """Entries in insertion order."""
        return tuple(self._entries)

    def entries_by_priority(self) -> Iterator[CalendarEntry[T]]:
        """Entries in evaluation order (most recently added first)."""
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CalendarEntry[T]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"Calendar({len(self._entries)} entries{state})"
