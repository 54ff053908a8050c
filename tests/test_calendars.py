"""
Tests for the built-in calendars.

Tests cover:
- Working week base calendar
- England and Wales bank holidays and substitute days
- US federal holidays and observed days
"""
from datetime import date

import pytest

from lstc_calendar import DayType
from lstc_calendar.calendars import (
    england_and_wales_calendar,
    us_federal_calendar,
    working_week_calendar,
)

BH = DayType.BANK_HOLIDAY
WD = DayType.WORKDAY
WE = DayType.WEEKEND


class TestWorkingWeek:
    """Tests for the base working week calendar."""

    def test_two_entries(self):
        calendar = working_week_calendar()

        assert len(calendar) == 2
        assert not calendar.frozen

    @pytest.mark.parametrize("day,expected", [
        (5, WD), (6, WD), (7, WD), (8, WD), (9, WD), (10, WE), (11, WE),
    ])
    def test_week_of_february_2024(self, day, expected):
        assert working_week_calendar().classify_ymd(2024, 2, day) == expected


class TestEnglandAndWales:
    """Tests for England and Wales bank holidays."""

    @pytest.fixture
    def calendar(self):
        return england_and_wales_calendar(easter_years=range(2020, 2028))

    @pytest.mark.parametrize("d", [
        date(2024, 1, 1),
        date(2024, 3, 29),   # Good Friday
        date(2024, 4, 1),    # Easter Monday
        date(2024, 5, 6),
        date(2024, 5, 27),
        date(2024, 8, 26),
        date(2024, 12, 25),
        date(2024, 12, 26),
        date(2025, 4, 18),   # Good Friday
        date(2025, 4, 21),   # Easter Monday
    ])
    def test_bank_holidays_2024_2025(self, calendar, d):
        assert calendar.classify(d) == BH

    @pytest.mark.parametrize("d,expected", [
        (date(2022, 1, 1), BH),   # Saturday, the holiday itself
        (date(2022, 1, 2), WE),
        (date(2022, 1, 3), BH),   # substitute
        (date(2023, 1, 1), BH),   # Sunday
        (date(2023, 1, 2), BH),   # substitute
        (date(2023, 1, 3), WD),
    ])
    def test_new_year_substitutes(self, calendar, d, expected):
        assert calendar.classify(d) == expected

    @pytest.mark.parametrize("d,expected", [
        # Christmas on Friday, Boxing Day on Saturday
        (date(2020, 12, 25), BH),
        (date(2020, 12, 26), BH),
        (date(2020, 12, 27), WE),
        (date(2020, 12, 28), BH),
        (date(2020, 12, 29), WD),
        # Christmas on Saturday
        (date(2021, 12, 27), BH),
        (date(2021, 12, 28), BH),
        (date(2021, 12, 29), WD),
        # Christmas on Sunday
        (date(2022, 12, 26), BH),
        (date(2022, 12, 27), BH),
        (date(2022, 12, 28), WD),
    ])
    def test_christmas_substitutes(self, calendar, d, expected):
        assert calendar.classify(d) == expected

    @pytest.mark.parametrize("d", [
        date(2024, 5, 13),
        date(2024, 5, 20),
        date(2024, 8, 19),
        date(2024, 12, 27),
    ])
    def test_ordinary_mondays_and_days(self, calendar, d):
        assert calendar.classify(d) == WD

    def test_easter_needs_years(self):
        calendar = england_and_wales_calendar()

        assert calendar.classify(date(2024, 3, 29)) == WD
        assert calendar.classify(date(2024, 4, 1)) == WD

    def test_easter_entries_are_exact_dates(self):
        calendar = england_and_wales_calendar(easter_years=[2024])
        easter_entries = [e for e in calendar.entries if e.year is not None]

        assert [(e.year, e.month, e.day) for e in easter_entries] == [
            (2024, 3, 29),
            (2024, 4, 1),
        ]
        assert calendar.classify(date(2025, 4, 18)) == WD


class TestUSFederal:
    """Tests for US federal holidays."""

    @pytest.fixture
    def calendar(self):
        return us_federal_calendar()

    @pytest.mark.parametrize("d", [
        date(2024, 1, 1),
        date(2024, 1, 15),   # MLK Day
        date(2024, 2, 19),   # Presidents' Day
        date(2024, 5, 27),   # Memorial Day
        date(2024, 6, 19),   # Juneteenth
        date(2024, 7, 4),
        date(2024, 9, 2),    # Labor Day
        date(2024, 10, 14),  # Columbus Day
        date(2024, 11, 11),
        date(2024, 11, 28),  # Thanksgiving
        date(2024, 12, 25),
    ])
    def test_holidays_2024(self, calendar, d):
        assert calendar.classify(d) == BH

    @pytest.mark.parametrize("d", [
        date(2020, 7, 3),    # July 4th on Saturday
        date(2021, 6, 18),   # Juneteenth on Saturday
        date(2021, 12, 24),  # Christmas on Saturday
        date(2021, 12, 31),  # New Year's Day 2022 on Saturday
        date(2022, 12, 26),  # Christmas on Sunday
        date(2023, 1, 2),    # New Year's Day on Sunday
        date(2026, 7, 3),    # July 4th on Saturday
    ])
    def test_observed_days(self, calendar, d):
        assert calendar.classify(d) == BH

    @pytest.mark.parametrize("d,expected", [
        (date(2024, 11, 21), WD),  # 3rd Thursday
        (date(2024, 5, 20), WD),
        (date(2024, 7, 5), WD),
        (date(2024, 7, 6), WE),
    ])
    def test_non_holidays(self, calendar, d, expected):
        assert calendar.classify(d) == expected

    def test_optional_holidays(self):
        calendar = us_federal_calendar(include_juneteenth=False, include_columbus_day=False)

        assert calendar.classify(date(2024, 6, 19)) == WD
        assert calendar.classify(date(2024, 10, 14)) == WD
        assert calendar.classify(date(2024, 7, 4)) == BH
