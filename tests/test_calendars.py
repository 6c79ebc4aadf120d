"""
Tests for calendar systems and the calendar registry.
"""

import pytest

from datespan import Date
from datespan.conventions import (
    ISO,
    JULIAN,
    TARGET,
    WEEKEND_ONLY,
    CalendarType,
    get_calendar,
    get_default_calendar,
    set_default_calendar,
)


class TestISOCalendar:
    """Tests for the proleptic Gregorian calendar."""

    def test_known_iso_days(self):
        """Test fixed points of the linear day index."""
        assert ISO.to_iso_days(0, 1, 1) == 0
        assert ISO.to_iso_days(1970, 1, 1) == 719528
        assert ISO.to_iso_days(2020, 1, 1) == 737790
        assert ISO.to_iso_days(-1, 1, 1) == -365

    def test_round_trip(self):
        """Test conversion back from ISO days."""
        for fields in [(2020, 2, 29), (1900, 3, 1), (2000, 12, 31), (-44, 3, 15), (0, 2, 29)]:
            assert ISO.date_from_iso_days(ISO.to_iso_days(*fields)) == fields

    def test_consecutive_days(self):
        """Test that the index increases by one per day across year ends."""
        assert ISO.to_iso_days(2021, 1, 1) - ISO.to_iso_days(2020, 12, 31) == 1
        assert ISO.to_iso_days(2020, 3, 1) - ISO.to_iso_days(2020, 2, 29) == 1
        assert ISO.to_iso_days(2019, 3, 1) - ISO.to_iso_days(2019, 2, 28) == 1

    def test_leap_years(self):
        assert ISO.is_leap_year(2000)
        assert ISO.is_leap_year(2020)
        assert not ISO.is_leap_year(1900)
        assert not ISO.is_leap_year(2019)

    def test_valid_date(self):
        assert ISO.valid_date(2020, 2, 29)
        assert not ISO.valid_date(2019, 2, 29)
        assert not ISO.valid_date(2020, 13, 1)
        assert not ISO.valid_date(2020, 4, 31)
        assert not ISO.valid_date(2020, 1, 0)

    def test_date_to_string(self):
        assert ISO.date_to_string(2020, 1, 5) == "2020-01-05"
        assert ISO.date_to_string(33, 7, 4) == "0033-07-04"
        assert ISO.date_to_string(-1, 1, 1) == "-0001-01-01"


class TestJulianCalendar:
    """Tests for the proleptic Julian calendar."""

    def test_offset_from_gregorian(self):
        """Test that Julian 2020-01-01 is Gregorian 2020-01-14."""
        assert JULIAN.to_iso_days(2020, 1, 1) == ISO.to_iso_days(2020, 1, 14)

    def test_gregorian_reform(self):
        """Test that Julian 1582-10-04 is followed by Gregorian 1582-10-15."""
        assert JULIAN.to_iso_days(1582, 10, 4) + 1 == ISO.to_iso_days(1582, 10, 15)

    def test_round_trip(self):
        for fields in [(2020, 1, 1), (1900, 2, 29), (1582, 10, 4), (1, 1, 1)]:
            assert JULIAN.date_from_iso_days(JULIAN.to_iso_days(*fields)) == fields

    def test_leap_years(self):
        assert JULIAN.is_leap_year(1900)
        assert JULIAN.valid_date(1900, 2, 29)
        assert not JULIAN.is_leap_year(2019)

    def test_date_to_string(self):
        assert JULIAN.date_to_string(2020, 1, 1) == "2020-01-01 Julian"


class TestQuantLibCalendar:
    """Tests for QuantLib-backed calendars."""

    def test_iso_days_match_gregorian(self):
        assert TARGET.to_iso_days(2020, 1, 1) == ISO.to_iso_days(2020, 1, 1)
        assert TARGET.to_iso_days(1901, 1, 1) == ISO.to_iso_days(1901, 1, 1)

    def test_round_trip(self):
        days = ISO.to_iso_days(2024, 2, 29)
        assert TARGET.date_from_iso_days(days) == (2024, 2, 29)

    def test_supported_range(self):
        """Test that dates outside QuantLib's range are rejected."""
        assert TARGET.valid_date(1901, 1, 1)
        assert TARGET.valid_date(2199, 12, 31)
        assert not TARGET.valid_date(1900, 12, 31)
        with pytest.raises(ValueError):
            TARGET.to_iso_days(1900, 12, 31)
        with pytest.raises(ValueError):
            TARGET.date_from_iso_days(ISO.to_iso_days(2200, 1, 1))

    def test_february_outside_supported_range(self):
        """Test that out-of-range February dates are invalid, not a QuantLib error."""
        assert not TARGET.valid_date(2300, 2, 1)
        assert not TARGET.valid_date(1800, 2, 29)
        assert TARGET.valid_date(2196, 2, 29)
        with pytest.raises(ValueError):
            Date(2300, 2, 1, TARGET)
        with pytest.raises(ValueError):
            TARGET.to_iso_days(1800, 2, 28)

    def test_business_days(self):
        assert TARGET.is_business_day(2020, 1, 2)
        assert not TARGET.is_business_day(2020, 1, 4)  # Saturday
        assert not TARGET.is_business_day(2020, 12, 25)
        assert TARGET.is_holiday(2020, 12, 25)
        assert WEEKEND_ONLY.is_business_day(2020, 12, 25)

    def test_calendars_are_distinct(self):
        assert TARGET != WEEKEND_ONLY
        assert TARGET != ISO
        assert ISO != JULIAN


class TestRegistry:
    """Tests for calendar lookup and the default calendar."""

    def test_get_calendar(self):
        assert get_calendar("ISO") is ISO
        assert get_calendar("julian") is JULIAN
        assert get_calendar("EUR") is TARGET
        assert get_calendar(CalendarType.WEEKEND) is WEEKEND_ONLY

    def test_unknown_calendar(self):
        with pytest.raises(ValueError, match="Unknown calendar"):
            get_calendar("MARS")

    def test_default_calendar(self):
        assert get_default_calendar() is ISO
        set_default_calendar("JULIAN")
        assert get_default_calendar() is JULIAN
        set_default_calendar(TARGET)
        assert get_default_calendar() is TARGET
