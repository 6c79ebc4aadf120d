"""
Calendar systems mapping year/month/day triples to a shared linear day index.

Every calendar encodes its dates as ISO days: the number of days since the
proleptic Gregorian date 0000-01-01. Ranges step over that index, so they
never need to know how a calendar lays out its months.
"""

from abc import ABC, abstractmethod
from typing import Tuple

# ISO days of 1970-01-01
UNIX_EPOCH_ISO_DAYS = 719528

# Julian day number of 0000-01-01 (proleptic Gregorian)
ISO_EPOCH_JULIAN_DAY = 1721060

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month + 9 if month <= 2 else month - 3
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def _civil_from_days(days: int) -> Tuple[int, int, int]:
    """Inverse of _days_from_civil."""
    days += 719468
    era = days // 146097
    day_of_era = days - era * 146097
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Calendar(ABC):
    """Base class for calendar systems.

    Subclasses provide the leap year rule and the conversion to and from ISO
    days; month lengths, validation and formatting are shared.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        """Check if year is a leap year in this calendar."""

    @abstractmethod
    def to_iso_days(self, year: int, month: int, day: int) -> int:
        """Convert a date of this calendar into its linear day index."""

    @abstractmethod
    def date_from_iso_days(self, days: int) -> Tuple[int, int, int]:
        """Convert a linear day index into (year, month, day)."""

    def days_in_month(self, year: int, month: int) -> int:
        """Get the number of days in a given month."""
        if month == 2 and self.is_leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def valid_date(self, year: int, month: int, day: int) -> bool:
        """Check if the fields form a date of this calendar."""
        if not (_is_int(year) and _is_int(month) and _is_int(day)):
            return False
        if not 1 <= month <= 12:
            return False
        return 1 <= day <= self.days_in_month(year, month)

    def date_to_string(self, year: int, month: int, day: int) -> str:
        """Format a date as YYYY-MM-DD (negative years get a leading minus)."""
        if year < 0:
            year_text = f"-{-year:04d}"
        else:
            year_text = f"{year:04d}"
        return f"{year_text}-{month:02d}-{day:02d}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ISOCalendar(Calendar):
    """Proleptic Gregorian calendar, valid for any integer year."""

    def __init__(self):
        super().__init__("ISO")

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def to_iso_days(self, year: int, month: int, day: int) -> int:
        return _days_from_civil(year, month, day) + UNIX_EPOCH_ISO_DAYS

    def date_from_iso_days(self, days: int) -> Tuple[int, int, int]:
        return _civil_from_days(days - UNIX_EPOCH_ISO_DAYS)


class JulianCalendar(Calendar):
    """Proleptic Julian calendar.

    Conversions go through the Julian day number, which both calendars share.
    """

    def __init__(self):
        super().__init__("Julian")

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0

    def to_iso_days(self, year: int, month: int, day: int) -> int:
        a = (14 - month) // 12
        y = year + 4800 - a
        m = month + 12 * a - 3
        julian_day = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
        return julian_day - ISO_EPOCH_JULIAN_DAY

    def date_from_iso_days(self, days: int) -> Tuple[int, int, int]:
        c = days + ISO_EPOCH_JULIAN_DAY + 32082
        d = (4 * c + 3) // 1461
        e = c - (1461 * d) // 4
        m = (5 * e + 2) // 153
        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = d - 4800 + m // 10
        return year, month, day

    def date_to_string(self, year: int, month: int, day: int) -> str:
        return f"{super().date_to_string(year, month, day)} {self.name}"


ISO = ISOCalendar()
JULIAN = JulianCalendar()
