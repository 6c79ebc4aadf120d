"""
QuantLib-backed calendar implementations.

Dates of these calendars are Gregorian but live inside QuantLib's supported
date range, and each calendar carries a QuantLib business-day calendar so
ranges over it can be filtered down to settlement days.
"""

import logging
from typing import Tuple

import QuantLib as ql

from datespan.conventions.calendars import Calendar, _is_int

logger = logging.getLogger(__name__)

# ISO days of 1899-12-30, which QuantLib numbers as serial 0
QL_SERIAL_EPOCH_ISO_DAYS = 693959


def _to_ql_date(year: int, month: int, day: int) -> ql.Date:
    """Convert date fields to QuantLib Date."""
    return ql.Date(day, month, year)


def _to_fields(ql_date: ql.Date) -> Tuple[int, int, int]:
    """Convert QuantLib Date to (year, month, day)."""
    return ql_date.year(), int(ql_date.month()), ql_date.dayOfMonth()


class QuantLibCalendar(Calendar):
    """Base calendar class for QuantLib-backed dates and business days."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        super().__init__(name)
        self._ql_calendar = ql_calendar
        self.min_date = _to_fields(ql.Date.minDate())
        self.max_date = _to_fields(ql.Date.maxDate())

    def _serial_bounds(self) -> Tuple[int, int]:
        return ql.Date.minDate().serialNumber(), ql.Date.maxDate().serialNumber()

    def is_leap_year(self, year: int) -> bool:
        return ql.Date.isLeap(year)

    def valid_date(self, year: int, month: int, day: int) -> bool:
        if not (_is_int(year) and _is_int(month) and _is_int(day)):
            return False
        # QuantLib rejects leap year queries outside its range
        if not self.min_date <= (year, month, day) <= self.max_date:
            return False
        return super().valid_date(year, month, day)

    def to_iso_days(self, year: int, month: int, day: int) -> int:
        if not self.valid_date(year, month, day):
            raise ValueError(
                f"{year:04d}-{month:02d}-{day:02d} is outside the {self.name} calendar"
            )
        return _to_ql_date(year, month, day).serialNumber() + QL_SERIAL_EPOCH_ISO_DAYS

    def date_from_iso_days(self, days: int) -> Tuple[int, int, int]:
        serial = days - QL_SERIAL_EPOCH_ISO_DAYS
        lowest, highest = self._serial_bounds()
        if not lowest <= serial <= highest:
            logger.debug("Rejecting ISO days %s for %s calendar", days, self.name)
            raise ValueError(f"ISO days {days} is outside the {self.name} calendar")
        return _to_fields(ql.Date(serial))

    def is_business_day(self, year: int, month: int, day: int) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(year, month, day))

    def is_holiday(self, year: int, month: int, day: int) -> bool:
        """Check if date is a holiday."""
        return self._ql_calendar.isHoliday(_to_ql_date(year, month, day))

    def date_to_string(self, year: int, month: int, day: int) -> str:
        return f"{super().date_to_string(year, month, day)} {self.name}"


class TargetCalendar(QuantLibCalendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar.

    Uses QuantLib's built-in TARGET calendar implementation.
    """

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(QuantLibCalendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("Weekend", ql.WeekendsOnly())


TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
