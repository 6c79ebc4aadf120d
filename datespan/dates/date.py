"""
The calendar-aware date value type.
"""

from dataclasses import dataclass, field
from datetime import date as py_date
from datetime import datetime
from typing import Optional, Union

from datespan.conventions.calendars import ISO, Calendar, _is_int
from datespan.conventions.registry import get_default_calendar

# Python ordinal 1 (0001-01-01) in ISO days
_PY_ORDINAL_OFFSET = 365


@dataclass(frozen=True, repr=False)
class Date:
    """A year/month/day triple in a given calendar.

    Dates are immutable and validated on construction. Ordering compares the
    day each date denotes, so dates of different calendars can be ordered;
    equality is field-wise.
    """

    year: int
    month: int
    day: int
    calendar: Calendar = field(default_factory=get_default_calendar)

    def __post_init__(self) -> None:
        if not (_is_int(self.year) and _is_int(self.month) and _is_int(self.day)):
            raise TypeError(
                f"Date fields must be integers, got: {self.year!r}, {self.month!r}, {self.day!r}"
            )
        if not isinstance(self.calendar, Calendar):
            raise TypeError(f"Unsupported calendar: {self.calendar!r}")
        if not self.calendar.valid_date(self.year, self.month, self.day):
            raise ValueError(
                f"Invalid date {self.year}-{self.month}-{self.day} "
                f"for calendar {self.calendar.name}"
            )

    @classmethod
    def from_iso_days(cls, days: int, calendar: Calendar) -> "Date":
        """Build the date of `calendar` found at a linear day index."""
        year, month, day = calendar.date_from_iso_days(days)
        return cls(year, month, day, calendar)

    @classmethod
    def from_python(
        cls, value: Union[py_date, datetime], calendar: Optional[Calendar] = None
    ) -> "Date":
        """Convert a Python date/datetime (Gregorian) into a Date of `calendar`.

        Without a calendar the result uses the default calendar, like `Date` itself.
        """
        if isinstance(value, datetime):
            value = value.date()
        if not isinstance(value, py_date):
            raise TypeError(f"Unsupported type for date: {type(value)}")
        days = ISO.to_iso_days(value.year, value.month, value.day)
        return cls.from_iso_days(days, calendar or get_default_calendar())

    def to_iso_days(self) -> int:
        """Linear day index of this date."""
        return self.calendar.to_iso_days(self.year, self.month, self.day)

    def to_python(self) -> py_date:
        """Convert to a Python date denoting the same day."""
        ordinal = self.to_iso_days() - _PY_ORDINAL_OFFSET
        if not py_date.min.toordinal() <= ordinal <= py_date.max.toordinal():
            raise ValueError(f"{self} cannot be represented as a Python date")
        return py_date.fromordinal(ordinal)

    def convert(self, calendar: Calendar) -> "Date":
        """Same day expressed in another calendar."""
        if calendar == self.calendar:
            return self
        return Date.from_iso_days(self.to_iso_days(), calendar)

    def _compare_key(self, other) -> int:
        if not isinstance(other, Date):
            return NotImplemented
        return other.to_iso_days()

    def __lt__(self, other) -> bool:
        key = self._compare_key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.to_iso_days() < key

    def __le__(self, other) -> bool:
        key = self._compare_key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.to_iso_days() <= key

    def __gt__(self, other) -> bool:
        key = self._compare_key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.to_iso_days() > key

    def __ge__(self, other) -> bool:
        key = self._compare_key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.to_iso_days() >= key

    def __str__(self) -> str:
        return self.calendar.date_to_string(self.year, self.month, self.day)

    def __repr__(self) -> str:
        return f"Date({self})"
