"""
Windowed access to date ranges without materializing the whole range.
"""

from typing import List, Tuple

from datespan.conventions.calendars import Calendar
from datespan.dates.date import Date
from datespan.enumerable.base import SliceFun

from .size import size


def _slice(current: int, step: int, remaining: int, calendar: Calendar) -> List[Date]:
    if remaining == 1:
        return [Date.from_iso_days(current, calendar)]

    dates = []
    for _ in range(remaining):
        dates.append(Date.from_iso_days(current, calendar))
        current += step
    return dates


def slice_accessor(date_range) -> Tuple[int, SliceFun]:
    """
    Return the range size and an accessor for contiguous windows.

    accessor(offset, length) returns `length` dates starting at position
    `offset`, in iteration order. Callers must keep offset + length within size.
    """
    first = date_range.first_index
    step = date_range.step
    calendar = date_range.first.calendar

    def accessor(offset: int, length: int) -> List[Date]:
        return _slice(first + offset * step, step, length, calendar)

    return size(date_range), accessor
