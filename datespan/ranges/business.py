"""
Business-day filtering for ranges over QuantLib-backed calendars.
"""

from typing import List

from datespan.conventions.calendars_quantlib import QuantLibCalendar
from datespan.dates.date import Date
from datespan.enumerable.functions import filter_items

from .core import DateRange


def business_days(date_range: DateRange) -> List[Date]:
    """Dates of the range that are business days of its calendar."""
    calendar = date_range.calendar
    if not isinstance(calendar, QuantLibCalendar):
        raise TypeError(
            f"Calendar {calendar.name} has no business days; use a QuantLib-backed calendar"
        )
    return filter_items(
        date_range, lambda dt: calendar.is_business_day(dt.year, dt.month, dt.day)
    )


def count_business_days(date_range: DateRange) -> int:
    """Number of business days in the range."""
    return len(business_days(date_range))
