"""Inclusive, steppable date ranges over pluggable calendars.

Key modules:
- conventions: Calendar systems (ISO, Julian, QuantLib-backed) and the registry
- dates: The Date value type and coercion helpers
- ranges: DateRange, its factory and the O(1) query operations
- enumerable: The count/contains/slice/reduce protocol and reduce-driven helpers
"""

from datespan.conventions import get_calendar, set_default_calendar
from datespan.dates import Date, to_date
from datespan.enumerable import (
    Continue,
    Done,
    Enumerable,
    Halt,
    Halted,
    Suspend,
    Suspended,
)
from datespan.ranges import DateRange, date_range

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Continue",
    "Date",
    "DateRange",
    "Done",
    "Enumerable",
    "Halt",
    "Halted",
    "Suspend",
    "Suspended",
    "date_range",
    "get_calendar",
    "set_default_calendar",
    "to_date",
]
