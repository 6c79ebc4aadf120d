from typing import Optional, Union
from datetime import datetime, date

from pandas import NaT, Timestamp

from datespan.conventions.calendars import Calendar
from datespan.dates.date import Date

DateLike = Union[Date, date, datetime, Timestamp]


def to_date(date_like: DateLike, calendar: Optional[Calendar] = None) -> Date:
    """
    Convert a date-like value into a Date.
    Accepts Date, datetime.date, datetime.datetime and pandas Timestamp.
    Python and pandas values are read as Gregorian and land in `calendar`, or in the
    default calendar when none is given, so they pair with Dates built without one.
    A Date is converted only when a calendar is given.
    """
    if date_like is NaT:
        raise ValueError("Cannot convert NaT to a date")
    if isinstance(date_like, Date):
        return date_like if calendar is None else date_like.convert(calendar)
    if isinstance(date_like, Timestamp):
        return Date.from_python(date_like.date(), calendar)
    if isinstance(date_like, (date, datetime)):
        return Date.from_python(date_like, calendar)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")
