# Re-export calendar components
from .calendars import ISO, JULIAN, Calendar, ISOCalendar, JulianCalendar
from .calendars_quantlib import TARGET, WEEKEND_ONLY, QuantLibCalendar
from .registry import (
    CALENDARS,
    get_calendar,
    get_default_calendar,
    set_default_calendar,
)
from .types import CalendarType
