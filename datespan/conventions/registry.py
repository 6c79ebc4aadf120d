"""
Calendar registry and the module-level default calendar.
"""

import logging
from typing import Union

from datespan.conventions.calendars import ISO, JULIAN, Calendar
from datespan.conventions.calendars_quantlib import TARGET, WEEKEND_ONLY
from datespan.conventions.types import CalendarType

logger = logging.getLogger(__name__)

# Calendar registry
CALENDARS = {
    CalendarType.ISO.value: ISO,
    CalendarType.JULIAN.value: JULIAN,
    CalendarType.TARGET.value: TARGET,
    CalendarType.WEEKEND.value: WEEKEND_ONLY,
    "EUR": TARGET,  # Alias
}

_DEFAULT_CALENDAR = ISO


def get_calendar(name: Union[str, CalendarType]) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name ("ISO", "JULIAN", "TARGET", "EUR" or "WEEKEND")
            or a CalendarType member
    """
    if isinstance(name, CalendarType):
        name = name.value
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]


def get_default_calendar() -> Calendar:
    """Get the calendar used for dates built without an explicit one."""
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar: Union[str, CalendarType, Calendar]) -> None:
    """Set the default calendar by name or instance."""
    global _DEFAULT_CALENDAR
    if not isinstance(calendar, Calendar):
        calendar = get_calendar(calendar)
    logger.debug("Default calendar changed from %s to %s", _DEFAULT_CALENDAR, calendar)
    _DEFAULT_CALENDAR = calendar
