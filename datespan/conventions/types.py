"""
Basic types and enums used across the calendar system.
"""

from enum import Enum


class CalendarType(Enum):
    """Predefined calendars."""

    ISO = "ISO"
    JULIAN = "JULIAN"
    TARGET = "TARGET"
    WEEKEND = "WEEKEND"
