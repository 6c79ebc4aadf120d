"""
O(1) membership test for date ranges.
"""

from datespan.dates.date import Date

from .size import is_empty


def _truncated_rem(dividend: int, divisor: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


def is_member(date_range, candidate) -> bool:
    """
    Check if candidate lies on the range's progression.

    Values that are not dates, or dates of another calendar, are never members.
    """
    if not isinstance(candidate, Date):
        return False
    if candidate.calendar != date_range.first.calendar:
        return False
    if is_empty(date_range):
        return False

    days = candidate.to_iso_days()
    first_days = date_range.first_index
    last_days = date_range.last_index

    if first_days <= last_days:
        within = first_days <= days <= last_days
    else:
        within = last_days <= days <= first_days

    return within and _truncated_rem(days - first_days, date_range.step) == 0
