"""
O(1) size and emptiness of a date range.

A range is empty when its step walks away from `last`: forward steps need
first_index <= last_index, backward steps need first_index >= last_index.
"""


def is_empty(date_range) -> bool:
    """Check if the range has no elements."""
    if date_range.step > 0:
        return date_range.first_index > date_range.last_index
    return date_range.first_index < date_range.last_index


def size(date_range) -> int:
    """Number of dates in the range."""
    if is_empty(date_range):
        return 0
    # Non-empty ranges have the distance and the step of the same sign
    distance = date_range.last_index - date_range.first_index
    return abs(distance) // abs(date_range.step) + 1
