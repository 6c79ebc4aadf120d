"""
Construction of date ranges.
"""

import logging
from typing import Optional

from datespan.dates.coercion import DateLike, to_date

from .core import DateRange

logger = logging.getLogger(__name__)


def date_range(first: DateLike, last: DateLike, step: Optional[int] = None) -> DateRange:
    """
    Build an inclusive range from `first` to `last`.

    Args:
        first: Initial date (Date, or a Python/pandas date coerced to ISO)
        last: Last date, in the same calendar as `first`
        step: Nonzero step in days. When omitted it is 1 if first <= last,
            otherwise -1.

    Returns:
        The DateRange with its day indexes cached

    Raises:
        ValueError: If the calendars differ or the step is zero
        TypeError: If the step is not an integer or a date is not date-like
    """
    first = to_date(first)
    last = to_date(last)

    if first.calendar != last.calendar:
        raise ValueError(
            "both dates must have matching calendars, "
            f"got: {first.calendar.name} and {last.calendar.name}"
        )

    first_index = first.to_iso_days()
    last_index = last.to_iso_days()

    if step is None:
        step = 1 if first_index <= last_index else -1
        logger.debug("Inferred step %s for range %s..%s", step, first, last)
    elif not isinstance(step, int) or isinstance(step, bool):
        raise TypeError(f"the step must be a non-zero integer, got: {step!r}")
    elif step == 0:
        raise ValueError("the step must be a non-zero integer, got: 0")

    return DateRange(
        first=first,
        last=last,
        first_index=first_index,
        last_index=last_index,
        step=step,
    )
