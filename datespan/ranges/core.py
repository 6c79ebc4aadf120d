"""
Core data structure for date ranges.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from datespan.dates.date import Date
from datespan.enumerable.base import Enumerable, SliceFun
from datespan.enumerable.signals import ReduceFun, Result, Signal

from .formatting import format_range
from .membership import is_member
from .reduce import reduce_range
from .size import is_empty, size
from .slicing import slice_accessor


@dataclass(frozen=True, repr=False)
class DateRange(Enumerable):
    """An inclusive range of dates walked with a fixed step in days.

    Build ranges with `date_range`, which validates the endpoints and step and
    fills in the cached day indexes.

    Attributes:
        first: The initial date of the range
        last: The last date of the range (reached only if the step lands on it)
        first_index: Linear day index of `first`
        last_index: Linear day index of `last`
        step: Nonzero step in days; negative steps walk backwards
    """

    first: Date
    last: Date
    first_index: int
    last_index: int
    step: int

    @property
    def calendar(self):
        return self.first.calendar

    def is_empty(self) -> bool:
        return is_empty(self)

    def count(self) -> int:
        return size(self)

    def contains(self, item: Any) -> bool:
        return is_member(self, item)

    def slice(self) -> Tuple[int, SliceFun]:
        return slice_accessor(self)

    def reduce(self, signal: Signal, fun: ReduceFun) -> Result:
        return reduce_range(self, signal, fun)

    def __str__(self) -> str:
        return format_range(self)

    def __repr__(self) -> str:
        return f"DateRange({format_range(self)})"
