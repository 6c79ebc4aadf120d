"""
Cooperative reduction over a date range.

The engine walks the linear day index from `first_index` towards
`last_index`, converting each index to a date and handing it to the reducing
function. After every element the returned signal decides whether to keep
going, pause with a continuation, or stop. The walk is an explicit loop, so
ranges of any length run in constant stack depth.
"""

from functools import partial

from datespan.conventions.calendars import Calendar
from datespan.dates.date import Date
from datespan.enumerable.signals import (
    Continue,
    Done,
    Halt,
    Halted,
    ReduceFun,
    Result,
    Signal,
    Suspend,
    Suspended,
)


def _in_range(current: int, last: int, step: int) -> bool:
    if step > 0:
        return current <= last
    return current >= last


def _reduce(
    current: int,
    last: int,
    signal: Signal,
    fun: ReduceFun,
    step: int,
    calendar: Calendar,
) -> Result:
    while True:
        if isinstance(signal, Halt):
            return Halted(signal.acc)

        if isinstance(signal, Suspend):
            continuation = partial(_reduce, current, last, fun=fun, step=step, calendar=calendar)
            return Suspended(signal.acc, continuation)

        if not isinstance(signal, Continue):
            raise TypeError(f"Unknown reduce signal: {signal!r}")

        if not _in_range(current, last, step):
            return Done(signal.acc)

        signal = fun(Date.from_iso_days(current, calendar), signal.acc)
        current += step


def reduce_range(date_range, signal: Signal, fun: ReduceFun) -> Result:
    """Fold `fun` over the range, honouring Continue/Suspend/Halt signals."""
    return _reduce(
        date_range.first_index,
        date_range.last_index,
        signal,
        fun,
        date_range.step,
        date_range.first.calendar,
    )
