"""Count/contains/slice/reduce protocol and reduce-driven helpers."""

from .base import Enumerable, SliceFun
from .functions import (
    at,
    filter_items,
    find,
    iterate,
    map_items,
    take,
    to_list,
    zip_items,
)
from .signals import (
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
