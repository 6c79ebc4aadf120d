"""Generic helpers driven by the reduce protocol.

These work on any object implementing count/contains/slice/reduce and never
rely on the concrete collection type.
"""

from collections.abc import Iterator
from typing import Any, Callable, List, Optional, Tuple

from datespan.enumerable.signals import Continue, Halt, Suspend, Suspended


def iterate(enumerable) -> Iterator[Any]:
    """Lazily yield elements, suspending the reduction after each one."""
    result = enumerable.reduce(Continue(None), lambda item, _acc: Suspend(item))
    while isinstance(result, Suspended):
        yield result.acc
        result = result.resume(Continue(None))


def _append(item, acc):
    acc.append(item)
    return Continue(acc)


def to_list(enumerable) -> List[Any]:
    return enumerable.reduce(Continue([]), _append).acc


def take(enumerable, amount: int) -> List[Any]:
    """
    First `amount` elements; a negative amount takes from the end.

    Taking from the front halts the reduction as soon as enough elements are
    collected, so it is cheap on very large collections.
    """
    if amount == 0:
        return []
    if amount < 0:
        size, accessor = enumerable.slice()
        length = min(-amount, size)
        return accessor(size - length, length) if length else []

    def collect(item, acc):
        acc.append(item)
        return Halt(acc) if len(acc) >= amount else Continue(acc)

    return enumerable.reduce(Continue([]), collect).acc


def at(enumerable, index: int, default: Optional[Any] = None) -> Any:
    """Element at index (negative counts from the end), or default."""
    size, accessor = enumerable.slice()
    if index < 0:
        index += size
    if not 0 <= index < size:
        return default
    return accessor(index, 1)[0]


def find(enumerable, predicate: Callable[[Any], bool], default: Optional[Any] = None) -> Any:
    """First element satisfying predicate, or default."""

    def check(item, acc):
        return Halt(item) if predicate(item) else Continue(acc)

    return enumerable.reduce(Continue(default), check).acc


def filter_items(enumerable, predicate: Callable[[Any], bool]) -> List[Any]:
    def keep(item, acc):
        if predicate(item):
            acc.append(item)
        return Continue(acc)

    return enumerable.reduce(Continue([]), keep).acc


def map_items(enumerable, fun: Callable[[Any], Any]) -> List[Any]:
    def apply(item, acc):
        acc.append(fun(item))
        return Continue(acc)

    return enumerable.reduce(Continue([]), apply).acc


def zip_items(*enumerables) -> List[Tuple[Any, ...]]:
    """Pair elements positionally, stopping at the shortest collection."""
    if not enumerables:
        return []
    return list(zip(*(iterate(enumerable) for enumerable in enumerables)))
