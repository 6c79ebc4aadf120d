"""
Enumerable protocol for collections driven by the cooperative reduce.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Callable, List, Tuple

from datespan.enumerable.functions import iterate
from datespan.enumerable.signals import ReduceFun, Result, Signal

SliceFun = Callable[[int, int], List[Any]]


class Enumerable(ABC):
    """
    Protocol for countable, sliceable, interruptibly-iterable collections.

    Implementations must support:
    - O(1) counting via count()
    - Membership tests via contains(item)
    - Windowed access via slice(), returning (size, accessor)
    - Cooperative folding via reduce(signal, fun)

    The Python container protocol (len, in, iteration and indexing) is
    derived from those four operations.
    """

    @abstractmethod
    def count(self) -> int:
        """Return the number of elements."""
        pass

    @abstractmethod
    def contains(self, item: Any) -> bool:
        """Check if item is an element of the collection."""
        pass

    @abstractmethod
    def slice(self) -> Tuple[int, SliceFun]:
        """
        Return the size and an accessor for contiguous windows.

        The accessor takes (offset, length) with 0 <= offset,
        offset + length <= size and length >= 1, and returns the elements of
        that window in iteration order.
        """
        pass

    @abstractmethod
    def reduce(self, signal: Signal, fun: ReduceFun) -> Result:
        """
        Fold over the elements in iteration order.

        Args:
            signal: Initial signal carrying the initial accumulator.
            fun: Called as fun(element, acc) and returning the next signal.

        Returns:
            Done, Halted or Suspended.
        """
        pass

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[Any]:
        return iterate(self)

    def __getitem__(self, index):
        size, accessor = self.slice()
        if isinstance(index, slice):
            start, stop, step = index.indices(size)
            if step == 1:
                return accessor(start, stop - start) if stop > start else []
            return [accessor(position, 1)[0] for position in range(start, stop, step)]
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(
                f"{type(self).__name__} indices must be integers or slices, "
                f"not {type(index).__name__}"
            )
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"{type(self).__name__} index out of range")
        return accessor(position, 1)[0]
