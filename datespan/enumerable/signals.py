"""Signals and terminal shapes of the cooperative reduce protocol.

A reducing function receives each element together with the accumulator and
answers with a signal telling the producer what to do next:

- ``Continue(acc)``: keep going with the next element
- ``Suspend(acc)``: stop this pass and hand back a continuation
- ``Halt(acc)``: stop for good

The producer answers with one of ``Done``, ``Suspended`` or ``Halted``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Continue:
    acc: Any


@dataclass(frozen=True)
class Suspend:
    acc: Any


@dataclass(frozen=True)
class Halt:
    acc: Any


Signal = Union[Continue, Suspend, Halt]


@dataclass(frozen=True)
class Done:
    """The producer ran out of elements."""

    acc: Any


@dataclass(frozen=True)
class Halted:
    """The reducing function asked to stop."""

    acc: Any


@dataclass(frozen=True)
class Suspended:
    """The reducing function asked to pause.

    Attributes:
        acc: Accumulator at the point of suspension
        continuation: Callable taking the next signal and resuming the reduction
            at the element following the last one visited
    """

    acc: Any
    continuation: Callable[[Signal], "Result"]

    def resume(self, signal: Signal) -> "Result":
        return self.continuation(signal)


Result = Union[Done, Halted, Suspended]

ReduceFun = Callable[[Any, Any], Signal]
