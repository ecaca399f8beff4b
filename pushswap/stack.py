"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Optional, Union

from pushswap.errors import StackError


class Stack:
    """A double-ended stack of integers; iteration goes from top to bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def push_front(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Put ``value`` at the bottom."""
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackError("pop from an empty stack")
        return self._items.popleft()

    def pop_back(self) -> int:
        """Remove and return the bottom value."""
        if not self._items:
            raise StackError("pop from an empty stack")
        return self._items.pop()

    def swap(self) -> None:
        """Exchange the two top values."""
        if len(self._items) < 2:
            raise StackError("swap needs at least two values")
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self.push_back(self.pop_front())

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self.push_front(self.pop_back())

    def move_top_to(self, other: Stack) -> None:
        """Take the top value off this stack and put it on top of ``other``."""
        other.push_front(self.pop_front())

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        items = self._items
        return all(a <= b for a, b in zip(items, list(items)[1:]))


class Operation(Enum):
    """The named moves of the puzzle; the value is the name that is printed."""

    SA = "sa"
    SB = "sb"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"
    PA = "pa"
    PB = "pb"


def _print_line(name: str) -> None:
    sys.stdout.write(name + "\n")


class Machine:
    """Stacks ``a`` and ``b`` together with the moves that report themselves.

    ``a`` starts with ``values`` (first value on top) and ``b`` starts empty.
    Every successful move passes its name to ``emit``, which by default
    writes it as a line to standard output.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self._emit = emit if emit is not None else _print_line

    def apply(self, operation: Union[Operation, str]) -> None:
        """Perform ``operation`` (an :class:`Operation` or its name) and report it."""
        op = Operation(operation)
        if op is Operation.SA:
            self.a.swap()
        elif op is Operation.SB:
            self.b.swap()
        elif op is Operation.RA:
            self.a.rotate()
        elif op is Operation.RB:
            self.b.rotate()
        elif op is Operation.RRA:
            self.a.reverse_rotate()
        elif op is Operation.RRB:
            self.b.reverse_rotate()
        elif op is Operation.PA:
            self.b.move_top_to(self.a)
        else:
            self.a.move_top_to(self.b)
        self._emit(op.value)

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        self.apply(Operation.SB)

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        self.apply(Operation.RB)

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        self.apply(Operation.RRB)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self.apply(Operation.PB)