"""Strategies that sort stack ``a`` of a machine using the puzzle's moves."""

from __future__ import annotations

from itertools import islice

from pushswap.errors import StackError
from pushswap.stack import Machine, Stack


def find_min(stack: Stack) -> tuple[int, int]:
    """The smallest value of ``stack`` and the position of its first occurrence."""
    try:
        index, value = min(enumerate(stack), key=lambda pair: pair[1])
    except ValueError:
        raise StackError("empty stack has no minimum") from None
    return value, index


def _top(stack: Stack) -> int:
    try:
        return next(iter(stack))
    except StopIteration:
        raise StackError("empty stack has no top") from None


def _push_min_to_b(machine: Machine) -> None:
    value, index = find_min(machine.a)
    half = len(machine.a) // 2
    while _top(machine.a) != value:
        if index < half:
            machine.ra()
        else:
            machine.rra()
    machine.pb()


def radix_sort(machine: Machine) -> None:
    """Sort ``a`` bit by bit; values are expected to be ranks starting at 0."""
    size = len(machine.a)
    max_bits = max(size - 1, 0).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            if (_top(machine.a) >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while len(machine.b):
            machine.pa()


def sort_3(machine: Machine) -> None:
    """Sort the top three values of ``a`` in at most two moves."""
    values = list(islice(machine.a, 3))
    if len(values) < 3:
        raise StackError("sort_3 needs at least three values")
    first, second, third = values
    if first > second and second < third and third > first:
        machine.sa()
    elif first > second and second > third and third < first:
        machine.sa()
        machine.rra()
    elif first > second and second < third and third < first:
        machine.ra()
    elif first < second and second > third and third > first:
        machine.sa()
        machine.ra()
    elif first < second and second > third and third < first:
        machine.rra()


def sort_4(machine: Machine) -> None:
    """Sort four values: park the minimum on ``b``, sort three, bring it back."""
    _push_min_to_b(machine)
    sort_3(machine)
    machine.pa()


def sort_5(machine: Machine) -> None:
    """Sort four or five values, parking the minimum first when there are five."""
    parked = False
    if len(machine.a) == 5:
        _push_min_to_b(machine)
        parked = True
    sort_4(machine)
    if parked:
        machine.pa()


def sort(machine: Machine) -> None:
    """Sort ``a`` with the strategy that suits its size."""
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_3(machine)
    elif size in (4, 5):
        sort_5(machine)
    else:
        radix_sort(machine)