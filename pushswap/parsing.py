"""Argument parsing and rank compression of the input numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.chars import is_digit, is_space
from pushswap.errors import PushSwapError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_int(text: str) -> int:
    """Parse a strict 32-bit signed decimal integer.

    Leading whitespace and a single sign are allowed; everything after the
    sign must be decimal digits, at least one. Anything else, and any value
    outside the 32-bit range, raises :class:`PushSwapError`.
    """
    rest = text.lstrip("\t\n\v\f\r ")
    if rest != text and any(not is_space(c) for c in text[: len(text) - len(rest)]):
        raise PushSwapError(f"invalid number {text!r}")
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    if not rest or not all(is_digit(c) for c in rest):
        raise PushSwapError(f"invalid number {text!r}")
    value = sign * int(rest)
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError(f"number out of range {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument as a number, in order."""
    return [parse_int(arg) for arg in args]


def has_duplicate(args: Sequence[str]) -> bool:
    """True when two arguments denote the same number."""
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in the sorted order of all values.

    Equal values share the position of the first of them.
    """
    ranks: dict[int, int] = {}
    for index, value in enumerate(sorted(values)):
        ranks.setdefault(value, index)
    return [ranks[value] for value in values]