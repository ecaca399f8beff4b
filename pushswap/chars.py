"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACES = frozenset(map(ord, "\t\n\v\f\r "))


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_space(c: Char) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return or space."""
    return _code(c) in _SPACES


def is_ascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) < 128


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 31 < _code(c) < 127


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c