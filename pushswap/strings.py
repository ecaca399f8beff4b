"""String helpers: integer conversion, searching, splitting, joining and trimming.

Searches return an index into the text, or ``None`` when nothing matches.
Looking for the terminating character ``"\\0"`` finds the end of the text.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

from pushswap.chars import is_digit

LLONG_MAX = 2**63 - 1
LLONG_MIN = -(2**63)

_ATOI_SPACES = frozenset(chr(code) for code in (*range(9, 14), 32))
_NUL = "\0"


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Parsing stops at the first non-digit. A value that leaves the 64-bit
    range gives ``-1`` when positive and ``0`` when negative; any other
    value is narrowed to a 32-bit integer.
    """
    stripped = text.lstrip("".join(_ATOI_SPACES))
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    number = 0
    for char in stripped:
        if not is_digit(char):
            break
        number = number * 10 + sign * (ord(char) - ord("0"))
        if sign == -1 and number < LLONG_MIN:
            return 0
        if sign == 1 and number > LLONG_MAX:
            return -1
    return _to_int32(number)


def itoa(number: int) -> str:
    """Decimal representation of ``number``."""
    return str(number)


def split(text: Optional[str], sep: str) -> Optional[list[str]]:
    """Non-empty pieces of ``text`` between runs of the character ``sep``."""
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; ``"\\0"`` gives ``len(text)``."""
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; ``"\\0"`` gives ``len(text)``."""
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the order."""
    if count == 0:
        return 0
    index = 0
    while count > 1 and index < len(second):
        if _code_at(first, index) != _code_at(second, index):
            break
        index += 1
        count -= 1
    return _code_at(first, index) - _code_at(second, index)


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Index of ``needle`` in the first ``length`` characters of ``haystack``."""
    if haystack is None or needle is None:
        return None
    if not needle:
        return 0
    if not haystack or length == 0:
        return None
    last_start = min(length - len(needle), len(haystack) - 1)
    return next(
        (start for start in range(last_start + 1) if haystack.startswith(needle, start)),
        None,
    )


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy of ``src`` that fits a buffer of ``size``, with the full length of ``src``."""
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: Optional[str], src: str, size: int) -> tuple[Optional[str], int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``.

    Returns the resulting text and the length the full result would have.
    """
    if dst is None:
        return None, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two texts; a missing one is treated as absent."""
    if first is None and second is None:
        return None
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if text is None:
        return None
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``text`` without leading and trailing characters found in ``charset``."""
    if text is None or charset is None:
        return None
    return text.strip(charset)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """New text built from ``func(index, char)`` for every character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` on each item, storing any non-``None`` result in place."""
    if chars is None or func is None:
        return
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement