"""Writing characters, text, lines and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character; standard output is used when no stream is given."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; a missing or empty text writes nothing."""
    if not text:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``number``."""
    _target(stream).write(str(int(number)))