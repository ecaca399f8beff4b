"""Exceptions raised for invalid input and impossible stack operations."""

from __future__ import annotations


class PushSwapError(Exception):
    """Any failure of the program; always reported to the user as ``Error``."""

    message = "Error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class StackError(PushSwapError):
    """An operation was applied to a stack that cannot support it."""