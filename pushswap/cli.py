"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.errors import PushSwapError
from pushswap.output import put_endl
from pushswap.parsing import compress, has_duplicate, parse_arguments
from pushswap.sort import sort
from pushswap.stack import Machine


def solve(args: Sequence[str]) -> list[str]:
    """The names of the moves that sort ``args``; raises PushSwapError on bad input."""
    args = list(args)
    if not args:
        return []
    values = parse_arguments(args)
    if has_duplicate(args):
        raise PushSwapError("duplicate numbers")
    moves: list[str] = []
    machine = Machine(compress(values), emit=moves.append)
    if not machine.a.is_sorted():
        sort(machine)
    return moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the command-line arguments by default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = solve(args)
    except PushSwapError as exc:
        put_endl(str(exc), sys.stderr)
        return 1
    for move in moves:
        put_endl(move, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())