# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The program prints the instructions it uses, one per
line, so that applying them to the input in stack `a` (with `b` empty) leaves
`a` sorted in ascending order, smallest on top.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a`: the top element goes to the bottom  |
| `rb`  | rotate `b`                                      |
| `rra` | reverse rotate `a`: the bottom goes to the top  |
| `rrb` | reverse rotate `b`                              |

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

The same command is available as `python -m pushswap.cli`.

Each argument is one integer; the first argument is the top of stack `a`.
An argument may have leading whitespace and a single `+` or `-` sign, and
must otherwise be made of digits only, within the 32-bit signed range.
Invalid input, a value out of range, or a duplicate value makes the program
print `Error` to standard error and exit with status 1. With no arguments, or
with input that is already sorted, nothing is printed.

The input is first ranked to `0 .. n-1`. Two to five values are then sorted
with short hand-written sequences; six or more are sorted with a binary radix
sort over the two stacks.

## Library use

```python
from pushswap.cli import solve

print(solve(["3", "2", "1"]))   # ['sa', 'rra']
```

`solve` raises `pushswap.errors.PushSwapError` on bad input; moves applied
to a stack that cannot take them raise its subclass `StackError`.

- `pushswap.stack`: `Stack`, a double-ended stack of integers, and `Machine`,
  the two-stack machine whose moves (`sa`, `sb`, `ra`, `rb`, `rra`, `rrb`,
  `pa`, `pb`, or `apply` with an `Operation`) pass each move's name to an
  `emit` callback, printing it to standard output by default.
- `pushswap.sort`: `sort`, `sort_3`, `sort_4`, `sort_5`, `radix_sort` and
  `find_min`.
- `pushswap.parsing`: `parse_int`, `parse_arguments`, `has_duplicate` and
  `compress`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`.
- Helper modules `pushswap.chars` (ASCII classification and case),
  `pushswap.strings` (`atoi`, `itoa`, `split`, `strjoin`, `strtrim` and other
  string helpers) and `pushswap.memory` (byte-buffer fill, copy, move,
  search, compare and zeroed allocation).

## What it does not do

- There is no checker: the package does not read a list of instructions and
  verify that it sorts a given input.
- The combined moves `ss`, `rr` and `rrr` are not provided and never printed.
- Numbers are taken one per argument; a single argument holding several
  space-separated numbers is rejected as invalid.

## Tests

```
pip install -e ".[test]"
pytest
```