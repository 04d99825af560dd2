# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
moves, printing each move it makes, one per line.

The moves are:

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two values of `a`                      |
| `sb`  | swap the top two values of `b`                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top goes to the bottom           |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom goes to the top         |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installing

```
pip install .
```

## Command line

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The same can be run as `python -m pushswap.cli`. Numbers may be given as
separate arguments, inside one quoted argument, or both. The first number is
the top of stack `a`.

- With no arguments, or a single empty one, nothing is printed and the exit
  status is 0.
- If the input is already in strictly increasing order, nothing is printed.
- An argument that is empty (among several), made only of spaces, or holding
  anything other than digits, spaces and signs, or a sign not followed by a
  digit or placed right after a digit, prints `Error` on standard error and
  exits with status 2.
- A value outside the 32-bit signed integer range exits with status 2 without
  printing anything.
- A repeated value prints `Error` on standard error and exits with status 0.

Stacks of two to five values use short fixed move sequences; larger stacks
are sorted by pushing ranges of ranks to `b` and then pulling the biggest
value back to `a` each time.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])   # ['sa', 'rra']
```

- `pushswap.sorting` — `solve(values)` returns the list of move names;
  `handle_stack`, `sort_three`, `sort_four`, `sort_five` and `range_sort`
  work on a `Stacks` object.
- `pushswap.stacks` — `Stacks(values)` holds the deques `a` and `b`, records
  every move in `moves`, and offers the eleven moves as methods, plus
  `values_a()`, `values_b()` and `index_a()`. Also `find_smallest`,
  `find_biggest` and `is_sorted`.
- `pushswap.parsing` — `split_arguments`, `parse_int`, `parse_values`,
  `has_duplicate`, `only_space` and `is_valid_argument`; failures raise
  `InputError` (a `ValueError`).
- `pushswap.cli` — `run(arguments)` runs the whole program on a list of
  arguments and returns the exit status; `main(argv=None)` is the command.

`pushswap.libft` holds small helpers the program is built on: `chars`
(character classes and case), `memory` (byte buffers), `strings` (searching
and bounded copies), `transform` (substrings, joining, trimming, splitting,
number conversion), `output` (writing to a text stream) and `linkedlist`
(a singly linked list of `ListNode`).

## What it does not do

There is no checker: the package does not read moves from standard input to
replay them and verify that they sort a given list.

## Tests

```
pip install .[test]
pytest
```