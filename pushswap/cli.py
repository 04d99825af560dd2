"""The command: print the moves that sort the integers given as arguments."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.libft.output import putendl_fd, putstr_fd
from pushswap.parsing import InputError, has_duplicate, parse_values, split_arguments
from pushswap.sorting import solve
from pushswap.stacks import is_sorted

EXIT_OK = 0
EXIT_ERROR = 2


def run(arguments: Sequence[str]) -> int:
    """Sort the numbers in ``arguments``, print the moves, return the exit status.

    Invalid arguments print ``Error`` to standard error and give status 2.
    A value out of the int range gives status 2 without a message.
    Duplicates print ``Error`` but give status 0; already sorted input
    prints nothing.
    """
    arguments = list(arguments)
    if not arguments or (len(arguments) == 1 and not arguments[0]):
        return EXIT_OK
    try:
        tokens = split_arguments(arguments)
    except InputError:
        putstr_fd("Error\n", sys.stderr)
        return EXIT_ERROR
    try:
        values = parse_values(tokens)
    except InputError:
        return EXIT_ERROR
    if is_sorted(values):
        return EXIT_OK
    if has_duplicate(values):
        putstr_fd("Error\n", sys.stderr)
        return EXIT_OK
    for move in solve(values):
        putendl_fd(move, sys.stdout)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; ``argv`` excludes the program name and defaults to sys.argv."""
    arguments = sys.argv[1:] if argv is None else argv
    return run(arguments)


if __name__ == "__main__":
    sys.exit(main())