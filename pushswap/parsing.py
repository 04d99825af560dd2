"""Validating command-line arguments and turning them into integers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.transform import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"


class InputError(ValueError):
    """Raised when the arguments do not describe a list of integers."""


def only_space(arguments: Iterable[str]) -> bool:
    """True when some argument is made of spaces alone (and is not empty)."""
    return any(argument and not argument.strip(" ") for argument in arguments)


def is_valid_argument(text: str) -> bool:
    """Whether ``text`` holds only space-separated, optionally signed numbers.

    A sign must be followed by a digit and must not follow a digit.
    Emptiness is not judged here.
    """
    if any(char != " " and char not in _SIGNS and not is_digit(char) for char in text):
        return False
    for position, char in enumerate(text):
        if char not in _SIGNS:
            continue
        following = text[position + 1 : position + 2]
        preceding = text[position - 1] if position > 0 else ""
        if not following or not is_digit(following):
            return False
        if preceding and is_digit(preceding):
            return False
    return True


def split_arguments(arguments: Sequence[str]) -> List[str]:
    """Validate every argument and split them all into number tokens."""
    if only_space(arguments):
        raise InputError("an argument holds only spaces")
    for argument in arguments:
        if not argument:
            raise InputError("an argument is empty")
        if not is_valid_argument(argument):
            raise InputError(f"not a list of integers: {argument!r}")
    return split(" ".join(arguments), " ")


def parse_int(text: str) -> int:
    """Parse a leading signed decimal integer that must fit a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            raise InputError(f"out of int range: {text!r}")
    return result * sign


def parse_values(tokens: Iterable[str]) -> List[int]:
    """Parse every token; raise InputError on overflow or when there are none."""
    values = [parse_int(token) for token in tokens]
    if not values:
        raise InputError("no values given")
    return values


def has_duplicate(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False