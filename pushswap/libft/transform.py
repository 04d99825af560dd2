"""Building new strings: slicing, joining, trimming, splitting and number conversion."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_LONG_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """Split on the single character ``sep``, dropping empty words."""
    if s is None:
        raise TypeError("split needs a string")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C ``int`` would hold it.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Values out of range wrap around rather than fail.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    result = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        result = _wrap(result * 10 + (ord(char) - ord("0")), _LONG_LONG_BITS)
    return _wrap(_wrap(result, _INT_BITS) * sign, _INT_BITS)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of ``f(index, char)`` for every character."""
    if s is None or f is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on each character, storing any replacement in place.

    A return value of None leaves the character unchanged.
    """
    if chars is None or f is None:
        raise TypeError("striteri needs a character sequence and a function")
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement