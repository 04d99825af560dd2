"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))