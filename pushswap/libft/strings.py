"""Searching, comparing and bounded copying of strings.

Positions are returned as indices rather than pointers. The terminating
NUL of a C string is modelled as the position just past the last
character, so searching for ``"\\0"`` finds ``len(s)``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

Char = Union[str, int]


def _as_char(c: Char) -> str:
    """Normalise a character or an integer code to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``"\\0"`` matches at ``len(s)``."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    position = s.find(char)
    return None if position < 0 else position


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``"\\0"`` matches at ``len(s)``."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    position = s.rfind(char)
    return None if position < 0 else position


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, with
    the end of a string counting as code 0, or 0 when they agree.
    """
    for index in range(max(n, 0)):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    if length <= 0:
        return None
    position = haystack[:length].find(needle)
    return None if position < 0 else position


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the text that fits and the full length of ``src``, so that a
    truncated copy shows as a returned length of at least ``size``.
    A ``size`` of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    needed. When ``dst`` already fills the buffer it is left unchanged.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)