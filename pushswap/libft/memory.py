"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: Readable) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Zero the first ``length`` bytes."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(count * size)


def memcpy(dst: Buffer, src: Readable, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    if dst is src:
        return dst
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: Buffer, src: Readable, length: int) -> Buffer:
    """Copy ``length`` bytes even when ``dst`` and ``src`` overlap."""
    _check_length(length, dst, src)
    if dst is src or length == 0:
        return dst
    # Snapshot the source first so overlapping views copy correctly.
    dst[:length] = bytes(src[:length])
    return dst


def memchr(buffer: Readable, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length``, or None."""
    _check_length(length, buffer)
    position = bytes(buffer[:length]).find(value & 0xFF)
    return None if position < 0 else position


def memcmp(left: Readable, right: Readable, length: int) -> int:
    """Difference of the first differing bytes within ``length``, else 0."""
    _check_length(length, left, right)
    for a, b in zip(bytes(left[:length]), bytes(right[:length])):
        if a != b:
            return a - b
    return 0