"""Sorting stack ``a`` with the stack moves, printing nothing.

Small stacks of up to five values use fixed move sequences. Larger
stacks are pushed to ``b`` in index ranges and then brought back
biggest first.
"""

from __future__ import annotations

from typing import Iterable, List

from pushswap.stacks import Node, Stack, Stacks, find_biggest, find_smallest


def _position(stack: Stack, target: Node) -> int:
    """Zero-based position of ``target`` in ``stack``."""
    return next(pos for pos, node in enumerate(stack) if node is target)


def _require_size(stacks: Stacks, size: int) -> None:
    if len(stacks.a) != size:
        raise ValueError(f"stack a must hold exactly {size} values, not {len(stacks.a)}")


def sort_three(stacks: Stacks) -> None:
    """Sort exactly three values in ``a`` with at most two moves."""
    _require_size(stacks, 3)
    a = stacks.a
    small = find_smallest(a)
    big = find_biggest(a)
    small_last = a[-1] is small
    if a[1] is small:
        if a[-1] is big:
            stacks.sa()
        else:
            stacks.ra()
    elif a[1] is big:
        stacks.rra()
        if not small_last:
            stacks.sa()
    elif small_last:
        stacks.sa()
        stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Sort exactly four values: park the smallest on ``b``, sort three, bring it back."""
    _require_size(stacks, 4)
    pos = _position(stacks.a, find_smallest(stacks.a)) + 1
    if pos == 2:
        stacks.sa()
    elif pos == 3:
        stacks.ra()
        stacks.sa()
    elif pos == 4:
        stacks.rra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort exactly five values: park the smallest on ``b``, sort four, bring it back."""
    _require_size(stacks, 5)
    pos = _position(stacks.a, find_smallest(stacks.a)) + 1
    if pos == 2:
        stacks.sa()
    elif pos == 3:
        stacks.ra()
        stacks.sa()
    elif pos == 4:
        stacks.rra()
        stacks.rra()
    elif pos == 5:
        stacks.rra()
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def _push_ranges(stacks: Stacks) -> None:
    low = 0
    high = int(len(stacks.a) * 0.05 + 10)
    while stacks.a:
        index = stacks.a[0].index
        if low <= index <= high:
            stacks.pb()
            low += 1
            high += 1
        elif index < low:
            stacks.pb()
            stacks.rb()
            low += 1
            high += 1
        else:
            stacks.ra()


def _bring_to_top(stacks: Stacks, target: Node) -> None:
    size = len(stacks.b)
    pos = _position(stacks.b, target)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.rb()
    else:
        for _ in range(size - pos):
            stacks.rrb()


def range_sort(stacks: Stacks) -> None:
    """Sort any number of values by pushing index ranges to ``b`` and back."""
    stacks.index_a()
    _push_ranges(stacks)
    while stacks.b:
        _bring_to_top(stacks, find_biggest(stacks.b))
        stacks.pa()


def handle_stack(stacks: Stacks) -> None:
    """Pick the sorting strategy for the size of ``a`` and run it."""
    size = len(stacks.a)
    if size == 1:
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        range_sort(stacks)


def solve(values: Iterable[int]) -> List[str]:
    """The moves that sort ``values`` in stack ``a``."""
    stacks = Stacks(values)
    handle_stack(stacks)
    return list(stacks.moves)