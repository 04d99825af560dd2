"""The two stacks and the eleven moves that rearrange them.

Stack ``a`` and stack ``b`` are deques of nodes with the top of each
stack on the left. Every move is appended to ``Stacks.moves`` under its
name, in the order it was made.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank once indexed."""

    value: int
    index: int = -1


Stack = Deque[Node]


def _swap(stack: Stack) -> None:
    if len(stack) < 2:
        return
    # Only the values change places; each node keeps its own index.
    stack[0].value, stack[1].value = stack[1].value, stack[0].value


def _rotate(stack: Stack) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: Stack) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stack ``a`` filled with the given values, an empty stack ``b``."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: Stack = deque(Node(value) for value in values)
        self.b: Stack = deque()
        self.moves: List[str] = []

    def sa(self) -> None:
        """Swap the top two values of ``a``."""
        _swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the top two values of ``b``."""
        _swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` together."""
        _swap(self.a)
        _swap(self.b)
        self.moves.append("ss")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` together."""
        _rotate(self.a)
        _rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` together."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.moves.append("rrr")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")

    def values_a(self) -> List[int]:
        """Values of ``a`` from top to bottom."""
        return [node.value for node in self.a]

    def values_b(self) -> List[int]:
        """Values of ``b`` from top to bottom."""
        return [node.value for node in self.b]

    def index_a(self) -> List[int]:
        """Rank every node of ``a`` by value, from 0; return the ranks top to bottom.

        Equal values are ranked in stack order.
        """
        ranked = sorted(self.a, key=lambda node: node.value)
        for rank, node in enumerate(ranked):
            node.index = rank
        return [node.index for node in self.a]


def find_smallest(stack: Iterable[Node]) -> Optional[Node]:
    """The first node holding the smallest value, or None when empty."""
    return min(stack, key=lambda node: node.value, default=None)


def find_biggest(stack: Iterable[Node]) -> Optional[Node]:
    """The first node holding the biggest value, or None when empty."""
    return max(stack, key=lambda node: node.value, default=None)


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are strictly increasing."""
    items = list(values)
    return all(left < right for left, right in zip(items, items[1:]))