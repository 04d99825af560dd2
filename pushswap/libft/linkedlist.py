"""A minimal singly linked list of arbitrary contents.

Functions that may change which node is first return the new head, so
callers rebind it: ``head = lstadd_front(head, node)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One link holding ``content`` and the node after it."""

    content: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents from this node to the end of the list."""
        for node in _nodes(self):
            yield node.content


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        following = node.next
        yield node
        node = following


def lstnew(content: Any) -> ListNode:
    """A new unlinked node holding ``content``."""
    return ListNode(content)


def lstadd_front(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put ``node`` before ``head``; return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstadd_back(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Append ``node`` after the last node; return the head."""
    if node is None:
        return head
    if head is None:
        return node
    last = lstlast(head)
    last.next = node
    return head


def lstsize(head: Optional[ListNode]) -> int:
    """Number of nodes from ``head`` onwards."""
    return sum(1 for _ in _nodes(head))


def lstlast(head: Optional[ListNode]) -> Optional[ListNode]:
    """The last node, or None for an empty list."""
    last = None
    for node in _nodes(head):
        last = node
    return last


def lstdelone(node: Optional[ListNode], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release one node, handing its content to ``delete``."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lstclear(
    head: Optional[ListNode], delete: Optional[Callable[[Any], Any]]
) -> Optional[ListNode]:
    """Release every node in order; return the new (empty) head.

    Without a ``delete`` function nothing is released and ``head`` is returned.
    """
    if delete is None:
        return head
    for node in list(_nodes(head)):
        lstdelone(node, delete)
    return None


def lstiter(head: Optional[ListNode], f: Optional[Callable[[Any], Any]]) -> None:
    """Call ``f`` on each content in order."""
    if f is None:
        return
    for node in _nodes(head):
        f(node.content)


def lstmap(
    head: Optional[ListNode],
    f: Optional[Callable[[Any], Any]],
    delete: Optional[Callable[[Any], Any]],
) -> Optional[ListNode]:
    """A new list of ``f(content)`` for every node.

    If ``f`` fails part way, the contents already mapped are handed to
    ``delete`` and the error propagates.
    """
    if head is None or f is None:
        return None
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    try:
        for content in head:
            node = ListNode(f(content))
            if tail is None:
                new_head = node
            else:
                tail.next = node
            tail = node
    except Exception:
        lstclear(new_head, delete)
        raise
    return new_head