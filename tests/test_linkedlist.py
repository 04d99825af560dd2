import pytest

from pushswap.libft.linkedlist import (
    ListNode,
    lstadd_back,
    lstadd_front,
    lstclear,
    lstdelone,
    lstiter,
    lstlast,
    lstmap,
    lstnew,
    lstsize,
)


def build(contents):
    head = None
    for content in contents:
        head = lstadd_back(head, lstnew(content))
    return head


def test_lstnew_holds_content_and_no_next():
    node = lstnew("x")
    assert node.content == "x"
    assert node.next is None


def test_iteration_yields_contents_in_order():
    contents = ["a", "b", "c"]
    assert list(build(contents)) == contents


def test_lstadd_front_prepends():
    head = build(["b", "c"])
    head = lstadd_front(head, lstnew("a"))
    assert list(head) == ["a", "b", "c"]


def test_lstadd_front_without_node_keeps_head():
    head = build(["a"])
    assert lstadd_front(head, None) is head


def test_lstadd_back_to_empty_returns_node():
    node = lstnew("a")
    assert lstadd_back(None, node) is node


def test_lstadd_back_without_node_keeps_head():
    head = build(["a", "b"])
    assert lstadd_back(head, None) is head
    assert list(head) == ["a", "b"]


def test_lstsize():
    contents = list(range(7))
    assert lstsize(build(contents)) == len(contents)
    assert lstsize(None) == 0


def test_lstlast():
    contents = ["a", "b", "c"]
    assert lstlast(build(contents)).content == contents[-1]
    assert lstlast(None) is None


def test_lstdelone_passes_content_to_delete():
    deleted = []
    node = lstnew("payload")
    lstdelone(node, deleted.append)
    assert deleted == ["payload"]


def test_lstdelone_without_delete_leaves_node():
    node = lstnew("payload")
    lstdelone(node, None)
    assert node.content == "payload"


def test_lstclear_deletes_every_content_in_order():
    contents = ["a", "b", "c"]
    deleted = []
    head = lstclear(build(contents), deleted.append)
    assert head is None
    assert deleted == contents


def test_lstclear_without_delete_returns_head():
    head = build(["a", "b"])
    assert lstclear(head, None) is head
    assert list(head) == ["a", "b"]


def test_lstiter_visits_all():
    contents = [3, 1, 2]
    seen = []
    lstiter(build(contents), seen.append)
    assert seen == contents


def test_lstmap_builds_new_list_and_keeps_original():
    contents = [1, 2, 3]
    head = build(contents)
    mapped = lstmap(head, str, None)
    assert list(mapped) == [str(c) for c in contents]
    assert list(head) == contents
    assert lstsize(mapped) == lstsize(head)


def test_lstmap_of_empty_is_empty():
    assert lstmap(None, str, None) is None


def test_lstmap_failure_releases_mapped_contents():
    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    deleted = []
    with pytest.raises(RuntimeError):
        lstmap(build([1, 2, 3, 4]), f, deleted.append)
    assert deleted == [10, 20]


def test_listnode_iter_starts_at_node():
    head = build(["a", "b", "c"])
    assert list(head.next) == ["b", "c"]
    assert isinstance(head, ListNode) and list(ListNode("z")) == ["z"]