"""A singly linked list of arbitrary content.

The functions take the head node of a list, or None for an empty list.
Those that can change which node is the head return the new head.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

__all__ = [
    "Node",
    "lst_new",
    "lst_add_front",
    "lst_add_back",
    "lst_size",
    "lst_last",
    "lst_del_one",
    "lst_clear",
    "lst_iter",
    "lst_map",
]

Deleter = Callable[[Any], Any]


@dataclass(eq=False)
class Node:
    """One list node holding ``content`` and a link to the ``next`` node."""

    content: Any = None
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of this node and of every node after it."""
        for node in _nodes(self):
            yield node.content


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def lst_new(content: Any) -> Node:
    """Return a new, unlinked node holding ``content``."""
    return Node(content)


def lst_add_front(head: Optional[Node], node: Node) -> Node:
    """Link ``node`` before ``head`` and return it as the new head."""
    if node is None:
        raise ValueError("a node to add is required")
    node.next = head
    return node


def lst_add_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Link ``node`` after the last node of the list and return the head.

    An empty list becomes ``node``; a missing ``node`` leaves the list as is.
    """
    if node is None:
        return head
    if head is None:
        return node
    last = lst_last(head)
    assert last is not None
    last.next = node
    return head


def lst_size(head: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lst_last(head: Optional[Node]) -> Optional[Node]:
    """Return the last node of the list, or None when it is empty."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lst_del_one(node: Optional[Node], delete: Optional[Deleter]) -> None:
    """Release the content of ``node`` by calling ``delete`` on it.

    The following nodes are not touched. Nothing happens when either
    argument is missing.
    """
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None


def lst_clear(head: Optional[Node], delete: Optional[Deleter]) -> Optional[Node]:
    """Release every node from ``head`` on and return the emptied list (None).

    Without ``delete`` the list is returned unchanged.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lst_del_one(node, delete)
        node.next = None
        node = following
    return None


def lst_iter(head: Optional[Node], f: Optional[Callable[[Any], Any]]) -> None:
    """Call ``f`` on the content of each node in order."""
    if head is None or f is None:
        return
    for content in head:
        f(content)


def lst_map(
    head: Optional[Node],
    f: Optional[Callable[[Any], Any]],
    delete: Optional[Deleter],
) -> Optional[Node]:
    """Return a new list holding ``f`` applied to each content of the list.

    Returns None when any argument is missing. If ``f`` raises, the contents
    already produced are released with ``delete`` before the error propagates.
    """
    if head is None or f is None or delete is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    try:
        for content in head:
            node = lst_new(f(content))
            if tail is None:
                new_head = node
            else:
                tail.next = node
            tail = node
    except BaseException:
        lst_clear(new_head, delete)
        raise
    return new_head