"""Singly linked lists: bare node helpers and a positional list class."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "ListNode",
    "build_list",
    "to_list",
    "reverse_with_stack",
    "reverse_recursive",
    "SinglyLinkedList",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked chain."""

    val: Any
    next: Optional[ListNode] = None


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Chain ``values`` into nodes and return the head, or None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the chain starting at ``head``."""
    return [node.val for node in _walk(head)]


def reverse_with_stack(head: ListNode | None) -> ListNode | None:
    """Reverse a chain by pushing its nodes on a stack and relinking them."""
    stack = list(_walk(head))
    if not stack:
        return None
    new_head = stack.pop()
    current = new_head
    while stack:
        current.next = stack.pop()
        current = current.next
    current.next = None
    return new_head


def reverse_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a chain recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


class SinglyLinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        items = list(values)
        self._head = build_list(items)
        self._size = len(items)

    def _node_at(self, position: int) -> ListNode:
        if not 1 <= position <= self._size:
            raise IndexError("position out of range")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        if self._head is None:
            self._head = node
        else:
            *_, last = _walk(self._head)
            last.next = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1-based)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("position out of range")
        if position == 1:
            self._head = ListNode(value, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = ListNode(value, previous.next)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at ``position`` (1-based)."""
        if self._head is None:
            raise IndexError("list is empty")
        if position == 1:
            removed = self._head
            self._head = removed.next
        else:
            self._node_at(position)
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.val

    def update_at(self, position: int, value: Any) -> Any:
        """Replace the value at ``position`` (1-based) and return the old one."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._node_at(position)
        old, node.val = node.val, value
        return old

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._head = reverse_with_stack(self._head)

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*map(str, self), "NULL"])

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"