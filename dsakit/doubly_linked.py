"""A doubly linked list with positional and value-based operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the list."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` at the back of the list."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_position(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1-based)."""
        if position <= 0:
            raise IndexError("invalid position")
        if position == 1:
            self.insert_at_beginning(value)
            return
        if position > self._size + 1:
            raise IndexError("position out of range")
        if position == self._size + 1:
            self.insert_at_end(value)
            return
        previous = self._node_at(position - 1)
        node = _Node(value, previous, previous.next)
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def delete_from_beginning(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._unlink(self._head)

    def delete_from_end(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._unlink(self._tail)

    def delete_from_position(self, position: int) -> Any:
        """Remove and return the value at ``position`` (1-based)."""
        if self._head is None or position <= 0:
            raise IndexError("invalid position or empty list")
        if position > self._size:
            raise IndexError("position out of range")
        return self._unlink(self._node_at(position))

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise ValueError("list is empty")
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError(f"value {value!r} not found")

    def search(self, key: Any) -> int | None:
        """Return the 1-based position of ``key``, or None when absent."""
        return next(
            (pos for pos, value in enumerate(self, start=1) if value == key), None
        )

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"