"""A circular singly linked list that keeps a pointer to its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["CircularLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class CircularLinkedList:
    """A circular list; iteration starts at the node after the last one."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _pairs(self) -> Iterator[tuple[_Node, _Node]]:
        if self._last is None:
            return
        previous, node = self._last, self._last.next
        for _ in range(self._size):
            yield previous, node
            previous, node = node, node.next

    def _link_after_last(self, value: Any) -> _Node:
        node = _Node(value)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1
        return node

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        self._last = self._link_after_last(value)

    def insert_begin(self, value: Any) -> None:
        """Put ``value`` before the first node."""
        self._link_after_last(value)

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``key``."""
        if self._last is None:
            raise ValueError("list is empty")
        for _, node in self._pairs():
            if node.value == key:
                new_node = _Node(value, node.next)
                node.next = new_node
                if node is self._last:
                    self._last = new_node
                self._size += 1
                return
        raise ValueError(f"node with value {key!r} not found")

    def delete(self, key: Any) -> None:
        """Remove the first node holding ``key``."""
        if self._last is None:
            raise ValueError("list is empty")
        for previous, node in self._pairs():
            if node.value == key:
                if self._size == 1:
                    self._last = None
                else:
                    previous.next = node.next
                    if node is self._last:
                        self._last = previous
                self._size -= 1
                return
        raise ValueError(f"node with value {key!r} not found")

    def search(self, key: Any) -> int | None:
        """Return the 1-based position of ``key``, or None when absent."""
        return next(
            (pos for pos, value in enumerate(self, start=1) if value == key), None
        )

    def __iter__(self) -> Iterator[Any]:
        return (node.value for _, node in self._pairs())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"