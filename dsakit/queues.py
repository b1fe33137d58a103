"""First-in, first-out queues: a bounded linear one and a linked one."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["QueueFullError", "QueueEmptyError", "ArrayQueue", "LinkedQueue"]


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class ArrayQueue:
    """A linear queue over a fixed number of slots.

    Slots freed at the front are not reused until the queue drains
    completely, so the queue can report full while holding fewer than
    ``capacity`` values.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_full(self) -> bool:
        return self._rear == self.capacity - 1

    def is_empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        if self.is_empty():
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self.is_empty() else self._rear - self._front + 1

    def __repr__(self) -> str:
        return f"ArrayQueue(capacity={self.capacity}, items={list(self)!r})"


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"