"""Last-in, first-out stacks: one bounded by a capacity, one linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["StackOverflowError", "StackUnderflowError", "ArrayStack", "LinkedStack"]


class StackOverflowError(OverflowError):
    """Raised when pushing onto a stack that is already full."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow: cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: no element to pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, top_first={list(self)!r})"


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow: empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack(top_first={list(self)!r})"