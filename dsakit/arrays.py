"""A bounded array supporting insertion, deletion and update by position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["FixedArray"]


class FixedArray:
    """A sequence with a fixed capacity, like a statically sized array."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} values do not fit in capacity {capacity}"
            )
        self.capacity = capacity
        self._items = items

    def _position(self, index: int) -> int:
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("array index out of range")
        return index

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index`` (0..len), shifting later elements."""
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        self._items.insert(index, value)

    def delete(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._items.pop(self._position(index))

    def update(self, index: int, value: Any) -> None:
        """Replace the element at ``index``."""
        self._items[self._position(index)] = value

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"FixedArray({self.capacity}, {self._items!r})"