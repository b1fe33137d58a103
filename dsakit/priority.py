"""A binary-heap priority queue with a key function and either ordering."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

__all__ = ["PriorityQueue", "Scored", "order_by_marks"]


class _Entry:
    __slots__ = ("priority", "seq", "item", "largest_first")

    def __init__(self, priority: Any, seq: int, item: Any, largest_first: bool):
        self.priority = priority
        self.seq = seq
        self.item = item
        self.largest_first = largest_first

    def __lt__(self, other: _Entry) -> bool:
        if self.priority == other.priority:
            return self.seq < other.seq
        if self.largest_first:
            return self.priority > other.priority
        return self.priority < other.priority


class PriorityQueue:
    """Serves items by priority; the largest first unless told otherwise.

    Items of equal priority come out in the order they were pushed.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        key: Callable[[Any], Any] | None = None,
        largest_first: bool = True,
    ) -> None:
        self._key = key if key is not None else (lambda item: item)
        self._largest_first = largest_first
        self._counter = itertools.count()
        self._heap: list[_Entry] = []
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Add ``item`` to the queue."""
        entry = _Entry(
            self._key(item), next(self._counter), item, self._largest_first
        )
        heapq.heappush(self._heap, entry)

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def peek(self) -> Any:
        """Return the item with the highest priority without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        return self._heap[0].item

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        order = "largest" if self._largest_first else "smallest"
        return f"PriorityQueue(size={len(self)}, {order}_first)"


@dataclass(frozen=True)
class Scored:
    """A named record with marks."""

    name: str
    marks: int


def order_by_marks(records: Iterable[Scored]) -> list[Scored]:
    """Return the records from the lowest marks to the highest."""
    queue = PriorityQueue(records, key=attrgetter("marks"), largest_first=False)
    return [queue.pop() for _ in range(len(queue))]