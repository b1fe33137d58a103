"""Classic comparison sorts: bubble, insertion, selection, merge and quick sort.

Every sort takes any iterable and returns a new ascending list; the input is
left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "partition",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the already sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        pos = i - 1
        while pos >= 0 and items[pos] > current:
            items[pos + 1] = items[pos]
            pos -= 1
        items[pos + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> Iterator[Any]:
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    # The left half takes the middle element, as with mid = l + (r - l) / 2.
    mid = (len(items) - 1) // 2 + 1
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto partition of ``values[low:high + 1]`` around its last element.

    Rearranges the slice in place and returns the pivot's final index.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items