"""Searching and extreme-value helpers over sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "binary_search",
    "linear_search",
    "find_max",
    "find_min",
    "second_largest",
    "third_largest",
]


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            left = mid + 1
        else:
            right = mid - 1
    return None


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)


def find_max(values: Iterable[Any]) -> Any:
    """Return the largest element; raise ValueError when there is none."""
    items = list(values)
    if not items:
        raise ValueError("find_max() of an empty sequence")
    return max(items)


def find_min(values: Iterable[Any]) -> Any:
    """Return the smallest element; raise ValueError when there is none."""
    items = list(values)
    if not items:
        raise ValueError("find_min() of an empty sequence")
    return min(items)


def second_largest(values: Iterable[Any]) -> Any:
    """Return the largest value strictly below the maximum.

    Raises ValueError when no such value exists.
    """
    first = second = -math.inf
    for value in values:
        if value > first:
            second, first = first, value
        elif second < value < first:
            second = value
    if second == -math.inf:
        raise ValueError("no second largest element")
    return second


def third_largest(values: Iterable[Any]) -> Any:
    """Return the third distinct largest value.

    Raises ValueError when no such value exists.
    """
    first = second = third = -math.inf
    for value in values:
        if value > first:
            third, second, first = second, first, value
        elif second < value < first:
            third, second = second, value
        elif third < value < second:
            third = value
    if third == -math.inf:
        raise ValueError("no third largest element")
    return third