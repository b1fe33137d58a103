"""Small practice problems: prefix sums, reversals and a ping counter."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from itertools import accumulate
from typing import Any

__all__ = [
    "running_sum",
    "reverse_in_place",
    "reverse_with_stack",
    "reverse_string",
    "RecentCounter",
]


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def reverse_in_place(chars: MutableSequence[Any]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def reverse_with_stack(chars: MutableSequence[Any]) -> None:
    """Reverse ``chars`` in place by pushing onto and popping off a stack."""
    stack = list(chars)
    chars[:] = [stack.pop() for _ in range(len(stack))]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by swapping characters from both ends."""
    chars = list(text)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


class RecentCounter:
    """Counts the pings within the last 3000 time units, inclusive."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._pings: list[int] = []

    def ping(self, t: int) -> int:
        """Record a ping at time ``t`` and count pings at or after ``t - 3000``."""
        self._pings.append(t)
        start = t - self.WINDOW
        return sum(1 for p in self._pings if p >= start)