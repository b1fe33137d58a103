"""Reading text files line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["read_lines", "count_lines"]


def _iter_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    # Split on "\n" only, keeping any "\r" as part of the line.
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of the file at ``path`` without their line breaks."""
    return list(_iter_lines(path))


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return how many lines the file at ``path`` holds."""
    return sum(1 for _ in _iter_lines(path))