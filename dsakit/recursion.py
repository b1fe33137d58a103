"""Recursive classics: factorial, Fibonacci numbers and stair climbing."""

from __future__ import annotations

from functools import lru_cache

__all__ = ["factorial", "fibonacci", "fibonacci_iterative", "climb_stairs"]


def _check_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers")


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    _check_non_negative(n, "factorial")
    if n == 0:
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n < 2:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number (F(0) = 0, F(1) = 1), recursively."""
    _check_non_negative(n, "fibonacci")
    return _fib(n)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number using a running pair."""
    _check_non_negative(n, "fibonacci")
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


@lru_cache(maxsize=None)
def _stairs(n: int) -> int:
    if n <= 1:
        return 1
    return _stairs(n - 1) + _stairs(n - 2)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    _check_non_negative(n, "climb_stairs")
    return _stairs(n)