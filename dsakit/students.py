"""Introductory class examples: people with a head count and graded students."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["add", "greeting", "Person", "Student"]


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def greeting() -> str:
    """Return the welcome line shown at start-up."""
    return "Hello! Welcome to the Basics 🚀"


def _format_marks(marks: float) -> str:
    # Six significant digits with trailing zeros dropped: 92.0 -> "92".
    return f"{marks:g}"


class Person:
    """A person with a name and an age; every instance is counted."""

    _count: ClassVar[int] = 0

    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age
        Person._count += 1

    def describe(self) -> str:
        """Return a one-line summary of the person."""
        return f"Name: {self.name}, Age: {self.age}"

    @classmethod
    def total(cls) -> int:
        """Return how many people have been created."""
        return cls._count

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age!r})"


class Student:
    """A student with a roll number and marks; every instance is counted."""

    _count: ClassVar[int] = 0

    def __init__(self, name: str, roll_no: int, marks: float = 0.0) -> None:
        self.name = name
        self.roll_no = roll_no
        self.marks = marks
        Student._count += 1

    def describe(self) -> str:
        """Return the student's details, one field per line."""
        return "\n".join(
            [
                f"Name: {self.name}",
                f"Roll No: {self.roll_no}",
                f"Marks: {_format_marks(self.marks)}",
            ]
        )

    def compare_marks(self, other: Student) -> Student:
        """Return whichever student has the higher marks; ``other`` on a tie."""
        return self if self.marks > other.marks else other

    @classmethod
    def total(cls) -> int:
        """Return how many students have been created."""
        return cls._count

    def __repr__(self) -> str:
        return (
            f"Student(name={self.name!r}, roll_no={self.roll_no!r}, "
            f"marks={self.marks!r})"
        )