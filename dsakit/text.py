"""Character classification and ordering of strings."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CharacterCounts", "count_characters", "alphabetical_order"]

_VOWELS = frozenset("aeiou")
_ASCII_SPACE = frozenset(" \t\n\v\f\r")


@dataclass(frozen=True)
class CharacterCounts:
    """How many vowels, consonants, digits and spaces a text holds."""

    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    spaces: int = 0


def count_characters(sentence: str) -> CharacterCounts:
    """Count ASCII vowels, consonants, digits and whitespace in ``sentence``.

    Other characters, such as punctuation, are not counted.
    """
    vowels = consonants = digits = spaces = 0
    for ch in sentence.lower():
        if not ch.isascii():
            continue
        if ch.isalpha():
            if ch in _VOWELS:
                vowels += 1
            else:
                consonants += 1
        elif ch.isdigit():
            digits += 1
        elif ch in _ASCII_SPACE:
            spaces += 1
    return CharacterCounts(vowels, consonants, digits, spaces)


def alphabetical_order(first: str, second: str) -> tuple[str, str]:
    """Return the two strings with the one that sorts first in front."""
    if first < second:
        return first, second
    return second, first