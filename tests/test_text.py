import pytest

from dsakit.text import CharacterCounts, alphabetical_order, count_characters


def test_only_vowels():
    text = "AEIOUaeiou"
    counts = count_characters(text)
    assert counts.vowels == len(text)
    assert counts.consonants == 0


def test_only_consonants():
    text = "bcdfgXYZ"
    counts = count_characters(text)
    assert counts.consonants == len(text)
    assert counts.vowels == 0


def test_only_digits():
    text = "0123456789"
    assert count_characters(text) == CharacterCounts(digits=len(text))


def test_whitespace_kinds():
    text = " \t\n\r"
    assert count_characters(text) == CharacterCounts(spaces=len(text))


def test_punctuation_is_ignored():
    assert count_characters("!?.,;:-") == CharacterCounts()


def test_non_ascii_is_ignored():
    assert count_characters("éü\u00a0") == CharacterCounts()


@pytest.mark.parametrize("text", ["Hello World 123", "a1 b2 c3", "Sky 42"])
def test_counts_cover_alnum_and_space_text(text):
    counts = count_characters(text)
    total = counts.vowels + counts.consonants + counts.digits + counts.spaces
    assert total == len(text)
    assert counts.spaces == text.count(" ")


def test_empty_sentence():
    assert count_characters("") == CharacterCounts()


def test_alphabetical_order_source_example():
    assert alphabetical_order("apple", "banana") == ("apple", "banana")


def test_alphabetical_order_swaps():
    assert alphabetical_order("banana", "apple") == ("apple", "banana")


def test_alphabetical_order_is_sorted():
    pair = alphabetical_order("pear", "Pear")
    assert list(pair) == sorted(["pear", "Pear"])