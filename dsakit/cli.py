"""Interactive menu for working with a doubly linked list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from dsakit.doubly_linked import DoublyLinkedList

__all__ = ["run_menu", "main"]

_MENU = """
--- Doubly Linked List Menu ---
1. Insert at Beginning
2. Insert at End
3. Insert at Position
4. Delete from Beginning
5. Delete from End
6. Delete from Position
7. Delete by Value
8. Display Forward
9. Display Backward
10. Count Nodes
11. Search Element
12. Exit
"""

_EXIT = 12


class _EndOfInput(Exception):
    pass


class _Prompter:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = self._read_tokens(stdin)
        self._out = stdout

    @staticmethod
    def _read_tokens(stdin: TextIO) -> Iterator[str]:
        for line in stdin:
            yield from line.split()

    def write(self, text: str) -> None:
        self._out.write(text)

    def ask_int(self, prompt: str) -> int | None:
        """Prompt for an integer; None when the token is not one."""
        self.write(prompt)
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError:
            return None


def _show(prompter: _Prompter, label: str, values: list[object]) -> None:
    if not values:
        prompter.write("List is empty!\n")
        return
    prompter.write(f"List ({label}): " + "".join(f"{v} " for v in values) + "\n")


def _handle(choice: int | None, lst: DoublyLinkedList, io: _Prompter) -> None:
    if choice in (1, 2):
        value = io.ask_int("Enter value: ")
        if value is None:
            io.write("Invalid input!\n")
        elif choice == 1:
            lst.insert_at_beginning(value)
        else:
            lst.insert_at_end(value)
    elif choice == 3:
        position = io.ask_int("Enter position: ")
        value = io.ask_int("Enter value: ")
        if position is None or value is None:
            io.write("Invalid input!\n")
        elif position <= 0:
            io.write("Invalid position!\n")
        else:
            try:
                lst.insert_at_position(value, position)
            except IndexError:
                io.write("Position out of range!\n")
    elif choice in (4, 5):
        if not lst:
            io.write("List is empty!\n")
        elif choice == 4:
            lst.delete_from_beginning()
        else:
            lst.delete_from_end()
    elif choice == 6:
        position = io.ask_int("Enter position: ")
        if position is None:
            io.write("Invalid input!\n")
        elif not lst or position <= 0:
            io.write("Invalid position or empty list!\n")
        else:
            try:
                lst.delete_from_position(position)
            except IndexError:
                io.write("Position out of range!\n")
    elif choice == 7:
        value = io.ask_int("Enter value to delete: ")
        if value is None:
            io.write("Invalid input!\n")
        elif not lst:
            io.write("List is empty!\n")
        else:
            try:
                lst.delete_value(value)
            except ValueError:
                io.write("Value not found!\n")
    elif choice == 8:
        _show(io, "Forward", list(lst))
    elif choice == 9:
        _show(io, "Backward", list(reversed(lst)))
    elif choice == 10:
        io.write(f"Total nodes: {len(lst)}\n")
    elif choice == 11:
        value = io.ask_int("Enter value to search: ")
        position = None if value is None else lst.search(value)
        if position is None:
            io.write("Element not found!\n")
        else:
            io.write(f"Element {value} found at position {position}\n")
    elif choice == _EXIT:
        io.write("Exiting program...\n")
    else:
        io.write("Invalid choice! Try again.\n")


def run_menu(stdin: TextIO, stdout: TextIO) -> DoublyLinkedList:
    """Run the menu until the exit choice or the end of input.

    Returns the list as it stood when the menu ended.
    """
    lst = DoublyLinkedList()
    io = _Prompter(stdin, stdout)
    try:
        while True:
            io.write(_MENU)
            choice = io.ask_int("Enter your choice: ")
            _handle(choice, lst, io)
            if choice == _EXIT:
                break
    except _EndOfInput:
        io.write("\n")
    return lst


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Interactive doubly linked list menu."
    )
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout)
    return 0