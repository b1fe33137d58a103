"""Classic data structures and algorithms in plain Python, with a list menu command."""

__version__ = "0.1.0"