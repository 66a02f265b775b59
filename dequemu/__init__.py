"""Deque emulator with a cursor, stable merge sort, and a line-oriented command front end."""

__version__ = "0.1.0"
__all__ = ["algo", "emulator", "cli"]