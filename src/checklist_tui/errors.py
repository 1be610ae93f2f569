"""Exception hierarchy for checklist-tui."""

from __future__ import annotations


class ChecklistError(Exception):
    """Base class for all checklist-tui errors."""


class OutOfRangeError(ChecklistError, IndexError):
    """A model mutation referenced a position outside the entry list."""

    def __init__(self, pos: int, length: int) -> None:
        super().__init__(f"position {pos} out of range (length={length})")
        self.pos = pos
        self.length = length


class TerminalIOError(ChecklistError):
    """
    The terminal failed us: entering raw mode, reading input or painting.

    Always fatal for the run. The underlying OSError (or termios.error)
    is chained as __cause__.
    """
