"""Wrap-around cursor over an ordered sequence."""

from __future__ import annotations

from typing import Optional


class ListSelection:
    """
    Selected index over a sequence it does not own.

    The sequence length is passed to every navigation call, so the
    selection never holds a stale copy of it. When set, the index
    satisfies 0 <= index < length for the length last supplied.
    """

    def __init__(self, index: Optional[int] = None) -> None:
        self._index = index

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def is_empty(self) -> bool:
        return self._index is None

    def select(self, index: Optional[int]) -> None:
        """Point at an explicit index, or None to deselect."""
        if index is not None and index < 0:
            raise ValueError(f"selection index must be non-negative, got {index}")
        self._index = index

    def next(self, length: int) -> None:
        """Move forward, wrapping from the last index back to 0."""
        if length <= 0:
            return
        if self._index is None:
            self._index = 0
        else:
            self._index = (self._index + 1) % length

    def previous(self, length: int) -> None:
        """Move backward, wrapping from 0 to the last index."""
        if length <= 0:
            return
        if self._index is None:
            self._index = 0
        else:
            self._index = (self._index - 1 + length) % length

    def clear(self) -> None:
        self._index = None

    def __repr__(self) -> str:
        return f"ListSelection(index={self._index!r})"
