"""Checklist entries and the model that owns them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from checklist_tui.core.selection import ListSelection
from checklist_tui.errors import OutOfRangeError

logger = logging.getLogger(__name__)

# Status markers keyed by is_done. A done entry shows a blank box and an
# open one shows "x"; kept as-is until the intended meaning is confirmed.
DONE_MARKER = " "
OPEN_MARKER = "x"


@dataclass
class ChecklistEntry:
    """A single checklist line: done flag plus free-form title."""
    is_done: bool
    title: str

    def toggle_done(self) -> bool:
        """Flip the done flag. Returns the new value."""
        self.is_done = not self.is_done
        return self.is_done

    def display_text(self) -> str:
        """
        Text shown in the list widget.

        Newlines in the title are kept; the widget draws each one as
        its own row of the same item.
        """
        marker = DONE_MARKER if self.is_done else OPEN_MARKER
        return f"[{marker}] {self.title}"


def seed_entries() -> list[ChecklistEntry]:
    """Entries the app starts with."""
    return [
        ChecklistEntry(is_done=False, title="Hello world"),
        ChecklistEntry(is_done=True, title="Hello again"),
        ChecklistEntry(is_done=True, title="Bye!!"),
        ChecklistEntry(is_done=False, title="A line here..."),
        ChecklistEntry(is_done=True, title="What should i do?? \nthis?"),
        ChecklistEntry(is_done=True, title="Uno\nDos\nTres!"),
    ]


class ChecklistModel:
    """
    Ordered checklist entries with a single optional selection.

    All mutation goes through the methods below so the selection always
    points inside the list (or nowhere).
    """

    def __init__(self, entries: Optional[Iterable[ChecklistEntry]] = None) -> None:
        self._entries: list[ChecklistEntry] = list(entries) if entries is not None else []
        self._selection = ListSelection()

    @classmethod
    def with_seed(cls) -> ChecklistModel:
        return cls(seed_entries())

    @property
    def entries(self) -> tuple[ChecklistEntry, ...]:
        """Read-only view of the entries, in order."""
        return tuple(self._entries)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selection.index

    @property
    def selected_entry(self) -> Optional[ChecklistEntry]:
        index = self._selection.index
        if index is None:
            return None
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ChecklistEntry]:
        return iter(self._entries)

    def __getitem__(self, pos: int) -> ChecklistEntry:
        return self._entries[pos]

    def insert(self, entry: ChecklistEntry) -> ChecklistModel:
        """Append an entry at the end. The selection is unaffected."""
        self._entries.append(entry)
        return self

    def remove_at(self, pos: int) -> ChecklistEntry:
        """
        Remove and return the entry at pos.

        If the removed entry was selected the selection is cleared; if
        the selection sat after it, the selection moves back one so it
        keeps pointing at the same entry.

        Raises:
            OutOfRangeError: pos is not a valid index into the entries
        """
        if pos < 0 or pos >= len(self._entries):
            raise OutOfRangeError(pos, len(self._entries))

        entry = self._entries.pop(pos)
        selected = self._selection.index
        if selected is not None:
            if selected == pos:
                self._selection.clear()
            elif selected > pos:
                self._selection.select(selected - 1)

        logger.debug("removed entry %d (%r), selection now %r", pos, entry.title, self._selection.index)
        return entry

    def select(self, pos: int) -> None:
        """
        Select the entry at pos.

        Raises:
            OutOfRangeError: pos is not a valid index into the entries
        """
        if pos < 0 or pos >= len(self._entries):
            raise OutOfRangeError(pos, len(self._entries))
        self._selection.select(pos)

    def select_next(self) -> None:
        self._selection.next(len(self._entries))

    def select_previous(self) -> None:
        self._selection.previous(len(self._entries))

    def clear_selection(self) -> None:
        self._selection.clear()
