"""
checklist-tui: a keyboard-driven checklist in the terminal

Quick Start:
    >>> from checklist_tui import ChecklistModel
    >>> model = ChecklistModel.with_seed()
    >>> model.select_next()
    >>> model.selected_entry.display_text()
    '[x] Hello world'

Features:
    - Wrap-around selection over an ordered checklist
    - Framed multi-panel screen with toggleable side panel and text box
    - Raw-mode terminal handling with guaranteed restore on exit
"""

import logging

__version__ = "0.1.0"

from checklist_tui.core.selection import ListSelection
from checklist_tui.core.model import ChecklistEntry, ChecklistModel
from checklist_tui.cli.core.layout import DisplayToggles, ScreenLayout, compute_layout
from checklist_tui.errors import ChecklistError, OutOfRangeError, TerminalIOError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "ListSelection",
    "ChecklistEntry",
    "ChecklistModel",
    "DisplayToggles",
    "ScreenLayout",
    "compute_layout",
    "ChecklistError",
    "OutOfRangeError",
    "TerminalIOError",
]
