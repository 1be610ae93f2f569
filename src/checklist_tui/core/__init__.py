"""Core data structures: the checklist model and the screen canvas."""

from checklist_tui.core.cell import Cell, Style
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.selection import ListSelection
from checklist_tui.core.model import ChecklistEntry, ChecklistModel, seed_entries

__all__ = [
    "Cell",
    "Style",
    "Canvas",
    "ListSelection",
    "ChecklistEntry",
    "ChecklistModel",
    "seed_entries",
]
