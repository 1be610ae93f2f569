"""Reusable TUI widgets."""

from checklist_tui.cli.widgets.base import BaseWidget, Rect, Widget
from checklist_tui.cli.widgets.block import Alignment, Block, BorderType
from checklist_tui.cli.widgets.checklist import ChecklistWidget

__all__ = [
    "Widget",
    "BaseWidget",
    "Rect",
    "Alignment",
    "Block",
    "BorderType",
    "ChecklistWidget",
]
