"""Checklist widget - the entries with the current selection highlighted."""

from __future__ import annotations

from typing import Optional

from checklist_tui.cli.widgets.base import BaseWidget, Rect
from checklist_tui.cli.widgets.block import Block
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.cell import BLACK_FG, LIGHT_GREEN_BG, WHITE_BG, Style
from checklist_tui.core.model import ChecklistModel

HIGHLIGHT_SYMBOL = ">> "
ITEM_STYLE = Style(fg=BLACK_FG, bg=WHITE_BG)
HIGHLIGHT_STYLE = Style(bg=LIGHT_GREEN_BG, bold=True)


def first_visible_entry(heights: list[int], selected: Optional[int], visible_height: int) -> int:
    """
    Index of the first entry to draw so the selected entry fits.

    Starts at the top and only skips entries while the selected one
    would run past the bottom. Nothing is remembered between frames.
    """
    if selected is None:
        return 0
    start = 0
    while start < selected and sum(heights[start:selected + 1]) > visible_height:
        start += 1
    return start


class ChecklistWidget(BaseWidget):
    """
    Draws every entry's text, one row per title line.

    While something is selected all rows are indented by the highlight
    symbol's width; the selected entry shows the symbol on its first
    row and the highlight style across all of its rows. With no
    selection there is neither indent nor highlight.
    """

    def __init__(self, model: ChecklistModel, block: Optional[Block] = None) -> None:
        self.model = model
        self.block = block

    def render(self, canvas: Canvas, bounds: Rect) -> None:
        if self.block is not None:
            self.block.render(canvas, bounds)
            bounds = self.block.inner(bounds)
        if bounds.is_empty:
            return

        items = [entry.display_text().split('\n') for entry in self.model]
        selected = self.model.selected_index
        indent = len(HIGHLIGHT_SYMBOL) if selected is not None else 0
        start = first_visible_entry([len(lines) for lines in items], selected, bounds.height)

        y = bounds.y
        for index in range(start, len(items)):
            is_selected = index == selected
            style = ITEM_STYLE.patch(HIGHLIGHT_STYLE) if is_selected else ITEM_STYLE

            for row, line in enumerate(items[index]):
                if y >= bounds.bottom:
                    return
                canvas.set_style(bounds.x, y, bounds.width, 1, style)
                prefix = HIGHLIGHT_SYMBOL if is_selected and row == 0 else ' ' * indent
                canvas.put_text(bounds.x, y, prefix + line, max_width=bounds.width)
                y += 1
