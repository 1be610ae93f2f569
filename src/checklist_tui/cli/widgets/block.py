"""Bordered, titled box - the frame around every panel."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from checklist_tui.cli.widgets.base import BaseWidget, Rect
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.cell import Style


class BorderType(Enum):
    """Box drawing sets: (top-left, top-right, bottom-left, bottom-right, horizontal, vertical)."""
    PLAIN = ('┌', '┐', '└', '┘', '─', '│')
    THICK = ('┏', '┓', '┗', '┛', '━', '┃')


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _aligned_x(lane_x: int, lane_width: int, text_width: int, alignment: Alignment) -> int:
    if alignment == Alignment.CENTER:
        return lane_x + (lane_width - text_width) // 2
    if alignment == Alignment.RIGHT:
        return lane_x + lane_width - text_width
    return lane_x


class Block(BaseWidget):
    """
    A box with optional borders, a title on its top edge and a footer on
    its bottom edge.

    Titles and footers are cut to the space between the corners. A
    borderless block with a title gives up its first row to the title.
    """

    def __init__(
        self,
        title: str = "",
        borders: bool = True,
        border_type: BorderType = BorderType.PLAIN,
        border_style: Optional[Style] = None,
        title_alignment: Alignment = Alignment.LEFT,
        title_style: Optional[Style] = None,
        footer: str = "",
        footer_alignment: Alignment = Alignment.CENTER,
    ) -> None:
        self.title = title
        self.borders = borders
        self.border_type = border_type
        self.border_style = border_style
        self.title_alignment = title_alignment
        self.title_style = title_style
        self.footer = footer
        self.footer_alignment = footer_alignment

    def inner(self, bounds: Rect) -> Rect:
        """Area left for content once borders and title are drawn."""
        if self.borders:
            return bounds.inner(1)
        if self.title and bounds.height > 0:
            return Rect(bounds.x, bounds.y + 1, bounds.width, bounds.height - 1)
        return bounds

    def render(self, canvas: Canvas, bounds: Rect) -> None:
        if bounds.is_empty:
            return

        if self.borders:
            self._render_borders(canvas, bounds)

        edge = 1 if self.borders else 0
        lane_x = bounds.x + edge
        lane_width = max(0, bounds.width - 2 * edge)

        if self.title:
            self._render_label(canvas, self.title, lane_x, bounds.y, lane_width,
                               self.title_alignment, self.title_style)
        if self.footer and self.borders and bounds.height > 1:
            self._render_label(canvas, self.footer, lane_x, bounds.bottom - 1, lane_width,
                               self.footer_alignment, self.border_style)

    def _render_borders(self, canvas: Canvas, bounds: Rect) -> None:
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = self.border_type.value
        style = self.border_style
        left, right = bounds.x, bounds.right - 1
        top, bottom = bounds.y, bounds.bottom - 1

        for x in range(left, right + 1):
            canvas.put_char(x, top, horizontal, style)
            canvas.put_char(x, bottom, horizontal, style)
        for y in range(top, bottom + 1):
            canvas.put_char(left, y, vertical, style)
            canvas.put_char(right, y, vertical, style)

        canvas.put_char(left, top, top_left, style)
        canvas.put_char(right, top, top_right, style)
        canvas.put_char(left, bottom, bottom_left, style)
        canvas.put_char(right, bottom, bottom_right, style)

    @staticmethod
    def _render_label(
        canvas: Canvas,
        text: str,
        lane_x: int,
        y: int,
        lane_width: int,
        alignment: Alignment,
        style: Optional[Style],
    ) -> None:
        text = text[:lane_width]
        if not text:
            return
        x = _aligned_x(lane_x, lane_width, len(text), alignment)
        canvas.put_text(x, y, text, style)
