"""Panel geometry for the checklist screen.

The screen is a framed area with a 3-cell margin, split into:

    +-------------------------------------------+
    |  frame (title centered)                   |
    |   +---------------------------+-------+   |
    |   | list_area                 | side  |   |  top: 90% / 100%
    |   |                           | area  |   |
    |   +---------------------------+-------+   |
    |   | bottom (input box)                |   |  rest
    |   +-----------------------------------+   |
    +-------------------------------------------+

Two display toggles decide the split percentages. A hidden panel keeps
its slot in the tree with zero width or height, so drawing it is
always safe and simply produces nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Layout constants
MARGIN = 3
INPUT_BOX_PERCENT = 90   # top share of the interior height while the input box shows
SIDE_PANEL_PERCENT = 80  # list share of the top width while the side panel shows
FULL_PERCENT = 100


@dataclass(frozen=True)
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def inner(self, margin: int) -> Rect:
        """Shrink by margin on every side, clamping at zero size."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(self.x + margin, self.y + margin, width, height)


@dataclass
class DisplayToggles:
    """User switches for the optional panels."""
    show_side_panel: bool = True
    show_input_box: bool = True

    def toggle_side_panel(self) -> bool:
        """Flip side panel visibility. Returns True if it is now shown."""
        self.show_side_panel = not self.show_side_panel
        logger.debug("side panel %s", "shown" if self.show_side_panel else "hidden")
        return self.show_side_panel

    def toggle_input_box(self) -> bool:
        """Flip input box visibility. Returns True if it is now shown."""
        self.show_input_box = not self.show_input_box
        logger.debug("input box %s", "shown" if self.show_input_box else "hidden")
        return self.show_input_box


@dataclass(frozen=True)
class ScreenLayout:
    """Computed regions for one frame."""
    frame: Rect
    interior: Rect
    top: Rect
    bottom: Rect
    list_area: Rect
    side_area: Rect

    @property
    def side_panel_visible(self) -> bool:
        return not self.side_area.is_empty

    @property
    def input_box_visible(self) -> bool:
        return not self.bottom.is_empty


def split_vertical(area: Rect, top_percent: int) -> tuple[Rect, Rect]:
    """Split into a top part of top_percent of the height and the rest below."""
    top_height = area.height * top_percent // 100
    top = Rect(area.x, area.y, area.width, top_height)
    bottom = Rect(area.x, area.y + top_height, area.width, area.height - top_height)
    return top, bottom


def split_horizontal(area: Rect, left_percent: int) -> tuple[Rect, Rect]:
    """Split into a left part of left_percent of the width and the rest to the right."""
    left_width = area.width * left_percent // 100
    left = Rect(area.x, area.y, left_width, area.height)
    right = Rect(area.x + left_width, area.y, area.width - left_width, area.height)
    return left, right


def compute_layout(term_width: int, term_height: int, toggles: DisplayToggles) -> ScreenLayout:
    """
    Calculate panel regions for a terminal size and the current toggles.

    Pure: the same inputs always give the same layout. Terminals too
    small for the margin produce zero-sized regions, never negative ones.

    Args:
        term_width: Terminal width in columns
        term_height: Terminal height in rows
        toggles: Which optional panels are switched on
    """
    frame = Rect(0, 0, max(0, term_width), max(0, term_height))
    interior = frame.inner(MARGIN)

    top, bottom = split_vertical(
        interior, INPUT_BOX_PERCENT if toggles.show_input_box else FULL_PERCENT
    )
    list_area, side_area = split_horizontal(
        top, SIDE_PANEL_PERCENT if toggles.show_side_panel else FULL_PERCENT
    )

    return ScreenLayout(
        frame=frame,
        interior=interior,
        top=top,
        bottom=bottom,
        list_area=list_area,
        side_area=side_area,
    )
