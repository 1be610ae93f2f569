"""Canvas - fixed-size 2D grid of cells describing one screen frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from checklist_tui.core.cell import Cell, Style


@dataclass
class Canvas:
    """
    A width x height grid of Cells.

    Widgets draw into it and the terminal paints it. Reads and writes
    through get/set are bounds-checked; the drawing helpers (put_char,
    put_text, fill_rect, set_style) silently clip anything that falls
    outside the grid, so a widget handed a region at the screen edge
    never has to do its own clipping.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.width = max(0, self.width)
        self.height = max(0, self.height)
        if not self._buffer:
            self._buffer = [
                [Cell() for _ in range(self.width)] for _ in range(self.height)
            ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def put_char(self, x: int, y: int, char: str, style: Optional[Style] = None) -> None:
        """Put a character at position with optional styling."""
        if not self.in_bounds(x, y):
            return
        cell = self._buffer[y][x]
        cell.char = char
        if style is not None:
            style.apply(cell)

    def put_text(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        max_width: Optional[int] = None,
    ) -> int:
        """
        Put a single line of text starting at position.

        Returns the number of columns consumed (clipped columns count,
        so callers can keep advancing a cursor).
        """
        if max_width is not None:
            text = text[:max(0, max_width)]
        for i, char in enumerate(text):
            self.put_char(x + i, y, char, style)
        return len(text)

    def fill_rect(self, x: int, y: int, w: int, h: int, cell: Cell) -> None:
        """Fill a rectangle with copies of a cell."""
        for row in range(max(0, y), min(y + h, self.height)):
            for col in range(max(0, x), min(x + w, self.width)):
                self._buffer[row][col] = cell.copy()

    def set_style(self, x: int, y: int, w: int, h: int, style: Style) -> None:
        """Layer a style over a rectangle, keeping the characters."""
        for row in range(max(0, y), min(y + h, self.height)):
            for col in range(max(0, x), min(x + w, self.width)):
                style.apply(self._buffer[row][col])

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def row_text(self, y: int) -> str:
        """Characters of one row, without styling."""
        return ''.join(cell.char for cell in self._buffer[y])

    def text_lines(self) -> list[str]:
        """All rows as plain strings."""
        return [self.row_text(y) for y in range(self.height)]
