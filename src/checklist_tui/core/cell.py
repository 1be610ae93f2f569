"""Cell - atomic unit of the screen canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# SGR color codes used by the widgets
DEFAULT_FG = 39
DEFAULT_BG = 49
BLACK_FG = 30
WHITE_FG = 37
BLACK_BG = 40
WHITE_BG = 47
LIGHT_GREEN_BG = 102


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Colors are SGR codes; the defaults (39/49) leave the terminal's own
    foreground and background in place.
    """
    char: str = ' '
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    bold: bool = False

    def copy(self) -> Cell:
        """Create a copy of this cell."""
        return Cell(char=self.char, fg=self.fg, bg=self.bg, bold=self.bold)

    def is_default(self) -> bool:
        """Check if this cell is an unstyled blank."""
        return (
            self.char == ' '
            and self.fg == DEFAULT_FG
            and self.bg == DEFAULT_BG
            and not self.bold
        )


@dataclass(frozen=True)
class Style:
    """
    A partial set of cell attributes.

    None means "leave whatever is already there", so styles can be
    layered: an item style first, then a highlight on top of it.
    """
    fg: Optional[int] = None
    bg: Optional[int] = None
    bold: Optional[bool] = None

    def patch(self, other: Style) -> Style:
        """Return this style with the fields set in other taking precedence."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=other.bold if other.bold is not None else self.bold,
        )

    def apply(self, cell: Cell) -> None:
        """Write the set fields onto a cell in place."""
        if self.fg is not None:
            cell.fg = self.fg
        if self.bg is not None:
            cell.bg = self.bg
        if self.bold is not None:
            cell.bold = self.bold
