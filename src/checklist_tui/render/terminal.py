"""Render a canvas to terminal escape sequences."""

from __future__ import annotations

from checklist_tui.core.canvas import Canvas
from checklist_tui.core.cell import DEFAULT_BG, DEFAULT_FG

RESET = '\x1b[0m'


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when attributes change.
    Every line starts from default attributes and is reset at its end
    if anything is still active, so lines can be painted independently.
    """

    def render_lines(self, canvas: Canvas) -> list[str]:
        """Render canvas to one escaped string per row."""
        lines: list[str] = []

        for row in canvas.rows():
            line_parts: list[str] = []
            last_fg = DEFAULT_FG
            last_bg = DEFAULT_BG
            last_bold = False

            for cell in row:
                sgr_parts: list[str] = []

                if cell.bold != last_bold:
                    sgr_parts.append('1' if cell.bold else '22')
                    last_bold = cell.bold

                if cell.fg != last_fg:
                    sgr_parts.append(str(cell.fg))
                    last_fg = cell.fg

                if cell.bg != last_bg:
                    sgr_parts.append(str(cell.bg))
                    last_bg = cell.bg

                if sgr_parts:
                    line_parts.append(f"\x1b[{';'.join(sgr_parts)}m")

                line_parts.append(cell.char)

            if last_fg != DEFAULT_FG or last_bg != DEFAULT_BG or last_bold:
                line_parts.append(RESET)

            lines.append(''.join(line_parts))

        return lines

