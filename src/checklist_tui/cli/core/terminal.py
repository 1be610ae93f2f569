"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable

from checklist_tui.core.canvas import Canvas
from checklist_tui.errors import TerminalIOError
from checklist_tui.render.terminal import TerminalRenderer


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


@runtime_checkable
class RenderSurface(Protocol):
    """Where frames go: something that knows its size and can paint a canvas."""

    def size(self) -> TerminalSize:
        ...

    def paint(self, canvas: Canvas) -> None:
        ...


class Terminal:
    """Terminal I/O abstraction for TUI applications."""

    _renderer = TerminalRenderer()

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        try:
            sys.stdout.write(text)
            sys.stdout.flush()
        except OSError as e:
            raise TerminalIOError(f"write to terminal failed: {e}") from e

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write('\x1b[0m')

    @staticmethod
    def hide_cursor() -> None:
        Terminal.write('\x1b[?25l')

    @staticmethod
    def show_cursor() -> None:
        Terminal.write('\x1b[?25h')

    @classmethod
    def paint(cls, canvas: Canvas) -> None:
        """
        Repaint the whole screen from a canvas.

        Moves home instead of clearing to avoid flicker; the canvas
        covers every cell so nothing stale survives. Raw mode does not
        translate LF, hence the explicit CR.
        """
        lines = cls._renderer.render_lines(canvas)
        cls.write('\x1b[H' + '\r\n'.join(lines))

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return

        try:
            fd = sys.stdin.fileno()
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError, ValueError) as e:
            raise TerminalIOError(f"cannot enter raw mode: {e}") from e
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write('\x1b[?1049h')
        try:
            yield
        finally:
            Terminal.write('\x1b[?1049l')

    @staticmethod
    @contextmanager
    def mouse_capture() -> Iterator[None]:
        """Report mouse presses, using SGR encoding for the coordinates."""
        Terminal.write('\x1b[?1000h\x1b[?1006h')
        try:
            yield
        finally:
            Terminal.write('\x1b[?1006l\x1b[?1000l')

    @staticmethod
    @contextmanager
    def exclusive_mode() -> Iterator[None]:
        """
        Full TUI mode: alternate screen, hidden cursor, mouse capture, raw input.

        Everything is undone on the way out, whether the body returns
        normally or raises.
        """
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.mouse_capture(), Terminal.raw_mode():
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
