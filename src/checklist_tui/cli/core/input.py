"""Keyboard and mouse input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol, Union, runtime_checkable

from checklist_tui.errors import TerminalIOError


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report. x and y are 0-indexed screen cells."""
    button: int
    x: int
    y: int
    pressed: bool = True
    raw: str = ""


InputEvent = Union[KeyEvent, MouseEvent]


@runtime_checkable
class EventSource(Protocol):
    """Anything that can hand out the next input event, waiting if needed."""

    def read_blocking(self) -> InputEvent:
        ...


class InputReader:
    """
    Keyboard and mouse reader for a terminal in raw mode.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    Read failures and end of input raise TerminalIOError.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        'OH': Key.HOME,
        'OF': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[7~': Key.HOME,
        '[8~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[2~': Key.INSERT,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    # Legacy (X10) mouse reports carry three raw bytes after ESC [ M
    X10_PAYLOAD = 3

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, text: str) -> None:
        """Queue already-received input ahead of anything still unread."""
        self._buffer += text

    @property
    def has_pending(self) -> bool:
        """True while decoded-but-unreturned input is buffered."""
        return bool(self._buffer)

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> InputEvent:
        """Read an input event, blocking until one is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_chunk(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return
        except OSError as e:
            raise TerminalIOError(f"reading terminal input failed: {e}") from e
        if not data:
            raise TerminalIOError("terminal input closed")
        self._buffer += data.decode('utf-8', errors='replace')

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        self._read_chunk()

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                self._read_chunk()

                # Check if sequence looks complete
                if len(self._buffer) > 1:
                    rest = self._buffer[1:]
                    # Sequence ends with letter or ~
                    if len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~'):
                        return
                    if rest in self.SEQUENCES:
                        return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next event."""
        if not self._buffer:
            return None

        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        # Buffer starts with \x1b
        if len(self._buffer) == 1:
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if i > 0 and (ch.isalpha() or ch == '~'):
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            # ESC ESC: the first one is a lone escape press
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        raw = '\x1b' + seq

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        if seq.startswith('[<') and seq[-1] in 'Mm':
            mouse = self._parse_sgr_mouse(seq, raw)
            if mouse is not None:
                return mouse

        if seq == '[M' and len(self._buffer) >= self.X10_PAYLOAD:
            payload = self._buffer[:self.X10_PAYLOAD]
            self._buffer = self._buffer[self.X10_PAYLOAD:]
            button, x, y = (ord(c) - 32 for c in payload)
            return MouseEvent(
                button=button & 3,
                x=x - 1,
                y=y - 1,
                pressed=(button & 3) != 3,
                raw=raw + payload,
            )

        # Unknown sequence
        return KeyEvent(raw=raw)

    @staticmethod
    def _parse_sgr_mouse(seq: str, raw: str) -> Optional[MouseEvent]:
        """Decode '[<button;x;yM' (press) or '...m' (release)."""
        fields = seq[2:-1].split(';')
        if len(fields) != 3 or not all(f.isdigit() for f in fields):
            return None
        button, x, y = (int(f) for f in fields)
        return MouseEvent(
            button=button,
            x=x - 1,
            y=y - 1,
            pressed=seq[-1] == 'M',
            raw=raw,
        )

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except InterruptedError:
            return False
        except (ValueError, OSError) as e:
            raise TerminalIOError(f"polling terminal input failed: {e}") from e
        return bool(ready)
