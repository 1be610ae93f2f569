"""Shared fixtures: seeded model, toggles and headless terminal stand-ins.

Tests reach the stand-ins only through these fixtures, never by importing
this module.
"""

from typing import Callable, Iterable, Optional

import pytest

from checklist_tui.cli.core.input import EventSource, InputEvent
from checklist_tui.cli.core.layout import DisplayToggles
from checklist_tui.cli.core.terminal import TerminalSize
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.model import ChecklistModel
from checklist_tui.errors import TerminalIOError


class FakeSurface:
    """Records painted canvases instead of writing to a terminal."""

    def __init__(self, cols: int = 80, rows: int = 24) -> None:
        self._size = TerminalSize(rows, cols)
        self.frames: list[Canvas] = []

    def size(self) -> TerminalSize:
        return self._size

    def resize(self, cols: int, rows: int) -> None:
        self._size = TerminalSize(rows, cols)

    def paint(self, canvas: Canvas) -> None:
        self.frames.append(canvas)


class FakeEvents:
    """Hands out a fixed list of events, then fails like a closed terminal."""

    def __init__(self, events: Iterable[InputEvent], error: Optional[Exception] = None) -> None:
        self._events = list(events)
        self._error = error

    def read_blocking(self) -> InputEvent:
        if not self._events:
            raise self._error or TerminalIOError("terminal input closed")
        return self._events.pop(0)


@pytest.fixture
def model() -> ChecklistModel:
    """The six seed entries, nothing selected."""
    return ChecklistModel.with_seed()


@pytest.fixture
def toggles() -> DisplayToggles:
    return DisplayToggles()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def make_events() -> Callable[..., EventSource]:
    """Build an event source from a list of events (and an optional final error)."""
    return FakeEvents
