"""Core TUI infrastructure - terminal I/O, input handling, layout."""

from checklist_tui.cli.core.terminal import RenderSurface, Terminal, TerminalSize
from checklist_tui.cli.core.input import (
    EventSource,
    InputEvent,
    InputReader,
    Key,
    KeyEvent,
    MouseEvent,
)
from checklist_tui.cli.core.layout import (
    DisplayToggles,
    Rect,
    ScreenLayout,
    compute_layout,
)
from checklist_tui.cli.core.shortcuts import Action, ShortcutDef, ShortcutRegistry
from checklist_tui.cli.core.dispatcher import InputDispatcher

__all__ = [
    "Terminal",
    "TerminalSize",
    "RenderSurface",
    "EventSource",
    "InputEvent",
    "InputReader",
    "KeyEvent",
    "MouseEvent",
    "Key",
    "DisplayToggles",
    "Rect",
    "ScreenLayout",
    "compute_layout",
    "Action",
    "ShortcutDef",
    "ShortcutRegistry",
    "InputDispatcher",
]
