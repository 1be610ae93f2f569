"""Keyboard shortcut registry.

Single source of truth for the key bindings: the dispatcher walks it to
decide what a key press does, and the screen frame uses it to show the
key hints. Registration order is priority order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from checklist_tui.cli.core.input import InputEvent, Key, KeyEvent


class Action(Enum):
    """What a key press asks the app to do."""
    NONE = auto()
    QUIT = auto()
    TOGGLE_SIDE_PANEL = auto()
    TOGGLE_INPUT_BOX = auto()
    SELECT_NEXT = auto()
    SELECT_PREVIOUS = auto()
    CLEAR_SELECTION = auto()


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        action: Action triggered by the shortcut
        keys: Keys/chars that trigger it
        label: Short label for the key hint line
        description: Longer description for help output
    """
    action: Action
    keys: list[str | Key]
    label: str
    description: str

    def matches(self, event: InputEvent) -> bool:
        """Check if an input event triggers this shortcut. Only key events can."""
        if not isinstance(event, KeyEvent):
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return "/".join(
            _key_to_display(key) if isinstance(key, Key) else key for key in self.keys
        )


def _key_to_display(key: Key) -> str:
    """Convert a Key enum to display string."""
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.LEFT: "←",
        Key.RIGHT: "→",
        Key.ESCAPE: "Esc",
        Key.HOME: "Home",
        Key.END: "End",
    }
    return display_map.get(key, key.name.title())


DEFAULT_SHORTCUTS: list[ShortcutDef] = [
    ShortcutDef(Action.QUIT, [Key.ESCAPE], "Quit", "Leave the application"),
    ShortcutDef(Action.TOGGLE_SIDE_PANEL, [Key.END], "Projects", "Show or hide the projects panel"),
    ShortcutDef(Action.TOGGLE_INPUT_BOX, [Key.HOME], "Text", "Show or hide the text box"),
    ShortcutDef(Action.SELECT_NEXT, [Key.DOWN], "Next", "Select the next entry, wrapping to the first"),
    ShortcutDef(Action.SELECT_PREVIOUS, [Key.UP], "Prev", "Select the previous entry, wrapping to the last"),
    ShortcutDef(Action.CLEAR_SELECTION, [Key.LEFT], "Deselect", "Clear the selection"),
]


class ShortcutRegistry:
    """Ordered collection of shortcuts; the first match wins."""

    def __init__(self, shortcuts: Optional[list[ShortcutDef]] = None) -> None:
        self._shortcuts: list[ShortcutDef] = []
        for shortcut in (DEFAULT_SHORTCUTS if shortcuts is None else shortcuts):
            self.register(shortcut)

    def register(self, shortcut: ShortcutDef) -> None:
        """Add a shortcut after all existing ones."""
        self._shortcuts.append(shortcut)

    def match(self, event: InputEvent) -> Optional[ShortcutDef]:
        """Find the first shortcut matching the event."""
        for shortcut in self._shortcuts:
            if shortcut.matches(event):
                return shortcut
        return None

    def __iter__(self) -> Iterator[ShortcutDef]:
        return iter(self._shortcuts)

    def __len__(self) -> int:
        return len(self._shortcuts)

    def help_lines(self) -> list[str]:
        """One 'keys  description' line per shortcut."""
        width = max((len(s.key_display) for s in self._shortcuts), default=0)
        return [f"{s.key_display:<{width}}  {s.description}" for s in self._shortcuts]
