"""Build the visual description of one frame."""

from __future__ import annotations

from typing import Optional

from checklist_tui.cli.core.layout import DisplayToggles, ScreenLayout
from checklist_tui.cli.core.shortcuts import Action, ShortcutRegistry
from checklist_tui.cli.widgets.block import Alignment, Block, BorderType
from checklist_tui.cli.widgets.checklist import ChecklistWidget
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.cell import BLACK_BG, WHITE_FG, Style
from checklist_tui.core.model import ChecklistModel

APP_TITLE = " Checklist "
LIST_TITLE = "List"
SIDE_PANEL_TITLE = "Projects"
INPUT_BOX_TITLE = "Text"
SIDE_PANEL_TITLE_STYLE = Style(fg=WHITE_FG, bg=BLACK_BG, bold=True)


def key_hints(
    registry: ShortcutRegistry,
    toggles: DisplayToggles,
    max_width: Optional[int] = None,
) -> str:
    """
    Shortcut summary for the bottom edge of the frame.

    Hints are kept in registry order and dropped from the end until the
    text fits max_width; if not even the first fits, the result is empty.
    """
    parts: list[str] = []
    for shortcut in registry:
        label = shortcut.label
        if shortcut.action == Action.TOGGLE_SIDE_PANEL:
            label = f"{'Hide' if toggles.show_side_panel else 'Show'} {label.lower()}"
        elif shortcut.action == Action.TOGGLE_INPUT_BOX:
            label = f"{'Hide' if toggles.show_input_box else 'Show'} {label.lower()}"
        candidate = parts + [f"{shortcut.key_display} {label}"]
        if max_width is not None and len(_join_hints(candidate)) > max_width:
            break
        parts = candidate
    return _join_hints(parts) if parts else ""


def _join_hints(parts: list[str]) -> str:
    return " " + "  ".join(parts) + " "


class RenderComposer:
    """
    Turns layout + state into a Canvas for the terminal to paint.

    Every panel is drawn on every frame. Hidden panels arrive as
    zero-sized regions and draw nothing. The model and toggles are only
    read, never changed.
    """

    def __init__(self, registry: Optional[ShortcutRegistry] = None) -> None:
        self.registry = registry if registry is not None else ShortcutRegistry()

    def compose(
        self,
        layout: ScreenLayout,
        model: ChecklistModel,
        toggles: DisplayToggles,
    ) -> Canvas:
        canvas = Canvas(layout.frame.width, layout.frame.height)

        Block(
            title=APP_TITLE,
            border_type=BorderType.THICK,
            title_alignment=Alignment.CENTER,
            footer=key_hints(self.registry, toggles, max_width=layout.frame.width - 2),
        ).render(canvas, layout.frame)

        ChecklistWidget(model, block=Block(title=LIST_TITLE)).render(canvas, layout.list_area)

        Block(
            title=SIDE_PANEL_TITLE,
            borders=False,
            title_alignment=Alignment.CENTER,
            title_style=SIDE_PANEL_TITLE_STYLE,
        ).render(canvas, layout.side_area)

        Block(title=INPUT_BOX_TITLE).render(canvas, layout.bottom)

        return canvas
