"""Interactive checklist screen."""

from __future__ import annotations

import logging
from typing import Optional

from checklist_tui.cli.compose import RenderComposer
from checklist_tui.cli.core.dispatcher import InputDispatcher
from checklist_tui.cli.core.input import EventSource, InputEvent, InputReader
from checklist_tui.cli.core.layout import DisplayToggles, compute_layout
from checklist_tui.cli.core.shortcuts import Action, ShortcutRegistry
from checklist_tui.cli.core.terminal import RenderSurface, Terminal
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.model import ChecklistModel

logger = logging.getLogger(__name__)


class ChecklistApp:
    """
    The event loop: render a frame, wait for one input event, apply it.

    Simple design:
    - Up/Down move the selection (wrapping), Left clears it
    - End/Home show or hide the projects panel and the text box
    - Esc quits

    The app owns the model and the toggles; the dispatcher and composer
    borrow them for one call at a time. Terminal failures are not
    caught here.
    """

    def __init__(
        self,
        model: Optional[ChecklistModel] = None,
        toggles: Optional[DisplayToggles] = None,
        surface: Optional[RenderSurface] = None,
        events: Optional[EventSource] = None,
    ) -> None:
        self.running = False
        self.model = model if model is not None else ChecklistModel.with_seed()
        self.toggles = toggles if toggles is not None else DisplayToggles()
        self.surface: RenderSurface = surface if surface is not None else Terminal
        self.events = events

        registry = ShortcutRegistry()
        self.dispatcher = InputDispatcher(registry)
        self.composer = RenderComposer(registry)

    def render(self) -> Canvas:
        """Lay out, compose and paint one frame. Returns what was painted."""
        size = self.surface.size()
        layout = compute_layout(size.cols, size.rows, self.toggles)
        canvas = self.composer.compose(layout, self.model, self.toggles)
        self.surface.paint(canvas)
        return canvas

    def handle_event(self, event: InputEvent) -> Action:
        """Apply one input event; stops the loop on quit."""
        action = self.dispatcher.dispatch(event, self.model, self.toggles)
        if action == Action.QUIT:
            self.running = False
        return action

    def run(self) -> None:
        """Main application loop. Returns once the quit key is pressed."""
        if self.events is None:
            self.events = InputReader()

        self.running = True
        logger.info("checklist started with %d entries", len(self.model))
        while self.running:
            self.render()
            self.handle_event(self.events.read_blocking())
        logger.info("checklist stopped")


def run_checklist() -> None:
    """Take over the terminal, run the checklist, and give the terminal back."""
    with Terminal.exclusive_mode():
        app = ChecklistApp(events=InputReader())
        app.run()


if __name__ == "__main__":
    run_checklist()
