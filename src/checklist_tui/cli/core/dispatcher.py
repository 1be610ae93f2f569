"""Turn input events into state changes."""

from __future__ import annotations

import logging
from typing import Optional

from checklist_tui.cli.core.input import InputEvent
from checklist_tui.cli.core.layout import DisplayToggles
from checklist_tui.cli.core.shortcuts import Action, ShortcutRegistry
from checklist_tui.core.model import ChecklistModel

logger = logging.getLogger(__name__)


class InputDispatcher:
    """
    Apply the action bound to an input event.

    Holds no application state itself: the model and toggles are
    passed in for each event.
    """

    def __init__(self, registry: Optional[ShortcutRegistry] = None) -> None:
        self.registry = registry if registry is not None else ShortcutRegistry()

    def dispatch(
        self,
        event: InputEvent,
        model: ChecklistModel,
        toggles: DisplayToggles,
    ) -> Action:
        """
        Run the action for one event and return it.

        Unbound keys and non-key events (mouse reports) return
        Action.NONE and change nothing. Action.QUIT changes nothing
        either; stopping is up to the caller.
        """
        shortcut = self.registry.match(event)
        if shortcut is None:
            return Action.NONE

        action = shortcut.action
        if action == Action.TOGGLE_SIDE_PANEL:
            toggles.toggle_side_panel()
        elif action == Action.TOGGLE_INPUT_BOX:
            toggles.toggle_input_box()
        elif action == Action.SELECT_NEXT:
            model.select_next()
        elif action == Action.SELECT_PREVIOUS:
            model.select_previous()
        elif action == Action.CLEAR_SELECTION:
            model.clear_selection()

        logger.debug("%s -> %s (selection=%r)", event, action.name, model.selected_index)
        return action
