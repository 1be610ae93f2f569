"""Renderers for turning a canvas into terminal output."""

from checklist_tui.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
