"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from checklist_tui.cli.core.layout import Rect
from checklist_tui.core.canvas import Canvas

__all__ = ["Rect", "Widget", "BaseWidget"]


@runtime_checkable
class Widget(Protocol):
    """Protocol for TUI widgets."""

    def render(self, canvas: Canvas, bounds: Rect) -> None:
        """Draw into the canvas, staying inside bounds."""
        ...


class BaseWidget(ABC):
    """Base class for widgets that draw into a region of a canvas."""

    @abstractmethod
    def render(self, canvas: Canvas, bounds: Rect) -> None:
        """Subclasses must implement rendering."""
        pass
