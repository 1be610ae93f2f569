"""Tests for panel geometry and display toggles."""

import pytest

from checklist_tui.cli.core.layout import (
    DisplayToggles,
    Rect,
    compute_layout,
    split_horizontal,
    split_vertical,
)


class TestDisplayToggles:

    def test_defaults_show_everything(self) -> None:
        toggles = DisplayToggles()
        assert toggles.show_side_panel is True
        assert toggles.show_input_box is True

    def test_toggle_side_panel_only_touches_its_flag(self) -> None:
        toggles = DisplayToggles()
        assert toggles.toggle_side_panel() is False
        assert toggles == DisplayToggles(show_side_panel=False, show_input_box=True)
        assert toggles.toggle_side_panel() is True
        assert toggles == DisplayToggles(True, True)

    def test_toggle_input_box_only_touches_its_flag(self) -> None:
        toggles = DisplayToggles()
        toggles.toggle_input_box()
        assert toggles == DisplayToggles(show_side_panel=True, show_input_box=False)


class TestRect:

    def test_inner(self) -> None:
        assert Rect(0, 0, 10, 8).inner(3) == Rect(3, 3, 4, 2)

    def test_inner_clamps(self) -> None:
        inner = Rect(0, 0, 5, 2).inner(3)
        assert inner.width == 0
        assert inner.height == 0
        assert inner.is_empty

    def test_edges(self) -> None:
        rect = Rect(2, 3, 4, 5)
        assert rect.right == 6
        assert rect.bottom == 8
        assert rect.area == 20


class TestSplits:

    def test_split_vertical_remainder_goes_below(self) -> None:
        top, bottom = split_vertical(Rect(0, 0, 10, 34), 90)
        assert top == Rect(0, 0, 10, 30)
        assert bottom == Rect(0, 30, 10, 4)

    def test_split_horizontal_full(self) -> None:
        left, right = split_horizontal(Rect(1, 1, 10, 5), 100)
        assert left == Rect(1, 1, 10, 5)
        assert right.width == 0


class TestComputeLayout:

    def test_everything_shown(self) -> None:
        layout = compute_layout(100, 40, DisplayToggles(True, True))
        assert layout.frame == Rect(0, 0, 100, 40)
        assert layout.interior == Rect(3, 3, 94, 34)
        assert layout.top == Rect(3, 3, 94, 30)  # 90% of 34
        assert layout.bottom == Rect(3, 33, 94, 4)
        assert layout.list_area == Rect(3, 3, 75, 30)  # 80% of 94
        assert layout.side_area == Rect(78, 3, 19, 30)
        assert layout.side_panel_visible
        assert layout.input_box_visible

    def test_everything_hidden(self) -> None:
        layout = compute_layout(100, 40, DisplayToggles(False, False))
        assert layout.top == layout.interior
        assert layout.list_area == layout.interior
        assert layout.bottom.height == 0
        assert layout.side_area.width == 0
        assert not layout.side_panel_visible
        assert not layout.input_box_visible

    def test_only_side_panel_hidden(self) -> None:
        layout = compute_layout(100, 40, DisplayToggles(False, True))
        assert layout.list_area == Rect(3, 3, 94, 30)
        assert layout.side_area.width == 0
        assert layout.bottom == Rect(3, 33, 94, 4)

    def test_only_input_box_hidden(self) -> None:
        layout = compute_layout(100, 40, DisplayToggles(True, False))
        assert layout.top.height == 34
        assert layout.bottom.height == 0
        assert layout.list_area.width == 75

    @pytest.mark.parametrize("width,height", [(0, 0), (5, 4), (6, 6), (-3, 10), (80, 2)])
    def test_tiny_terminal_clamps_to_zero(self, width: int, height: int) -> None:
        layout = compute_layout(width, height, DisplayToggles())
        for region in (layout.interior, layout.top, layout.bottom,
                       layout.list_area, layout.side_area):
            assert region.width >= 0
            assert region.height >= 0
            assert region.is_empty

    def test_deterministic(self) -> None:
        toggles = DisplayToggles(True, False)
        assert compute_layout(120, 50, toggles) == compute_layout(120, 50, toggles)

    def test_regions_stay_inside_interior(self) -> None:
        layout = compute_layout(73, 29, DisplayToggles())
        interior = layout.interior
        for region in (layout.list_area, layout.side_area, layout.bottom):
            assert region.x >= interior.x
            assert region.y >= interior.y
            assert region.right <= interior.right
            assert region.bottom <= interior.bottom
        assert layout.list_area.width + layout.side_area.width == interior.width
        assert layout.top.height + layout.bottom.height == interior.height
