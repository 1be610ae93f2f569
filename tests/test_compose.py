"""Tests for frame composition and the widgets it uses."""

from checklist_tui.cli.compose import RenderComposer, key_hints
from checklist_tui.cli.core.layout import DisplayToggles, Rect, compute_layout
from checklist_tui.cli.core.shortcuts import ShortcutRegistry
from checklist_tui.cli.widgets.block import Alignment, Block, BorderType
from checklist_tui.cli.widgets.checklist import (
    HIGHLIGHT_SYMBOL,
    ChecklistWidget,
    first_visible_entry,
)
from checklist_tui.core.canvas import Canvas
from checklist_tui.core.cell import BLACK_FG, LIGHT_GREEN_BG, WHITE_BG
from checklist_tui.core.model import ChecklistEntry, ChecklistModel

# 60x30 with both panels: interior (3,3,54,24), list (3,3,43,21),
# side (46,3,11,21), bottom (3,24,54,3). List content starts at (4,4).
WIDTH, HEIGHT = 60, 30


def compose(model: ChecklistModel, toggles: DisplayToggles) -> Canvas:
    layout = compute_layout(WIDTH, HEIGHT, toggles)
    return RenderComposer().compose(layout, model, toggles)


class TestBlock:

    def test_borders_and_title(self) -> None:
        canvas = Canvas(10, 3)
        Block(title="Hi").render(canvas, Rect(0, 0, 10, 3))
        assert canvas.text_lines() == [
            "┌Hi──────┐",
            "│        │",
            "└────────┘",
        ]

    def test_thick_centered(self) -> None:
        canvas = Canvas(10, 2)
        Block(title="ab", border_type=BorderType.THICK,
              title_alignment=Alignment.CENTER).render(canvas, Rect(0, 0, 10, 2))
        assert canvas.row_text(0) == "┏━━━ab━━━┓"

    def test_title_truncated_between_corners(self) -> None:
        canvas = Canvas(6, 2)
        Block(title="Projects").render(canvas, Rect(0, 0, 6, 2))
        assert canvas.row_text(0) == "┌Proj┐"

    def test_borderless_inner_skips_title_row(self) -> None:
        block = Block(title="T", borders=False)
        assert block.inner(Rect(0, 0, 5, 5)) == Rect(0, 1, 5, 4)
        assert Block(borders=False).inner(Rect(0, 0, 5, 5)) == Rect(0, 0, 5, 5)

    def test_empty_region_draws_nothing(self) -> None:
        canvas = Canvas(5, 5)
        Block(title="x").render(canvas, Rect(2, 2, 0, 3))
        assert all(line == "     " for line in canvas.text_lines())

    def test_footer(self) -> None:
        canvas = Canvas(12, 3)
        Block(footer="ok").render(canvas, Rect(0, 0, 12, 3))
        assert canvas.row_text(2) == "└────ok────┘"


class TestChecklistWidget:

    def test_no_selection_no_indent(self, model: ChecklistModel) -> None:
        canvas = Canvas(30, 12)
        ChecklistWidget(model).render(canvas, Rect(0, 0, 30, 12))
        assert canvas.row_text(0).rstrip() == "[x] Hello world"
        assert canvas.row_text(1).rstrip() == "[ ] Hello again"
        assert canvas[0, 0].fg == BLACK_FG
        assert canvas[29, 0].bg == WHITE_BG
        assert not any(canvas[x, 0].bold for x in range(30))

    def test_multiline_entries_span_rows(self, model: ChecklistModel) -> None:
        canvas = Canvas(30, 12)
        ChecklistWidget(model).render(canvas, Rect(0, 0, 30, 12))
        rows = [line.rstrip() for line in canvas.text_lines()]
        assert rows[4:9] == ["[ ] What should i do??", "this?", "[ ] Uno", "Dos", "Tres!"]

    def test_selected_entry_highlighted(self, model: ChecklistModel) -> None:
        model.select_next()
        model.select_next()
        canvas = Canvas(30, 12)
        ChecklistWidget(model).render(canvas, Rect(0, 0, 30, 12))
        assert canvas.row_text(0).rstrip() == "   [x] Hello world"
        assert canvas.row_text(1).rstrip() == HIGHLIGHT_SYMBOL + "[ ] Hello again"
        assert canvas[5, 1].bg == LIGHT_GREEN_BG
        assert canvas[5, 1].bold is True
        assert canvas[5, 1].fg == BLACK_FG
        assert canvas[5, 0].bg == WHITE_BG

    def test_highlight_covers_every_line_of_entry(self, model: ChecklistModel) -> None:
        model.select_previous()
        model.select_previous()  # last entry: "Uno\nDos\nTres!"
        canvas = Canvas(20, 12)
        ChecklistWidget(model).render(canvas, Rect(0, 0, 20, 12))
        assert canvas.row_text(6).rstrip() == ">> [ ] Uno"
        assert canvas.row_text(7).rstrip() == "   Dos"
        for y in (6, 7, 8):
            assert canvas[0, y].bg == LIGHT_GREEN_BG

    def test_selected_entry_scrolled_into_view(self, model: ChecklistModel) -> None:
        model.select_previous()
        model.select_previous()
        canvas = Canvas(20, 4)
        ChecklistWidget(model).render(canvas, Rect(0, 0, 20, 4))
        assert canvas.row_text(0).rstrip() == ">> [ ] Uno"
        assert canvas.row_text(3).strip() == ""

    def test_text_clipped_to_region(self) -> None:
        model = ChecklistModel([ChecklistEntry(False, "a very long title indeed")])
        canvas = Canvas(20, 2)
        ChecklistWidget(model).render(canvas, Rect(2, 0, 8, 1))
        assert canvas.row_text(0) == "  [x] a ve          "

    def test_empty_model(self) -> None:
        canvas = Canvas(10, 3)
        ChecklistWidget(ChecklistModel()).render(canvas, Rect(0, 0, 10, 3))
        assert all(line == " " * 10 for line in canvas.text_lines())


class TestFirstVisibleEntry:

    def test_no_selection_starts_at_top(self) -> None:
        assert first_visible_entry([1, 1, 1], None, 1) == 0

    def test_selected_fits(self) -> None:
        assert first_visible_entry([1, 1, 1, 1, 2, 3], 2, 4) == 0

    def test_skips_until_selected_fits(self) -> None:
        assert first_visible_entry([1, 1, 1, 1, 2, 3], 5, 4) == 5
        assert first_visible_entry([1, 1, 1, 1, 2, 3], 4, 4) == 2

    def test_oversized_selected_entry_starts_with_it(self) -> None:
        assert first_visible_entry([1, 5], 1, 2) == 1


class TestRenderComposer:

    def test_frame(self, model: ChecklistModel, toggles: DisplayToggles) -> None:
        canvas = compose(model, toggles)
        assert (canvas.width, canvas.height) == (WIDTH, HEIGHT)
        top = canvas.row_text(0)
        assert top[0] == '┏' and top[-1] == '┓'
        assert top[24:35] == " Checklist "
        assert canvas.row_text(HEIGHT - 1)[0] == '┗'
        assert "Esc Quit" in canvas.row_text(HEIGHT - 1)

    def test_panels(self, model: ChecklistModel, toggles: DisplayToggles) -> None:
        canvas = compose(model, toggles)
        assert canvas.row_text(3)[3:8] == "┌List"
        assert canvas.row_text(3)[47:55] == "Projects"
        assert canvas[47, 3].bold is True
        assert canvas.row_text(4)[4:19] == "[x] Hello world"
        assert canvas.row_text(24)[3:8] == "┌Text"
        assert canvas.row_text(26)[3] == '└'

    def test_hidden_panels(self, model: ChecklistModel) -> None:
        toggles = DisplayToggles(False, False)
        canvas = compose(model, toggles)
        text = "\n".join(canvas.text_lines())
        assert "Projects" not in text
        assert "┌Text" not in text
        # list now spans the whole interior
        assert canvas.row_text(3)[56] == '┐'
        assert canvas.row_text(26)[3] == '└'

    def test_compose_does_not_mutate(self, model: ChecklistModel, toggles: DisplayToggles) -> None:
        model.select_next()
        compose(model, toggles)
        assert model.selected_index == 0
        assert len(model) == 6
        assert toggles == DisplayToggles()

    def test_tiny_terminal(self, model: ChecklistModel, toggles: DisplayToggles) -> None:
        layout = compute_layout(4, 2, toggles)
        canvas = RenderComposer().compose(layout, model, toggles)
        # title cut to the two columns between the corners, hints dropped
        assert canvas.text_lines() == ["┏ C┓", "┗━━┛"]

    def test_key_hints_follow_toggles(self) -> None:
        registry = ShortcutRegistry()
        assert "End Hide projects" in key_hints(registry, DisplayToggles())
        hints = key_hints(registry, DisplayToggles(False, False))
        assert "End Show projects" in hints
        assert "Home Show text" in hints

    def test_key_hints_drop_whole_entries(self) -> None:
        registry = ShortcutRegistry()
        hints = key_hints(registry, DisplayToggles(), max_width=30)
        assert hints == " Esc Quit  End Hide projects "
        assert key_hints(registry, DisplayToggles(), max_width=5) == ""
