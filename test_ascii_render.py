"""Tests for ascii_render module."""

import pytest

from ascii_render import render_grid, render_heat, strip_ansi
from grid2d import Grid2D
from grid_types import pt


def bracket(text: str) -> str:
    """Visible stand-in for a color, so output can be compared exactly."""
    return f"[{text}]"


def sample_grid() -> Grid2D[int]:
    return Grid2D.from_rows([[1, 2, 3], [4, 5, 6]])


class TestStripAnsi:
    """Tests for ANSI code removal."""

    def test_removes_color_codes(self) -> None:
        """Escape sequences vanish, text stays."""
        assert strip_ansi("\x1b[31mred\x1b[39m plain \x1b[1;32mbold\x1b[0m") == "red plain bold"

    def test_plain_text_unchanged(self) -> None:
        """Text without codes passes through."""
        assert strip_ansi("123\n456") == "123\n456"


class TestRenderGrid:
    """Tests for highlight rendering."""

    def test_plain_render_matches_str(self) -> None:
        """No highlights gives the plain display."""
        assert render_grid(sample_grid()) == str(sample_grid())

    def test_highlighted_cells_are_colored(self) -> None:
        """Only highlighted cells pass through the color function."""
        output = render_grid(sample_grid(), highlight=[pt(0, 0), pt(2, 1)], color=bracket)
        assert output == "[1]23\n45[6]"

    def test_default_color_keeps_visible_text(self) -> None:
        """Chalk colors wrap the cell without changing what is shown."""
        output = render_grid(sample_grid(), highlight=[pt(1, 1)])
        assert strip_ansi(output) == "123\n456"

    def test_points_outside_grid_ignored(self) -> None:
        """Highlights beyond the bounds are dropped."""
        output = render_grid(sample_grid(), highlight=[pt(9, 9)], color=bracket)
        assert output == "123\n456"

    def test_cell_width_and_formatter(self) -> None:
        """Cells are formatted, then right-aligned."""
        output = render_grid(
            sample_grid(), highlight=[pt(1, 0)], cell_width=3, formatter=lambda v: f"{v * 10}", color=bracket
        )
        assert output == " 10[ 20] 30\n 40 50 60"


class TestRenderHeat:
    """Tests for value-bucket coloring."""

    def test_buckets(self) -> None:
        """Values are bucketed across the palette, low to high."""
        palette = (lambda s: f"<{s}>", lambda s: f"({s})")
        grid = Grid2D.from_rows([[0, 4], [5, 10]])
        assert render_heat(grid, palette=palette) == "<0><4>\n(5)(10)"

    def test_uniform_grid_uses_first_color(self) -> None:
        """A single distinct value uses palette[0]."""
        palette = (bracket, lambda s: s)
        grid = Grid2D.from_rows([[3, 3], [3, 3]])
        assert render_heat(grid, palette=palette) == "[3][3]\n[3][3]"

    def test_default_palette_keeps_visible_text(self) -> None:
        """Chalk colors do not change the visible digits."""
        assert strip_ansi(render_heat(sample_grid(), cell_width=2)) == " 1 2 3\n 4 5 6"

    def test_empty_grid(self) -> None:
        """Nothing to render."""
        assert render_heat(Grid2D.from_rows([])) == ""

    def test_empty_palette(self) -> None:
        """A palette needs at least one color."""
        with pytest.raises(ValueError, match="at least one color"):
            render_heat(sample_grid(), palette=())
