"""
Terminal rendering for Grid2D values.

Provides two rendering approaches:
1. Highlight rendering - plain cells with selected points colorized
2. Heat rendering - numeric cells colorized by value bucket
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid2d import Grid2D
from grid_types import Point

__all__ = ["DEFAULT_PALETTE", "render_grid", "render_heat", "strip_ansi"]

logger = logging.getLogger(__name__)

Colorize = Callable[[str], str]

# Cold to hot
DEFAULT_PALETTE: tuple[Colorize, ...] = (
    chalk.blue,
    chalk.cyan,
    chalk.green,
    chalk.yellow,
    chalk.redBright,
    chalk.red,
)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI color codes, leaving the visible characters."""
    return _ANSI_ESCAPE.sub("", text)


def _format_cell(value: Any, formatter: Callable[[Any], str], cell_width: int | None) -> str:
    content = formatter(value)
    if cell_width is not None:
        content = content.rjust(cell_width)
    return content


def render_grid(
    grid: Grid2D[Any],
    highlight: Iterable[Point] = (),
    cell_width: int | None = None,
    formatter: Callable[[Any], str] = str,
    color: Colorize = chalk.yellowBright,
) -> str:
    """
    Render a grid with selected points colorized.

    Args:
        grid: The grid to render
        highlight: Points to colorize; points outside the grid are ignored
        cell_width: Optional width each formatted cell is right-aligned to
        formatter: Converts a cell value to text (default str)
        color: Colorizer applied to highlighted cells

    Returns:
        Rows joined by newlines, with ANSI color codes around highlighted cells
    """
    marked = {p for p in highlight if grid.bounds.contains(p)}

    lines: list[str] = []
    for y, row in enumerate(grid.data):
        line_parts: list[str] = []
        for x, value in enumerate(row):
            content = _format_cell(value, formatter, cell_width)
            if Point(x, y) in marked:
                content = color(content)
            line_parts.append(content)
        lines.append("".join(line_parts))

    return "\n".join(lines)


def render_heat(
    grid: Grid2D[Any],
    palette: tuple[Colorize, ...] = DEFAULT_PALETTE,
    cell_width: int | None = None,
) -> str:
    """
    Render a numeric grid with each cell colored by its value.

    The value range [min, max] is split into len(palette) equal buckets;
    the lowest bucket uses palette[0]. A grid of one distinct value uses
    palette[0] throughout.
    """
    if not palette:
        raise ValueError("render_heat needs at least one color in the palette")
    if grid.bounds.is_empty():
        return ""

    values = [value for _, value in grid.iter_horizontal()]
    low, high = min(values), max(values)
    span = high - low

    def bucket(value: Any) -> int:
        if span == 0:
            return 0
        return min(int((value - low) * len(palette) / span), len(palette) - 1)

    logger.debug("render_heat: range [%r, %r] over %d colors", low, high, len(palette))

    lines = [
        "".join(palette[bucket(value)](_format_cell(value, str, cell_width)) for value in row)
        for row in grid.data
    ]
    return "\n".join(lines)
