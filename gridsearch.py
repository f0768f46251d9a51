"""
Grid and best-first search toolkit for puzzle solvers.

Two cooperating parts:
- Point/Direction/Bounds algebra and the Grid2D container
- Generic Dijkstra and A* over caller-defined states

This module re-exports the public surface so solvers can write
`from gridsearch import Grid2D, dijkstra, pt`.
"""

from __future__ import annotations

from best_first import OptimizationState, Reverse, a_star, dijkstra
from grid2d import CellFn, Grid2D
from grid_parser import parse_char_rows, parse_delimited_rows, parse_point
from grid_types import CARDINAL_DIRECTIONS, Bounds, Direction, Point, Rect, pt, reading_order

__all__ = [
    # Point algebra
    "Bounds",
    "CARDINAL_DIRECTIONS",
    "Direction",
    "Point",
    "Rect",
    "pt",
    "reading_order",
    # Grid
    "CellFn",
    "Grid2D",
    # Text formats
    "parse_char_rows",
    "parse_delimited_rows",
    "parse_point",
    # Search
    "OptimizationState",
    "Reverse",
    "a_star",
    "dijkstra",
]
