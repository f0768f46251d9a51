"""
Demonstration scripts for the grid and best-first search toolkit.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Hashable, Iterator

from ascii_render import render_grid, render_heat
from best_first import Reverse, a_star, dijkstra
from grid2d import Grid2D
from grid_types import Bounds, Point, pt

LAYOUTS = dict(
    small="""\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581""",
    maze="""\
19111
19191
19191
11191
99991""",
)


@dataclass(frozen=True)
class RouteState:
    """
    Search state carrying the route taken so far.

    The route is output, not position: it stays out of the cache key so two
    routes reaching the same point are deduplicated by cost alone.
    """

    cost: int
    point: Point
    route: tuple[Point, ...]

    def cache_key(self) -> Hashable:
        return self.point

    def score(self) -> Reverse[int]:
        return Reverse(self.cost)


@dataclass(frozen=True)
class CostState:
    """Raw-cost state for A*, which must not see Reverse scores."""

    cost: int
    point: Point

    def cache_key(self) -> Hashable:
        return self.point

    def score(self) -> int:
        return self.cost


def cheapest_route(grid: Grid2D[int]) -> RouteState | None:
    """Dijkstra from the top-left to the bottom-right, remembering the route."""
    if grid.bounds.is_empty():
        return None
    target = grid.bounds.bottom_right()

    def successors(state: RouteState) -> Iterator[RouteState]:
        for p, cost in grid.cardinal_neighbors(state.point):
            yield RouteState(state.cost + cost, p, state.route + (p,))

    return dijkstra(
        RouteState(0, Point.ORIGIN, (Point.ORIGIN,)),
        successors,
        lambda state: state.point == target,
    )


def cheapest_cost_a_star(grid: Grid2D[int]) -> int | None:
    """A* from the top-left to the bottom-right with a Manhattan heuristic."""
    if grid.bounds.is_empty():
        return None
    target = grid.bounds.bottom_right()
    # Every step costs at least the cheapest cell, so this stays consistent
    min_cost = min(value for _, value in grid.iter_horizontal())

    def successors(state: CostState) -> Iterator[CostState]:
        for p, cost in grid.cardinal_neighbors(state.point):
            yield CostState(state.cost + cost, p)

    final = a_star(
        CostState(0, Point.ORIGIN),
        successors,
        lambda state: state.point.manhattan_distance(target) * min_cost,
        lambda state: state.point == target,
    )
    return None if final is None else final.cost


def shortest_path_demo(layout: str) -> None:
    """Show the cheapest route through a cost grid three ways."""
    grid = Grid2D.from_char_str(LAYOUTS[layout], int)

    print("=" * 40)
    print(f"Cost grid '{layout}' ({grid.bounds.width}x{grid.bounds.height}):")
    print("=" * 40)
    print(render_heat(grid))
    print()

    print(f"Grid2D.shortest_path:   {grid.shortest_path()}")
    print(f"A* (Manhattan):         {cheapest_cost_a_star(grid)}")

    route = cheapest_route(grid)
    if route is None:
        print("No route found")
        return
    print(f"Dijkstra with route:    {route.cost} over {len(route.route) - 1} steps")
    print()
    print(render_grid(grid, highlight=route.route))
    print()


def transform_demo() -> None:
    """Demonstrate grid derivations: rotation, growth and insertion."""
    grid = Grid2D.from_rows([[1, 2, 3], [4, 5, 6]])

    print("=" * 40)
    print("Original:")
    print("=" * 40)
    print(grid.to_string_with_cell_width(3))
    print()

    print("Rotated 90° clockwise:")
    print(grid.rotate90().to_string_with_cell_width(3))
    print()

    print("Grown by two rows of 0:")
    print(grid.grow_y(2, 0).to_string_with_cell_width(3))
    print()

    spread = Grid2D.new_constant(Bounds(5, 5), 0)
    spread.transform_neighbors(pt(2, 2), lambda _, value: value + 1)
    spread.transform_cardinal_neighbors(pt(2, 2), lambda _, value: value + 1)
    print("Neighborhood increments around (2,2):")
    print(render_grid(spread, highlight=[pt(2, 2)], cell_width=2))
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    shortest_path_demo(sys.argv[1] if len(sys.argv) > 1 else "small")
    transform_demo()
