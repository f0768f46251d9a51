"""
Dense rectangular grid container indexed by Point.

Cells are stored row-major: grid[p] reads data[p.y][p.x]. Every row has
exactly bounds.width cells and there are exactly bounds.height rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Number
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

from best_first import Reverse, dijkstra
from grid_parser import parse_char_rows, parse_delimited_rows
from grid_types import Bounds, Direction, Point

__all__ = ["Grid2D", "CellFn"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# Type alias for per-cell callbacks: (point, current value) -> result
CellFn = Callable[[Point, T], U]


@dataclass(eq=False)
class Grid2D(Generic[T]):
    """
    A 2D grid of cells of type T.

    Prefer the from_rows and new_constant constructors; direct construction
    raises ValueError when data does not have the shape bounds describe.
    """

    data: list[list[T]]
    bounds: Bounds

    def __post_init__(self) -> None:
        widths = sorted({len(row) for row in self.data})
        if len(self.data) != self.bounds.height or any(w != self.bounds.width for w in widths):
            raise ValueError(
                f"Grid data does not match bounds {self.bounds.width}x{self.bounds.height}: "
                f"{len(self.data)} rows with widths {widths}"
            )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> Grid2D[T]:
        """
        Build a grid from rows of cells.

        Bounds come from the first row's length and the row count.

        Raises:
            ValueError: If rows differ in length
        """
        data = [list(row) for row in rows]
        width = len(data[0]) if data else 0
        mismatched = [(i, len(row)) for i, row in enumerate(data) if len(row) != width]
        if mismatched:
            details = ", ".join(f"row {i} has {n}" for i, n in mismatched)
            raise ValueError(f"Inconsistent row lengths: expected {width} cells per row, {details}")
        return cls(data, Bounds(width, len(data)))

    @classmethod
    def new_constant(cls, bounds: Bounds, value: T) -> Grid2D[T]:
        return cls([[value] * bounds.width for _ in range(bounds.height)], bounds)

    @classmethod
    def from_char_str(cls, text: str, parse: Callable[[str], T]) -> Grid2D[T]:
        """One cell per character, one row per line. See grid_parser.parse_char_rows."""
        return cls.from_rows(parse_char_rows(text, parse))

    @classmethod
    def from_delimited_str(cls, text: str, delimiter: str, parse: Callable[[str], T]) -> Grid2D[T]:
        """One cell per delimited field, one row per line. See grid_parser.parse_delimited_rows."""
        return cls.from_rows(parse_delimited_rows(text, delimiter, parse))

    def copy(self) -> Grid2D[T]:
        return Grid2D([list(row) for row in self.data], self.bounds)

    # =========================================================================
    # Indexing
    # =========================================================================

    def _check(self, point: Point) -> None:
        if not self.bounds.contains(point):
            raise IndexError(
                f"Point {point} out of bounds for {self.bounds.width}x{self.bounds.height} grid"
            )

    def __getitem__(self, point: Point) -> T:
        self._check(point)
        return self.data[point.y][point.x]

    def __setitem__(self, point: Point, value: T) -> None:
        self._check(point)
        self.data[point.y][point.x] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return self.data == other.data

    # Mutable; use as_tuple() for a hashable snapshot
    __hash__ = None  # type: ignore[assignment]

    def as_tuple(self) -> tuple[tuple[T, ...], ...]:
        return tuple(tuple(row) for row in self.data)

    def bottom_right(self) -> T:
        p = self.bounds.bottom_right()
        return self.data[p.y][p.x]

    # =========================================================================
    # Traversal
    # =========================================================================

    def rows(self) -> Iterator[Iterator[T]]:
        return (iter(row) for row in self.data)

    def cols(self) -> Iterator[Iterator[T]]:
        return (
            (self.data[y][x] for y in range(self.bounds.height))
            for x in range(self.bounds.width)
        )

    def enumerate_rows(self) -> Iterator[tuple[int, Iterator[T]]]:
        return enumerate(self.rows())

    def enumerate_cols(self) -> Iterator[tuple[int, Iterator[T]]]:
        return enumerate(self.cols())

    def iter_horizontal(self) -> Iterator[tuple[Point, T]]:
        return ((p, self.data[p.y][p.x]) for p in self.bounds.iter_horizontal())

    def iter_vertical(self) -> Iterator[tuple[Point, T]]:
        return ((p, self.data[p.y][p.x]) for p in self.bounds.iter_vertical())

    def row(self, y: int) -> Iterator[tuple[Point, T]]:
        """Cells of row y, left to right."""
        if not 0 <= y < self.bounds.height:
            raise IndexError(f"Invalid row number {y} for grid of height {self.bounds.height}")
        return ((Point(x, y), self.data[y][x]) for x in range(self.bounds.width))

    def col(self, x: int) -> Iterator[tuple[Point, T]]:
        """Cells of column x, top to bottom."""
        if not 0 <= x < self.bounds.width:
            raise IndexError(f"Invalid column number {x} for grid of width {self.bounds.width}")
        return ((Point(x, y), self.data[y][x]) for y in range(self.bounds.height))

    def cardinal_neighbors(self, point: Point) -> Iterator[tuple[Point, T]]:
        return ((p, self.data[p.y][p.x]) for p in point.cardinal_neighbors(self.bounds))

    def neighbors(self, point: Point) -> Iterator[tuple[Point, T]]:
        return ((p, self.data[p.y][p.x]) for p in point.neighbors(self.bounds))

    def cardinal_neighbor(self, point: Point, direction: Direction) -> tuple[Point, T] | None:
        p = point.cardinal_neighbor(direction, self.bounds)
        if p is None:
            return None
        return (p, self.data[p.y][p.x])

    # =========================================================================
    # Mutation
    # =========================================================================

    def _transform_points(self, points: Iterable[Point], f: CellFn[T, T]) -> None:
        # Materialize first so f never observes a half-updated neighborhood
        for p in list(points):
            self.data[p.y][p.x] = f(p, self.data[p.y][p.x])

    def transform(self, f: CellFn[T, T]) -> None:
        """Replace every cell with f(point, value), in row-major order."""
        self._transform_points(self.bounds.iter_horizontal(), f)

    def transform_neighbors(self, point: Point, f: CellFn[T, T]) -> None:
        """Replace each in-bounds compass neighbor of point with f(neighbor, value)."""
        self._transform_points(point.neighbors(self.bounds), f)

    def transform_cardinal_neighbors(self, point: Point, f: CellFn[T, T]) -> None:
        """Replace each in-bounds cardinal neighbor of point with f(neighbor, value)."""
        self._transform_points(point.cardinal_neighbors(self.bounds), f)

    def insert_row(self, y: int, value: T) -> None:
        """Insert a row of `value` so that it becomes row y."""
        if not 0 <= y <= self.bounds.height:
            raise IndexError(f"Invalid row insertion index {y} for grid of height {self.bounds.height}")
        self.data.insert(y, [value] * self.bounds.width)
        self.bounds = Bounds(self.bounds.width, self.bounds.height + 1)

    def insert_col(self, x: int, value: T) -> None:
        """Insert a column of `value` so that it becomes column x."""
        if not 0 <= x <= self.bounds.width:
            raise IndexError(f"Invalid column insertion index {x} for grid of width {self.bounds.width}")
        for line in self.data:
            line.insert(x, value)
        self.bounds = Bounds(self.bounds.width + 1, self.bounds.height)

    # =========================================================================
    # Derivations
    # =========================================================================

    def grow_y(self, by: int, fill: T) -> Grid2D[T]:
        """A new grid with `by` rows of `fill` appended at the bottom."""
        if by < 0:
            raise ValueError(f"Cannot grow grid by a negative number of rows ({by})")
        data = [list(row) for row in self.data]
        data.extend([fill] * self.bounds.width for _ in range(by))
        return Grid2D(data, Bounds(self.bounds.width, self.bounds.height + by))

    def rotate90(self) -> Grid2D[T]:
        """
        A new grid rotated 90° clockwise.

        Row r of the result is column r of this grid read bottom to top, so a
        W×H grid becomes H×W.
        """
        data = [list(reversed(list(col))) for col in self.cols()]
        return Grid2D(data, Bounds(self.bounds.height, self.bounds.width))

    def map(self, f: CellFn[T, U]) -> Grid2D[U]:
        """A grid of the same bounds holding f(point, value) for every cell."""
        data = [
            [f(Point(x, y), value) for x, value in enumerate(row)]
            for y, row in enumerate(self.data)
        ]
        return Grid2D(data, self.bounds)

    # =========================================================================
    # Display
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string_format_cell(str)

    def to_string_with_cell_width(self, width: int) -> str:
        """Each cell right-aligned to `width` characters (numbers) or left-aligned (text)."""
        def pad(value: T) -> str:
            text = str(value)
            return text.rjust(width) if isinstance(value, Number) else text.ljust(width)

        return self.to_string_format_cell(pad)

    def to_string_format_cell(self, formatter: Callable[[T], str]) -> str:
        return "\n".join("".join(formatter(value) for value in row) for row in self.data)

    # =========================================================================
    # Shortest path
    # =========================================================================

    def shortest_path(self, zero: Any = 0) -> Any:
        """
        Minimum total entry cost from the top-left to the bottom-right cell.

        Moves are cardinal steps. The start cell's value is excluded and every
        other entered cell, including the target, contributes its value. Cell
        values must be non-negative and support addition with `zero`.

        Args:
            zero: Starting cost, also returned for an empty grid
        """
        if self.bounds.is_empty():
            return zero

        target = self.bounds.bottom_right()

        def successors(state: _ShortestPathState) -> Iterator[_ShortestPathState]:
            for p, cost in self.cardinal_neighbors(state.point):
                yield _ShortestPathState(state.distance + cost, p)

        final = dijkstra(
            _ShortestPathState(zero, Point.ORIGIN),
            successors,
            lambda state: state.point == target,
        )
        if final is None:
            # Every cell is reachable by cardinal moves from the origin
            raise RuntimeError(
                f"shortest_path found no route across {self.bounds.width}x{self.bounds.height} grid"
            )
        logger.debug(
            "shortest_path: %r over %dx%d grid", final.distance, self.bounds.width, self.bounds.height
        )
        return final.distance


@dataclass(frozen=True)
class _ShortestPathState:
    """Accumulated cost with the location along for the ride."""

    distance: Any
    point: Point

    def cache_key(self) -> Hashable:
        return self.point

    def score(self) -> Reverse[Any]:
        return Reverse(self.distance)
