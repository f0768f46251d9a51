"""
Shared point, direction and bounds types for grid algorithms.

Coordinates are unsigned and laid out like this:

    +------------------------  y = 0
    |
    |    *
    |
    x = 0

The * is at (x=4, y=2). x grows rightward, y grows downward.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator

__all__ = [
    "Bounds",
    "CARDINAL_DIRECTIONS",
    "Direction",
    "Point",
    "Rect",
    "pt",
    "reading_order",
]


class Direction(Enum):
    """Cardinal direction for movement."""

    UP = "up"  # Decreasing y
    LEFT = "left"  # Decreasing x
    RIGHT = "right"  # Increasing x
    DOWN = "down"  # Increasing y

    def opposite(self) -> Direction:
        match self:
            case Direction.LEFT:
                return Direction.RIGHT
            case Direction.RIGHT:
                return Direction.LEFT
            case Direction.UP:
                return Direction.DOWN
            case Direction.DOWN:
                return Direction.UP

    def clockwise90(self) -> Direction:
        match self:
            case Direction.UP:
                return Direction.RIGHT
            case Direction.RIGHT:
                return Direction.DOWN
            case Direction.DOWN:
                return Direction.LEFT
            case Direction.LEFT:
                return Direction.UP


CARDINAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.DOWN,
)

# Neighbor offsets; order is part of the contract
_CARDINAL_DELTAS = ((-1, 0), (1, 0), (0, -1), (0, 1))  # left, right, up, down
_COMPASS_DELTAS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


# =============================================================================
# Point
# =============================================================================


@dataclass(frozen=True, order=True)
class Point:
    """
    An unsigned 2D coordinate.

    Points order lexicographically by (x, y). That is NOT the row-major order
    produced by Bounds.iter_horizontal; use reading_order as a sort key when
    sorted points must line up with horizontal iteration.
    """

    x: int
    y: int

    ORIGIN: ClassVar[Point]

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Point coordinates must be non-negative, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    def index(self, width: int) -> int:
        """Offset of this point in a flat row-major buffer of the given width."""
        return self.x + self.y * width

    def _bounded_relatives(
        self, bounds: Bounds, deltas: Iterable[tuple[int, int]]
    ) -> Iterator[Point]:
        for dx, dy in deltas:
            x = self.x + dx
            y = self.y + dy
            if 0 <= x < bounds.width and 0 <= y < bounds.height:
                yield Point(x, y)

    def cardinal_neighbors(self, bounds: Bounds) -> Iterator[Point]:
        """In-bounds neighbors, always in the order left, right, up, down."""
        return self._bounded_relatives(bounds, _CARDINAL_DELTAS)

    def neighbors(self, bounds: Bounds) -> Iterator[Point]:
        """In-bounds compass neighbors (including diagonals) in fixed delta order."""
        return self._bounded_relatives(bounds, _COMPASS_DELTAS)

    def left(self) -> Point | None:
        return Point(self.x - 1, self.y) if self.x > 0 else None

    def right(self, width: int) -> Point | None:
        return Point(self.x + 1, self.y) if self.x + 1 < width else None

    def right_unbounded(self) -> Point:
        return Point(self.x + 1, self.y)

    def up(self) -> Point | None:
        return Point(self.x, self.y - 1) if self.y > 0 else None

    def down(self, height: int) -> Point | None:
        return Point(self.x, self.y + 1) if self.y + 1 < height else None

    def down_unbounded(self) -> Point:
        return Point(self.x, self.y + 1)

    def cardinal_neighbor(self, direction: Direction, bounds: Bounds) -> Point | None:
        match direction:
            case Direction.LEFT:
                return self.left()
            case Direction.RIGHT:
                return self.right(bounds.width)
            case Direction.UP:
                return self.up()
            case Direction.DOWN:
                return self.down(bounds.height)

    def move_by(self, direction: Direction, distance: int, bounds: Bounds) -> Point | None:
        """Move `distance` steps in `direction`, or None if that leaves the bounds."""
        match direction:
            case Direction.UP if self.y >= distance:
                return Point(self.x, self.y - distance)
            case Direction.LEFT if self.x >= distance:
                return Point(self.x - distance, self.y)
            case Direction.DOWN if self.y + distance < bounds.height:
                return Point(self.x, self.y + distance)
            case Direction.RIGHT if self.x + distance < bounds.width:
                return Point(self.x + distance, self.y)
            case _:
                return None

    def move_by_delta(self, dx: int, dy: int, bounds: Bounds) -> Point | None:
        new_x = self.x + dx
        new_y = self.y + dy
        if new_x < 0 or new_x >= bounds.width:
            return None
        if new_y < 0 or new_y >= bounds.height:
            return None
        return Point(new_x, new_y)

    def manhattan_distance(self, other: Point) -> int:
        return self.horizontal_distance(other) + self.vertical_distance(other)

    def vertical_distance(self, other: Point) -> int:
        return max(self.y, other.y) - min(self.y, other.y)

    def horizontal_distance(self, other: Point) -> int:
        return max(self.x, other.x) - min(self.x, other.x)

    def to(self, other: Point) -> Iterator[Point]:
        """Every point of the inclusive rectangle spanned by self and other, x outer, y inner."""
        min_x, max_x = min(self.x, other.x), max(self.x, other.x)
        min_y, max_y = min(self.y, other.y), max(self.y, other.y)
        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                yield Point(x, y)

    def direction_to(self, other: Point) -> Direction | None:
        """The cardinal direction of `other` if it is exactly one step away."""
        if self.left() == other:
            return Direction.LEFT
        if self.right_unbounded() == other:
            return Direction.RIGHT
        if self.up() == other:
            return Direction.UP
        if self.down_unbounded() == other:
            return Direction.DOWN
        return None


Point.ORIGIN = Point(0, 0)


def pt(x: int, y: int) -> Point:
    """Shorthand constructor for Point."""
    return Point(x, y)


def reading_order(point: Point) -> tuple[int, int]:
    """Sort key matching Bounds.iter_horizontal (row-major) order."""
    return (point.y, point.x)


# =============================================================================
# Bounds and Rect
# =============================================================================


@dataclass(frozen=True)
class Bounds:
    """Rectangular extent (width, height) within which points are valid."""

    width: int
    height: int

    INFINITE: ClassVar[Bounds]

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def iter_vertical(self) -> Iterator[Point]:
        """Column-major traversal: x outer, y inner."""
        for x in range(self.width):
            for y in range(self.height):
                yield Point(x, y)

    def iter_horizontal(self) -> Iterator[Point]:
        """Row-major traversal: y outer, x inner."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def iter_horizontal_rev(self) -> Iterator[Point]:
        for y in reversed(range(self.height)):
            for x in reversed(range(self.width)):
                yield Point(x, y)

    def bottom_right(self) -> Point:
        if self.is_empty():
            raise ValueError(f"Empty bounds {self.width}x{self.height} have no bottom-right point")
        return Point(self.width - 1, self.height - 1)

    def corners(self) -> list[Point]:
        """Corner points in the order top-left, bottom-left, top-right, bottom-right."""
        br = self.bottom_right()
        return [Point.ORIGIN, Point(0, br.y), Point(br.x, 0), br]

    def contains(self, point: Point) -> bool:
        return point.x < self.width and point.y < self.height

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)


Bounds.INFINITE = Bounds(sys.maxsize, sys.maxsize)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle between two inclusive corners, normalized on construction."""

    origin: Point
    terminex: Point

    def __post_init__(self) -> None:
        a, b = self.origin, self.terminex
        object.__setattr__(self, "origin", Point(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "terminex", Point(max(a.x, b.x), max(a.y, b.y)))

    def contains(self, point: Point) -> bool:
        return (
            self.origin.x <= point.x <= self.terminex.x
            and self.origin.y <= point.y <= self.terminex.y
        )

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)
