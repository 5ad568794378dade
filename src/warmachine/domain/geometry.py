"""
Local map geometry for a single country's city view.

Every country is drawn on the same 10x10 city grid centred on the country's
local origin (0, 0).  This module converts grid cells into local coordinates,
places the attacker block for an incoming war, and answers the segment
questions used to decide which city is the real frontier.

Coordinate System:
------------------
- The grid covers a 1480x680 area; each cell is 148x68.
- Grid column 0 is the western edge, row 0 the northern edge.
- Local ``x`` grows to the east and local ``y`` grows to the south, so a
  NORTH border city has ``y < 0`` and a WEST border city has ``x < 0``.
- Attackers are drawn outside the grid: 800 units east/west of the origin,
  or 380 units north/south of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from warmachine.domain.enums import BorderDirection

CITY_GRID_WIDTH = 1480
CITY_GRID_HEIGHT = 680
CITY_GRID_COLUMNS = 10
CITY_GRID_ROWS = 10
CITY_BLOCK_WIDTH = CITY_GRID_WIDTH // CITY_GRID_COLUMNS
CITY_BLOCK_HEIGHT = CITY_GRID_HEIGHT // CITY_GRID_ROWS
CITY_START_X = -CITY_GRID_WIDTH // 2
CITY_START_Y = -300

ATTACKER_HORIZONTAL_OFFSET = 800
ATTACKER_VERTICAL_OFFSET = 380


@dataclass(frozen=True, slots=True)
class Point:
    """A position in a country's local coordinates.

    Example:
        >>> Point(3.0, 4.0).distance_to(Point(0.0, 0.0))
        5.0
    """

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)


def city_position(grid_x: int, grid_y: int) -> Point:
    """
    Return the centre of a grid cell in local coordinates.

    Args:
        grid_x: Column, 0 (west) to 9 (east)
        grid_y: Row, 0 (north) to 9 (south)

    Returns:
        Centre of the cell

    Example:
        >>> city_position(0, 0)
        Point(x=-666.0, y=-266.0)
        >>> city_position(9, 9)
        Point(x=666.0, y=346.0)
    """
    x = CITY_START_X + grid_x * CITY_BLOCK_WIDTH + CITY_BLOCK_WIDTH / 2
    y = CITY_START_Y + grid_y * CITY_BLOCK_HEIGHT + CITY_BLOCK_HEIGHT / 2
    return Point(float(x), float(y))


def attacker_position(direction: BorderDirection, defender_origin: Point = ORIGIN) -> Point:
    """
    Where the attacking country's block is drawn.

    ``direction`` is the side of the defender that faces the attacker.  The
    block sits outside the grid on that side, aligned with the defender's
    origin along the other axis.

    Example:
        >>> attacker_position(BorderDirection.NORTH)
        Point(x=0.0, y=-380.0)
        >>> attacker_position(BorderDirection.EAST, Point(10.0, 20.0))
        Point(x=800.0, y=20.0)
    """
    match direction:
        case BorderDirection.NORTH:
            return Point(defender_origin.x, float(-ATTACKER_VERTICAL_OFFSET))
        case BorderDirection.SOUTH:
            return Point(defender_origin.x, float(ATTACKER_VERTICAL_OFFSET))
        case BorderDirection.EAST:
            return Point(float(ATTACKER_HORIZONTAL_OFFSET), defender_origin.y)
        case BorderDirection.WEST:
            return Point(float(-ATTACKER_HORIZONTAL_OFFSET), defender_origin.y)
    raise ValueError(f"Unknown direction: {direction!r}")


def is_on_side(point: Point, direction: BorderDirection, origin: Point = ORIGIN) -> bool:
    """True when ``point`` lies strictly on the ``direction`` side of ``origin``."""

    match direction:
        case BorderDirection.NORTH:
            return point.y < origin.y
        case BorderDirection.SOUTH:
            return point.y > origin.y
        case BorderDirection.EAST:
            return point.x > origin.x
        case BorderDirection.WEST:
            return point.x < origin.x
    raise ValueError(f"Unknown direction: {direction!r}")


def outward_extent(point: Point, direction: BorderDirection) -> float:
    """How far ``point`` reaches towards ``direction`` (larger is further out)."""

    match direction:
        case BorderDirection.NORTH:
            return -point.y
        case BorderDirection.SOUTH:
            return point.y
        case BorderDirection.EAST:
            return point.x
        case BorderDirection.WEST:
            return -point.x
    raise ValueError(f"Unknown direction: {direction!r}")


def distance_to_segment(start: Point, end: Point, point: Point) -> float:
    """
    Shortest distance from ``point`` to the segment ``start``-``end``.

    The projection parameter is clamped to the segment, so points beyond either
    end measure to the nearest endpoint.

    Example:
        >>> distance_to_segment(Point(0, 0), Point(10, 0), Point(5, 3))
        3.0
        >>> distance_to_segment(Point(0, 0), Point(10, 0), Point(13, 4))
        5.0
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return point.distance_to(start)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    closest = Point(start.x + t * dx, start.y + t * dy)
    return point.distance_to(closest)


def line_passes_near_point(
    start: Point, end: Point, point: Point, max_distance: float = 20.0
) -> bool:
    return distance_to_segment(start, end, point) <= max_distance


def is_point_between(a: Point, b: Point, c: Point, tolerance: float = 10.0) -> bool:
    """
    True when ``c`` lies (approximately) on the straight path from ``a`` to ``b``.

    Uses the triangle inequality: ``|AC| + |CB|`` equals ``|AB|`` only for
    points on the segment.
    """
    detour = a.distance_to(c) + c.distance_to(b) - a.distance_to(b)
    return abs(detour) < tolerance
