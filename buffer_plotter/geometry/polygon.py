"""Polygon helpers shared by the simplifier and the offset strategies."""

import math
from typing import Iterable, List, Sequence

from .errors import InvalidGeometry
from .types import Point

MIN_RING_POINTS = 3


def as_points(polygon: Iterable) -> List[Point]:
    """Copy a sequence of points or (x, y) pairs into a new list of Points."""
    points = []
    for p in polygon:
        x, y = p
        points.append(Point(float(x), float(y)))
    return points


def require_ring(polygon: Iterable) -> List[Point]:
    """Return a copy of *polygon*, raising InvalidGeometry if it cannot form a ring."""
    points = as_points(polygon)
    if len(points) < MIN_RING_POINTS:
        raise InvalidGeometry(
            f"a closed polygon needs at least {MIN_RING_POINTS} points, got {len(points)}"
        )
    return points


def open_ring(points: Sequence[Point], tolerance: float = 1e-9) -> List[Point]:
    """Drop an explicit closing point that repeats the first vertex.

    SVG paths and vpype lines store closed shapes with the start point
    repeated at the end; rings in this package close implicitly.
    """
    result = list(points)
    while len(result) > 1 and math.dist(tuple(result[0]), tuple(result[-1])) <= tolerance:
        result.pop()
    return result


def polygon_signed_area(polygon: Sequence[Point]) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise.
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0
