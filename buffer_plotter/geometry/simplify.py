"""Closed-ring simplification.

Ramer-Douglas-Peucker keeps the first and last point of a polyline no
matter what. A ring has no real endpoints, so the first vertex is
duplicated at the end before simplifying and the duplicate is removed
afterwards. Without the sentinel the closing edge is never tested and a
near-duplicate point tends to survive next to the start vertex.
"""

import logging
import math
from typing import Iterable, List

from .polygon import require_ring
from .types import Point

logger = logging.getLogger(__name__)


def perpendicular_distance(point: Point, start: Point, end: Point) -> float:
    """Distance from *point* to the line through *start* and *end*.

    Falls back to the plain point distance when the chord has zero length.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    chord = math.hypot(dx, dy)
    if chord == 0.0:
        return math.hypot(point.x - start.x, point.y - start.y)
    return abs(dy * (point.x - start.x) - dx * (point.y - start.y)) / chord


def _farthest(points: List[Point], first: int, last: int):
    index = first + 1
    max_dist = -1.0
    for i in range(first + 1, last):
        d = perpendicular_distance(points[i], points[first], points[last])
        if d > max_dist:
            index, max_dist = i, d
    return index, max_dist


def simplify_polyline(points: List[Point], tolerance: float, force_first_split: bool = False) -> List[Point]:
    """Ramer-Douglas-Peucker over an open polyline.

    With *force_first_split* the outermost segment always keeps its
    farthest interior point, whatever the tolerance.
    """
    n = len(points)
    if n < 3:
        return list(points)

    keep = [False] * n
    keep[0] = keep[-1] = True

    stack = [(0, n - 1, force_first_split)]
    while stack:
        first, last, forced = stack.pop()
        if last - first < 2:
            continue
        index, max_dist = _farthest(points, first, last)
        if forced or max_dist > tolerance:
            keep[index] = True
            stack.append((first, index, False))
            stack.append((index, last, False))

    return [p for p, k in zip(points, keep) if k]


def simplify_ring(polygon: Iterable, tolerance: float) -> List[Point]:
    """Reduce the vertex count of a closed ring within *tolerance*.

    Args:
        polygon: At least three points or (x, y) pairs, closing implicitly.
        tolerance: Maximum perpendicular deviation a discarded point may have.
            0 keeps every point that is not exactly collinear with its
            neighbours.

    Returns:
        A new list of at least two points, in input order.

    Raises:
        InvalidGeometry: fewer than three points.
        ValueError: negative tolerance.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    points = require_ring(polygon)

    # The chord of the outermost segment joins the first vertex to its own
    # copy, so its farthest point is always kept.
    sentinelled = points + [Point(points[0].x, points[0].y)]
    simplified = simplify_polyline(sentinelled, tolerance, force_first_split=True)
    result = simplified[:-1]

    logger.debug("simplified ring from %d to %d points (tolerance=%g)", len(points), len(result), tolerance)
    return result
