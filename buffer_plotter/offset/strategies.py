"""Polygon offset strategies.

Two ways of moving a closed ring a fixed distance away from itself:

- ``ExactOffsetStrategy`` scales the ring into the integer domain and lets
  a clipping backend compute a mitred offset. Robust on non-convex input.
- ``ApproximateOffsetStrategy`` pushes each vertex along a normal estimated
  from the midpoints of its two edges. Cheap, but sharp corners crowd and
  tight concave regions can fold over, leaving a self-intersecting ring.
  That result is returned as is.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..geometry.errors import InvalidGeometry, PrecisionOverflow
from ..geometry.polygon import require_ring
from ..geometry.types import Point
from .backend import JOIN_MITER, ClippingBackend, IntPath, PyclipperBackend

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 100.0

# Normals shorter than this are treated as zero, leaving the vertex in place.
NORMAL_EPSILON = 1e-5


class OffsetStrategy(ABC):
    """Something that can offset a closed ring by a signed distance."""

    name: str = ""

    @abstractmethod
    def offset(self, polygon: Iterable, distance: float) -> List[Point]:
        """Return a new ring offset by *distance* (positive grows a CCW ring)."""


class ExactOffsetStrategy(OffsetStrategy):
    """Mitred offset computed by an integer-domain clipping backend.

    Only the first contour returned by the backend is kept. Offsets that
    split the ring into several pieces (deep concavities at large inward
    distances) lose every piece but one; ``offset_contours`` returns them all.
    """

    name = "exact"

    def __init__(self, backend: Optional[ClippingBackend] = None, scale: float = DEFAULT_SCALE):
        if not scale > 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.backend = backend if backend is not None else PyclipperBackend()
        self.scale = scale

    def to_scaled(self, points: List[Point], distance: float) -> IntPath:
        """Scale *points* into the backend's integer domain."""
        if not math.isfinite(distance):
            raise InvalidGeometry(f"offset distance must be finite, got {distance}")
        extent = 0.0
        for p in points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise InvalidGeometry(f"non-finite coordinate in polygon: {p}")
            extent = max(extent, abs(p.x), abs(p.y))

        limit = self.backend.max_coordinate
        # Joins can push a vertex out by more than the distance itself
        reach = abs(distance) * self.backend.max_growth
        if (extent + reach) * self.scale > limit:
            raise PrecisionOverflow(
                f"coordinates up to {extent:g} offset by {distance:g} (reaching {reach:g}) at scale {self.scale:g} "
                f"exceed the backend integer range ({limit})"
            )

        return [(int(round(p.x * self.scale)), int(round(p.y * self.scale))) for p in points]

    def from_scaled(self, contour: IntPath) -> List[Point]:
        return [Point(x / self.scale, y / self.scale) for x, y in contour]

    def offset_contours(self, polygon: Iterable, distance: float) -> List[List[Point]]:
        """Offset *polygon* and return every contour the backend produced."""
        points = require_ring(polygon)
        scaled = self.to_scaled(points, distance)
        contours = self.backend.offset_paths(scaled, JOIN_MITER, distance * self.scale)
        if not contours:
            raise InvalidGeometry(
                f"offsetting by {distance:g} leaves no area (scale={self.scale:g})"
            )
        return [self.from_scaled(c) for c in contours]

    def offset(self, polygon: Iterable, distance: float) -> List[Point]:
        contours = self.offset_contours(polygon, distance)
        if len(contours) > 1:
            logger.warning(
                "offset by %g produced %d contours; keeping the first and discarding %d",
                distance, len(contours), len(contours) - 1,
            )
        return contours[0]


class ApproximateOffsetStrategy(OffsetStrategy):
    """Per-vertex displacement along a midpoint-estimated normal."""

    name = "approximate"

    def offset(self, polygon: Iterable, distance: float) -> List[Point]:
        points = require_ring(polygon)
        n = len(points)
        result = []
        for i in range(n):
            prev = points[(i - 1 + n) % n]
            curr = points[i]
            next_pt = points[(i + 1) % n]

            # Midpoints of prev->curr and curr->next
            mid_ax = (prev.x + curr.x) / 2.0
            mid_ay = (prev.y + curr.y) / 2.0
            mid_bx = (curr.x + next_pt.x) / 2.0
            mid_by = (curr.y + next_pt.y) / 2.0

            dx = mid_bx - mid_ax
            dy = mid_by - mid_ay
            length = math.hypot(dx, dy)
            if length < NORMAL_EPSILON:
                nx = ny = 0.0
            else:
                nx = dy / length
                ny = -dx / length

            result.append(Point(curr.x + nx * distance, curr.y + ny * distance))

        return result
