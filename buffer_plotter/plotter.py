"""Plotting pipeline: simplified outlines and simplified buffer outlines.

The pipeline only produces point lists. Whoever consumes the returned
``Outline`` objects (an SVG writer, a vpype layer) owns what happens next.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .geometry import Outline, as_points, simplify_ring
from .offset import (
    ApproximateOffsetStrategy,
    DEFAULT_SCALE,
    ExactOffsetStrategy,
    PolygonOffsetEngine,
    PyclipperBackend,
)

logger = logging.getLogger(__name__)

MARKER_LABEL = "marker"
BUFFER_LABEL = "buffer"


@dataclass
class PlotterSettings:
    """Parameters for plotting outlines and buffers."""
    buffer_distance: float = 40.0
    # 0 plots every point; 10 is a fairly good value for collider-sized shapes.
    tolerance: float = 10.0
    use_exact_strategy: bool = True
    scale: float = DEFAULT_SCALE
    miter_limit: float = 2.0

    def make_engine(self) -> PolygonOffsetEngine:
        backend = PyclipperBackend(miter_limit=self.miter_limit)
        return PolygonOffsetEngine(
            exact=ExactOffsetStrategy(backend=backend, scale=self.scale),
            approximate=ApproximateOffsetStrategy(),
        )


def plot_points(polygon: Iterable, settings: PlotterSettings) -> Outline:
    """Simplified outline of *polygon*."""
    return Outline(MARKER_LABEL, simplify_ring(polygon, settings.tolerance))


def plot_buffer(
    polygon: Iterable,
    settings: PlotterSettings,
    engine: Optional[PolygonOffsetEngine] = None,
) -> Outline:
    """Simplified outline of the buffer around *polygon*.

    The approximate strategy works on a simplified copy of the input, which
    cuts down the number of outliers its normal estimate produces.
    """
    if engine is None:
        engine = settings.make_engine()

    points = as_points(polygon)
    if settings.use_exact_strategy:
        candidates = points
    else:
        candidates = simplify_ring(points, settings.tolerance)

    offset_points = engine.offset(candidates, settings.buffer_distance, settings.use_exact_strategy)
    simplified = simplify_ring(offset_points, settings.tolerance)
    logger.debug(
        "buffer: %d input, %d candidates, %d offset, %d plotted",
        len(points), len(candidates), len(offset_points), len(simplified),
    )
    return Outline(BUFFER_LABEL, simplified)


class Plotter:
    """Produces marker and buffer outlines for polygons with fixed settings."""

    def __init__(self, settings: Optional[PlotterSettings] = None, engine: Optional[PolygonOffsetEngine] = None):
        self.settings = settings if settings is not None else PlotterSettings()
        self.engine = engine if engine is not None else self.settings.make_engine()

    def plot_points(self, polygon: Iterable) -> Outline:
        return plot_points(polygon, self.settings)

    def plot_buffer(self, polygon: Iterable) -> Outline:
        return plot_buffer(polygon, self.settings, self.engine)

    def plot(self, polygon: Iterable, points: bool = True, buffer: bool = True) -> List[Outline]:
        """Return the requested outlines, markers first."""
        polygon = as_points(polygon)
        outlines = []
        if points:
            outlines.append(self.plot_points(polygon))
        if buffer:
            outlines.append(self.plot_buffer(polygon))
        return outlines
