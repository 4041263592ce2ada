"""buffer-plotter: simplified outlines and offset buffers for closed polygons."""

__version__ = "0.1.0"

from .geometry import Point, Outline, InvalidGeometry, PrecisionOverflow, simplify_ring
from .offset import PolygonOffsetEngine, offset_polygon
from .plotter import Plotter, PlotterSettings

__all__ = [
    "Point",
    "Outline",
    "InvalidGeometry",
    "PrecisionOverflow",
    "simplify_ring",
    "PolygonOffsetEngine",
    "offset_polygon",
    "Plotter",
    "PlotterSettings",
]
