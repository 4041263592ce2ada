"""Geometry utilities for buffer-plotter."""

from .types import Point, Outline
from .errors import GeometryError, InvalidGeometry, PrecisionOverflow
from .polygon import (
    as_points,
    open_ring,
    polygon_signed_area,
)
from .simplify import simplify_ring, perpendicular_distance

__all__ = [
    "Point",
    "Outline",
    "GeometryError",
    "InvalidGeometry",
    "PrecisionOverflow",
    "as_points",
    "open_ring",
    "polygon_signed_area",
    "simplify_ring",
    "perpendicular_distance",
]
