"""Polygon offsetting for buffer-plotter."""

from .backend import ClippingBackend, PyclipperBackend, MAX_COORDINATE
from .strategies import (
    OffsetStrategy,
    ExactOffsetStrategy,
    ApproximateOffsetStrategy,
    DEFAULT_SCALE,
)
from .engine import PolygonOffsetEngine, offset_polygon

__all__ = [
    "ClippingBackend",
    "PyclipperBackend",
    "MAX_COORDINATE",
    "OffsetStrategy",
    "ExactOffsetStrategy",
    "ApproximateOffsetStrategy",
    "DEFAULT_SCALE",
    "PolygonOffsetEngine",
    "offset_polygon",
]
