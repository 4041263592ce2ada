"""Exceptions raised by the geometry core."""


class GeometryError(ValueError):
    """Base class for errors caused by the shape of the input."""


class InvalidGeometry(GeometryError):
    """The polygon has too few vertices, or an offset annihilated it."""


class PrecisionOverflow(GeometryError):
    """Scaled coordinates would not fit the clipping backend's integer range."""
