"""Dispatch between offset strategies."""

import logging
from typing import Dict, Iterable, List, Optional

from ..geometry.polygon import require_ring
from ..geometry.types import Point
from .strategies import ApproximateOffsetStrategy, ExactOffsetStrategy, OffsetStrategy

logger = logging.getLogger(__name__)


class PolygonOffsetEngine:
    """Holds the available offset strategies and routes calls to one of them.

    The exact and approximate strategies are always present; further
    strategies can be added with ``register`` and reached by name.
    """

    def __init__(
        self,
        exact: Optional[OffsetStrategy] = None,
        approximate: Optional[OffsetStrategy] = None,
    ):
        self.exact = exact if exact is not None else ExactOffsetStrategy()
        self.approximate = approximate if approximate is not None else ApproximateOffsetStrategy()
        self._strategies: Dict[str, OffsetStrategy] = {}
        self._strategies[ExactOffsetStrategy.name] = self.exact
        self._strategies[ApproximateOffsetStrategy.name] = self.approximate

    def register(self, strategy: OffsetStrategy, name: Optional[str] = None):
        key = name or strategy.name
        if not key:
            raise ValueError("strategy needs a name to be registered")
        self._strategies[key] = strategy

    def strategy(self, name: str) -> OffsetStrategy:
        try:
            return self._strategies[name]
        except KeyError:
            raise KeyError(f"no offset strategy named {name!r}") from None

    def strategy_names(self) -> List[str]:
        return list(self._strategies)

    def offset_with(self, name: str, polygon: Iterable, distance: float) -> List[Point]:
        """Offset *polygon* using the strategy registered under *name*."""
        strategy = self.strategy(name)
        points = require_ring(polygon)
        logger.debug("offsetting %d points by %g using %s strategy", len(points), distance, name)
        return strategy.offset(points, distance)

    def offset(self, polygon: Iterable, distance: float, use_exact_strategy: bool = True) -> List[Point]:
        """Offset a closed ring.

        Args:
            polygon: At least three points or (x, y) pairs.
            distance: Signed offset; positive is outward for a CCW ring.
            use_exact_strategy: Use the clipping-based offset when True,
                the per-vertex normal approximation otherwise.

        Returns:
            A newly built list of points.

        Raises:
            InvalidGeometry: fewer than three points, or the exact offset
                collapsed the ring.
            PrecisionOverflow: the exact offset cannot represent the
                coordinates at its scale.
        """
        name = ExactOffsetStrategy.name if use_exact_strategy else ApproximateOffsetStrategy.name
        return self.offset_with(name, polygon, distance)


_default_engine = PolygonOffsetEngine()


def offset_polygon(polygon: Iterable, distance: float, use_exact_strategy: bool = True) -> List[Point]:
    """Offset *polygon* with a shared engine using the default strategies."""
    return _default_engine.offset(polygon, distance, use_exact_strategy)
