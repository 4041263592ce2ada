"""Integer-domain clipping backends for the exact offset strategy."""

from typing import List, Protocol, Sequence, Tuple

import pyclipper

IntPath = List[Tuple[int, int]]

# Clipper's "high range": coordinates must stay within a signed 62-bit value.
MAX_COORDINATE = 0x3FFFFFFFFFFFFFFF

JOIN_MITER = "miter"
JOIN_SQUARE = "square"
JOIN_ROUND = "round"


class ClippingBackend(Protocol):
    """Offsets one closed integer path, returning zero or more contours.

    ``max_growth`` bounds how far, in multiples of the offset distance, a
    join may move a vertex.
    """

    max_coordinate: int
    max_growth: float

    def offset_paths(self, path: Sequence[Tuple[int, int]], join_type: str, delta: float) -> List[IntPath]:
        ...


class PyclipperBackend:
    """ClippingBackend built on pyclipper's ClipperOffset."""

    max_coordinate = MAX_COORDINATE

    _join_types = {
        JOIN_MITER: pyclipper.JT_MITER,
        JOIN_SQUARE: pyclipper.JT_SQUARE,
        JOIN_ROUND: pyclipper.JT_ROUND,
    }

    def __init__(self, miter_limit: float = 2.0, arc_tolerance: float = 0.25):
        self.miter_limit = miter_limit
        self.arc_tolerance = arc_tolerance

    @property
    def max_growth(self) -> float:
        # Clipper clamps miter limits below 2 up to 2
        return max(self.miter_limit, 2.0)

    def offset_paths(self, path: Sequence[Tuple[int, int]], join_type: str, delta: float) -> List[IntPath]:
        try:
            join = self._join_types[join_type]
        except KeyError:
            raise ValueError(f"unknown join type: {join_type!r}") from None

        co = pyclipper.PyclipperOffset(miter_limit=self.miter_limit, arc_tolerance=self.arc_tolerance)
        co.AddPath(list(path), join, pyclipper.ET_CLOSEDPOLYGON)

        solution = co.Execute(delta)
        return [[(int(x), int(y)) for x, y in contour] for contour in solution]
