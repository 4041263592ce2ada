"""Type definitions for buffer-plotter geometry."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    """2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Outline:
    """A closed ring of points tagged with the layer it is plotted on."""
    label: str
    points: List[Point] = field(default_factory=list)

    def __len__(self):
        return len(self.points)
