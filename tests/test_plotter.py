"""Tests for the outline/buffer plotting pipeline."""

import math

import pytest
from buffer_plotter.geometry import InvalidGeometry, Point
from buffer_plotter.offset import PolygonOffsetEngine, OffsetStrategy
from buffer_plotter.plotter import Plotter, PlotterSettings, plot_buffer, plot_points

# 10x10 square with a redundant point in the middle of every edge
EDGED_SQUARE = [
    (0, 0), (5, 0), (10, 0), (10, 5),
    (10, 10), (5, 10), (0, 10), (0, 5),
]


def _corners(points):
    return sorted((round(p.x, 6), round(p.y, 6)) for p in points)


class CountingStrategy(OffsetStrategy):
    name = "approximate"

    def __init__(self):
        self.seen = []

    def offset(self, polygon, distance):
        self.seen.append(len(polygon))
        return [Point(p.x, p.y) for p in polygon]


def test_default_settings():
    """Defaults match the values the plotter was tuned with."""
    settings = PlotterSettings()
    assert settings.buffer_distance == 40.0
    assert settings.tolerance == 10.0
    assert settings.use_exact_strategy is True
    assert settings.scale == 100.0


def test_plot_points_simplifies():
    """Marker outline drops the redundant edge points."""
    outline = plot_points(EDGED_SQUARE, PlotterSettings(tolerance=0.1))
    assert outline.label == "marker"
    assert outline.points == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


def test_plot_buffer_exact():
    """Exact buffer of the square is a bigger square."""
    settings = PlotterSettings(buffer_distance=1, tolerance=0.1)
    outline = plot_buffer(EDGED_SQUARE, settings)
    assert outline.label == "buffer"
    assert _corners(outline.points) == _corners(
        [Point(-1, -1), Point(11, -1), Point(11, 11), Point(-1, 11)]
    )


def test_plot_buffer_approximate_simplifies_first():
    """The approximate strategy only sees the simplified corners."""
    settings = PlotterSettings(buffer_distance=1, tolerance=0.1, use_exact_strategy=False)
    outline = plot_buffer(EDGED_SQUARE, settings)

    d = math.sqrt(0.5)
    expected = [(-d, -d), (10 + d, -d), (10 + d, 10 + d), (-d, 10 + d)]
    assert len(outline.points) == 4
    for got, (x, y) in zip(outline.points, expected):
        assert got.x == pytest.approx(x)
        assert got.y == pytest.approx(y)


def test_plot_buffer_exact_uses_raw_points():
    """The exact path hands every input point to the offset."""
    strategy = CountingStrategy()
    engine = PolygonOffsetEngine(exact=strategy)
    plot_buffer(EDGED_SQUARE, PlotterSettings(buffer_distance=1, tolerance=0.1), engine)
    assert strategy.seen == [8]

    approximate = CountingStrategy()
    engine = PolygonOffsetEngine(approximate=approximate)
    settings = PlotterSettings(buffer_distance=1, tolerance=0.1, use_exact_strategy=False)
    plot_buffer(EDGED_SQUARE, settings, engine)
    assert approximate.seen == [4]


def test_plot_buffer_collapse():
    """Shrinking the square away is an error."""
    settings = PlotterSettings(buffer_distance=-6, tolerance=0.1)
    with pytest.raises(InvalidGeometry):
        plot_buffer(EDGED_SQUARE, settings)


def test_plotter_plot_selection():
    """Plotter returns markers then buffer, or just what was asked for."""
    plotter = Plotter(PlotterSettings(buffer_distance=2, tolerance=0.1))
    outlines = plotter.plot(EDGED_SQUARE)
    assert [o.label for o in outlines] == ["marker", "buffer"]
    assert len(outlines[0]) == 4
    assert _corners(outlines[1].points) == _corners(
        [Point(-2, -2), Point(12, -2), Point(12, 12), Point(-2, 12)]
    )

    assert [o.label for o in plotter.plot(EDGED_SQUARE, buffer=False)] == ["marker"]
    assert [o.label for o in plotter.plot(EDGED_SQUARE, points=False)] == ["buffer"]
    assert plotter.plot(EDGED_SQUARE, points=False, buffer=False) == []


def test_plotter_scale_setting_reaches_engine():
    """The configured scale is used by the exact strategy."""
    plotter = Plotter(PlotterSettings(scale=1, buffer_distance=0.4, tolerance=0))
    outline = plotter.plot_buffer([(0, 0), (10, 0), (10, 10), (0, 10)])
    # 0.4 rounds away at scale 1
    assert _corners(outline.points) == _corners(
        [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    )
