"""Tests for closed-ring simplification."""

import math

import pytest
from buffer_plotter.geometry import (
    InvalidGeometry,
    Point,
    perpendicular_distance,
    simplify_ring,
)


def _points(coords):
    return [Point(x, y) for x, y in coords]


def _wobbly_circle(n=60, radius=50.0):
    """Circle with a deterministic radial wobble, no collinear triples."""
    return [
        Point(
            (radius + 3 * math.sin(7 * i)) * math.cos(2 * math.pi * i / n),
            (radius + 3 * math.sin(7 * i)) * math.sin(2 * math.pi * i / n),
        )
        for i in range(n)
    ]


def test_collinear_point_removed():
    """A point in the middle of an edge is dropped."""
    square = _points([(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)])
    result = simplify_ring(square, tolerance=0.1)
    assert result == _points([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_zero_tolerance_keeps_simplified_input():
    """Rings without collinear triples come back unchanged at tolerance 0."""
    star = _points([(0, 0), (4, 1), (8, 0), (7, 4), (8, 8), (4, 7), (0, 8), (1, 4)])
    assert simplify_ring(star, 0) == star

    circle = _wobbly_circle()
    assert simplify_ring(circle, 0) == circle


def test_accepts_tuples():
    """Plain (x, y) pairs are accepted and converted to Points."""
    result = simplify_ring([(0, 0), (10, 0), (10, 10), (0, 10)], 0)
    assert result == _points([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_closing_edge_near_duplicate_removed():
    """A vertex hugging the start point on the closing edge is dropped."""
    ring = _points([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0.01)])
    result = simplify_ring(ring, tolerance=0.1)
    assert result == _points([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_monotonic_in_tolerance():
    """Raising the tolerance never keeps more points."""
    circle = _wobbly_circle()
    counts = [len(simplify_ring(circle, tol)) for tol in (0, 0.5, 1, 2, 4, 8, 16, 50, 200)]
    assert counts == sorted(counts, reverse=True)
    assert counts[0] == len(circle)


def test_result_length_bounds():
    """Result keeps between 2 and N points whatever the tolerance."""
    triangle = _points([(0, 0), (4, 0), (0, 3)])
    for tol in (0, 1, 2.9, 3.1, 100, 1e9):
        result = simplify_ring(triangle, tol)
        assert 2 <= len(result) <= 3

    circle = _wobbly_circle()
    for tol in (0, 1, 10, 1000):
        assert 2 <= len(simplify_ring(circle, tol)) <= len(circle)


def test_huge_tolerance_keeps_start_and_farthest():
    """With nothing else worth keeping the start and farthest vertex remain."""
    triangle = _points([(0, 0), (4, 0), (0, 3)])
    assert simplify_ring(triangle, 100) == _points([(0, 0), (4, 0)])


def test_input_not_mutated():
    """The caller's list and points are left alone."""
    square = _points([(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)])
    before = [Point(p.x, p.y) for p in square]
    result = simplify_ring(square, 0.1)
    assert square == before
    assert result is not square
    assert all(r is not p for r in result for p in square)


def test_too_few_points():
    """Fewer than three points is invalid geometry."""
    with pytest.raises(InvalidGeometry):
        simplify_ring([(0, 0), (1, 1)], 0)
    with pytest.raises(InvalidGeometry):
        simplify_ring([], 0)


def test_negative_tolerance():
    """Negative tolerance is rejected."""
    with pytest.raises(ValueError):
        simplify_ring([(0, 0), (1, 0), (0, 1)], -1)


def test_perpendicular_distance():
    """Distance to the chord line, or to the point when the chord is empty."""
    assert perpendicular_distance(Point(5, 3), Point(0, 0), Point(10, 0)) == pytest.approx(3)
    assert perpendicular_distance(Point(20, -4), Point(0, 0), Point(10, 0)) == pytest.approx(4)
    assert perpendicular_distance(Point(3, 4), Point(0, 0), Point(0, 0)) == pytest.approx(5)
