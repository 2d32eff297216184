import math

import numpy as np
import pytest

from Nodes.errors import InvalidArgumentError
from Nodes.Point import Point
from Nodes.Rectangle import Rectangle


class TestPoint:
    def test_equality_is_exact_and_hashable(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(1, 2.0000001)
        assert len({Point(1, 2), Point(1.0, 2.0)}) == 1

    def test_is_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_of_coerces_sequences_and_arrays(self):
        assert Point.of((3, 4)) == Point(3, 4)
        assert Point.of([3.5, -1]) == Point(3.5, -1)
        assert Point.of(np.array([0.25, 0.5])) == Point(0.25, 0.5)
        p = Point(1, 1)
        assert Point.of(p) is p

    @pytest.mark.parametrize("bad", [None, (1,), (1, 2, 3), "xy", ("a", 1), 7])
    def test_of_rejects_malformed(self, bad):
        with pytest.raises(InvalidArgumentError):
            Point.of(bad)

    @pytest.mark.parametrize("x, y", [(math.nan, 0), (0, math.inf), (-math.inf, 1)])
    def test_rejects_non_finite(self, x, y):
        with pytest.raises(InvalidArgumentError):
            Point(x, y)

    @pytest.mark.parametrize("x, y", [(None, 1), (0, "1"), ([1], 2)])
    def test_rejects_non_numeric_coordinates(self, x, y):
        with pytest.raises(InvalidArgumentError):
            Point(x, y)

    def test_distances(self):
        assert Point(0, 0).distance_squared_to(Point(3, 4)) == 25
        assert Point(0, 0).distance_to(Point(3, 4)) == 5


class TestRectangle:
    def test_contains_is_inclusive(self):
        r = Rectangle(-1, -1, 1, 1)
        assert r.contains(Point(0, 0))
        assert r.contains(Point(1, 1))
        assert r.contains(Point(-1, 0.5))
        assert not r.contains(Point(2, 1))

    def test_intersects_counts_touching_boundaries(self):
        r = Rectangle(0, 0, 1, 1)
        assert r.intersects(Rectangle(1, 1, 2, 2))
        assert r.intersects(Rectangle(0.2, 0.2, 0.3, 0.3))
        assert not r.intersects(Rectangle(1.01, 0, 2, 1))
        assert Rectangle.plane().intersects(r)

    def test_distance_squared_to(self):
        r = Rectangle(0, 0, 2, 1)
        assert r.distance_squared_to(Point(1, 0.5)) == 0
        assert r.distance_squared_to(Point(3, 0.5)) == 1
        assert r.distance_squared_to(Point(-3, 5)) == 9 + 16
        assert r.distance_to(Point(-3, 5)) == 5

    def test_unbounded_plane_has_zero_distance(self):
        assert Rectangle.plane().distance_squared_to(Point(1e9, -1e9)) == 0

    def test_degenerate_rectangle_is_valid(self):
        r = Rectangle(1, 1, 1, 1)
        assert r.area() == 0
        assert r.contains(Point(1, 1))

    @pytest.mark.parametrize("bounds", [(1, 0, 0, 1), (0, 1, 1, 0), (0, math.nan, 1, 1)])
    def test_rejects_inverted_or_nan_bounds(self, bounds):
        with pytest.raises(InvalidArgumentError):
            Rectangle(*bounds)

    @pytest.mark.parametrize("bounds", [(None, 0, 1, 1), (0, 0, "1", 1)])
    def test_rejects_non_numeric_bounds(self, bounds):
        with pytest.raises(InvalidArgumentError):
            Rectangle(*bounds)

    def test_of(self):
        assert Rectangle.of((0, 0, 1, 2)) == Rectangle(0, 0, 1, 2)
        with pytest.raises(InvalidArgumentError):
            Rectangle.of(None)
        with pytest.raises(InvalidArgumentError):
            Rectangle.of((0, 0, 1))

    def test_clip_replaces_only_given_bounds(self):
        r = Rectangle.plane().clip(xmax=0.0)
        assert r.xmax == 0.0
        assert r.xmin == -math.inf and r.ymin == -math.inf and r.ymax == math.inf
        assert r.width() == math.inf
