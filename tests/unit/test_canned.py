"""Unit tests for ready-made profile loops."""

import math

import pytest

from profile2d.core.canned import (
    circle_blueprint,
    polygon_blueprint,
    polysides_blueprint,
    rectangle_blueprint,
    rounded_rectangle_blueprint,
)
from profile2d.domain import Arc, Line, Point


class TestPolygon:
    """Tests for polygon_blueprint."""

    def test_closes_loop(self):
        """Test the closing edge is added."""
        bp = polygon_blueprint([Point(0, 0), Point(4, 0), Point(0, 3)])
        assert len(bp.curves) == 3
        assert bp.curves[-1] == Line(Point(0, 3), Point(0, 0))
        assert bp.is_closed()

    def test_too_few_points(self):
        """Test two points do not make a polygon."""
        with pytest.raises(ValueError):
            polygon_blueprint([Point(0, 0), Point(1, 0)])


class TestRectangle:
    """Tests for rectangle builders."""

    def test_rectangle(self):
        """Test a centered rectangle."""
        bp = rectangle_blueprint(4, 2)
        assert bp.bounding_box.to_tuple() == (-2, -1, 2, 1)
        assert bp.first_point == Point(-2, -1)
        assert bp.orientation == "counterClockwise"

    def test_rectangle_center(self):
        """Test a rectangle around an explicit center."""
        bp = rectangle_blueprint(10, 10, Point(5, 5))
        assert bp.bounding_box.to_tuple() == (0, 0, 10, 10)

    @pytest.mark.parametrize("width,height", [(0, 1), (1, -1)])
    def test_invalid_sides(self, width, height):
        """Test non-positive sides are rejected."""
        with pytest.raises(ValueError):
            rectangle_blueprint(width, height)

    def test_rounded_rectangle(self):
        """Test every corner is rounded."""
        bp = rounded_rectangle_blueprint(10, 6, 1)
        assert len(bp.curves) == 8
        assert sum(isinstance(c, Arc) for c in bp.curves) == 4
        assert bp.bounding_box.to_tuple() == pytest.approx((-5, -3, 5, 3))
        assert bp.is_closed()

    def test_rounded_rectangle_zero_radius(self):
        """Test a zero radius gives a plain rectangle."""
        assert rounded_rectangle_blueprint(10, 6, 0) == rectangle_blueprint(10, 6)

    def test_rounded_rectangle_radius_too_large(self):
        """Test the radius must stay below half of the smaller side."""
        with pytest.raises(ValueError):
            rounded_rectangle_blueprint(10, 6, 3)


class TestRegularShapes:
    """Tests for regular polygons and circles."""

    def test_polysides(self):
        """Test a hexagon inscribed in a circle."""
        bp = polysides_blueprint(2.0, 6)
        assert len(bp.curves) == 6
        assert bp.first_point.is_close(Point(2, 0), 1e-12)
        for curve in bp.curves:
            assert curve.first_point.distance_to(Point(0, 0)) == pytest.approx(2.0)
            assert curve.length == pytest.approx(2.0)
        assert bp.orientation == "counterClockwise"

    def test_polysides_too_few_sides(self):
        """Test a regular polygon needs three sides."""
        with pytest.raises(ValueError):
            polysides_blueprint(1.0, 2)

    def test_circle(self):
        """Test a circle is a single full arc."""
        bp = circle_blueprint(3.0, Point(1, 1))
        (arc,) = bp.curves
        assert isinstance(arc, Arc)
        assert arc.is_full_circle
        assert arc.sweep == pytest.approx(2 * math.pi)
        assert bp.bounding_box.to_tuple() == pytest.approx((-2, -2, 4, 4))
        assert bp.is_inside(Point(1, 1))
