"""Unit tests for curve-curve intersection."""

import math

import pytest

from profile2d.core.intersections import CurveIntersection, blueprints_intersect, intersect_curves
from profile2d.domain import Arc, Blueprint, Line, Point


def assert_points(actual, expected, precision=1e-9):
    """Assert two point lists match in any order."""
    assert len(actual) == len(expected)
    for p in expected:
        assert any(p.is_close(q, precision) for q in actual), f"{p} not in {actual}"


def square(x0, y0, side):
    pts = [Point(x0, y0), Point(x0 + side, y0), Point(x0 + side, y0 + side), Point(x0, y0 + side)]
    return Blueprint([Line(a, b) for a, b in zip(pts, pts[1:] + pts[:1])])


class TestCurveIntersection:
    """Tests for the CurveIntersection result."""

    def test_empty(self):
        """Test the default result is empty."""
        assert CurveIntersection().is_empty()

    def test_common_segment_endpoints(self):
        """Test endpoints are reported per common segment."""
        result = CurveIntersection(common_segments=[Line(Point(0, 0), Point(1, 0))])
        assert not result.is_empty()
        assert result.common_segment_endpoints == [(Point(0, 0), Point(1, 0))]


class TestLineLine:
    """Tests for line/line intersections."""

    def test_crossing(self):
        """Test two diagonals crossing in the middle."""
        result = intersect_curves(
            Line(Point(0, 0), Point(10, 10)), Line(Point(0, 10), Point(10, 0))
        )
        assert_points(result.intersections, [Point(5, 5)])
        assert result.common_segments == []

    def test_parallel(self):
        """Test parallel lines do not meet."""
        result = intersect_curves(Line(Point(0, 0), Point(10, 0)), Line(Point(0, 1), Point(10, 1)))
        assert result.is_empty()

    def test_disjoint_segments(self):
        """Test lines that would meet only when extended."""
        result = intersect_curves(Line(Point(0, 0), Point(4, 4)), Line(Point(10, 0), Point(6, 4)))
        assert result.is_empty()

    def test_touching_at_end(self):
        """Test a T junction yields the junction point."""
        result = intersect_curves(Line(Point(0, 0), Point(10, 0)), Line(Point(5, 0), Point(5, 5)))
        assert_points(result.intersections, [Point(5, 0)])

    def test_collinear_overlap(self):
        """Test overlapping collinear lines yield a common segment."""
        result = intersect_curves(Line(Point(0, 0), Point(10, 0)), Line(Point(15, 0), Point(5, 0)))
        assert result.intersections == []
        assert len(result.common_segments) == 1
        (first, last), = result.common_segment_endpoints
        assert first.is_close(Point(5, 0), 1e-12)
        assert last == Point(10, 0)

    def test_collinear_end_to_end(self):
        """Test collinear lines sharing only an endpoint touch at it."""
        result = intersect_curves(Line(Point(0, 0), Point(5, 0)), Line(Point(5, 0), Point(10, 0)))
        assert_points(result.intersections, [Point(5, 0)])
        assert result.common_segments == []


class TestLineArc:
    """Tests for line/arc intersections."""

    def test_secant(self):
        """Test a line through a circle meets it twice."""
        circle = Arc.circle(Point(0, 0), 5.0)
        line = Line(Point(-10, 0), Point(10, 0))
        assert_points(intersect_curves(line, circle).intersections, [Point(-5, 0), Point(5, 0)])
        assert_points(intersect_curves(circle, line).intersections, [Point(-5, 0), Point(5, 0)])

    def test_tangent(self):
        """Test a tangent line yields exactly one point."""
        circle = Arc.circle(Point(0, 0), 5.0)
        line = Line(Point(-10, 5), Point(10, 5))
        assert_points(intersect_curves(line, circle).intersections, [Point(0, 5)])

    def test_outside_arc_range(self):
        """Test hits on the circle but off the arc are dropped."""
        upper = Arc(Point(0, 0), 5.0, 0.0, math.pi)
        line = Line(Point(0, -10), Point(0, 10))
        assert_points(intersect_curves(line, upper).intersections, [Point(0, 5)])


class TestArcArc:
    """Tests for arc/arc intersections."""

    def test_two_points(self):
        """Test two overlapping circles meet twice."""
        result = intersect_curves(Arc.circle(Point(0, 0), 5.0), Arc.circle(Point(6, 0), 5.0))
        assert_points(result.intersections, [Point(3, 4), Point(3, -4)])

    def test_external_tangent(self):
        """Test externally tangent circles meet once."""
        result = intersect_curves(Arc.circle(Point(0, 0), 5.0), Arc.circle(Point(10, 0), 5.0))
        assert_points(result.intersections, [Point(5, 0)])

    def test_internal_tangent(self):
        """Test internally tangent circles meet once."""
        result = intersect_curves(Arc.circle(Point(0, 0), 5.0), Arc.circle(Point(2, 0), 3.0))
        assert_points(result.intersections, [Point(5, 0)])

    def test_concentric(self):
        """Test concentric circles of different radii never meet."""
        result = intersect_curves(Arc.circle(Point(0, 0), 5.0), Arc.circle(Point(0, 0), 3.0))
        assert result.is_empty()

    def test_nested(self):
        """Test a small circle inside a large one never meets it."""
        result = intersect_curves(Arc.circle(Point(0, 0), 5.0), Arc.circle(Point(1, 0), 1.0))
        assert result.is_empty()

    def test_co_circular_overlap(self):
        """Test arcs on the same circle share their overlap."""
        first = Arc(Point(0, 0), 5.0, 0.0, math.pi)
        second = Arc(Point(0, 0), 5.0, math.pi / 2, math.pi)
        result = intersect_curves(first, second)
        assert len(result.common_segments) == 1
        overlap = result.common_segments[0]
        assert overlap.first_point.is_close(Point(0, 5), 1e-9)
        assert overlap.last_point.is_close(Point(-5, 0), 1e-9)

    def test_co_circular_overlap_follows_first_curve(self):
        """Test the overlap is oriented like the first arc."""
        first = Arc(Point(0, 0), 5.0, math.pi, -math.pi)
        second = Arc(Point(0, 0), 5.0, math.pi / 2, math.pi)
        overlap = intersect_curves(first, second).common_segments[0]
        assert overlap.sweep < 0
        assert overlap.first_point.is_close(Point(-5, 0), 1e-9)
        assert overlap.last_point.is_close(Point(0, 5), 1e-9)


class TestBlueprintsIntersect:
    """Tests for loop/loop intersection checks."""

    def test_crossing_loops(self):
        """Test overlapping squares intersect."""
        assert blueprints_intersect(square(0, 0, 10), square(5, 5, 10))

    def test_far_loops(self):
        """Test distant squares do not intersect."""
        assert not blueprints_intersect(square(0, 0, 10), square(50, 50, 10))

    def test_nested_loops(self):
        """Test a square inside another does not touch it."""
        assert not blueprints_intersect(square(0, 0, 10), square(2, 2, 2))


@pytest.mark.parametrize("precision", [1e-12, 1e-9, 1e-6])
def test_precision_floor(precision):
    """Test the crossing is found for any requested precision."""
    result = intersect_curves(
        Line(Point(0, 0), Point(10, 10)), Line(Point(0, 10), Point(10, 0)), precision
    )
    assert len(result.intersections) == 1
