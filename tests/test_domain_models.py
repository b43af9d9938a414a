"""Tests for domain models to verify they work correctly."""

import math

import pytest

from profile2d.domain import (
    Arc,
    Blueprint,
    Blueprints,
    BoundingBox2D,
    CompoundBlueprint,
    Corner,
    Line,
    Point,
    PointCornerFilter,
    curve_from_dict,
    shape_from_dict,
)
from profile2d.exceptions import BlueprintError, CurveError, GeometryError, PointNotOnCurveError


def square(x0: float, y0: float, side: float) -> Blueprint:
    """Counter-clockwise square starting at its bottom-left corner."""
    pts = [
        Point(x0, y0),
        Point(x0 + side, y0),
        Point(x0 + side, y0 + side),
        Point(x0, y0 + side),
    ]
    return Blueprint([Line(a, b) for a, b in zip(pts, pts[1:] + pts[:1])])


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_vector_arithmetic(self) -> None:
        """Test addition, subtraction and scaling."""
        a = Point(1.0, 2.0)
        b = Point(3.0, -1.0)
        assert a + b == Point(4.0, 1.0)
        assert a - b == Point(-2.0, 3.0)
        assert a * 2 == Point(2.0, 4.0)
        assert 2 * a == Point(2.0, 4.0)
        assert -a == Point(-1.0, -2.0)
        assert b / 2 == Point(1.5, -0.5)

    def test_dot_and_cross(self) -> None:
        """Test dot and cross products."""
        assert Point(1, 0).dot(Point(0, 1)) == 0
        assert Point(1, 0).cross(Point(0, 1)) == 1
        assert Point(0, 1).cross(Point(1, 0)) == -1

    def test_normalized(self) -> None:
        """Test unit vector computation."""
        assert Point(3.0, 4.0).normalized() == Point(0.6, 0.8)
        with pytest.raises(ValueError):
            Point(0.0, 0.0).normalized()

    def test_rotated(self) -> None:
        """Test rotation around the origin and around a center."""
        p = Point(1.0, 0.0).rotated(math.pi / 2)
        assert p.is_close(Point(0.0, 1.0), 1e-12)

        q = Point(2.0, 1.0).rotated(math.pi, Point(1.0, 1.0))
        assert q.is_close(Point(0.0, 1.0), 1e-12)

    def test_mirrored(self) -> None:
        """Test reflection across an axis."""
        p = Point(2.0, 3.0).mirrored(Point(1.0, 0.0), Point(0.0, 0.0))
        assert p.is_close(Point(2.0, -3.0), 1e-12)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestBoundingBox2D:
    """Tests for BoundingBox2D class."""

    def test_from_points(self) -> None:
        """Test box construction from points."""
        box = BoundingBox2D.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert box.to_tuple() == (-2, -1, 4, 5)
        assert box.width == 6
        assert box.height == 6
        assert box.center == Point(1.0, 2.0)

    def test_from_no_points(self) -> None:
        """Test that an empty point list is rejected."""
        with pytest.raises(ValueError):
            BoundingBox2D.from_points([])

    def test_is_out(self) -> None:
        """Test disjointness, with touching boxes not out."""
        box = BoundingBox2D(0, 0, 10, 10)
        assert box.is_out(BoundingBox2D(11, 0, 20, 10))
        assert not box.is_out(BoundingBox2D(10, 0, 20, 10))
        assert not box.is_out(BoundingBox2D(5, 5, 15, 15))

    def test_contains_point_inclusive(self) -> None:
        """Test that the boundary counts as contained."""
        box = BoundingBox2D(0, 0, 10, 10)
        assert box.contains_point(Point(10, 5))
        assert not box.contains_point(Point(10.1, 5))

    def test_union(self) -> None:
        """Test box union."""
        box = BoundingBox2D(0, 0, 1, 1).union(BoundingBox2D(2, -1, 3, 0))
        assert box.to_tuple() == (0, -1, 3, 1)


class TestLine:
    """Tests for Line curves."""

    def test_evaluation(self) -> None:
        """Test points and tangents along a line."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.value(0.5) == Point(5.0, 0.0)
        assert line.first_point == Point(0, 0)
        assert line.last_point == Point(10, 0)
        assert line.tangent_at(0.3) == Point(10, 0)
        assert line.length == 10

    def test_parameter(self) -> None:
        """Test projecting points on the line."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.parameter(Point(2.5, 0)) == pytest.approx(0.25)
        with pytest.raises(PointNotOnCurveError):
            line.parameter(Point(2.5, 1.0))

    def test_trimmed_keeps_exact_endpoints(self) -> None:
        """Test that trimming at the ends reuses the original endpoints."""
        line = Line(Point(0.1, 0.3), Point(7.7, 1.9))
        piece = line.trimmed(0.5, 1.0)
        assert piece.last_point == line.last_point

    def test_split_at(self) -> None:
        """Test splitting at points and ignoring locations at the ends."""
        line = Line(Point(0, 0), Point(10, 0))
        pieces = line.split_at([Point(7, 0), Point(3, 0), Point(0, 0)])
        assert [p.first_point.x for p in pieces] == pytest.approx([0, 3, 7])
        assert pieces[-1].last_point == Point(10, 0)
        assert line.split_at([1e-12]) == [line]

    def test_split_tolerance_is_a_distance(self) -> None:
        """Test a cut close to the end of a long line is kept."""
        line = Line(Point(0, 0), Point(1000, 0))
        pieces = line.split_at([Point(1000 - 5e-7, 0)])
        assert len(pieces) == 2
        assert pieces[1].length == pytest.approx(5e-7, rel=1e-3)
        assert line.split_at([Point(1000 - 1e-8, 0)]) == [line]

    def test_offset_to_the_right(self) -> None:
        """Test that a positive offset moves to the right of travel."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.offset(1.0) == Line(Point(0, -1), Point(10, -1))
        assert line.offset(-1.0) == Line(Point(0, 1), Point(10, 1))

    def test_degenerate_offset(self) -> None:
        """Test that a zero-length line has no offset."""
        assert Line(Point(1, 1), Point(1, 1)).offset(1.0) is None

    def test_reversed(self) -> None:
        """Test reversal swaps the endpoints."""
        assert Line(Point(0, 0), Point(1, 2)).reversed() == Line(Point(1, 2), Point(0, 0))

    def test_ray_crossings_half_open(self) -> None:
        """Test that a shared vertex on the ray counts once."""
        origin = Point(0, 0)
        assert Line(Point(5, -1), Point(5, 1)).ray_crossings(origin) == 1
        assert Line(Point(5, 0), Point(5, 1)).ray_crossings(origin) == 1
        assert Line(Point(5, -1), Point(5, 0)).ray_crossings(origin) == 0
        assert Line(Point(-5, -1), Point(-5, 1)).ray_crossings(origin) == 0
        assert Line(Point(1, 0), Point(9, 0)).ray_crossings(origin) == 0

    def test_distance_from(self) -> None:
        """Test distance to the closest point of the segment."""
        line = Line(Point(0, 0), Point(10, 0))
        assert line.distance_from(Point(5, 3)) == pytest.approx(3)
        assert line.distance_from(Point(13, 4)) == pytest.approx(5)

    def test_to_dict(self) -> None:
        """Test serialization."""
        data = Line(Point(0, 1), Point(2, 3)).to_dict()
        assert data == {"type": "line", "start": [0, 1], "end": [2, 3]}
        assert curve_from_dict(data) == Line(Point(0, 1), Point(2, 3))


class TestArc:
    """Tests for Arc curves."""

    def test_invalid_arcs(self) -> None:
        """Test that degenerate arcs are rejected."""
        with pytest.raises(CurveError):
            Arc(Point(0, 0), 0.0, 0.0, math.pi)
        with pytest.raises(CurveError):
            Arc(Point(0, 0), 1.0, 0.0, 0.0)
        with pytest.raises(CurveError):
            Arc(Point(0, 0), 1.0, 0.0, 7.0)

    def test_circle(self) -> None:
        """Test full circle evaluation."""
        circle = Arc.circle(Point(0, 0), 1.0)
        assert circle.is_full_circle
        assert circle.first_point.is_close(Point(1, 0), 1e-12)
        assert circle.value(0.25).is_close(Point(0, 1), 1e-12)
        assert circle.last_point.is_close(circle.first_point, 1e-12)

    def test_from_center_takes_shorter_arc(self) -> None:
        """Test the sweep sign of arcs built around a center."""
        ccw = Arc.from_center(Point(1, 0), Point(0, 1), Point(0, 0))
        assert ccw.sweep == pytest.approx(math.pi / 2)
        cw = Arc.from_center(Point(0, 1), Point(1, 0), Point(0, 0))
        assert cw.sweep == pytest.approx(-math.pi / 2)

    def test_through_points(self) -> None:
        """Test arcs through three points in both directions."""
        upper = Arc.through_points(Point(1, 0), Point(0, 1), Point(-1, 0))
        assert upper.center.is_close(Point(0, 0), 1e-12)
        assert upper.radius == pytest.approx(1.0)
        assert upper.sweep == pytest.approx(math.pi)

        lower = Arc.through_points(Point(1, 0), Point(0, -1), Point(-1, 0))
        assert lower.sweep == pytest.approx(-math.pi)

    def test_through_collinear_points(self) -> None:
        """Test that collinear points cannot define an arc."""
        with pytest.raises(GeometryError):
            Arc.through_points(Point(0, 0), Point(1, 1), Point(2, 2))

    def test_parameter(self) -> None:
        """Test projecting points on an arc."""
        upper = Arc(Point(0, 0), 1.0, 0.0, math.pi)
        assert upper.parameter(Point(0, 1)) == pytest.approx(0.5)
        with pytest.raises(PointNotOnCurveError):
            upper.parameter(Point(0, -1))

    def test_bounding_box_uses_extreme_points(self) -> None:
        """Test that the box covers the top of a half circle."""
        upper = Arc(Point(0, 0), 1.0, 0.0, math.pi)
        assert upper.bounding_box.to_tuple() == pytest.approx((-1, 0, 1, 1))

    def test_offset(self) -> None:
        """Test offsets of counter-clockwise and clockwise arcs."""
        ccw = Arc.circle(Point(0, 0), 5.0)
        assert ccw.offset(1.0).radius == pytest.approx(6.0)
        assert ccw.offset(-5.0) is None

        cw = ccw.reversed()
        assert cw.offset(1.0).radius == pytest.approx(4.0)

    def test_split_at(self) -> None:
        """Test splitting a half circle at its middle."""
        upper = Arc(Point(0, 0), 1.0, 0.0, math.pi)
        pieces = upper.split_at([0.5])
        assert len(pieces) == 2
        assert all(p.sweep == pytest.approx(math.pi / 2) for p in pieces)
        assert pieces[0].last_point.is_close(Point(0, 1), 1e-12)

    def test_ray_crossings(self) -> None:
        """Test ray crossings for points inside and left of a circle."""
        circle = Arc.circle(Point(0, 0), 1.0)
        assert circle.ray_crossings(Point(0, 0.5)) == 1
        assert circle.ray_crossings(Point(-2, 0.5)) == 2
        assert circle.ray_crossings(Point(2, 0.5)) == 0

    def test_mirror_flips_sweep(self) -> None:
        """Test that mirroring reverses the turning direction."""
        upper = Arc(Point(0, 0), 1.0, 0.0, math.pi)
        lower = upper.mirror(Point(1, 0), Point(0, 0))
        assert lower.sweep == pytest.approx(-math.pi)
        assert lower.mid_point.is_close(Point(0, -1), 1e-12)

    def test_unknown_curve_type(self) -> None:
        """Test that unknown curve dictionaries are rejected."""
        with pytest.raises(CurveError, match="Unknown curve type"):
            curve_from_dict({"type": "spline"})


class TestBlueprint:
    """Tests for Blueprint class."""

    def test_blueprint_creation(self) -> None:
        """Test basic blueprint creation."""
        bp = square(0, 0, 10)
        assert len(bp.curves) == 4
        assert bp.is_closed()
        assert repr(bp) == "Blueprint(4 curves: LINE, LINE, LINE, LINE)"

    def test_empty_blueprint(self) -> None:
        """Test that a blueprint needs curves."""
        with pytest.raises(BlueprintError):
            Blueprint([])

    def test_open_blueprint(self) -> None:
        """Test closedness of an open chain."""
        bp = Blueprint([Line(Point(0, 0), Point(1, 0)), Line(Point(1, 0), Point(1, 1))])
        assert not bp.is_closed()

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        assert square(2, 3, 10).bounding_box.to_tuple() == (2, 3, 12, 13)

    def test_is_inside(self) -> None:
        """Test strict point containment."""
        bp = square(0, 0, 10)
        assert bp.is_inside(Point(5, 5))
        assert not bp.is_inside(Point(15, 5))
        assert not bp.is_inside(Point(-5, 5))

    def test_boundary_is_not_inside(self) -> None:
        """Test that boundary points are not inside."""
        bp = square(0, 0, 10)
        assert not bp.is_inside(Point(10, 5))
        assert not bp.is_inside(Point(0, 0))
        assert bp.is_on_boundary(Point(10, 5))

    def test_is_inside_circle(self) -> None:
        """Test containment for a loop made of one arc."""
        bp = Blueprint([Arc.circle(Point(0, 0), 5.0)])
        assert bp.is_inside(Point(1, 1))
        assert not bp.is_inside(Point(4, 4))

    def test_orientation(self) -> None:
        """Test winding direction detection."""
        bp = square(0, 0, 10)
        assert bp.orientation == "counterClockwise"
        reversed_bp = Blueprint([c.reversed() for c in reversed(bp.curves)])
        assert reversed_bp.orientation == "clockwise"

    def test_orientation_with_arcs(self) -> None:
        """Test that arcs contribute their midpoints to the winding."""
        half_disc = Blueprint(
            [Arc(Point(0, 0), 1.0, 0.0, math.pi), Line(Point(-1, 0), Point(1, 0))]
        )
        assert half_disc.orientation == "counterClockwise"
        flipped = Blueprint([c.reversed() for c in reversed(half_disc.curves)])
        assert flipped.orientation == "clockwise"

    def test_translate(self) -> None:
        """Test translation."""
        moved = square(0, 0, 10).translate(5, -5)
        assert moved.bounding_box.to_tuple() == (5, -5, 15, 5)

    def test_rotate_degrees(self) -> None:
        """Test rotation by degrees around the origin."""
        rotated = square(0, 0, 10).rotate(90)
        assert rotated.bounding_box.to_tuple() == pytest.approx((-10, 0, 0, 10))

    def test_scale_around_center(self) -> None:
        """Test scaling around the bounding box center."""
        scaled = square(0, 0, 10).scale(2)
        assert scaled.bounding_box.to_tuple() == pytest.approx((-5, -5, 15, 15))

    def test_mirror_flips_orientation(self) -> None:
        """Test that mirroring flips the winding direction."""
        mirrored = square(0, 0, 10).mirror(Point(0, 1))
        assert mirrored.orientation == "clockwise"
        assert mirrored.bounding_box.to_tuple() == pytest.approx((-10, 0, 0, 10))

    def test_blueprint_serialization(self) -> None:
        """Test blueprint serialization."""
        bp = square(0, 0, 10)
        data = bp.to_dict()
        assert data["type"] == "blueprint"
        assert Blueprint.from_dict(data) == bp


class TestCompoundBlueprint:
    """Tests for CompoundBlueprint class."""

    def test_from_blueprints(self) -> None:
        """Test that the first loop becomes the outer loop."""
        outer, hole = square(0, 0, 10), square(2, 2, 2)
        compound = CompoundBlueprint.from_blueprints([outer, hole])
        assert compound.outer is outer
        assert compound.holes == [hole]
        assert compound.blueprints == [outer, hole]
        assert compound.bounding_box == outer.bounding_box

    def test_from_no_blueprints(self) -> None:
        """Test that an outer loop is required."""
        with pytest.raises(BlueprintError):
            CompoundBlueprint.from_blueprints([])

    def test_translate(self) -> None:
        """Test that transformations apply to every loop."""
        compound = CompoundBlueprint(square(0, 0, 10), [square(2, 2, 2)])
        moved = compound.translate(1, 1)
        assert moved.holes[0].bounding_box.to_tuple() == (3, 3, 5, 5)

    def test_serialization(self) -> None:
        """Test compound serialization."""
        compound = CompoundBlueprint(square(0, 0, 10), [square(2, 2, 2)])
        restored = shape_from_dict(compound.to_dict())
        assert isinstance(restored, CompoundBlueprint)
        assert restored == compound


class TestBlueprints:
    """Tests for Blueprints collections."""

    def test_collection(self) -> None:
        """Test sequence behaviour and bounding box union."""
        regions = Blueprints([square(0, 0, 1), square(5, 5, 1)])
        assert len(regions) == 2
        assert list(regions)[1] is regions[1]
        assert regions.bounding_box.to_tuple() == (0, 0, 6, 6)

    def test_empty_bounding_box(self) -> None:
        """Test that an empty collection has no bounding box."""
        with pytest.raises(BlueprintError):
            _ = Blueprints().bounding_box

    def test_serialization(self) -> None:
        """Test collection serialization."""
        regions = Blueprints([square(0, 0, 1), CompoundBlueprint(square(5, 5, 4), [square(6, 6, 1)])])
        data = regions.to_dict()
        assert data["type"] == "blueprints"
        assert shape_from_dict(data) == regions

    def test_shape_from_dict(self) -> None:
        """Test shape deserialization edge cases."""
        assert shape_from_dict(None) is None
        with pytest.raises(BlueprintError):
            shape_from_dict({"type": "polygon"})


class TestPointCornerFilter:
    """Tests for PointCornerFilter."""

    def test_should_keep(self) -> None:
        """Test matching corners by location."""
        first = Line(Point(0, 0), Point(10, 0))
        second = Line(Point(10, 0), Point(10, 10))
        corner = Corner(first, second, Point(10, 0))

        assert PointCornerFilter([Point(10, 0)]).should_keep(corner)
        assert PointCornerFilter([Point(10, 1e-9)]).should_keep(corner)
        assert not PointCornerFilter([Point(0, 0)]).should_keep(corner)
