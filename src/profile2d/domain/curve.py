"""Parametric 2D curves.

This module defines the curve contract the profile algorithms work with,
and its two concrete kinds:
- Curve2D: Abstract parametric curve over [0, 1]
- Line: Straight segment between two points
- Arc: Circular arc with a signed sweep (full circles included)

Every curve evaluates, splits, reverses and offsets itself, and answers
the point queries (projection, distance, ray crossings) that the blueprint
and intersection code rely on. Curves are immutable; all operations return
new curves.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from profile2d.domain.bbox import BoundingBox2D
from profile2d.domain.point import Point
from profile2d.exceptions import CurveError, GeometryError, PointNotOnCurveError
from profile2d.precision import PRECISION_INTERSECTION, PRECISION_OFFSET

TAU = 2 * math.pi


class Curve2D(ABC):
    """A parametric 2D curve over the parameter range [0, 1].

    Subclasses provide evaluation, projection and construction primitives;
    the shared behaviour (tangents, splitting, on-curve tests) is built on
    top of them here.
    """

    geom_type: ClassVar[str]
    first_parameter: ClassVar[float] = 0.0
    last_parameter: ClassVar[float] = 1.0

    @abstractmethod
    def value(self, t: float) -> Point:
        """Point at parameter ``t``."""

    @abstractmethod
    def derivative(self, t: float) -> Point:
        """First derivative at parameter ``t``."""

    @abstractmethod
    def parameter(self, point: Point, precision: float = PRECISION_INTERSECTION) -> float:
        """Parameter of the curve point closest to ``point``.

        Raises:
            PointNotOnCurveError: If the point is farther than ``precision``
        """

    @abstractmethod
    def trimmed(self, start: float, end: float) -> "Curve2D":
        """Sub-curve between two parameters, keeping the orientation."""

    @abstractmethod
    def reversed(self) -> "Curve2D":
        """Same curve travelled in the opposite direction."""

    @abstractmethod
    def offset(self, distance: float) -> "Curve2D | None":
        """Parallel curve at ``distance`` to the right of the travel direction.

        Negative distances offset to the left. Returns None when the offset
        curve degenerates.
        """

    @property
    @abstractmethod
    def bounding_box(self) -> BoundingBox2D:
        """Tight axis-aligned bounding box."""

    @abstractmethod
    def distance_from(self, point: Point) -> float:
        """Shortest distance from ``point`` to the curve."""

    @abstractmethod
    def ray_crossings(self, point: Point) -> int:
        """Number of crossings with the horizontal ray from ``point`` towards +x.

        Uses the half-open rule on y so that curves joined end to end never
        count a shared endpoint twice.
        """

    @abstractmethod
    def translate(self, dx: float, dy: float) -> "Curve2D":
        """Curve moved by (dx, dy)."""

    @abstractmethod
    def rotate(self, angle: float, center: Point) -> "Curve2D":
        """Curve rotated counter-clockwise by ``angle`` radians around ``center``."""

    @abstractmethod
    def scale(self, factor: float, center: Point) -> "Curve2D":
        """Curve scaled uniformly around ``center``."""

    @abstractmethod
    def mirror(self, direction: Point, origin: Point) -> "Curve2D":
        """Curve reflected across the line through ``origin`` along ``direction``."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""

    @property
    def first_point(self) -> Point:
        return self.value(self.first_parameter)

    @property
    def last_point(self) -> Point:
        return self.value(self.last_parameter)

    @property
    def mid_point(self) -> Point:
        """Point at the middle of the parameter range."""
        return self.value((self.first_parameter + self.last_parameter) / 2)

    def tangent_at(self, index: "float | Point" = 0.0) -> Point:
        """Tangent vector (not normalized) at a location on the curve.

        Args:
            index: Either a normalized position in [0, 1] along the parameter
                range, or a point that is projected onto the curve first

        Returns:
            First derivative at that location
        """
        if isinstance(index, Point):
            t = self.parameter(index)
        else:
            t = self.first_parameter + index * (self.last_parameter - self.first_parameter)
        return self.derivative(t)

    def is_on_curve(self, point: Point, precision: float = PRECISION_INTERSECTION) -> bool:
        """Check whether ``point`` lies on the curve within ``precision``."""
        return self.distance_from(point) <= precision

    def split_at(
        self,
        locations: Sequence["Point | float"],
        precision: float = PRECISION_INTERSECTION,
    ) -> list["Curve2D"]:
        """Split the curve at points or parameters.

        Locations closer than ``precision * 100`` (as a distance) to an end
        of the curve, or to the previous cut, are ignored.

        Args:
            locations: Points on the curve or raw parameters
            precision: Tolerance driving projection and deduplication

        Returns:
            Sub-curves in travel order; ``[self]`` when there is nothing to split

        Raises:
            PointNotOnCurveError: If a point is not on the curve
        """
        lookup_precision = max(precision, PRECISION_INTERSECTION)
        parameters = sorted(
            self.parameter(loc, lookup_precision) if isinstance(loc, Point) else float(loc)
            for loc in locations
        )

        tolerance = precision * 100
        start, end = self.first_point, self.last_point
        cuts: list[float] = []
        previous: Point | None = None
        for t in parameters:
            if not self.first_parameter < t < self.last_parameter:
                continue
            point = self.value(t)
            if point.distance_to(start) <= tolerance or point.distance_to(end) <= tolerance:
                continue
            if previous is not None and point.distance_to(previous) <= tolerance:
                continue
            cuts.append(t)
            previous = point

        if not cuts:
            return [self]

        bounds = [self.first_parameter, *cuts, self.last_parameter]
        return [self.trimmed(a, b) for a, b in zip(bounds, bounds[1:])]


@dataclass(frozen=True)
class Line(Curve2D):
    """Straight segment from ``start`` to ``end``.

    Attributes:
        start: First point
        end: Last point
    """

    start: Point
    end: Point

    geom_type: ClassVar[str] = "LINE"

    @property
    def first_point(self) -> Point:
        return self.start

    @property
    def last_point(self) -> Point:
        return self.end

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def value(self, t: float) -> Point:
        return self.start + (self.end - self.start) * t

    def derivative(self, t: float) -> Point:
        return self.end - self.start

    def _closest_parameter(self, point: Point) -> float:
        direction = self.end - self.start
        length_sq = direction.dot(direction)
        if length_sq == 0:
            return 0.0
        t = (point - self.start).dot(direction) / length_sq
        return min(max(t, 0.0), 1.0)

    def parameter(self, point: Point, precision: float = PRECISION_INTERSECTION) -> float:
        t = self._closest_parameter(point)
        distance = self.value(t).distance_to(point)
        if distance > precision:
            raise PointNotOnCurveError(point, distance)
        return t

    def trimmed(self, start: float, end: float) -> "Line":
        return Line(
            self.start if start <= 0 else self.value(start),
            self.end if end >= 1 else self.value(end),
        )

    def reversed(self) -> "Line":
        return Line(self.end, self.start)

    def offset(self, distance: float) -> "Line | None":
        try:
            direction = (self.end - self.start).normalized()
        except ValueError:
            return None
        shift = Point(direction.y, -direction.x) * distance
        return Line(self.start + shift, self.end + shift)

    @property
    def bounding_box(self) -> BoundingBox2D:
        return BoundingBox2D.from_points([self.start, self.end])

    def distance_from(self, point: Point) -> float:
        return self.value(self._closest_parameter(point)).distance_to(point)

    def ray_crossings(self, point: Point) -> int:
        x0, y0 = self.start.x, self.start.y
        x1, y1 = self.end.x, self.end.y
        if (y0 > point.y) != (y1 > point.y):
            x_cross = x0 + (point.y - y0) * (x1 - x0) / (y1 - y0)
            return 1 if point.x < x_cross else 0
        return 0

    def translate(self, dx: float, dy: float) -> "Line":
        shift = Point(dx, dy)
        return Line(self.start + shift, self.end + shift)

    def rotate(self, angle: float, center: Point) -> "Line":
        return Line(self.start.rotated(angle, center), self.end.rotated(angle, center))

    def scale(self, factor: float, center: Point) -> "Line":
        return Line(
            center + (self.start - center) * factor,
            center + (self.end - center) * factor,
        )

    def mirror(self, direction: Point, origin: Point) -> "Line":
        return Line(self.start.mirrored(direction, origin), self.end.mirrored(direction, origin))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "line",
            "start": list(self.start.to_tuple()),
            "end": list(self.end.to_tuple()),
        }


@dataclass(frozen=True)
class Arc(Curve2D):
    """Circular arc.

    The arc starts at ``start_angle`` and turns by ``sweep`` radians:
    counter-clockwise when positive, clockwise when negative. A sweep of
    ±2π is a full circle.

    Attributes:
        center: Circle center
        radius: Circle radius (strictly positive)
        start_angle: Angle of the first point, in radians
        sweep: Signed angular extent, in radians
    """

    center: Point
    radius: float
    start_angle: float
    sweep: float

    geom_type: ClassVar[str] = "CIRCLE"

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise CurveError(f"Arc radius must be positive, got {self.radius}")
        if self.sweep == 0 or abs(self.sweep) > TAU + 1e-12:
            raise CurveError(f"Arc sweep must be in [-2π, 0) or (0, 2π], got {self.sweep}")

    @classmethod
    def from_center(cls, start: Point, end: Point, center: Point) -> "Arc":
        """Shorter arc from ``start`` to ``end`` around ``center``.

        The radius is taken from ``start``; ``end`` only fixes the angle.

        Raises:
            CurveError: If the two points are at the same angle
        """
        radius = start.distance_to(center)
        a0 = math.atan2(start.y - center.y, start.x - center.x)
        a1 = math.atan2(end.y - center.y, end.x - center.x)
        sweep = math.remainder(a1 - a0, TAU)
        if abs(sweep) < 1e-15:
            raise CurveError("Arc start and end points coincide")
        return cls(center, radius, a0, sweep)

    @classmethod
    def through_points(cls, start: Point, mid: Point, end: Point) -> "Arc":
        """Arc from ``start`` to ``end`` passing through ``mid``.

        Raises:
            GeometryError: If the three points are collinear
        """
        d = 2 * (
            start.x * (mid.y - end.y)
            + mid.x * (end.y - start.y)
            + end.x * (start.y - mid.y)
        )
        if abs(d) < 1e-12:
            raise GeometryError("Cannot build an arc through collinear points")

        s2 = start.dot(start)
        m2 = mid.dot(mid)
        e2 = end.dot(end)
        center = Point(
            (s2 * (mid.y - end.y) + m2 * (end.y - start.y) + e2 * (start.y - mid.y)) / d,
            (s2 * (end.x - mid.x) + m2 * (start.x - end.x) + e2 * (mid.x - start.x)) / d,
        )

        a0 = math.atan2(start.y - center.y, start.x - center.x)
        a_mid = math.atan2(mid.y - center.y, mid.x - center.x)
        a1 = math.atan2(end.y - center.y, end.x - center.x)
        ccw_sweep = (a1 - a0) % TAU
        if (a_mid - a0) % TAU < ccw_sweep:
            sweep = ccw_sweep
        else:
            sweep = ccw_sweep - TAU
        return cls(center, start.distance_to(center), a0, sweep)

    @classmethod
    def circle(cls, center: Point, radius: float, start_angle: float = 0.0) -> "Arc":
        """Full counter-clockwise circle."""
        return cls(center, radius, start_angle, TAU)

    @property
    def is_full_circle(self) -> bool:
        return abs(abs(self.sweep) - TAU) < 1e-12

    @property
    def _direction(self) -> float:
        return 1.0 if self.sweep > 0 else -1.0

    def angle_at(self, t: float) -> float:
        """Polar angle of the point at parameter ``t``."""
        return self.start_angle + self.sweep * t

    def _angular_offset(self, angle: float) -> float:
        # Angle travelled from the start to reach ``angle``, in [0, 2π)
        return ((angle - self.start_angle) * self._direction) % TAU

    def value(self, t: float) -> Point:
        angle = self.angle_at(t)
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def derivative(self, t: float) -> Point:
        angle = self.angle_at(t)
        factor = self.sweep * self.radius
        return Point(-math.sin(angle) * factor, math.cos(angle) * factor)

    def parameter(self, point: Point, precision: float = PRECISION_INTERSECTION) -> float:
        offset = point - self.center
        if offset.norm() < 1e-15:
            raise PointNotOnCurveError(point, self.radius)

        span = abs(self.sweep)
        delta = self._angular_offset(math.atan2(offset.y, offset.x))
        if delta <= span:
            t = delta / span
        else:
            # Outside the arc: snap to the nearer end
            t = 0.0 if TAU - delta < delta - span else 1.0

        distance = self.value(t).distance_to(point)
        if distance > precision:
            raise PointNotOnCurveError(point, distance)
        return t

    def trimmed(self, start: float, end: float) -> "Arc":
        return Arc(self.center, self.radius, self.angle_at(start), self.sweep * (end - start))

    def reversed(self) -> "Arc":
        return Arc(self.center, self.radius, self.start_angle + self.sweep, -self.sweep)

    def offset(self, distance: float) -> "Arc | None":
        radius = self.radius + distance if self.sweep > 0 else self.radius - distance
        if radius <= PRECISION_OFFSET:
            return None
        return Arc(self.center, radius, self.start_angle, self.sweep)

    @property
    def bounding_box(self) -> BoundingBox2D:
        points = [self.first_point, self.last_point]
        span = abs(self.sweep)
        for quadrant in range(4):
            angle = quadrant * math.pi / 2
            if self._angular_offset(angle) <= span:
                points.append(
                    Point(
                        self.center.x + self.radius * math.cos(angle),
                        self.center.y + self.radius * math.sin(angle),
                    )
                )
        return BoundingBox2D.from_points(points)

    def distance_from(self, point: Point) -> float:
        offset = point - self.center
        distance_to_center = offset.norm()
        if distance_to_center < 1e-15:
            return self.radius
        if self._angular_offset(math.atan2(offset.y, offset.x)) <= abs(self.sweep):
            return abs(distance_to_center - self.radius)
        return min(point.distance_to(self.first_point), point.distance_to(self.last_point))

    def _monotone_bounds(self) -> list[float]:
        # Parameters splitting the arc into pieces monotone in y
        span = abs(self.sweep)
        cuts = []
        for angle in (math.pi / 2, 3 * math.pi / 2):
            delta = self._angular_offset(angle)
            if 0 < delta < span:
                cuts.append(delta / span)
        return [0.0, *sorted(cuts), 1.0]

    def ray_crossings(self, point: Point) -> int:
        bounds = self._monotone_bounds()
        crossings = 0
        for lo, hi in zip(bounds, bounds[1:]):
            lo_above = self.value(lo).y > point.y
            if lo_above == (self.value(hi).y > point.y):
                continue
            # Bisection is safe on a y-monotone piece
            for _ in range(60):
                mid = (lo + hi) / 2
                if (self.value(mid).y > point.y) == lo_above:
                    lo = mid
                else:
                    hi = mid
            if point.x < self.value((lo + hi) / 2).x:
                crossings += 1
        return crossings

    def translate(self, dx: float, dy: float) -> "Arc":
        return Arc(self.center + Point(dx, dy), self.radius, self.start_angle, self.sweep)

    def rotate(self, angle: float, center: Point) -> "Arc":
        return Arc(
            self.center.rotated(angle, center),
            self.radius,
            self.start_angle + angle,
            self.sweep,
        )

    def scale(self, factor: float, center: Point) -> "Arc":
        if factor == 0:
            raise GeometryError("Cannot scale an arc by zero")
        start_angle = self.start_angle + (math.pi if factor < 0 else 0.0)
        return Arc(
            center + (self.center - center) * factor,
            self.radius * abs(factor),
            start_angle,
            self.sweep,
        )

    def mirror(self, direction: Point, origin: Point) -> "Arc":
        axis_angle = math.atan2(direction.y, direction.x)
        return Arc(
            self.center.mirrored(direction, origin),
            self.radius,
            2 * axis_angle - self.start_angle,
            -self.sweep,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "arc",
            "center": list(self.center.to_tuple()),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "sweep": self.sweep,
        }


def curve_from_dict(data: dict[str, Any]) -> Curve2D:
    """Deserialize a curve produced by ``Curve2D.to_dict``.

    Raises:
        CurveError: If the curve type is unknown
    """
    kind = data.get("type")
    if kind == "line":
        return Line(Point(*data["start"]), Point(*data["end"]))
    if kind == "arc":
        return Arc(
            Point(*data["center"]),
            float(data["radius"]),
            float(data["start_angle"]),
            float(data["sweep"]),
        )
    raise CurveError(f"Unknown curve type: {kind!r}")
