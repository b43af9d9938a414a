"""Curve-curve intersection.

This module computes where two curves meet:
- Proper crossings and tangential touches, as points
- Overlapping stretches of collinear lines or co-circular arcs, as
  common segments oriented like the first curve

Line/arc and arc/arc intersections use the foot-of-perpendicular and
radical-axis constructions, with explicit tangency handling so that a
touching pair yields exactly one point.
"""

import logging
import math
from dataclasses import dataclass, field

from profile2d.domain import Arc, Blueprint, Curve2D, Line, Point
from profile2d.domain.curve import TAU
from profile2d.exceptions import CurveError
from profile2d.precision import PRECISION_INTERSECTION

logger = logging.getLogger(__name__)

# Floor for the geometric tolerance used by the constructions
MIN_TOLERANCE = 1e-10


@dataclass
class CurveIntersection:
    """Result of intersecting two curves.

    Attributes:
        intersections: Isolated intersection points
        common_segments: Overlapping sub-curves, oriented like the first curve
    """

    intersections: list[Point] = field(default_factory=list)
    common_segments: list[Curve2D] = field(default_factory=list)

    @property
    def common_segment_endpoints(self) -> list[tuple[Point, Point]]:
        """(first point, last point) of each common segment."""
        return [(s.first_point, s.last_point) for s in self.common_segments]

    def is_empty(self) -> bool:
        return not self.intersections and not self.common_segments


def intersect_curves(
    first: Curve2D,
    second: Curve2D,
    precision: float = PRECISION_INTERSECTION,
) -> CurveIntersection:
    """Intersect two curves.

    Args:
        first: First curve (drives the orientation of common segments)
        second: Second curve
        precision: Distance under which points are considered on a curve

    Returns:
        Intersection points and common segments

    Raises:
        CurveError: If a curve kind is not supported
    """
    tolerance = max(precision, MIN_TOLERANCE)

    if first.bounding_box.is_out(second.bounding_box):
        return CurveIntersection()

    if isinstance(first, Line) and isinstance(second, Line):
        return _intersect_lines(first, second, tolerance)
    if isinstance(first, Line) and isinstance(second, Arc):
        return CurveIntersection(intersections=_intersect_line_arc(first, second, tolerance))
    if isinstance(first, Arc) and isinstance(second, Line):
        return CurveIntersection(intersections=_intersect_line_arc(second, first, tolerance))
    if isinstance(first, Arc) and isinstance(second, Arc):
        return _intersect_arcs(first, second, tolerance)

    raise CurveError(
        f"Cannot intersect {type(first).__name__} with {type(second).__name__}"
    )


def _intersect_lines(first: Line, second: Line, tolerance: float) -> CurveIntersection:
    d1 = first.end - first.start
    d2 = second.end - second.start
    len1 = d1.norm()
    len2 = d2.norm()
    if len1 < tolerance or len2 < tolerance:
        return CurveIntersection()

    offset = second.start - first.start
    denom = d1.cross(d2)

    # Parallel lines
    if abs(denom) <= 1e-12 * len1 * len2:
        if abs(offset.cross(d1)) / len1 > tolerance:
            return CurveIntersection()

        length_sq = len1 * len1
        t0 = offset.dot(d1) / length_sq
        t1 = (second.end - first.start).dot(d1) / length_sq
        lo = max(0.0, min(t0, t1))
        hi = min(1.0, max(t0, t1))

        if (hi - lo) * len1 > tolerance:
            return CurveIntersection(common_segments=[first.trimmed(lo, hi)])
        if (lo - hi) * len1 <= tolerance:
            return CurveIntersection(intersections=[first.value(min(lo, hi))])
        return CurveIntersection()

    t = offset.cross(d2) / denom
    u = offset.cross(d1) / denom
    t_tol = tolerance / len1
    u_tol = tolerance / len2
    if -t_tol <= t <= 1 + t_tol and -u_tol <= u <= 1 + u_tol:
        return CurveIntersection(intersections=[first.value(min(max(t, 0.0), 1.0))])
    return CurveIntersection()


def _intersect_line_arc(line: Line, arc: Arc, tolerance: float) -> list[Point]:
    direction = line.end - line.start
    length = direction.norm()
    if length < tolerance:
        return []
    unit = direction / length

    foot = line.start + unit * (arc.center - line.start).dot(unit)
    height = arc.center.distance_to(foot)

    if height > arc.radius + tolerance:
        return []
    if abs(height - arc.radius) <= tolerance:
        candidates = [foot]
    else:
        half_chord = math.sqrt(arc.radius**2 - height**2)
        candidates = [foot - unit * half_chord, foot + unit * half_chord]

    return [
        p
        for p in candidates
        if line.distance_from(p) <= tolerance and arc.distance_from(p) <= tolerance
    ]


def _intersect_arcs(first: Arc, second: Arc, tolerance: float) -> CurveIntersection:
    delta = second.center - first.center
    d = delta.norm()
    r1, r2 = first.radius, second.radius

    if d <= tolerance:
        if abs(r1 - r2) <= tolerance:
            return _common_arcs(first, second, tolerance)
        return CurveIntersection()

    if abs(d - (r1 + r2)) <= tolerance:
        candidates = [first.center + delta * (r1 / d)]
    elif abs(d - abs(r1 - r2)) <= tolerance:
        t = r1 / d if r1 >= r2 else -r1 / d
        candidates = [first.center + delta * t]
    elif d > r1 + r2 or d < abs(r1 - r2):
        return CurveIntersection()
    else:
        a = (r1**2 - r2**2 + d**2) / (2 * d)
        h = math.sqrt(max(r1**2 - a**2, 0.0))
        base = first.center + delta * (a / d)
        normal = Point(-delta.y, delta.x) / d
        candidates = [base + normal * h, base - normal * h]

    points = [
        p
        for p in candidates
        if first.distance_from(p) <= tolerance and second.distance_from(p) <= tolerance
    ]
    return CurveIntersection(intersections=points)


def _ccw_range(arc: Arc) -> tuple[float, float]:
    # Counter-clockwise start angle and positive span
    if arc.sweep > 0:
        return arc.start_angle, arc.sweep
    return arc.start_angle + arc.sweep, -arc.sweep


def _common_arcs(first: Arc, second: Arc, tolerance: float) -> CurveIntersection:
    """Overlap of two arcs lying on the same circle."""
    first_start, first_span = _ccw_range(first)
    second_start, second_span = _ccw_range(second)
    angle_tol = tolerance / first.radius
    shift = (second_start - first_start) % TAU

    result = CurveIntersection()
    for start in (shift - TAU, shift):
        lo = max(0.0, start)
        hi = min(first_span, start + second_span)
        if hi - lo > angle_tol:
            overlap = Arc(first.center, first.radius, first_start + lo, hi - lo)
            result.common_segments.append(overlap if first.sweep > 0 else overlap.reversed())
        elif hi - lo >= -angle_tol:
            angle = first_start + (lo + hi) / 2
            result.intersections.append(
                first.center + Point(math.cos(angle), math.sin(angle)) * first.radius
            )

    logger.debug(
        "Co-circular arcs: %d common segments, %d touching points",
        len(result.common_segments),
        len(result.intersections),
    )
    return result


def blueprints_intersect(first: Blueprint, second: Blueprint) -> bool:
    """Check whether two loops touch, cross or overlap anywhere."""
    if first.bounding_box.is_out(second.bounding_box):
        return False
    return any(
        not intersect_curves(a, b).is_empty()
        for a in first.curves
        for b in second.curves
    )
