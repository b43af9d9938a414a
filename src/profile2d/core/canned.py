"""Ready-made profile loops.

Builders that generate their own vertices return counter-clockwise loops.
"""

import math
from collections.abc import Sequence

from profile2d.core.corners import fillet_curves, modify_corners
from profile2d.core.geometry import polar_to_cartesian
from profile2d.domain import Arc, Blueprint, Line, Point


def polygon_blueprint(points: Sequence[Point]) -> Blueprint:
    """Closed polygon through the given vertices.

    Args:
        points: Vertices in travel order; the closing edge is added

    Raises:
        ValueError: If fewer than three vertices are given
    """
    if len(points) < 3:
        raise ValueError(f"A polygon needs at least 3 points, got {len(points)}")
    return Blueprint(
        [Line(start, end) for start, end in zip(points, [*points[1:], points[0]])]
    )


def rectangle_blueprint(width: float, height: float, center: Point | None = None) -> Blueprint:
    """Axis-aligned rectangle centered on ``center`` (origin by default)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Rectangle sides must be positive, got {width} x {height}")
    c = center if center is not None else Point(0.0, 0.0)
    half_w, half_h = width / 2, height / 2
    return polygon_blueprint(
        [
            Point(c.x - half_w, c.y - half_h),
            Point(c.x + half_w, c.y - half_h),
            Point(c.x + half_w, c.y + half_h),
            Point(c.x - half_w, c.y + half_h),
        ]
    )


def rounded_rectangle_blueprint(
    width: float,
    height: float,
    radius: float,
    center: Point | None = None,
) -> Blueprint:
    """Rectangle with every corner filleted.

    Raises:
        ValueError: If the radius is not below half of the smaller side
    """
    if radius >= min(width, height) / 2:
        raise ValueError(
            f"Corner radius {radius} must be below half of the smaller side "
            f"({min(width, height) / 2})"
        )
    rectangle = rectangle_blueprint(width, height, center)
    if radius <= 0:
        return rectangle
    return modify_corners(fillet_curves, rectangle, radius)


def polysides_blueprint(radius: float, sides_count: int, center: Point | None = None) -> Blueprint:
    """Regular polygon inscribed in a circle of ``radius``.

    The first vertex lies on the +x axis from the center.
    """
    if sides_count < 3:
        raise ValueError(f"A regular polygon needs at least 3 sides, got {sides_count}")
    c = center if center is not None else Point(0.0, 0.0)
    step = 2 * math.pi / sides_count
    return polygon_blueprint(
        [c + polar_to_cartesian(radius, i * step) for i in range(sides_count)]
    )


def circle_blueprint(radius: float, center: Point | None = None) -> Blueprint:
    """Full circle made of a single arc."""
    return Blueprint([Arc.circle(center if center is not None else Point(0.0, 0.0), radius)])
