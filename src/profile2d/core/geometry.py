"""Point-level geometric helpers.

This module provides small utilities shared by the profile algorithms:
- Tolerance-based point identity
- Deduplication of intersection points
- Polar to cartesian conversion

All functions are pure and stateless.
"""

import math
from collections.abc import Iterable

from profile2d.domain import Point
from profile2d.precision import INTERSECTION_DECIMALS, PRECISION_INTERSECTION


def same_point(first: Point, second: Point, precision: float = PRECISION_INTERSECTION) -> bool:
    """Check whether two points are the same within ``precision``.

    Args:
        first: First point
        second: Second point
        precision: Maximum distance between the points

    Returns:
        True if the points coincide

    Examples:
        >>> same_point(Point(0.0, 0.0), Point(0.0, 1e-12))
        True
        >>> same_point(Point(0.0, 0.0), Point(0.0, 1e-3))
        False
    """
    return first.distance_to(second) <= precision


def _point_key(point: Point, decimals: int) -> tuple[float, float]:
    # Adding 0.0 folds -0.0 into 0.0
    return (round(point.x, decimals) + 0.0, round(point.y, decimals) + 0.0)


def remove_duplicate_points(
    points: Iterable[Point], decimals: int = INTERSECTION_DECIMALS
) -> list[Point]:
    """Deduplicate points by their coordinates rounded to ``decimals``.

    Points collapsing to the same rounded key keep the position of the first
    occurrence and the value of the last one.

    Args:
        points: Points to deduplicate
        decimals: Number of decimals kept in the comparison key

    Returns:
        Distinct points, in first-occurrence order
    """
    unique: dict[tuple[float, float], Point] = {}
    for point in points:
        unique[_point_key(point, decimals)] = point
    return list(unique.values())


def polar_to_cartesian(radius: float, angle: float) -> Point:
    """Convert polar coordinates (angle in radians) to a point."""
    return Point(radius * math.cos(angle), radius * math.sin(angle))