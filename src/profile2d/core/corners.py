"""Corner modification: fillets, chamfers and dogbones.

This module replaces the sharp junction between consecutive curves of a
profile with a transition curve:

- fillet: a tangent arc of the given radius
- chamfer: a straight cut between the fillet's tangent points
- dogbone: an arc through the corner point, for cutter relief

The corner makers work on a single pair of curves. ``modify_corner_2d``
walks every corner of a shape (closing seam included) and applies a maker,
optionally restricted by a corner filter.
"""

import logging
import math
from collections.abc import Callable

from profile2d.core.geometry import same_point
from profile2d.core.intersections import intersect_curves
from profile2d.domain import (
    Arc,
    Blueprint,
    Blueprints,
    CompoundBlueprint,
    Corner,
    CornerFilter,
    Curve2D,
    Line,
    Point,
    Shape2D,
)
from profile2d.exceptions import GeometryError, bug
from profile2d.precision import PRECISION_INTERSECTION, PRECISION_POINT

logger = logging.getLogger(__name__)

CornerMaker = Callable[[Curve2D, Curve2D, float], list[Curve2D]]

# Below this |sin| two consecutive curves are considered collinear
COLLINEAR_SIN = 1e-10


def _unit_tangents(first_curve: Curve2D, second_curve: Curve2D) -> tuple[Point, Point] | None:
    try:
        return (
            first_curve.tangent_at(1).normalized(),
            second_curve.tangent_at(0).normalized(),
        )
    except ValueError:
        return None


def _offset_center(
    first_curve: Curve2D, second_curve: Curve2D, offset: float
) -> tuple[Curve2D, Curve2D, Point] | None:
    # Intersect both curves offset by the same distance; the hit nearest the corner is the center
    first_offset = first_curve.offset(offset)
    second_offset = second_curve.offset(offset)
    if first_offset is None or second_offset is None:
        return None

    candidates = intersect_curves(first_offset, second_offset, PRECISION_INTERSECTION)
    if not candidates.intersections:
        return None
    corner = first_curve.last_point
    center = min(candidates.intersections, key=corner.distance_to)
    return first_offset, second_offset, center


def remove_corner(
    first_curve: Curve2D, second_curve: Curve2D, radius: float
) -> tuple[Curve2D, Curve2D, Point] | None:
    """Trim two consecutive curves back to the tangent points of a fillet.

    Args:
        first_curve: Curve ending at the corner
        second_curve: Curve starting at the corner
        radius: Fillet radius

    Returns:
        (trimmed first curve, trimmed second curve, fillet center), or None
        when the corner cannot be removed: collinear curves, a non-positive
        radius, offsets that do not meet, or a radius consuming a whole curve
    """
    if radius <= 0:
        return None

    tangents = _unit_tangents(first_curve, second_curve)
    if tangents is None:
        return None
    sin_angle = tangents[0].cross(tangents[1])
    if abs(sin_angle) < COLLINEAR_SIN:
        return None

    # Offset towards the inside of the turn
    offset = abs(radius) * (-1 if sin_angle > 0 else 1)
    found = _offset_center(first_curve, second_curve, offset)
    if found is None:
        return None
    first_offset, second_offset, center = found

    def split_for_fillet(curve: Curve2D, offset_curve: Curve2D) -> list[Curve2D]:
        tangent = offset_curve.tangent_at(center)
        normal = Point(-tangent.y, tangent.x).normalized()
        split_point = center + normal * offset
        split_parameter = curve.parameter(split_point, PRECISION_POINT)
        return curve.split_at([split_parameter])

    first_pieces = split_for_fillet(first_curve, first_offset)
    second_pieces = split_for_fillet(second_curve, second_offset)
    if len(first_pieces) < 2 or len(second_pieces) < 2:
        return None

    return first_pieces[0], second_pieces[-1], center


def fillet_curves(first_curve: Curve2D, second_curve: Curve2D, radius: float) -> list[Curve2D]:
    """Round the corner between two curves with a tangent arc.

    Returns:
        [trimmed first, arc, trimmed second], or the two curves unchanged
        when the corner cannot be filleted
    """
    removed = remove_corner(first_curve, second_curve, radius)
    if removed is None:
        return [first_curve, second_curve]

    first, second, center = removed
    return [first, Arc.from_center(first.last_point, second.first_point, center), second]


def chamfer_curves(first_curve: Curve2D, second_curve: Curve2D, size: float) -> list[Curve2D]:
    """Bevel the corner between two curves with a straight cut.

    The cut joins the points where a fillet of radius ``size`` would be
    tangent to the curves.

    Returns:
        [trimmed first, cut, trimmed second], or the two curves unchanged
        when the corner cannot be chamfered
    """
    removed = remove_corner(first_curve, second_curve, size)
    if removed is None:
        return [first_curve, second_curve]

    first, second, _ = removed
    return [first, Line(first.last_point, second.first_point), second]


def dogbone_curves(first_curve: Curve2D, second_curve: Curve2D, radius: float) -> list[Curve2D]:
    """Relieve the corner with an arc of ``radius`` passing through the corner point.

    Returns:
        [trimmed first, relief arc, trimmed second], or the two curves
        unchanged when no relief can be built
    """
    if radius <= 0:
        return [first_curve, second_curve]

    tangents = _unit_tangents(first_curve, second_curve)
    if tangents is None:
        return [first_curve, second_curve]
    sin_angle = tangents[0].cross(tangents[1])
    if abs(sin_angle) < COLLINEAR_SIN:
        return [first_curve, second_curve]

    # The relief center sits at ``radius`` from the corner on the inner bisector
    turn = abs(math.atan2(sin_angle, tangents[0].dot(tangents[1])))
    offset = abs(radius) * math.cos(turn / 2) * (-1 if sin_angle > 0 else 1)
    found = _offset_center(first_curve, second_curve, offset)
    if found is None:
        return [first_curve, second_curve]
    center = found[2]

    circle = Arc.circle(center, radius)
    first_hits = intersect_curves(first_curve, circle).intersections
    second_hits = intersect_curves(second_curve, circle).intersections
    if not first_hits or not second_hits:
        return [first_curve, second_curve]

    first_part = first_curve.split_at([first_hits[0]])[0]
    second_part = second_curve.split_at([second_hits[-1]])[-1]
    try:
        relief = Arc.through_points(
            first_part.last_point, first_curve.last_point, second_part.first_point
        )
    except GeometryError:
        return [first_curve, second_curve]
    return [first_part, relief, second_part]


def modify_corners(
    make_corner: CornerMaker,
    blueprint: Blueprint,
    size: float,
    corner_filter: CornerFilter | None = None,
) -> Blueprint:
    """Apply a corner maker to every corner of a loop.

    Corners are visited in order; the curve produced last by one corner is
    the incoming curve of the next. On a closed loop the seam between the
    last and the first curve is handled last, and the reworked first curve
    is put back at the front.

    Args:
        make_corner: Corner maker (e.g. ``fillet_curves``)
        blueprint: Loop to modify
        size: Size passed to the maker
        corner_filter: Restricts the corners modified (all when None)

    Returns:
        New blueprint

    Raises:
        InvariantViolationError: If a maker returns no curve
    """

    def join(first_curve: Curve2D, second_curve: Curve2D) -> list[Curve2D]:
        corner = Corner(first_curve, second_curve, first_curve.last_point)
        if corner_filter is None or corner_filter.should_keep(corner):
            joined = list(make_corner(first_curve, second_curve, size))
        else:
            joined = [first_curve, second_curve]
        if not joined:
            bug("modify_corners", "corner maker returned no curve")
        return joined

    done: list[Curve2D] = []
    pending = blueprint.curves[0]
    for curve in blueprint.curves[1:]:
        joined = join(pending, curve)
        done.extend(joined[:-1])
        pending = joined[-1]
    curves = [*done, pending]

    if len(curves) > 1 and same_point(curves[0].first_point, curves[-1].last_point, PRECISION_POINT):
        joined = join(curves[-1], curves[0])
        curves = [joined[-1], *curves[1:-1], *joined[:-1]]

    return Blueprint(curves)


def modify_corner_2d(
    make_corner: CornerMaker,
    shape: Shape2D,
    size: float,
    corner_filter: CornerFilter | None = None,
) -> Shape2D:
    """Apply a corner maker to every loop of a shape.

    Compound blueprints have their outer loop and each hole modified
    independently; a large size may push a hole across the outer loop.
    """
    if isinstance(shape, Blueprint):
        return modify_corners(make_corner, shape, size, corner_filter)

    if isinstance(shape, CompoundBlueprint):
        return CompoundBlueprint(
            modify_corners(make_corner, shape.outer, size, corner_filter),
            [modify_corners(make_corner, h, size, corner_filter) for h in shape.holes],
        )

    if isinstance(shape, Blueprints):
        members: list[Blueprint | CompoundBlueprint] = []
        for member in shape:
            modified = modify_corner_2d(make_corner, member, size, corner_filter)
            if isinstance(modified, (Blueprint, CompoundBlueprint)):
                members.append(modified)
        return Blueprints(members)

    return None


def fillet_2d(shape: Shape2D, radius: float, corner_filter: CornerFilter | None = None) -> Shape2D:
    """Round the corners of a shape with tangent arcs of ``radius``."""
    logger.debug("Filleting %s with radius %s", type(shape).__name__, radius)
    return modify_corner_2d(fillet_curves, shape, radius, corner_filter)


def chamfer_2d(shape: Shape2D, size: float, corner_filter: CornerFilter | None = None) -> Shape2D:
    """Bevel the corners of a shape with straight cuts."""
    logger.debug("Chamfering %s with size %s", type(shape).__name__, size)
    return modify_corner_2d(chamfer_curves, shape, size, corner_filter)


def dogbone_2d(shape: Shape2D, radius: float, corner_filter: CornerFilter | None = None) -> Shape2D:
    """Relieve the corners of a shape with dogbone arcs of ``radius``."""
    logger.debug("Dogboning %s with radius %s", type(shape).__name__, radius)
    return modify_corner_2d(dogbone_curves, shape, radius, corner_filter)
