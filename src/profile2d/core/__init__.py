"""Core profile algorithms for profile2d.

This module contains the algorithms operating on blueprints:

- Curve intersection (points and overlapping common segments)
- Intersection segments (pairing the runs of two crossing loops)
- Nesting organisation (outer loops and their holes)
- Corner modification (fillets, chamfers, dogbones)
- Canned profiles (rectangles, polygons, circles)

All functions are:
- Stateless and synchronous
- Pure (inputs are never mutated)

Key functions:
- intersect_curves: Intersect two curves
- find_intersection_segments: Pair the runs of two loops
- organise_blueprints: Turn flat loops into regions with holes
- fillet_2d / chamfer_2d / dogbone_2d: Modify the corners of a shape
- modify_corner_2d: Apply any corner maker to a shape

Key classes:
- CurveIntersection: Result of a curve intersection
- BoxIndex: Bounding-box overlap index
- ContainedBlueprint: Loop annotated with its containers
- ProfileProcessor: Runs operations on profile documents
"""

from profile2d.core.canned import (
    circle_blueprint,
    polygon_blueprint,
    polysides_blueprint,
    rectangle_blueprint,
    rounded_rectangle_blueprint,
)
from profile2d.core.corners import (
    chamfer_2d,
    chamfer_curves,
    dogbone_2d,
    dogbone_curves,
    fillet_2d,
    fillet_curves,
    modify_corner_2d,
    modify_corners,
)
from profile2d.core.geometry import polar_to_cartesian, remove_duplicate_points, same_point
from profile2d.core.intersections import CurveIntersection, blueprints_intersect, intersect_curves
from profile2d.core.organizer import (
    ContainedBlueprint,
    add_containment_info,
    group_by_bounding_box_overlap,
    organise_blueprints,
    resolve_nesting,
)
from profile2d.core.processor import ProfileProcessor
from profile2d.core.segments import (
    SAME,
    IntersectionSegment,
    find_intersection_segments,
    rotate_to_start_at,
    rotate_to_start_at_segment,
)
from profile2d.core.spatial import BoxIndex

__all__ = [
    # Intersections
    "CurveIntersection",
    "blueprints_intersect",
    "intersect_curves",
    # Intersection segments
    "SAME",
    "IntersectionSegment",
    "find_intersection_segments",
    "rotate_to_start_at",
    "rotate_to_start_at_segment",
    # Organizer
    "BoxIndex",
    "ContainedBlueprint",
    "add_containment_info",
    "group_by_bounding_box_overlap",
    "organise_blueprints",
    "resolve_nesting",
    # Corners
    "chamfer_2d",
    "chamfer_curves",
    "dogbone_2d",
    "dogbone_curves",
    "fillet_2d",
    "fillet_curves",
    "modify_corner_2d",
    "modify_corners",
    # Processor
    "ProfileProcessor",
    # Canned profiles
    "circle_blueprint",
    "polygon_blueprint",
    "polysides_blueprint",
    "rectangle_blueprint",
    "rounded_rectangle_blueprint",
    # Geometry helpers
    "polar_to_cartesian",
    "remove_duplicate_points",
    "same_point",
]
