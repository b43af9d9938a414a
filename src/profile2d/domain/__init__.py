"""Domain models for profile2d.

This module contains the geometric value types the algorithms operate on.
All models are designed to be:

- Immutable in practice (operations return new objects)
- Serializable to plain dictionaries for JSON documents
- Independent of any CAD kernel

Key classes:
- Point: A 2D point / vector
- BoundingBox2D: Axis-aligned box
- Curve2D, Line, Arc: Parametric curves
- Blueprint: A curve loop
- CompoundBlueprint: An outer loop with holes
- Blueprints: A collection of regions
- Corner, CornerFilter: Corner selection for fillets and chamfers
"""

from profile2d.domain.bbox import BoundingBox2D
from profile2d.domain.blueprint import (
    Blueprint,
    Blueprints,
    CompoundBlueprint,
    Orientation,
    Shape2D,
    shape_from_dict,
)
from profile2d.domain.corner import Corner, CornerFilter, PointCornerFilter
from profile2d.domain.curve import Arc, Curve2D, Line, curve_from_dict
from profile2d.domain.point import Point

__all__: list[str] = [
    # Core types
    "Point",
    "BoundingBox2D",
    "Curve2D",
    "Line",
    "Arc",
    "Blueprint",
    "CompoundBlueprint",
    "Blueprints",
    "Shape2D",
    "Orientation",
    # Corners
    "Corner",
    "CornerFilter",
    "PointCornerFilter",
    # Serialization
    "curve_from_dict",
    "shape_from_dict",
]
