"""Blueprints: 2D curve loops and their compositions.

This module defines the profile data model:
- Blueprint: An ordered list of curves forming a (usually closed) loop
- CompoundBlueprint: One outer loop with zero or more hole loops
- Blueprints: A collection of disjoint Blueprint / CompoundBlueprint members
- Shape2D: Any of the above, or None for "no shape"
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from profile2d.domain.bbox import BoundingBox2D
from profile2d.domain.curve import Curve2D, curve_from_dict
from profile2d.domain.point import Point
from profile2d.exceptions import BlueprintError
from profile2d.precision import PRECISION_INTERSECTION, PRECISION_POINT

Orientation: TypeAlias = Literal["clockwise", "counterClockwise"]


@dataclass
class Blueprint:
    """An ordered sequence of curves forming a profile loop.

    Consecutive curves are expected to share endpoints. A blueprint is
    treated as immutable once built: every operation returns a new one.

    Attributes:
        curves: Curves in travel order (never empty)
    """

    curves: list[Curve2D]
    _cached_bbox: BoundingBox2D | None = field(
        default=None, repr=False, init=False, compare=False
    )

    def __post_init__(self) -> None:
        self.curves = list(self.curves)
        if not self.curves:
            raise BlueprintError("A blueprint needs at least one curve")

    def __repr__(self) -> str:
        kinds = ", ".join(c.geom_type for c in self.curves)
        return f"Blueprint({len(self.curves)} curves: {kinds})"

    @property
    def bounding_box(self) -> BoundingBox2D:
        """Bounding box of all curves.

        Result is cached for efficiency.
        """
        if self._cached_bbox is None:
            box = self.curves[0].bounding_box
            for curve in self.curves[1:]:
                box = box.union(curve.bounding_box)
            self._cached_bbox = box
        return self._cached_bbox

    @property
    def first_point(self) -> Point:
        return self.curves[0].first_point

    @property
    def last_point(self) -> Point:
        return self.curves[-1].last_point

    def is_closed(self, precision: float = PRECISION_POINT) -> bool:
        """Check whether the loop ends where it starts."""
        return self.first_point.is_close(self.last_point, precision)

    def is_on_boundary(self, point: Point, precision: float = PRECISION_INTERSECTION) -> bool:
        """Check whether ``point`` lies on one of the curves."""
        return any(curve.is_on_curve(point, precision) for curve in self.curves)

    def is_inside(self, point: Point) -> bool:
        """Strict point-in-loop test by ray casting.

        Points on the boundary, or outside the bounding box, are not inside.

        Args:
            point: The point to test

        Returns:
            True if the point is strictly inside the loop
        """
        if not self.bounding_box.contains_point(point):
            return False
        if self.is_on_boundary(point):
            return False
        crossings = sum(curve.ray_crossings(point) for curve in self.curves)
        return crossings % 2 == 1

    @property
    def orientation(self) -> Orientation:
        """Winding direction estimated with the shoelace formula.

        Non-line curves contribute their midpoint as an extra vertex.
        """
        vertices: list[Point] = []
        for curve in self.curves:
            vertices.append(curve.first_point)
            if curve.geom_type != "LINE":
                vertices.append(curve.mid_point)

        approximate_area = 0.0
        for current, following in zip(vertices, vertices[1:] + vertices[:1]):
            approximate_area += (following.x - current.x) * (following.y + current.y)

        return "clockwise" if approximate_area > 0 else "counterClockwise"

    def translate(self, dx: float, dy: float) -> "Blueprint":
        return Blueprint([c.translate(dx, dy) for c in self.curves])

    def rotate(self, angle: float, center: Point | None = None) -> "Blueprint":
        """Rotate counter-clockwise by ``angle`` degrees around ``center`` (origin by default)."""
        pivot = center if center is not None else Point(0.0, 0.0)
        return Blueprint([c.rotate(math.radians(angle), pivot) for c in self.curves])

    def scale(self, factor: float, center: Point | None = None) -> "Blueprint":
        """Scale uniformly around ``center`` (bounding box center by default)."""
        pivot = center if center is not None else self.bounding_box.center
        return Blueprint([c.scale(factor, pivot) for c in self.curves])

    def mirror(self, direction: Point, origin: Point | None = None) -> "Blueprint":
        """Reflect across the line through ``origin`` (origin by default) along ``direction``.

        The winding direction of the loop flips.
        """
        pivot = origin if origin is not None else Point(0.0, 0.0)
        return Blueprint([c.mirror(direction, pivot) for c in self.curves])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the blueprint
        """
        return {"type": "blueprint", "curves": [c.to_dict() for c in self.curves]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Blueprint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a blueprint

        Returns:
            Blueprint instance
        """
        return cls(curves=[curve_from_dict(c) for c in data["curves"]])


@dataclass
class CompoundBlueprint:
    """An outer loop with holes.

    Attributes:
        outer: The outer boundary
        holes: Loops inside the outer boundary, in resolution order
    """

    outer: Blueprint
    holes: list[Blueprint] = field(default_factory=list)

    @classmethod
    def from_blueprints(cls, blueprints: Sequence[Blueprint]) -> "CompoundBlueprint":
        """Build from a sequence whose first element is the outer loop.

        Raises:
            BlueprintError: If the sequence is empty
        """
        if not blueprints:
            raise BlueprintError("A compound blueprint needs an outer loop")
        return cls(outer=blueprints[0], holes=list(blueprints[1:]))

    @property
    def blueprints(self) -> list[Blueprint]:
        """Outer loop followed by the holes."""
        return [self.outer, *self.holes]

    @property
    def bounding_box(self) -> BoundingBox2D:
        return self.outer.bounding_box

    def translate(self, dx: float, dy: float) -> "CompoundBlueprint":
        return CompoundBlueprint(
            self.outer.translate(dx, dy), [h.translate(dx, dy) for h in self.holes]
        )

    def rotate(self, angle: float, center: Point | None = None) -> "CompoundBlueprint":
        return CompoundBlueprint(
            self.outer.rotate(angle, center), [h.rotate(angle, center) for h in self.holes]
        )

    def scale(self, factor: float, center: Point | None = None) -> "CompoundBlueprint":
        pivot = center if center is not None else self.bounding_box.center
        return CompoundBlueprint(
            self.outer.scale(factor, pivot), [h.scale(factor, pivot) for h in self.holes]
        )

    def mirror(self, direction: Point, origin: Point | None = None) -> "CompoundBlueprint":
        return CompoundBlueprint(
            self.outer.mirror(direction, origin),
            [h.mirror(direction, origin) for h in self.holes],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "compound",
            "outer": self.outer.to_dict(),
            "holes": [h.to_dict() for h in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompoundBlueprint":
        return cls(
            outer=Blueprint.from_dict(data["outer"]),
            holes=[Blueprint.from_dict(h) for h in data["holes"]],
        )


@dataclass
class Blueprints:
    """A collection of disjoint profile regions.

    Attributes:
        members: Simple or compound blueprints
    """

    members: list[Blueprint | CompoundBlueprint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Blueprint | CompoundBlueprint]:
        return iter(self.members)

    def __getitem__(self, index: int) -> Blueprint | CompoundBlueprint:
        return self.members[index]

    @property
    def bounding_box(self) -> BoundingBox2D:
        """Union of the members' boxes.

        Raises:
            BlueprintError: If the collection is empty
        """
        if not self.members:
            raise BlueprintError("An empty collection has no bounding box")
        box = self.members[0].bounding_box
        for member in self.members[1:]:
            box = box.union(member.bounding_box)
        return box

    def translate(self, dx: float, dy: float) -> "Blueprints":
        return Blueprints([m.translate(dx, dy) for m in self.members])

    def rotate(self, angle: float, center: Point | None = None) -> "Blueprints":
        return Blueprints([m.rotate(angle, center) for m in self.members])

    def scale(self, factor: float, center: Point | None = None) -> "Blueprints":
        pivot = center if center is not None else self.bounding_box.center
        return Blueprints([m.scale(factor, pivot) for m in self.members])

    def mirror(self, direction: Point, origin: Point | None = None) -> "Blueprints":
        return Blueprints([m.mirror(direction, origin) for m in self.members])

    def to_dict(self) -> dict[str, Any]:
        return {"type": "blueprints", "members": [m.to_dict() for m in self.members]}


Shape2D: TypeAlias = Blueprint | CompoundBlueprint | Blueprints | None


def shape_from_dict(data: dict[str, Any] | None) -> Shape2D:
    """Deserialize any shape produced by a ``to_dict`` method.

    Raises:
        BlueprintError: If the shape type is unknown
    """
    if data is None:
        return None
    kind = data.get("type")
    if kind == "blueprint":
        return Blueprint.from_dict(data)
    if kind == "compound":
        return CompoundBlueprint.from_dict(data)
    if kind == "blueprints":
        members: list[Blueprint | CompoundBlueprint] = []
        for member in data["members"]:
            shape = shape_from_dict(member)
            if not isinstance(shape, (Blueprint, CompoundBlueprint)):
                raise BlueprintError(f"Invalid collection member type: {member.get('type')!r}")
            members.append(shape)
        return Blueprints(members)
    raise BlueprintError(f"Unknown shape type: {kind!r}")
