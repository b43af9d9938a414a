"""Axis-aligned bounding boxes."""

from collections.abc import Iterable
from dataclasses import dataclass

from profile2d.domain.point import Point


@dataclass(frozen=True, slots=True)
class BoundingBox2D:
    """Axis-aligned 2D bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox2D":
        """Smallest box containing all the given points.

        Raises:
            ValueError: If no points are given
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot build a bounding box from no points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, other: "BoundingBox2D") -> "BoundingBox2D":
        """Smallest box containing both boxes."""
        return BoundingBox2D(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def is_out(self, other: "BoundingBox2D") -> bool:
        """Check whether the two boxes are strictly disjoint.

        Boxes sharing only an edge or a corner are not out of each other.
        """
        return (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )

    def contains_point(self, point: Point) -> bool:
        """Check whether a point lies in the box, boundary included."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
