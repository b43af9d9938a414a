"""2D point and vector value type.

Points double as vectors: the arithmetic operators and the dot/cross
products treat a Point as the vector from the origin.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable. Exact equality compares raw floats; geometric
    code compares points with a tolerance through ``is_close``.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> "Point":
        return Point(self.x / factor, self.y / factor)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the cross product with another vector.

        Positive when ``other`` turns counter-clockwise from ``self``.
        """
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Point":
        """Unit vector with the same direction.

        Raises:
            ValueError: If the vector has zero length
        """
        length = self.norm()
        if length < 1e-15:
            raise ValueError("Cannot normalize a zero-length vector")
        return Point(self.x / length, self.y / length)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "Point", precision: float) -> bool:
        """Check whether two points coincide within ``precision``."""
        return self.distance_to(other) <= precision

    def rotated(self, angle: float, center: "Point | None" = None) -> "Point":
        """Rotate counter-clockwise around a center.

        Args:
            angle: Rotation angle in radians
            center: Rotation center (origin if None)

        Returns:
            Rotated point
        """
        cx, cy = (center.x, center.y) if center is not None else (0.0, 0.0)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        dx, dy = self.x - cx, self.y - cy
        return Point(cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)

    def mirrored(self, direction: "Point", origin: "Point") -> "Point":
        """Reflect across the line through ``origin`` along ``direction``."""
        axis = direction.normalized()
        offset = self - origin
        return origin + axis * (2 * offset.dot(axis)) - offset

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
