"""Corners between consecutive curves and the filters selecting them."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from profile2d.domain.curve import Curve2D
from profile2d.domain.point import Point
from profile2d.precision import PRECISION_POINT


@dataclass(frozen=True)
class Corner:
    """The junction of two consecutive curves.

    Attributes:
        first_curve: Curve arriving at the corner
        second_curve: Curve leaving the corner
        point: Junction point (end of ``first_curve``)
    """

    first_curve: Curve2D
    second_curve: Curve2D
    point: Point


class CornerFilter(Protocol):
    """Decides which corners a corner operation may modify."""

    def should_keep(self, corner: Corner) -> bool: ...


@dataclass(frozen=True)
class PointCornerFilter:
    """Keeps the corners located at any of the given points.

    Attributes:
        points: Corner locations to keep
        precision: Matching tolerance
    """

    points: Sequence[Point]
    precision: float = PRECISION_POINT

    def should_keep(self, corner: Corner) -> bool:
        return any(corner.point.is_close(p, self.precision) for p in self.points)
