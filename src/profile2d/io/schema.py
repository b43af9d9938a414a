"""Pydantic schema of profile documents.

A profile document lists closed loops, each given in one of three forms:

    {"loops": [
        {"points": [[0, 0], [10, 0], [10, 10], [0, 10]]},
        {"circle": {"center": [5, 5], "radius": 2}},
        {"curves": [
            {"type": "line", "start": [0, 0], "end": [4, 0]},
            {"type": "arc", "center": [4, 2], "radius": 2,
             "start_angle": -1.5708, "sweep": 3.1416},
            {"type": "line", "start": [4, 4], "end": [0, 0]}
        ]}
    ]}

Angles are in radians.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

Coordinates = tuple[float, float]


class LineModel(BaseModel):
    """Straight segment."""

    type: Literal["line"]
    start: Coordinates
    end: Coordinates


class ArcModel(BaseModel):
    """Circular arc with a signed sweep."""

    type: Literal["arc"]
    center: Coordinates
    radius: float = Field(gt=0.0)
    start_angle: float
    sweep: float


CurveModel = Annotated[LineModel | ArcModel, Field(discriminator="type")]


class CircleModel(BaseModel):
    """Full circle."""

    center: Coordinates = (0.0, 0.0)
    radius: float = Field(gt=0.0)


class LoopModel(BaseModel):
    """One closed loop, given by exactly one of its three forms."""

    points: list[Coordinates] | None = None
    circle: CircleModel | None = None
    curves: list[CurveModel] | None = None

    @model_validator(mode="after")
    def _check_single_form(self) -> "LoopModel":
        given = [name for name in ("points", "circle", "curves") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError("a loop needs exactly one of 'points', 'circle' or 'curves'")
        if self.points is not None and len(self.points) < 3:
            raise ValueError("a polygon loop needs at least 3 points")
        if self.curves is not None and not self.curves:
            raise ValueError("a curve loop needs at least one curve")
        return self


class ProfileDocument(BaseModel):
    """Top-level profile document."""

    loops: list[LoopModel] = Field(min_length=1)
