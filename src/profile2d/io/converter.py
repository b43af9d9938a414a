"""Conversion between profile documents and domain models."""

from typing import Any

from profile2d.domain import (
    Arc,
    Blueprint,
    Blueprints,
    CompoundBlueprint,
    Curve2D,
    Line,
    Point,
    Shape2D,
)
from profile2d.io.schema import CurveModel, LineModel, LoopModel, ProfileDocument


def curve_model_to_domain(model: CurveModel) -> Curve2D:
    """Convert a schema curve to a domain curve."""
    if isinstance(model, LineModel):
        return Line(Point(*model.start), Point(*model.end))
    return Arc(Point(*model.center), model.radius, model.start_angle, model.sweep)


def loop_model_to_blueprint(model: LoopModel) -> Blueprint:
    """Convert a schema loop to a blueprint.

    Args:
        model: Validated loop

    Returns:
        Blueprint in the loop's travel order
    """
    if model.points is not None:
        points = [Point(x, y) for x, y in model.points]
        return Blueprint([Line(a, b) for a, b in zip(points, [*points[1:], points[0]])])
    if model.circle is not None:
        return Blueprint([Arc.circle(Point(*model.circle.center), model.circle.radius)])
    assert model.curves is not None
    return Blueprint([curve_model_to_domain(c) for c in model.curves])


def document_to_blueprints(document: ProfileDocument) -> list[Blueprint]:
    """Convert every loop of a document, in document order."""
    return [loop_model_to_blueprint(loop) for loop in document.loops]


def shape_to_loops(shape: Shape2D) -> list[Blueprint]:
    """Flatten a shape into its loops (outer loops followed by their holes)."""
    if shape is None:
        return []
    if isinstance(shape, Blueprint):
        return [shape]
    if isinstance(shape, CompoundBlueprint):
        return shape.blueprints
    return [loop for member in shape for loop in shape_to_loops(member)]


def _rounded(value: Any, decimals: int) -> Any:
    if isinstance(value, float):
        return round(value, decimals) + 0.0
    if isinstance(value, dict):
        return {k: _rounded(v, decimals) for k, v in value.items()}
    if isinstance(value, list):
        return [_rounded(v, decimals) for v in value]
    return value


def shape_to_dict(shape: Shape2D, decimals: int | None = None) -> dict[str, Any] | None:
    """Serialize a shape, optionally rounding every float.

    Args:
        shape: Shape to serialize
        decimals: Decimals kept (no rounding if None)

    Returns:
        JSON-compatible dictionary, or None for no shape
    """
    if shape is None:
        return None
    data = shape.to_dict()
    return _rounded(data, decimals) if decimals is not None else data


def region_count(shape: Shape2D) -> int:
    """Number of disjoint regions in a shape."""
    if shape is None:
        return 0
    if isinstance(shape, Blueprints):
        return len(shape)
    return 1
