"""Intersection segments between two closed blueprints.

Given two loops A and B, this module finds where they cross or overlap,
splits both loops there, and pairs the resulting runs of curves: each pair
holds the run of A and the run of B travelling between the same two
landmark points, or the marker "same" when the run of A lies on a stretch
of boundary shared by both loops.

Boolean operations on profiles are built on top of these pairs by picking
runs from A and B according to the operation.

Key functions:
- find_intersection_segments: The full pairing pipeline
- rotate_to_start_at: Rotate a loop to start at a point
- rotate_to_start_at_segment: Rotate (or reverse) a loop to start on a segment
- reverse_curves: Reverse a run of curves
"""

import logging
from collections.abc import Sequence
from typing import Literal, TypeAlias

from profile2d.core.geometry import remove_duplicate_points, same_point
from profile2d.core.intersections import intersect_curves
from profile2d.domain import Blueprint, Curve2D, Point
from profile2d.exceptions import bug
from profile2d.precision import PRECISION_INTERSECTION

logger = logging.getLogger(__name__)

SAME: Literal["same"] = "same"

IntersectionSegment: TypeAlias = tuple[list[Curve2D], list[Curve2D] | Literal["same"]]


def start_of_run(run: Sequence[Curve2D]) -> Point:
    """First point of a non-empty run of curves."""
    if not run:
        bug("start_of_run", "empty run")
    return run[0].first_point


def end_of_run(run: Sequence[Curve2D]) -> Point:
    """Last point of a non-empty run of curves."""
    if not run:
        bug("end_of_run", "empty run")
    return run[-1].last_point


def reverse_curves(curves: Sequence[Curve2D]) -> list[Curve2D]:
    """Travel a run of curves backwards: reversed order, each curve reversed."""
    return [curve.reversed() for curve in reversed(curves)]


def reverse_runs(runs: Sequence[Sequence[Curve2D]]) -> list[list[Curve2D]]:
    """Travel a partitioned loop backwards: reversed run order, each run reversed."""
    return [reverse_curves(run) for run in reversed(runs)]


def _rotated(curves: Sequence[Curve2D], start_index: int) -> list[Curve2D]:
    if start_index <= 0:
        return list(curves)
    return [*curves[start_index:], *curves[:start_index]]


def rotate_to_start_at(curves: Sequence[Curve2D], point: Point) -> list[Curve2D]:
    """Rotate a loop so that its first curve starts at ``point``.

    The loop is returned unchanged when no curve starts at the point.
    """
    start_index = next(
        (i for i, curve in enumerate(curves) if same_point(curve.first_point, point)),
        -1,
    )
    return _rotated(curves, start_index)


def _segment_index(curves: Sequence[Curve2D], segment: Curve2D) -> int:
    return next(
        (
            i
            for i, curve in enumerate(curves)
            if same_point(curve.first_point, segment.first_point)
            and same_point(curve.last_point, segment.last_point)
        ),
        -1,
    )


def rotate_to_start_at_segment(curves: Sequence[Curve2D], segment: Curve2D) -> list[Curve2D]:
    """Rotate a loop so that it starts with a curve matching ``segment``.

    The loop is reversed when the segment only matches backwards.

    Raises:
        InvariantViolationError: If the segment matches in neither direction
    """
    start_index = _segment_index(curves, segment)
    if start_index != -1:
        return _rotated(curves, start_index)

    reversed_curves = reverse_curves(curves)
    start_index = _segment_index(reversed_curves, segment)
    if start_index == -1:
        bug("rotate_to_start_at_segment", "segment not found in either direction")
    return _rotated(reversed_curves, start_index)


def matching_common_segment(
    start: Point,
    end: Point,
    midpoint: Point,
    common_segments: Sequence[Curve2D],
) -> Curve2D | None:
    """Find the common segment a stretch of boundary lies on.

    Args:
        start: First point of the stretch
        end: Last point of the stretch
        midpoint: A point in the middle of the stretch
        common_segments: Candidate common segments

    Returns:
        The common segment whose endpoints match in either direction and
        which contains ``midpoint``, or None
    """
    for segment in common_segments:
        forward = same_point(start, segment.first_point) and same_point(end, segment.last_point)
        backward = same_point(start, segment.last_point) and same_point(end, segment.first_point)
        if (forward or backward) and segment.is_on_curve(midpoint, PRECISION_INTERSECTION):
            return segment
    return None


def _find_all_intersections(
    first: Blueprint, second: Blueprint
) -> tuple[list[Point], list[Curve2D], list[list[Point]], list[list[Point]]]:
    all_points: list[Point] = []
    common_segments: list[Curve2D] = []
    first_curve_points: list[list[Point]] = [[] for _ in first.curves]
    second_curve_points: list[list[Point]] = [[] for _ in second.curves]

    for i, this_curve in enumerate(first.curves):
        for j, other_curve in enumerate(second.curves):
            result = intersect_curves(this_curve, other_curve, PRECISION_INTERSECTION / 100)
            endpoints = [p for pair in result.common_segment_endpoints for p in pair]
            found = [*result.intersections, *endpoints]

            all_points.extend(found)
            first_curve_points[i].extend(found)
            second_curve_points[j].extend(found)
            common_segments.extend(result.common_segments)

    return remove_duplicate_points(all_points), common_segments, first_curve_points, second_curve_points


def _split_curves(curves: Sequence[Curve2D], curve_points: Sequence[list[Point]]) -> list[Curve2D]:
    split: list[Curve2D] = []
    for curve, points in zip(curves, curve_points):
        if points:
            split.extend(curve.split_at(points, PRECISION_INTERSECTION / 100))
        else:
            split.append(curve)
    return split


def remove_non_crossing_points(
    points: Sequence[Point],
    split_curves: Sequence[Curve2D],
    other: Blueprint,
) -> list[Point]:
    """Keep the points where the loop actually crosses ``other``.

    At every point, the split curves touching it are classified by whether
    their midpoint lies inside ``other``. A point whose curves all lie on
    the same side is a tangential touch and is dropped.

    Args:
        points: Candidate intersection points
        split_curves: The loop, already split at every candidate point
        other: The loop being crossed

    Returns:
        Points where the loop crosses from one side to the other

    Raises:
        InvariantViolationError: If an odd number of curves touch a point
    """
    crossing: list[Point] = []
    for point in points:
        touching = [
            c
            for c in split_curves
            if same_point(c.first_point, point) or same_point(c.last_point, point)
        ]
        if len(touching) % 2:
            bug(
                "remove_non_crossing_points",
                f"{len(touching)} curves touch {point.to_tuple()} (expected an even count)",
            )

        sides = {other.is_inside(curve.mid_point) for curve in touching}
        if len(sides) > 1:
            crossing.append(point)
    return crossing


def split_into_runs(
    curves: Sequence[Curve2D],
    landmarks: Sequence[Point],
    common_segments: Sequence[Curve2D],
) -> list[list[Curve2D]]:
    """Partition a rotated loop into runs between landmarks.

    A curve ending on a landmark closes the current run. A curve lying on a
    common segment forms a run of its own.
    """
    runs: list[list[Curve2D]] = []
    current: list[Curve2D] = []

    for curve in curves:
        if any(same_point(curve.last_point, p) for p in landmarks):
            current.append(curve)
            runs.append(current)
            current = []
        elif matching_common_segment(
            curve.first_point, curve.last_point, curve.mid_point, common_segments
        ):
            if current:
                runs.append(current)
                current = []
            runs.append([curve])
        else:
            current.append(curve)

    if current:
        runs.append(current)
    return runs


def find_intersection_segments(
    first: Blueprint, second: Blueprint
) -> list[IntersectionSegment] | None:
    """Pair the runs of two closed loops between their crossing points.

    Args:
        first: Loop A
        second: Loop B

    Returns:
        Ordered pairs (run of A, run of B or "same"), or None when the loops
        touch in fewer than two places or never actually cross or overlap

    Raises:
        InvariantViolationError: On internally inconsistent topology
    """
    raw_points, common_segments, first_points, second_points = _find_all_intersections(
        first, second
    )
    if len(raw_points) <= 1:
        logger.debug("Fewer than two intersection points, nothing to pair")
        return None

    first_curves = _split_curves(first.curves, first_points)
    second_curves = _split_curves(second.curves, second_points)

    landmarks = remove_non_crossing_points(raw_points, first_curves, second)
    if not landmarks and not common_segments:
        logger.debug("Loops only touch, nothing to pair")
        return None

    if common_segments:
        start_segment = common_segments[0]
        first_curves = rotate_to_start_at_segment(first_curves, start_segment)
        second_curves = rotate_to_start_at_segment(second_curves, start_segment)
    else:
        first_curves = rotate_to_start_at(first_curves, landmarks[0])
        second_curves = rotate_to_start_at(second_curves, landmarks[0])

    first_runs = split_into_runs(first_curves, landmarks, common_segments)
    second_runs = split_into_runs(second_curves, landmarks, common_segments)

    if first_runs and second_runs:
        ends_differ = not same_point(end_of_run(second_runs[0]), end_of_run(first_runs[0]))
        opens_off_segment = bool(common_segments) and len(second_runs[0]) != 1
        if ends_differ or opens_off_segment:
            second_runs = reverse_runs(second_runs)

    if len(first_runs) != len(second_runs):
        bug(
            "find_intersection_segments",
            f"mismatched run counts ({len(first_runs)} vs {len(second_runs)})",
        )

    segments: list[IntersectionSegment] = []
    for run_a, run_b in zip(first_runs, second_runs):
        shared = matching_common_segment(
            start_of_run(run_a), end_of_run(run_a), run_a[0].mid_point, common_segments
        )
        segments.append((run_a, SAME) if shared else (run_a, run_b))

    logger.debug(
        "Paired %d runs (%d landmarks, %d common segments)",
        len(segments),
        len(landmarks),
        len(common_segments),
    )
    return segments
