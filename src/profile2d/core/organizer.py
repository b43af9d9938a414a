"""Nesting organizer: flat loops to regions with holes.

This module turns an unordered list of closed loops into disjoint regions:
each region is an outer loop and the loops directly inside it (its holes).
Loops nested deeper start new regions of their own, alternating like the
even-odd fill rule:

    outer ⊃ hole ⊃ island ⊃ island-hole
    → [outer, hole], [island, island-hole]

Loops that cross each other are not supported; the result is unspecified.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from profile2d.core.spatial import BoxIndex
from profile2d.domain import Blueprint, Blueprints, CompoundBlueprint

logger = logging.getLogger(__name__)


@dataclass
class ContainedBlueprint:
    """A loop annotated with the loops of its group that contain it.

    Attributes:
        blueprint: The loop
        is_in: Other loops of the same group containing it
    """

    blueprint: Blueprint
    is_in: list[Blueprint] = field(default_factory=list)

    def is_inside_of(self, other: Blueprint) -> bool:
        return any(container is other for container in self.is_in)


def group_by_bounding_box_overlap(blueprints: Sequence[Blueprint]) -> list[list[Blueprint]]:
    """Group loops whose bounding boxes overlap, directly or through a chain.

    Args:
        blueprints: Loops to group

    Returns:
        Connected groups, ordered by their first member's input position,
        members in input order
    """
    boxes = [bp.bounding_box for bp in blueprints]
    index = BoxIndex(boxes)
    parents = list(range(len(blueprints)))

    def find(i: int) -> int:
        while parents[i] != i:
            parents[i] = parents[parents[i]]
            i = parents[i]
        return i

    for i, box in enumerate(boxes):
        for j in index.search(box):
            if j <= i:
                continue
            root_i, root_j = find(i), find(j)
            if root_i != root_j:
                parents[max(root_i, root_j)] = min(root_i, root_j)

    groups: dict[int, list[Blueprint]] = {}
    for i, blueprint in enumerate(blueprints):
        groups.setdefault(find(i), []).append(blueprint)
    return list(groups.values())


def add_containment_info(group: Sequence[Blueprint]) -> list[ContainedBlueprint]:
    """Annotate every loop of a group with the loops containing it.

    A loop is considered inside another when the midpoint of its first
    curve is.
    """
    annotated = []
    for blueprint in group:
        sample = blueprint.curves[0].mid_point
        containers = [
            other for other in group if other is not blueprint and other.is_inside(sample)
        ]
        annotated.append(ContainedBlueprint(blueprint, containers))
    return annotated


def resolve_nesting(group: list[ContainedBlueprint]) -> list[list[ContainedBlueprint]]:
    """Split an annotated group into clusters of one outer loop and its holes.

    Args:
        group: Loops annotated by ``add_containment_info``

    Returns:
        Clusters; within a cluster every loop is the outer loop or a direct
        hole of it
    """
    if not group:
        return []

    outer_loops = [c for c in group if not c.is_in]
    deeply_nested = [c for c in group if len(c.is_in) > 1]

    if len(outer_loops) == 1 and not deeply_nested:
        return [group]

    if len(outer_loops) > 1:
        clusters = []
        for outer in outer_loops:
            subgroup = [
                c
                for c in group
                if c.blueprint is outer.blueprint or c.is_inside_of(outer.blueprint)
            ]
            clusters.extend(resolve_nesting(subgroup))
        return clusters

    first_level = [c for c in group if len(c.is_in) <= 1]
    nested = add_containment_info([c.blueprint for c in deeply_nested])
    return [first_level, *resolve_nesting(nested)]


def _cluster_to_shape(cluster: list[ContainedBlueprint]) -> Blueprint | CompoundBlueprint:
    if len(cluster) == 1:
        return cluster[0].blueprint
    ordered = sorted(cluster, key=lambda c: len(c.is_in))
    return CompoundBlueprint.from_blueprints([c.blueprint for c in ordered])


def organise_blueprints(blueprints: Sequence[Blueprint]) -> Blueprints:
    """Organise closed loops into regions with holes.

    Args:
        blueprints: Closed, mutually non-crossing loops in any order

    Returns:
        One member per region: a Blueprint when the region has no hole,
        a CompoundBlueprint (outer loop first) otherwise

    Example:
        >>> regions = organise_blueprints([hole, outer, far_away])
        >>> [type(r).__name__ for r in regions]
        ['CompoundBlueprint', 'Blueprint']
    """
    members: list[Blueprint | CompoundBlueprint] = []
    groups = group_by_bounding_box_overlap(blueprints)
    for group in groups:
        for cluster in resolve_nesting(add_containment_info(group)):
            members.append(_cluster_to_shape(cluster))

    logger.debug(
        "Organised %d loops into %d regions (%d overlap groups)",
        len(blueprints),
        len(members),
        len(groups),
    )
    return Blueprints(members)
