"""
Merge resolution for colliding bodies.

Candidate pairs come out of the force pass in System.tick. Pairs are joined
transitively, so three bodies that touch in one tick become one body rather
than being merged pair by pair (which would count the shared body twice).
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np

from .body import Body
from .constants import FIXED_TAG

logger = logging.getLogger(__name__)


def group_pairs(pairs: Sequence[Tuple[int, int]]) -> List[List[int]]:
    """
    Union-find over candidate pairs. Returns each connected group as a sorted
    index list; groups are ordered by their lowest index.
    """
    parent: Dict[int, int] = {}

    def find(i: int) -> int:
        parent.setdefault(i, i)
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    for i, j in pairs:
        ri, rj = find(i), find(j)
        if ri != rj:
            parent[max(ri, rj)] = min(ri, rj)

    groups: Dict[int, List[int]] = {}
    for i in parent:
        groups.setdefault(find(i), []).append(i)
    return [sorted(members) for _, members in sorted(groups.items())]


def survivor_index(bodies: Sequence[Body], members: Sequence[int]) -> int:
    """Heaviest member wins; on an exact tie the lowest index does."""
    return min(members, key=lambda idx: (-bodies[idx].mass, idx))


def merge_group(bodies: Sequence[Body], members: Sequence[int]) -> Body:
    """
    Reduce a group of colliding bodies into one.

    Mass is summed, position and previous position are mass-weighted
    centroids. If any member is fixed the result is fixed, stationary, and
    tagged FIXED_TAG; otherwise it keeps the survivor's tag.
    """
    group = [bodies[idx] for idx in members]
    total_mass = 0.0
    for body in group:
        total_mass += body.mass
    position = sum((body.mass * body.position for body in group), np.zeros(2)) / total_mass
    previous = sum((body.mass * body.previous for body in group), np.zeros(2)) / total_mass

    fixed = any(body.fixed for body in group)
    if fixed:
        return Body(total_mass, position, previous=position, fixed=True, display_tag=FIXED_TAG)
    tag = bodies[survivor_index(bodies, members)].display_tag
    return Body(total_mass, position, previous=previous, display_tag=tag)


def resolve_merges(bodies: List[Body], pairs: Sequence[Tuple[int, int]]) -> List[Body]:
    """
    Return a new collection with every colliding group collapsed into its
    survivor's slot and the absorbed bodies left out.
    """
    if not pairs:
        return list(bodies)

    replaced: Dict[int, Body] = {}
    absorbed: Set[int] = set()
    for members in group_pairs(pairs):
        keep = survivor_index(bodies, members)
        replaced[keep] = merge_group(bodies, members)
        absorbed.update(idx for idx in members if idx != keep)
        logger.debug(
            "Merged bodies %s into slot %d (mass %.3f)",
            members,
            keep,
            replaced[keep].mass,
        )

    return [
        replaced.get(idx, body)
        for idx, body in enumerate(bodies)
        if idx not in absorbed
    ]
