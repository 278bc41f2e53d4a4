"""
Free-Edge Tracker
=================

Derives the genuinely free boundary from every edge accumulated so far.

Two edges on the same axis cancel each other where they overlap if they lie
at the same position and face each other (opposite polarity): that stretch is
the shared wall between two touching squares, so nothing can be placed
against it. Whatever is left of each edge survives as free boundary.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from brick_layout.layout_core.geometry import Edge, Side

DEFAULT_POSITION_TOLERANCE = 0.01

_BucketKey = Tuple[Side, int]


class _PositionIndex:
    """
    Edges bucketed by polarity and position.

    Buckets are one tolerance wide, so every edge within tolerance of a
    position sits in that position's bucket or a neighboring one.
    """

    def __init__(self, edges: Sequence[Edge], tolerance: float):
        self._edges = edges
        self._tolerance = tolerance
        self._width = tolerance if tolerance > 0 else 1.0
        self._buckets: Dict[_BucketKey, List[int]] = defaultdict(list)
        for index, edge in enumerate(edges):
            self._buckets[(edge.side, self._bucket(edge.pos))].append(index)

    def _bucket(self, pos: float) -> int:
        return math.floor(pos / self._width)

    def facing(self, index: int) -> List[int]:
        """Indices of opposite-polarity edges at the same position as ``edges[index]``."""
        edge = self._edges[index]
        side = edge.side.opposite
        center = self._bucket(edge.pos)
        found = []
        for bucket in (center - 1, center, center + 1):
            for other_index in self._buckets.get((side, bucket), ()):
                if abs(self._edges[other_index].pos - edge.pos) < self._tolerance:
                    found.append(other_index)
        return found


def _collect_masks(
    index: int,
    edges: Sequence[Edge],
    position_index: _PositionIndex
) -> List[Tuple[float, float]]:
    """Overlapping sub-ranges of ``edges[index]`` covered by facing edges."""
    edge = edges[index]
    masks = []
    for other_index in position_index.facing(index):
        other = edges[other_index]
        if edge.end > other.start and other.end > edge.start:
            masks.append((max(edge.start, other.start), min(edge.end, other.end)))
    return masks


def prune_free_edges(
    edges: Sequence[Edge],
    position_tolerance: float = DEFAULT_POSITION_TOLERANCE
) -> List[Edge]:
    """
    Remove the parts of each edge cancelled by facing neighbors.

    Args:
        edges: Raw edges of one axis, as accumulated from placed squares.
        position_tolerance: Max distance between two positions considered equal.

    Returns:
        Surviving free sub-edges. Pieces no longer than the position
        tolerance are dropped: they are seams between squares that sit
        closer than the tolerance, not room for a new square.
    """
    position_index = _PositionIndex(edges, position_tolerance)
    free_edges: List[Edge] = []

    for index, edge in enumerate(edges):
        masks = _collect_masks(index, edges, position_index)

        # Walk down from the top of the edge, keeping the gaps between masks
        masks.sort(key=lambda mask: mask[1], reverse=True)
        temp_end = edge.end
        for mask_start, mask_end in masks:
            if temp_end - mask_end > position_tolerance:
                free_edges.append(edge.with_extent(mask_end, temp_end))
            # min, not assignment: a mask nested in one already walked
            # must not re-expose the length that one covered
            temp_end = min(temp_end, mask_start)

        if temp_end - edge.start > position_tolerance:
            free_edges.append(edge.with_extent(edge.start, temp_end))

    return free_edges
