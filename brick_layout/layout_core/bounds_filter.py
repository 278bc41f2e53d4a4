"""
Bounds Filter
=============

Clips candidate center intervals so the square stays inside the play area
and clear of the squares already placed.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from brick_layout.layout_core.geometry import Axis, Edge, Rect, Square

# Overlap depth still treated as touching; below the layout check tolerance
DEFAULT_CLEARANCE = 1e-7


def clip_to_bounds(
    side_length: float,
    candidates: Sequence[Edge],
    bounding_box: Rect
) -> List[Edge]:
    """
    Clip candidates to the bounding box.

    A candidate whose perpendicular footprint leaves the box is dropped
    outright. Along the edge the footprint is clipped to the box and the
    remaining center interval is kept only if it still has length.

    Args:
        side_length: Side of the new square.
        candidates: Center intervals from the candidate finder.
        bounding_box: Play area.

    Returns:
        Surviving, possibly shortened, center intervals.
    """
    half = side_length / 2.0
    clipped: List[Edge] = []

    for candidate in candidates:
        par_start, par_end, perp_start, perp_end = candidate.footprint(side_length)
        par_low, par_high = bounding_box.extent(candidate.axis)
        perp_low, perp_high = bounding_box.extent(candidate.axis.other)

        if perp_start < perp_low or perp_end > perp_high:
            continue

        par_start = max(par_start, par_low)
        par_end = min(par_end, par_high)

        start = par_start + half
        end = par_end - half
        if end > start:
            clipped.append(candidate.with_extent(start, end))

    return clipped


def clip_to_squares(
    side_length: float,
    candidates: Sequence[Edge],
    squares: Sequence[Square],
    clearance: float = DEFAULT_CLEARANCE
) -> List[Edge]:
    """
    Cut the center ranges that would overlap a placed square out of candidates.

    A placed square blocks a candidate when their spans across the candidate
    overlap by more than ``clearance``. Along the candidate it then rules out
    the open range of centers that would push into it. Touching stays legal.

    Args:
        side_length: Side of the new square.
        candidates: Center intervals, already clipped to the bounding box.
        squares: Squares placed so far.
        clearance: Overlap depth still treated as touching.

    Returns:
        Surviving pieces of the candidates, in candidate order.
    """
    if not candidates or not squares:
        return list(candidates)

    half = side_length / 2.0
    left, right, bottom, top = np.array(
        [(s.left, s.right, s.bottom, s.top) for s in squares],
        dtype=np.float64
    ).T

    # (C, 1) candidate columns broadcast against (N,) square rows
    along_x = np.array([c.axis is Axis.X for c in candidates])[:, None]
    starts = np.array([c.start for c in candidates], dtype=np.float64)[:, None]
    ends = np.array([c.end for c in candidates], dtype=np.float64)[:, None]
    centers = np.array([c.pos for c in candidates], dtype=np.float64)[:, None]

    along_low = np.where(along_x, left, bottom)
    along_high = np.where(along_x, right, top)
    across_low = np.where(along_x, bottom, left)
    across_high = np.where(along_x, top, right)

    blocked_low = along_low - half + clearance
    blocked_high = along_high + half - clearance
    blocking = (
        (across_low < centers + half - clearance)
        & (across_high > centers - half + clearance)
        & (blocked_low < ends)
        & (blocked_high > starts)
    )

    clipped: List[Edge] = []
    for row, candidate in enumerate(candidates):
        hits = np.nonzero(blocking[row])[0]
        if len(hits) == 0:
            clipped.append(candidate)
            continue

        cursor = candidate.start
        for low, high in sorted(zip(blocked_low[row, hits], blocked_high[row, hits])):
            if low > cursor:
                clipped.append(candidate.with_extent(cursor, float(low)))
            cursor = max(cursor, float(high))

        if candidate.end > cursor:
            clipped.append(candidate.with_extent(cursor, candidate.end))

    return clipped
