"""
Layout Checks
=============

Verifies finished layouts: bricks must not overlap and must stay inside the
bounding box. Touching edges are allowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from brick_layout.layout_core.geometry import Rect, Square

DEFAULT_CHECK_TOLERANCE = 1e-6


@dataclass
class LayoutCheckResult:
    """Result of a layout check."""
    overlaps: List[Tuple[int, int]] = field(default_factory=list)
    out_of_bounds: List[int] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.overlaps and not self.out_of_bounds


def _bounds_array(squares: Sequence[Square]) -> np.ndarray:
    """(N, 4) array of left, right, bottom, top."""
    if not squares:
        return np.zeros((0, 4), dtype=np.float64)
    return np.array(
        [(s.left, s.right, s.bottom, s.top) for s in squares],
        dtype=np.float64
    )


def find_overlaps(
    squares: Sequence[Square],
    tolerance: float = DEFAULT_CHECK_TOLERANCE
) -> List[Tuple[int, int]]:
    """
    Find pairs of squares whose interiors intersect.

    Args:
        squares: Squares to check.
        tolerance: Overlap depth below which squares count as touching.

    Returns:
        Index pairs (i, j) with i < j, positions in ``squares``.
    """
    bounds = _bounds_array(squares)
    if len(bounds) < 2:
        return []

    left, right, bottom, top = bounds.T
    overlap_x = np.minimum(right[:, None], right[None, :]) - np.maximum(left[:, None], left[None, :])
    overlap_y = np.minimum(top[:, None], top[None, :]) - np.maximum(bottom[:, None], bottom[None, :])
    hits = (overlap_x > tolerance) & (overlap_y > tolerance)

    rows, cols = np.nonzero(np.triu(hits, k=1))
    return [(int(i), int(j)) for i, j in zip(rows, cols)]


def find_out_of_bounds(
    squares: Sequence[Square],
    bounding_box: Rect,
    tolerance: float = DEFAULT_CHECK_TOLERANCE
) -> List[int]:
    """Positions of squares that stick out of the bounding box."""
    return [
        i for i, square in enumerate(squares)
        if not bounding_box.contains(square, tolerance)
    ]


def check_layout(
    squares: Sequence[Square],
    bounding_box: Rect,
    tolerance: float = DEFAULT_CHECK_TOLERANCE
) -> LayoutCheckResult:
    """
    Check the packing invariants of a layout.

    Args:
        squares: Placed squares.
        bounding_box: Region the squares must stay inside.
        tolerance: Numeric slack for both checks.

    Returns:
        LayoutCheckResult listing every violation.
    """
    return LayoutCheckResult(
        overlaps=find_overlaps(squares, tolerance),
        out_of_bounds=find_out_of_bounds(squares, bounding_box, tolerance)
    )
