"""
Geometry Primitives
===================

Axis-aligned edges, squares and the bounding rectangle used by the packer.

An edge is a horizontal or vertical segment described by its extent along
its own axis (``start``/``end``) and its fixed coordinate on the other axis
(``pos``). The ``side`` tells which way a square placed flush against the
edge would grow.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

Point = Tuple[float, float]


class Axis(Enum):
    """Direction along which an edge's extent runs."""
    X = "x"  # Horizontal segment, pos is a y coordinate
    Y = "y"  # Vertical segment, pos is an x coordinate

    @property
    def other(self) -> "Axis":
        return Axis.Y if self is Axis.X else Axis.X


class Side(Enum):
    """Polarity of an edge along the perpendicular axis."""
    NEGATIVE = -1
    POSITIVE = 1

    @property
    def opposite(self) -> "Side":
        return Side.POSITIVE if self is Side.NEGATIVE else Side.NEGATIVE


@dataclass(frozen=True)
class Edge:
    """
    Axis-aligned segment with a polarity.

    Used both for the free boundary of placed squares and, by the candidate
    finder and bounds filter, for intervals of legal square centers (in which
    case ``pos`` is the center coordinate on the perpendicular axis).
    """
    start: float
    end: float
    pos: float
    side: Side
    axis: Axis

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def is_degenerate(self) -> bool:
        """True if the edge has no extent and therefore no placement capacity."""
        return self.end <= self.start

    def footprint(self, side_length: float) -> Tuple[float, float, float, float]:
        """
        Region covered by squares of ``side_length`` centered anywhere on this edge.

        Returns:
            (par_start, par_end, perp_start, perp_end): bounds along the edge's
            axis followed by bounds along the perpendicular axis.
        """
        half = side_length / 2.0
        return (
            self.start - half,
            self.end + half,
            self.pos - half,
            self.pos + half,
        )

    def with_extent(self, start: float, end: float) -> "Edge":
        """Copy of this edge spanning [start, end]."""
        return replace(self, start=start, end=end)


def edge_from_points(a: Point, b: Point, side: Side) -> Edge:
    """
    Build a normalized edge from two endpoints.

    Args:
        a: First endpoint (x, y).
        b: Second endpoint (x, y).
        side: Polarity of the new edge.

    Returns:
        Edge ordered by the lower coordinate.

    Raises:
        ValueError: If the points are neither horizontally nor vertically aligned.
    """
    (ax, ay), (bx, by) = a, b
    if ay == by:
        return Edge(start=min(ax, bx), end=max(ax, bx), pos=ay, side=side, axis=Axis.X)
    if ax == bx:
        return Edge(start=min(ay, by), end=max(ay, by), pos=ax, side=side, axis=Axis.Y)
    raise ValueError(f"Edges must be horizontal or vertical, got {a} -> {b}")


def square_corners(x: float, y: float, side: float) -> List[Point]:
    """Corners of a centered square: top-left, top-right, bottom-right, bottom-left."""
    half = side / 2.0
    left, right = x - half, x + half
    bottom, top = y - half, y + half
    return [(left, top), (right, top), (right, bottom), (left, bottom)]


@dataclass(frozen=True)
class Square:
    """A placed brick: center, side length and creation order."""
    x: float
    y: float
    side: float
    index: int

    @property
    def left(self) -> float:
        return self.x - self.side / 2.0

    @property
    def right(self) -> float:
        return self.x + self.side / 2.0

    @property
    def bottom(self) -> float:
        return self.y - self.side / 2.0

    @property
    def top(self) -> float:
        return self.y + self.side / 2.0

    @property
    def area(self) -> float:
        return self.side * self.side

    def corners(self) -> List[Point]:
        return square_corners(self.x, self.y, self.side)

    def edges(self) -> Tuple[List[Edge], List[Edge]]:
        """
        Boundary edges of the square.

        Walking the corners in winding order yields top (positive),
        right (positive), bottom (negative) and left (negative).

        Returns:
            (horizontal_edges, vertical_edges)
        """
        tl, tr, br, bl = self.corners()
        horizontal = [
            edge_from_points(tl, tr, Side.POSITIVE),
            edge_from_points(br, bl, Side.NEGATIVE),
        ]
        vertical = [
            edge_from_points(tr, br, Side.POSITIVE),
            edge_from_points(bl, tl, Side.NEGATIVE),
        ]
        return horizontal, vertical


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its center and size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2.0

    @property
    def right(self) -> float:
        return self.x + self.width / 2.0

    @property
    def bottom(self) -> float:
        return self.y - self.height / 2.0

    @property
    def top(self) -> float:
        return self.y + self.height / 2.0

    @property
    def area(self) -> float:
        return self.width * self.height

    def extent(self, axis: Axis) -> Tuple[float, float]:
        """(low, high) bounds of the rectangle along an axis."""
        if axis is Axis.X:
            return (self.left, self.right)
        return (self.bottom, self.top)

    def contains(self, square: Square, tolerance: float = 0.0) -> bool:
        """True if the whole square lies inside the rectangle."""
        return (
            square.left >= self.left - tolerance
            and square.right <= self.right + tolerance
            and square.bottom >= self.bottom - tolerance
            and square.top <= self.top + tolerance
        )
