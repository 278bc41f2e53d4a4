"""
Candidate-Position Finder
=========================

For a new square of a given size, finds every interval of center positions
where it can sit flush against a free edge without running into a neighbor.

The finder is called once per axis: the "parallel" edges are the ones the
square would rest on, the "perpendicular" edges are the other axis' free
edges, which act as walls along the parallel edge's run.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import List, Sequence, Tuple

from brick_layout.layout_core.edge_tracker import DEFAULT_POSITION_TOLERANCE
from brick_layout.layout_core.geometry import Edge, Side

DEFAULT_COVERAGE_TOLERANCE = 0.5


class _SortedEdges:
    """Edges sorted by position, sliceable by an open position range."""

    def __init__(self, edges: Sequence[Edge]):
        self.edges = sorted(edges, key=lambda edge: edge.pos)
        self._positions = [edge.pos for edge in self.edges]

    def between(self, low: float, high: float) -> List[Edge]:
        """Edges with low < pos < high, in position order."""
        return self.edges[bisect_right(self._positions, low):bisect_left(self._positions, high)]


def _reach(edge: Edge, side_length: float) -> Tuple[float, float, float, float]:
    """
    Region a square of ``side_length`` touching ``edge`` can occupy.

    Along the edge it reaches one full side length past each end; across it
    extends one side length into the half-plane the edge opens into.

    Returns:
        (par_start, par_end, perp_start, perp_end)
    """
    perp_start = edge.pos - (side_length if edge.side is Side.NEGATIVE else 0.0)
    perp_end = edge.pos + (side_length if edge.side is Side.POSITIVE else 0.0)
    return (edge.start - side_length, edge.end + side_length, perp_start, perp_end)


def _is_covered(
    candidate: Edge,
    side_length: float,
    parallel: _SortedEdges,
    coverage_tolerance: float
) -> bool:
    """True if a parallel edge crosses the candidate's footprint along its whole run."""
    par_start, par_end, perp_start, perp_end = candidate.footprint(side_length)
    for edge in parallel.between(perp_start, perp_end):
        if edge.start - coverage_tolerance < par_start and edge.end + coverage_tolerance > par_end:
            return True
    return False


def find_square_positions(
    side_length: float,
    parallel_edges: Sequence[Edge],
    perpendicular_edges: Sequence[Edge],
    coverage_tolerance: float = DEFAULT_COVERAGE_TOLERANCE,
    position_tolerance: float = DEFAULT_POSITION_TOLERANCE
) -> List[Edge]:
    """
    Find legal center intervals for a square resting on the parallel edges.

    Args:
        side_length: Side of the new square.
        parallel_edges: Free edges the square may sit flush against.
        perpendicular_edges: Free edges of the other axis.
        coverage_tolerance: Slack for the redundant-coverage filter.
        position_tolerance: Walls this close to either end of the reach
            still count as cutting through it.

    Returns:
        Edges whose extent is the range of legal centers along the parallel
        axis and whose ``pos`` is the center coordinate across it.
    """
    half = side_length / 2.0
    walls = _SortedEdges(perpendicular_edges)
    parallel = _SortedEdges(parallel_edges)
    positions: List[Edge] = []

    for par_edge in parallel_edges:
        par_start, par_end, perp_start, perp_end = _reach(par_edge, side_length)
        center_pos = perp_start + half
        window_start = par_start
        window_end = par_end
        found: List[Edge] = []

        # Sweep the walls cutting through the reachable run, left to right
        for wall in walls.between(par_start - position_tolerance, par_end + position_tolerance):
            if not (wall.end > perp_start and perp_end > wall.start):
                continue

            if wall.side is Side.POSITIVE:
                window_start = max(wall.pos, par_start)
                window_end = par_end
            else:
                window_end = min(wall.pos, par_end)
                start = window_start + half
                end = window_end - half
                if end > start:
                    found.append(Edge(start, end, center_pos, par_edge.side, par_edge.axis))
                window_start = max(wall.pos, par_start)

        start = window_start + half
        end = window_end - half
        if end > start:
            found.append(Edge(start, end, center_pos, par_edge.side, par_edge.axis))

        for candidate in found:
            if not _is_covered(candidate, side_length, parallel, coverage_tolerance):
                positions.append(candidate)

    return positions
