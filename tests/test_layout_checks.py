"""
Tests for layout invariant checks.
"""

from brick_layout.layout_core.geometry import Rect, Square
from brick_layout.layout_core.layout_checks import (
    check_layout,
    find_out_of_bounds,
    find_overlaps,
)


BOX = Rect(x=0.0, y=0.0, width=100.0, height=100.0)


class TestFindOverlaps:
    """Test pairwise overlap detection."""

    def test_touching_squares_allowed(self):
        squares = [
            Square(0.0, 0.0, 20.0, 0),
            Square(20.0, 0.0, 20.0, 1),
            Square(20.0, 20.0, 20.0, 2),
        ]

        assert find_overlaps(squares) == []

    def test_overlap_reported(self):
        squares = [
            Square(0.0, 0.0, 20.0, 0),
            Square(30.0, 30.0, 10.0, 1),
            Square(15.0, 5.0, 20.0, 2),
        ]

        assert find_overlaps(squares) == [(0, 2)]

    def test_contained_square_overlaps(self):
        squares = [Square(0.0, 0.0, 40.0, 0), Square(5.0, 5.0, 10.0, 1)]

        assert find_overlaps(squares) == [(0, 1)]

    def test_tolerance_absorbs_float_error(self):
        squares = [Square(0.0, 0.0, 20.0, 0), Square(20.0 - 1e-9, 0.0, 20.0, 1)]

        assert find_overlaps(squares) == []
        assert find_overlaps(squares, tolerance=0.0) == [(0, 1)]

    def test_empty_and_single(self):
        assert find_overlaps([]) == []
        assert find_overlaps([Square(0.0, 0.0, 1.0, 0)]) == []


class TestCheckLayout:
    """Test combined checks."""

    def test_out_of_bounds(self):
        squares = [Square(0.0, 0.0, 20.0, 0), Square(45.0, 0.0, 20.0, 1)]

        assert find_out_of_bounds(squares, BOX) == [1]

    def test_valid_layout(self):
        squares = [Square(-40.0, -40.0, 20.0, 0), Square(40.0, 40.0, 20.0, 1)]
        result = check_layout(squares, BOX)

        assert result.valid
        assert result.overlaps == []
        assert result.out_of_bounds == []

    def test_invalid_layout(self):
        squares = [Square(0.0, 0.0, 20.0, 0), Square(5.0, 0.0, 20.0, 1), Square(60.0, 0.0, 20.0, 2)]
        result = check_layout(squares, BOX)

        assert not result.valid
        assert result.overlaps == [(0, 1)]
        assert result.out_of_bounds == [2]
