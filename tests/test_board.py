"""
Unit tests for board.py module.

Tests:
- Board creation and dimension validation
- Cell access and bounds checking
- Orthogonal neighbors
- Coordinate label conversion
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gogame.board import (
    Board,
    Cell,
    MAX_BOARD_SIZE,
    coords_to_label,
    label_to_coords,
)
from gogame.errors import InvalidInput, OutOfBounds


class TestCell:
    """Tests for Cell values."""

    def test_wire_encoding(self):
        """Test cell values match the external encoding."""
        assert Cell.PLAYER1 == 0
        assert Cell.PLAYER2 == 1
        assert Cell.EMPTY == 2

    def test_opponent(self):
        """Test opponent of each colour."""
        assert Cell.PLAYER1.opponent() is Cell.PLAYER2
        assert Cell.PLAYER2.opponent() is Cell.PLAYER1

    def test_empty_has_no_opponent(self):
        """Test opponent of EMPTY is a contract violation."""
        with pytest.raises(InvalidInput):
            Cell.EMPTY.opponent()


class TestBoard:
    """Tests for Board class."""

    def test_creation_all_empty(self):
        """Test a new board holds only empty cells."""
        board = Board(9, 9)
        assert board.is_empty()
        assert all(board.get(p) is Cell.EMPTY for p in board.positions())
        assert len(list(board.positions())) == 81

    def test_rectangular_board(self):
        """Test non-square dimensions."""
        board = Board(5, 3)
        assert board.in_bounds((4, 2))
        assert not board.in_bounds((2, 4))
        assert len(board.to_grid()) == 5
        assert len(board.to_grid()[0]) == 3

    def test_invalid_dimensions(self):
        """Test invalid dimensions raise ValueError."""
        with pytest.raises(ValueError):
            Board(0, 9)
        with pytest.raises(ValueError):
            Board(9, -1)
        with pytest.raises(ValueError):
            Board(MAX_BOARD_SIZE + 1, 9)

    def test_set_and_get(self):
        """Test writing a single cell."""
        board = Board(9, 9)
        board.set((2, 3), Cell.PLAYER1)

        assert board.get((2, 3)) is Cell.PLAYER1
        assert board.get((3, 2)) is Cell.EMPTY
        assert list(board.stones()) == [(2, 3)]

    def test_get_out_of_bounds(self):
        """Test reading off the board raises OutOfBounds."""
        board = Board(9, 9)
        for pos in [(-1, 0), (0, -1), (9, 0), (0, 9)]:
            with pytest.raises(OutOfBounds):
                board.get(pos)

    def test_set_out_of_bounds(self):
        """Test writing off the board raises OutOfBounds."""
        board = Board(9, 9)
        with pytest.raises(OutOfBounds):
            board.set((9, 9), Cell.PLAYER2)

    def test_out_of_bounds_is_value_error(self):
        """Test OutOfBounds can be caught as ValueError."""
        with pytest.raises(ValueError):
            Board(3, 3).get((5, 5))

    def test_neighbors_center(self):
        """Test a center point has four orthogonal neighbors."""
        board = Board(9, 9)
        assert sorted(board.neighbors((4, 4))) == [(3, 4), (4, 3), (4, 5), (5, 4)]

    def test_neighbors_edge_and_corner(self):
        """Test edge and corner points have fewer neighbors."""
        board = Board(9, 9)
        assert sorted(board.neighbors((0, 0))) == [(0, 1), (1, 0)]
        assert sorted(board.neighbors((8, 4))) == [(7, 4), (8, 3), (8, 5)]

    def test_neighbors_no_diagonals(self):
        """Test diagonal points are never neighbors."""
        board = Board(9, 9)
        assert (5, 5) not in board.neighbors((4, 4))

    def test_copy_is_independent(self):
        """Test board copy."""
        board = Board(9, 9)
        board.set((1, 1), Cell.PLAYER2)

        copy = board.copy()
        copy.set((2, 2), Cell.PLAYER1)

        assert copy.get((1, 1)) is Cell.PLAYER2
        assert board.get((2, 2)) is Cell.EMPTY

    def test_to_grid_is_snapshot(self):
        """Test to_grid returns encoded values not tied to the board."""
        board = Board(3, 3)
        board.set((0, 2), Cell.PLAYER1)

        grid = board.to_grid()
        assert grid[0][2] == 0
        assert grid[1][1] == 2

        grid[1][1] = 0
        assert board.get((1, 1)) is Cell.EMPTY

    def test_pretty(self):
        """Test ASCII rendering."""
        board = Board(3, 3)
        board.set((0, 0), Cell.PLAYER1)
        board.set((2, 2), Cell.PLAYER2)

        lines = board.pretty().splitlines()
        assert lines[0] == " 3 . . O"
        assert lines[2] == " 1 X . ."
        assert lines[3] == "   A B C"


class TestCoordinateLabels:
    """Tests for coordinate label conversion."""

    def test_coords_to_label(self):
        """Test coordinate to label conversion."""
        assert coords_to_label(0, 0) == "A1"
        assert coords_to_label(8, 8) == "J9"
        assert coords_to_label(3, 3) == "D4"

    def test_label_to_coords_skips_i(self):
        """Test that column I is skipped."""
        assert label_to_coords("H1", 9, 9) == (7, 0)
        assert label_to_coords("J1", 9, 9) == (8, 0)

    def test_label_to_coords_case_insensitive(self):
        """Test case insensitivity."""
        assert label_to_coords("d4", 9, 9) == (3, 3)

    def test_label_to_coords_invalid(self):
        """Test invalid labels raise ValueError."""
        with pytest.raises(ValueError):
            label_to_coords("", 9, 9)
        with pytest.raises(ValueError):
            label_to_coords("A", 9, 9)
        with pytest.raises(ValueError):
            label_to_coords("I1", 9, 9)
        with pytest.raises(ValueError):
            label_to_coords("A10", 9, 9)
        with pytest.raises(ValueError):
            label_to_coords("K1", 9, 9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
