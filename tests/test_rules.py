"""
Unit tests for rules.py module.

Tests:
- Placement on empty, occupied and off-board cells
- Single and multi-group captures
- Suicide policies
- Rejected moves leave the board untouched
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gogame.board import Board, Cell
from gogame.errors import InvalidInput, OccupiedCell, OutOfBounds, SuicideMove
from gogame.rules import SuicidePolicy, apply_move, find_captures

X = Cell.PLAYER1
O = Cell.PLAYER2


def make_board(width, height, stones):
    """Build a board from {(x, y): Cell}."""
    board = Board(width, height)
    for pos, cell in stones.items():
        board.set(pos, cell)
    return board


class TestPlacement:
    """Tests for basic placement."""

    def test_place_on_empty(self):
        """Test a stone lands on an empty cell."""
        board = Board(9, 9)
        outcome = apply_move(board, (4, 4), X)

        assert board.get((4, 4)) is X
        assert outcome.position == (4, 4)
        assert outcome.player is X
        assert outcome.captured == frozenset()

    def test_occupied(self):
        """Test placing on an occupied cell raises and changes nothing."""
        board = make_board(9, 9, {(4, 4): X})
        before = board.to_grid()

        with pytest.raises(OccupiedCell):
            apply_move(board, (4, 4), O)
        assert board.to_grid() == before

    def test_out_of_bounds(self):
        """Test placing off the board raises OutOfBounds."""
        board = Board(9, 9)
        with pytest.raises(OutOfBounds):
            apply_move(board, (9, 0), X)
        with pytest.raises(OutOfBounds):
            apply_move(board, (0, -1), X)
        assert board.is_empty()

    def test_empty_player_is_invalid(self):
        """Test placing an EMPTY stone is a contract violation."""
        with pytest.raises(InvalidInput):
            apply_move(Board(9, 9), (0, 0), Cell.EMPTY)


class TestCapture:
    """Tests for capture resolution."""

    def test_corner_capture(self):
        """Test capturing a single corner stone."""
        board = make_board(5, 5, {(0, 0): O, (1, 0): X})
        outcome = apply_move(board, (0, 1), X)

        assert outcome.captured == frozenset({(0, 0)})
        assert board.get((0, 0)) is Cell.EMPTY

    def test_multi_stone_group_capture(self):
        """Test capturing a whole group at once."""
        board = make_board(5, 5, {
            (0, 0): O, (1, 0): O, (2, 0): O,
            (0, 1): X, (1, 1): X, (3, 0): X,
        })
        outcome = apply_move(board, (2, 1), X)

        assert outcome.captured == frozenset({(0, 0), (1, 0), (2, 0)})
        for pos in outcome.captured:
            assert board.get(pos) is Cell.EMPTY

    def test_two_groups_captured_together(self):
        """Test one move capturing two separate groups."""
        board = make_board(5, 5, {
            (0, 0): O, (2, 0): O,
            (0, 1): X, (2, 1): X, (3, 0): X,
        })
        outcome = apply_move(board, (1, 0), X)

        assert outcome.captured == frozenset({(0, 0), (2, 0)})
        assert board.get((1, 0)) is X

    def test_no_capture_with_liberty(self):
        """Test a group with a liberty left is not captured."""
        board = make_board(5, 5, {(2, 2): O, (1, 2): X, (3, 2): X})
        outcome = apply_move(board, (2, 1), X)

        assert outcome.captured == frozenset()
        assert board.get((2, 2)) is O

    def test_own_stones_never_captured_by_own_move(self):
        """Test find_captures only looks at opponent groups."""
        board = make_board(3, 3, {(0, 0): X, (1, 0): X})
        assert find_captures(board, (1, 0)) == frozenset()

    def test_capture_is_not_suicide(self):
        """Test a move with no liberties of its own is legal if it captures."""
        # O at (1,0) is in atari; X playing (0,0) has no liberties until it captures
        board = make_board(4, 3, {
            (0, 1): O, (1, 0): O,
            (1, 1): X, (2, 0): X,
        })
        outcome = apply_move(board, (0, 0), X)
        assert outcome.captured == frozenset({(1, 0)})
        assert board.get((0, 0)) is X


class TestSuicide:
    """Tests for suicide handling."""

    def suicide_board(self):
        return make_board(5, 5, {(1, 0): X, (0, 1): X})

    def test_forbid_rejects(self):
        """Test suicide is rejected under FORBID and nothing changes."""
        board = self.suicide_board()
        before = board.to_grid()

        with pytest.raises(SuicideMove):
            apply_move(board, (0, 0), O, SuicidePolicy.FORBID)
        assert board.to_grid() == before

    def test_forbid_is_default(self):
        """Test FORBID is the default policy."""
        with pytest.raises(SuicideMove):
            apply_move(self.suicide_board(), (0, 0), O)

    def test_allow_removes_own_group(self):
        """Test self-capture under ALLOW."""
        board = make_board(5, 5, {(1, 0): X, (1, 1): X, (0, 2): X, (0, 1): O})
        outcome = apply_move(board, (0, 0), O, SuicidePolicy.ALLOW)

        assert outcome.self_captured == frozenset({(0, 0), (0, 1)})
        assert board.get((0, 0)) is Cell.EMPTY
        assert board.get((0, 1)) is Cell.EMPTY
        assert board.get((1, 0)) is X


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
