"""
Move validation and capture.

apply_move works out the full effect of a move on a scratch copy of the
board and only writes to the real board once the move is known to be legal,
so a rejected move never leaves a partial change behind.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List

from .board import Board, Cell, Position
from .errors import InvalidInput, OccupiedCell, OutOfBounds, SuicideMove
from .groups import group_of, has_liberty

logger = logging.getLogger(__name__)


class SuicidePolicy(str, Enum):
    """What happens when a move leaves its own group without liberties."""
    FORBID = "forbid"
    ALLOW = "allow"


@dataclass
class MoveOutcome:
    """Effect of an accepted move."""
    position: Position
    player: Cell
    captured: FrozenSet[Position] = field(default_factory=frozenset)
    self_captured: FrozenSet[Position] = field(default_factory=frozenset)


def find_captures(board: Board, pos: Position) -> FrozenSet[Position]:
    """
    Opponent stones left without liberties by the stone at pos.

    Args:
        board: Board on which the stone at pos has already been placed
        pos: Position of the newly placed stone

    Returns:
        Union of all adjacent opponent groups that have no liberty
    """
    opponent = board.get(pos).opponent()
    captured = set()
    for n in board.neighbors(pos):
        if board.get(n) is not opponent or n in captured:
            continue
        group = group_of(board, n)
        if not has_liberty(board, group):
            captured.update(group)
    return frozenset(captured)


def apply_move(
    board: Board,
    pos: Position,
    player: Cell,
    suicide: SuicidePolicy = SuicidePolicy.FORBID,
) -> MoveOutcome:
    """
    Place a stone for player at pos and resolve captures.

    Args:
        board: Board to mutate on success
        pos: Target position
        player: Cell.PLAYER1 or Cell.PLAYER2
        suicide: Policy for moves that leave their own group with no liberty

    Returns:
        MoveOutcome describing the placed stone and removed stones

    Raises:
        OutOfBounds: If pos is off the board
        OccupiedCell: If pos already holds a stone
        SuicideMove: If the move is suicide and the policy forbids it
        InvalidInput: If player is Cell.EMPTY
    """
    if player is Cell.EMPTY:
        raise InvalidInput("Cannot place an empty stone")
    if not board.in_bounds(pos):
        raise OutOfBounds(pos[0], pos[1], board.width, board.height)
    if board.get(pos) is not Cell.EMPTY:
        raise OccupiedCell(*pos)

    scratch = board.copy()
    scratch.set(pos, player)

    captured = find_captures(scratch, pos)
    for p in captured:
        scratch.set(p, Cell.EMPTY)

    self_captured: FrozenSet[Position] = frozenset()
    own_group = group_of(scratch, pos)
    if not has_liberty(scratch, own_group):
        if suicide is SuicidePolicy.FORBID:
            raise SuicideMove(f"Move at {pos} leaves its own group without liberties")
        self_captured = own_group

    # Commit
    board.set(pos, player)
    removed: List[Position] = list(captured) + list(self_captured)
    for p in removed:
        board.set(p, Cell.EMPTY)

    if captured:
        logger.debug("%s at %s captured %d stone(s)", player.name, pos, len(captured))
    if self_captured:
        logger.debug("%s at %s self-captured %d stone(s)", player.name, pos, len(self_captured))

    return MoveOutcome(
        position=pos,
        player=player,
        captured=captured,
        self_captured=self_captured,
    )
