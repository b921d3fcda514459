"""
Group and liberty analysis.

A group is the maximal set of same-coloured stones connected through
orthogonal adjacency. Groups are recomputed on demand from the board.
"""

from collections import deque
from typing import FrozenSet, Iterable, List, Set

from .board import Board, Cell, Position
from .errors import InvalidInput

Group = FrozenSet[Position]


def group_of(board: Board, pos: Position) -> Group:
    """
    Collect the connected group containing pos.

    Uses an explicit worklist so large boards cannot exhaust the
    recursion limit. Each cell is visited at most once.

    Args:
        board: Board to inspect
        pos: Position of a stone

    Returns:
        Frozen set of the group's positions

    Raises:
        InvalidInput: If pos is empty
    """
    owner = board.get(pos)
    if owner is Cell.EMPTY:
        raise InvalidInput(f"No stone at {pos} to build a group from")

    visited: Set[Position] = {pos}
    queue = deque([pos])
    while queue:
        current = queue.popleft()
        for n in board.neighbors(current):
            if n not in visited and board.get(n) is owner:
                visited.add(n)
                queue.append(n)
    return frozenset(visited)


def has_liberty(board: Board, group: Iterable[Position]) -> bool:
    """Return True as soon as any stone of the group touches an empty cell."""
    for pos in group:
        for n in board.neighbors(pos):
            if board.get(n) is Cell.EMPTY:
                return True
    return False


def liberties(board: Board, group: Iterable[Position]) -> FrozenSet[Position]:
    """All empty cells adjacent to the group."""
    libs = set()
    for pos in group:
        for n in board.neighbors(pos):
            if board.get(n) is Cell.EMPTY:
                libs.add(n)
    return frozenset(libs)


def all_groups(board: Board) -> List[Group]:
    """
    Partition the board's stones into groups.

    Returns:
        List of groups; every stone appears in exactly one of them
    """
    seen: Set[Position] = set()
    groups = []
    for pos in board.stones():
        if pos in seen:
            continue
        group = group_of(board, pos)
        seen.update(group)
        groups.append(group)
    return groups
