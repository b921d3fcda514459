"""
Board representation for the Go turn engine.

Provides:
- Cell: per-intersection value (Player 1, Player 2 or Empty)
- Board: fixed-size grid with bounds checks and orthogonal adjacency
- Coordinate labels in the usual Go notation (column letters skip I)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

from .errors import InvalidInput, OutOfBounds

Position = Tuple[int, int]

# Column letters (I is skipped in Go)
COLUMN_LABELS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"

MAX_BOARD_SIZE = len(COLUMN_LABELS)

# Orthogonal offsets only; Go has no diagonal adjacency
_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Cell(int, Enum):
    """Value of a single intersection, using the engine's wire encoding."""
    PLAYER1 = 0
    PLAYER2 = 1
    EMPTY = 2

    def opponent(self) -> "Cell":
        if self is Cell.PLAYER1:
            return Cell.PLAYER2
        if self is Cell.PLAYER2:
            return Cell.PLAYER1
        raise InvalidInput("Empty cell has no opponent")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.PLAYER1: "X", Cell.PLAYER2: "O", Cell.EMPTY: "."}


# ============================================================================
# Coordinate Labels
# ============================================================================

def coords_to_label(x: int, y: int) -> str:
    """
    Convert (x, y) coordinates to a label such as "C4".

    Args:
        x: Column index (0-based)
        y: Row index (0-based)

    Returns:
        Label string, column letter followed by 1-based row
    """
    return f"{COLUMN_LABELS[x]}{y + 1}"


def label_to_coords(label: str, width: int, height: int) -> Position:
    """
    Convert a label (e.g., "C4") to an (x, y) tuple.

    Args:
        label: Column letter (I is skipped) followed by a 1-based row
        width: Board width
        height: Board height

    Returns:
        (x, y) tuple

    Raises:
        ValueError: If the label is malformed or off the board
    """
    if not label or len(label) < 2:
        raise ValueError(f"Invalid coordinate label: {label}")

    col = label[0].upper()
    try:
        row = int(label[1:])
    except ValueError:
        raise ValueError(f"Invalid coordinate label: {label}")

    if col not in COLUMN_LABELS:
        raise ValueError(f"Invalid column letter: {col}")

    x = COLUMN_LABELS.index(col)
    y = row - 1

    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"Label {label} out of bounds for {width}x{height}")

    return (x, y)


# ============================================================================
# Board
# ============================================================================

@dataclass
class Board:
    """
    A width x height Go board.

    Cells are stored row-major in a flat list; callers only ever see copies
    through to_grid(). Every position argument is bounds-checked.

    Attributes:
        width: Number of columns (x range)
        height: Number of rows (y range)
    """
    width: int
    height: int
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Validate dimensions and clear the grid."""
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or not 1 <= value <= MAX_BOARD_SIZE:
                raise ValueError(
                    f"Board {name} must be between 1 and {MAX_BOARD_SIZE}, got {value}"
                )
        if not self._cells:
            self._cells = [Cell.EMPTY] * (self.width * self.height)

    def _index(self, pos: Position) -> int:
        x, y = pos
        if not self.in_bounds(pos):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, pos: Position) -> Cell:
        """Return the cell at pos, raising OutOfBounds off the board."""
        return self._cells[self._index(pos)]

    def set(self, pos: Position, cell: Cell) -> None:
        """Write a single cell."""
        self._cells[self._index(pos)] = Cell(cell)

    def neighbors(self, pos: Position) -> List[Position]:
        """
        Orthogonally adjacent positions that lie on the board.

        Args:
            pos: An on-board position

        Returns:
            Up to four positions (fewer on edges and corners)
        """
        x, y = pos
        if not self.in_bounds(pos):
            raise OutOfBounds(x, y, self.width, self.height)
        result = []
        for dx, dy in _OFFSETS:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                result.append(n)
        return result

    def positions(self) -> Iterator[Position]:
        """Iterate over every position on the board."""
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def stones(self) -> Iterator[Position]:
        """Iterate over every occupied position."""
        for pos in self.positions():
            if self.get(pos) is not Cell.EMPTY:
                yield pos

    def is_empty(self) -> bool:
        return all(c is Cell.EMPTY for c in self._cells)

    def copy(self) -> "Board":
        """Create an independent copy of this board."""
        return Board(self.width, self.height, list(self._cells))

    def to_grid(self) -> List[List[int]]:
        """
        Snapshot of the board as grid[x][y] of encoded cell values.

        Returns:
            Nested lists of ints (Player 1 = 0, Player 2 = 1, Empty = 2)
        """
        return [
            [int(self.get((x, y))) for y in range(self.height)]
            for x in range(self.width)
        ]

    def pretty(self) -> str:
        """Human-readable rendering, highest row first."""
        lines = []
        for y in reversed(range(self.height)):
            row = " ".join(self.get((x, y)).symbol for x in range(self.width))
            lines.append(f"{y + 1:>2} {row}")
        lines.append("   " + " ".join(COLUMN_LABELS[:self.width]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Board(width={self.width}, "
            f"height={self.height}, "
            f"stones={sum(1 for _ in self.stones())})"
        )
