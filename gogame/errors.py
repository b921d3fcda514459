"""
Error taxonomy for the Go turn engine.

User-facing move errors (out of bounds, occupied, suicide, wrong turn) are
reported by Game.player_move as a rejected move. Lifecycle errors are raised
to the caller. InvalidInput signals a broken internal contract and is never
swallowed.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class OutOfBounds(GameError, ValueError):
    """Position lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        super().__init__(f"Position ({x}, {y}) out of bounds for {width}x{height} board")


class OccupiedCell(GameError, ValueError):
    """Target cell already holds a stone."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"Position ({x}, {y}) is already occupied")


class SuicideMove(GameError, ValueError):
    """Move would leave the mover's own group without liberties."""


class WrongTurn(GameError, ValueError):
    """Claimed turn or caller does not match the current game state."""


class NotJoinable(GameError):
    """Join attempted when the second slot is filled or the game is not waiting."""


class GameAlreadyStarted(GameError):
    """start_game called twice on the same instance."""


class GameNotInProgress(GameError):
    """Operation requires a game in a turn state."""


class InvalidInput(GameError, AssertionError):
    """Internal contract violation, e.g. a group query on an empty cell."""
