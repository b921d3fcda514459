"""
Game lifecycle and turn state machine.

States:
    NOT_STARTED -> (P1_TURN <-> P2_TURN) -> GAME_OVER

A Game owns its board. Every public method runs under the instance lock,
so moves are applied one at a time and queries always see the last
committed move.

Usage:
    game = Game()
    game.start_game(9, 9, caller="alice")
    game.join(caller="bob")
    game.player_move(2, 3, GameState.P1_TURN, caller="alice")  # True
    game.get_board_at(2, 3)                                     # 0
"""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple, Union

from .board import Board, Cell, Position
from .config import AppConfig, RulesConfig
from .errors import (
    GameAlreadyStarted,
    GameNotInProgress,
    NotJoinable,
    OccupiedCell,
    OutOfBounds,
    SuicideMove,
    WrongTurn,
)
from .rules import MoveOutcome, apply_move

logger = logging.getLogger(__name__)

# Errors a move can be rejected with; anything else propagates
MOVE_REJECTIONS = (OutOfBounds, OccupiedCell, SuicideMove, WrongTurn, GameNotInProgress)


class GameState(int, Enum):
    """Lifecycle state, using the engine's wire encoding."""
    P1_TURN = 0
    P2_TURN = 1
    GAME_OVER = 2
    NOT_STARTED = 3


_TURN_PLAYER = {
    GameState.P1_TURN: Cell.PLAYER1,
    GameState.P2_TURN: Cell.PLAYER2,
}

_NEXT_TURN = {
    GameState.P1_TURN: GameState.P2_TURN,
    GameState.P2_TURN: GameState.P1_TURN,
}


@dataclass(frozen=True)
class MoveRecord:
    """One accepted move in the game log."""
    number: int
    player: Cell
    position: Position
    captured: FrozenSet[Position] = frozenset()
    self_captured: FrozenSet[Position] = frozenset()

    def to_dict(self):
        return {
            "number": self.number,
            "player": int(self.player),
            "position": list(self.position),
            "captured": sorted(list(p) for p in self.captured),
            "self_captured": sorted(list(p) for p in self.self_captured),
        }


@dataclass
class MoveResult:
    """Outcome of a move attempt; reason names the rejection error."""
    valid: bool
    reason: Optional[str] = None
    message: Optional[str] = None
    captured: FrozenSet[Position] = field(default_factory=frozenset)
    self_captured: FrozenSet[Position] = field(default_factory=frozenset)


def _coerce_turn(claimed: Union[GameState, int]) -> Optional[GameState]:
    try:
        return GameState(claimed)
    except ValueError:
        return None


class Game:
    """
    A single Go match between two registered players.

    Caller identities are opaque values resolved by the host. None stands
    for an anonymous caller and skips identity checks, which lets one
    caller drive both sides (hot-seat play).
    """

    def __init__(self, config: Optional[AppConfig] = None, rules: Optional[RulesConfig] = None):
        """
        Create an uninitialised game; call start_game before anything else.

        Args:
            config: Application configuration (its rules section is used)
            rules: Rules configuration (overrides config)
        """
        if rules is not None:
            self.rules = rules
        elif config is not None:
            self.rules = config.rules
        else:
            self.rules = RulesConfig()

        self._lock = threading.RLock()
        self._board: Optional[Board] = None
        self._state: Optional[GameState] = None
        self._player1 = None
        self._player2 = None
        self._player2_joined = False
        self._moves: List[MoveRecord] = []
        self._winner: Optional[Cell] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_game(self, width: int, height: int, caller=None) -> None:
        """
        Create the board and register the caller as player 1.

        Raises:
            GameAlreadyStarted: If this instance was already started
            ValueError: If the dimensions are invalid
        """
        with self._lock:
            if self._state is not None:
                raise GameAlreadyStarted("start_game may only be called once per game")
            self._board = Board(width, height)
            self._player1 = caller
            self._state = GameState.NOT_STARTED
            logger.info("Game started on %dx%d board by %s", width, height, caller or "anonymous")

    def join(self, caller=None) -> None:
        """
        Register the caller as player 2 and hand the first turn to player 1.

        Raises:
            NotJoinable: If the game is not waiting for an opponent
        """
        with self._lock:
            if self._state is not GameState.NOT_STARTED:
                raise NotJoinable("Game is not waiting for a second player")
            if self._player2_joined:
                raise NotJoinable("Second player slot is already filled")
            if (caller is not None and caller == self._player1
                    and not self.rules.allow_self_join):
                raise NotJoinable("Player 1 cannot join their own game")

            self._player2 = caller
            self._player2_joined = True
            self._state = GameState.P1_TURN
            logger.info("Player 2 (%s) joined", caller or "anonymous")

    def resign(self, caller=None) -> Cell:
        """
        End the game; the resigning side loses.

        With an anonymous caller (or one identity holding both slots) the
        player to move resigns.

        Returns:
            The winning Cell

        Raises:
            GameNotInProgress: If the game is not in a turn state
            WrongTurn: If the caller is not one of the players
        """
        with self._lock:
            if self._state not in _TURN_PLAYER:
                raise GameNotInProgress("Only a game in progress can be resigned")

            if caller is None or (caller == self._player1 and caller == self._player2):
                loser = _TURN_PLAYER[self._state]
            elif caller == self._player1:
                loser = Cell.PLAYER1
            elif caller == self._player2:
                loser = Cell.PLAYER2
            else:
                raise WrongTurn(f"{caller} is not a player in this game")

            self._winner = loser.opponent()
            self._state = GameState.GAME_OVER
            logger.info("%s resigned, %s wins", loser.name, self._winner.name)
            return self._winner

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def _check_turn(self, claimed_turn, caller) -> Cell:
        if self._state not in _TURN_PLAYER:
            raise GameNotInProgress(f"No moves accepted in state {self._state}")
        if _coerce_turn(claimed_turn) is not self._state:
            raise WrongTurn(f"Claimed turn {claimed_turn!r} but state is {self._state.name}")

        expected = self._player1 if self._state is GameState.P1_TURN else self._player2
        if caller is not None and expected is not None and caller != expected:
            raise WrongTurn(f"It is {expected}'s turn, not {caller}'s")
        return _TURN_PLAYER[self._state]

    def _play(self, x: int, y: int, claimed_turn, caller) -> MoveOutcome:
        player = self._check_turn(claimed_turn, caller)
        outcome = apply_move(self._board, (x, y), player, self.rules.suicide)

        self._moves.append(MoveRecord(
            number=len(self._moves) + 1,
            player=player,
            position=(x, y),
            captured=outcome.captured,
            self_captured=outcome.self_captured,
        ))
        self._state = _NEXT_TURN[self._state]
        logger.debug("Move %d: %s at (%d, %d)", len(self._moves), player.name, x, y)
        return outcome

    def try_move(self, x: int, y: int, claimed_turn, caller=None) -> MoveResult:
        """
        Attempt a move and describe the result.

        Args:
            x: Column index
            y: Row index
            claimed_turn: GameState (or its int value) the caller believes is current
            caller: Identity of the caller, or None

        Returns:
            MoveResult; on rejection reason is the error class name and
            neither the board nor the state has changed
        """
        with self._lock:
            try:
                outcome = self._play(x, y, claimed_turn, caller)
            except MOVE_REJECTIONS as e:
                logger.info("Rejected move (%s, %s): %s", x, y, e)
                return MoveResult(valid=False, reason=type(e).__name__, message=str(e))
            return MoveResult(
                valid=True,
                captured=outcome.captured,
                self_captured=outcome.self_captured,
            )

    def player_move(self, x: int, y: int, claimed_turn, caller=None) -> bool:
        """Play a stone; returns whether the move was accepted."""
        return self.try_move(x, y, claimed_turn, caller).valid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_board_at(self, x: int, y: int) -> Optional[int]:
        """Encoded cell value, or None before start_game."""
        with self._lock:
            if self._board is None:
                return None
            return int(self._board.get((x, y)))

    def get_game_state(self) -> Optional[int]:
        """Encoded game state, or None before start_game."""
        with self._lock:
            if self._state is None:
                return None
            return int(self._state)

    @property
    def state(self) -> Optional[GameState]:
        with self._lock:
            return self._state

    @property
    def width(self) -> Optional[int]:
        with self._lock:
            return self._board.width if self._board is not None else None

    @property
    def height(self) -> Optional[int]:
        with self._lock:
            return self._board.height if self._board is not None else None

    @property
    def players(self) -> Tuple:
        with self._lock:
            return (self._player1, self._player2)

    @property
    def winner(self) -> Optional[Cell]:
        with self._lock:
            return self._winner

    @property
    def moves(self) -> Tuple[MoveRecord, ...]:
        with self._lock:
            return tuple(self._moves)

    def board_snapshot(self) -> Optional[List[List[int]]]:
        """grid[x][y] copy of the board, or None before start_game."""
        with self._lock:
            if self._board is None:
                return None
            return self._board.to_grid()

    def pretty(self) -> str:
        with self._lock:
            if self._board is None:
                return "(game not started)"
            return self._board.pretty()

    def to_dict(self):
        """JSON-friendly summary of the game."""
        with self._lock:
            return {
                "width": self.width,
                "height": self.height,
                "state": self._state.name if self._state is not None else None,
                "winner": self._winner.name if self._winner is not None else None,
                "board": self.board_snapshot(),
                "moves": [m.to_dict() for m in self._moves],
            }

    def __repr__(self) -> str:
        return (
            f"Game(state={self._state.name if self._state is not None else None}, "
            f"size={self.width}x{self.height}, "
            f"moves={len(self._moves)})"
        )


def replay(
    moves: List[Position],
    width: int = 9,
    height: int = 9,
    config: Optional[AppConfig] = None,
) -> Game:
    """
    Play a move sequence on a fresh hot-seat game, player 1 first.

    Args:
        moves: List of (x, y) positions
        width: Board width
        height: Board height
        config: Application configuration

    Returns:
        The game after the last move

    Raises:
        ValueError: If any move is rejected
    """
    game = Game(config=config)
    game.start_game(width, height)
    game.join()

    for i, (x, y) in enumerate(moves):
        result = game.try_move(x, y, game.state)
        if not result.valid:
            raise ValueError(f"Move {i + 1} at ({x}, {y}) rejected: {result.message}")

    return game
