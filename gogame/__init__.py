"""
Go Turn Engine

Two-player Go rules core: stone placement, group liberties, capture and
turn alternation, with SGF game records and a replay CLI.
"""

__version__ = "0.1.0"

from .board import Board, Cell, coords_to_label, label_to_coords
from .config import AppConfig, RulesConfig, load_config
from .errors import (
    GameAlreadyStarted,
    GameError,
    GameNotInProgress,
    InvalidInput,
    NotJoinable,
    OccupiedCell,
    OutOfBounds,
    SuicideMove,
    WrongTurn,
)
from .game import Game, GameState, MoveRecord, MoveResult, replay
from .groups import all_groups, group_of, has_liberty, liberties
from .rules import MoveOutcome, SuicidePolicy, apply_move

__all__ = [
    "Board",
    "Cell",
    "coords_to_label",
    "label_to_coords",
    "AppConfig",
    "RulesConfig",
    "load_config",
    "GameError",
    "GameAlreadyStarted",
    "GameNotInProgress",
    "InvalidInput",
    "NotJoinable",
    "OccupiedCell",
    "OutOfBounds",
    "SuicideMove",
    "WrongTurn",
    "Game",
    "GameState",
    "MoveRecord",
    "MoveResult",
    "replay",
    "all_groups",
    "group_of",
    "has_liberty",
    "liberties",
    "MoveOutcome",
    "SuicidePolicy",
    "apply_move",
]
