"""
SGF (Smart Game Format) game records.

Provides export of a game's move log and import of a move sequence using
the sgfmill library. Player 1 is recorded as Black, player 2 as White.
Points map as sgfmill (row, col) = (y, x); row 0 is the bottom row.
"""

from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from sgfmill import sgf

from .board import Cell
from .game import Game

_COLOURS = {Cell.PLAYER1: "b", Cell.PLAYER2: "w"}


def create_sgf(
    game: Game,
    black_player: Optional[str] = None,
    white_player: Optional[str] = None,
    game_name: str = "Go Turn Engine Game",
) -> str:
    """
    Create an SGF string from a game's move log.

    Args:
        game: A started game with a square board
        black_player: Player 1 name (defaults to the player 1 identity)
        white_player: Player 2 name (defaults to the player 2 identity)
        game_name: Name of the game

    Returns:
        SGF formatted string

    Raises:
        ValueError: If the game has not started or the board is not square
    """
    if game.width is None:
        raise ValueError("Game has not started")
    if game.width != game.height:
        raise ValueError(
            f"SGF records need a square board, got {game.width}x{game.height}"
        )

    player1, player2 = game.players
    record = sgf.Sgf_game(size=game.width)
    root = record.get_root()

    root.set("PB", black_player or str(player1 or "Player 1"))
    root.set("PW", white_player or str(player2 or "Player 2"))
    root.set("DT", date.today().isoformat())
    root.set("GN", game_name)
    root.set("AP", ("GoTurnEngine", "0.1"))

    if game.winner is not None:
        root.set("RE", "B+R" if game.winner is Cell.PLAYER1 else "W+R")

    for move in game.moves:
        node = record.extend_main_sequence()
        x, y = move.position
        node.set_move(_COLOURS[move.player], (y, x))

    return record.serialise().decode("utf-8")


def parse_sgf(sgf_content: str) -> Dict[str, Any]:
    """
    Parse an SGF string into a board size and move list.

    Args:
        sgf_content: Raw SGF file content as string

    Returns:
        Dictionary containing:
        - board_size: int
        - moves: List of (x, y) tuples, Black first, strictly alternating
        - metadata: Dict with player names, date, result when present

    Raises:
        ValueError: If the record is malformed, contains passes or setup
                    stones, or the colours do not alternate starting with Black
    """
    record = sgf.Sgf_game.from_string(sgf_content)
    root = record.get_root()
    board_size = record.get_size()

    metadata = {}
    for prop, key in [("PB", "black_player"), ("PW", "white_player"),
                      ("DT", "date"), ("RE", "result"), ("GN", "game_name")]:
        if root.has_property(prop):
            metadata[key] = root.get(prop)

    moves: List[Tuple[int, int]] = []
    expected = "b"
    for node in record.get_main_sequence():
        if node.has_setup_stones():
            raise ValueError(
                f"Setup stones (AB/AW/AE) are not supported (before move {len(moves) + 1})"
            )
        colour, point = node.get_move()
        if colour is None:
            continue
        if point is None:
            raise ValueError(f"Pass moves are not supported (move {len(moves) + 1})")
        if colour != expected:
            raise ValueError(
                f"Move {len(moves) + 1} should be {expected.upper()}, got {colour.upper()}"
            )
        row, col = point
        moves.append((col, row))
        expected = "w" if expected == "b" else "b"

    return {
        "board_size": board_size,
        "moves": moves,
        "metadata": metadata,
    }


def load_sgf_file(file_path: str) -> Dict[str, Any]:
    """Read an SGF record from disk and parse it (see parse_sgf)."""
    return parse_sgf(Path(file_path).read_bytes().decode("utf-8", errors="replace"))


def save_sgf_file(file_path: str, sgf_content: str) -> None:
    """Write an SGF record, creating parent directories as needed."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(sgf_content, encoding="utf-8")
