"""
Command-line replay tool for the Go turn engine.

Usage:
    # Replay moves on a 9x9 board
    python -m gogame.cli --moves 2,0 4,0 2,1

    # Replay an SGF record and print JSON
    python -m gogame.cli --sgf game.sgf --json

    # Write the replayed game out as SGF
    python -m gogame.cli --size 9 --moves 4,4 3,4 --export-sgf out.sgf
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .config import load_config
from .game import replay
from .sgf_handler import create_sgf, load_sgf_file, save_sgf_file

logger = logging.getLogger(__name__)


def parse_move(text: str) -> Tuple[int, int]:
    """Parse an "x,y" argument."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Move must look like 'x,y', got {text!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Move coordinates must be integers, got {text!r}")


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gogame",
        description="Replay a Go move sequence and show the resulting board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Capture a corner stone
  %(prog)s --size 5 --moves 0,0 1,0 4,4 0,1

  # Replay an SGF record
  %(prog)s --sgf game.sgf

  # Raw grid output (Player 1 = 0, Player 2 = 1, Empty = 2)
  %(prog)s --moves 2,2 3,3 --grid
        """
    )

    parser.add_argument(
        "--size", "-s",
        type=int,
        default=None,
        help="Square board size (default: from config)"
    )

    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--moves", "-m",
        nargs="+",
        type=parse_move,
        default=[],
        help='Moves as "x,y", played alternately starting with player 1'
    )
    source.add_argument(
        "--sgf",
        type=str,
        default=None,
        help="Replay the main line of an SGF file"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to config.yaml file"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output game as JSON"
    )

    parser.add_argument(
        "--grid",
        action="store_true",
        help="Output the encoded grid, one x column per line"
    )

    parser.add_argument(
        "--export-sgf",
        type=str,
        default=None,
        metavar="FILE",
        help="Write the replayed game to an SGF file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    try:
        config = load_config(parsed.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    width = parsed.width or parsed.size or config.rules.width
    height = parsed.height or parsed.size or config.rules.height
    moves = parsed.moves

    if parsed.sgf:
        try:
            record = load_sgf_file(parsed.sgf)
        except (OSError, ValueError) as e:
            print(f"Error reading SGF: {e}", file=sys.stderr)
            return 1
        width = height = record["board_size"]
        moves = record["moves"]

    try:
        game = replay(moves, width, height, config=config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Replayed %d moves", len(game.moves))

    if parsed.export_sgf:
        try:
            save_sgf_file(parsed.export_sgf, create_sgf(game))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if parsed.json:
        print(json.dumps(game.to_dict(), indent=2))
    elif parsed.grid:
        for column in game.board_snapshot():
            print(" ".join(str(v) for v in column))
    else:
        print(game.pretty())
        print(f"State: {game.state.name}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
