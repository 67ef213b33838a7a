"""
Main entry point for playing a sopa-de-letras game from the terminal.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --difficulty hard --play
    python -m src.main config.yaml --seed 42 --solve --output results/game.json
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .engine import Coordinate, render_board
from .session import GameConfig, GameSession, SessionStore, load_vocabulary


DEFAULT_CONFIG = "config.yaml"
SESSION_ID = "cli"

_COORD_RE = re.compile(r'(-?\d+)\s*,\s*(-?\d+)')


def load_config(config_path: str | Path) -> GameConfig:
    """Load game configuration from a YAML file.

    A relative vocabulary_path is resolved against the config file's directory.
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = GameConfig(**data)

    vocabulary_path = Path(config.vocabulary_path)
    if not vocabulary_path.is_absolute():
        config.vocabulary_path = str(path.parent / vocabulary_path)

    return config


def parse_coordinates(line: str) -> List[Coordinate]:
    """Parse 'row,col row,col ...' into coordinates."""
    return [(int(r), int(c)) for r, c in _COORD_RE.findall(line)]


def print_board(session: GameSession) -> None:
    size = session.board.size
    print(f"Board ({size}x{size}):")
    print(render_board(session.grid))
    print()
    print("Words to find:")
    for cw in session.colored_words:
        print(f"  {cw.text} ({cw.color})")


def print_solution(store: SessionStore, session_id: str) -> None:
    solution = store.reveal(session_id)
    print()
    print("=== Solution ===")
    for word, coords in solution.solutions.items():
        if coords is None:
            print(f"  {word}: not on the board")
        else:
            print(f"  {word}: {' '.join(f'{r},{c}' for r, c in coords)}")
    print(f"Elapsed: {solution.elapsed_ms / 1000:.1f}s")


def play(store: SessionStore, session_id: str) -> None:
    """Read guesses from stdin until the game ends."""
    session = store.get(session_id)
    print()
    print("Enter cells as 'row,col row,col ...', 'solve' to reveal or 'quit' to stop.")

    while session.active:
        try:
            line = input("> ").strip()
        except EOFError:
            break

        if not line:
            continue
        if line.lower() in ("quit", "exit"):
            break
        if line.lower() == "solve":
            print_solution(store, session_id)
            break

        coords = parse_coordinates(line)
        result = store.submit_guess(session_id, coords)

        if result.status == "VALID":
            print(f"Found '{result.word}' ({len(result.found_words)}/{len(session.words)})")
            if result.completed:
                print(f"All words found in {result.elapsed_seconds}s!")
        else:
            print(result.message)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play a sopa-de-letras (word search) game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  vocabulary_path: palabras.json
  default_difficulty: medium
  difficulties:
    easy: {word_count: 6, board_size: 10}
    medium: {word_count: 8, board_size: 12}
    hard: {word_count: 12, board_size: 14}
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG,
        help=f"Path to YAML configuration file (default: {DEFAULT_CONFIG})"
    )
    parser.add_argument(
        "--difficulty", "-d",
        help="Difficulty tier (default: from config)"
    )
    parser.add_argument(
        "--player", "-p",
        default="",
        help="Player name"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Read guesses interactively from stdin"
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Print the solution after generating the board"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session state JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log game events"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config.seed = args.seed
        vocabulary = load_vocabulary(config.vocabulary_path)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        store = SessionStore(vocabulary, config)
        session = store.start(SESSION_ID, player_name=args.player, difficulty=args.difficulty)
    except Exception as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    print_board(session)

    if session.board.dropped_words:
        print()
        print(f"Warning: not placed on the board: {', '.join(session.board.dropped_words)}")

    if args.play:
        try:
            play(store, SESSION_ID)
        except KeyboardInterrupt:
            print("\nGame interrupted by user")

    if args.solve and session.active:
        print_solution(store, SESSION_ID)

    if args.output:
        session.save_state(args.output)
        print()
        print(f"Session saved to: {args.output}")

    store.end(SESSION_ID)

    print()
    print("=== Game Summary ===")
    print(f"Words found: {len(session.found_words)}/{len(session.words)}")
    print(f"Duration: {session.elapsed_seconds():.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
