"""
Board generation for the word-search game.

Builds a square grid of random letters and hides each word along one of the
eight straight directions. Words may cross each other only where their
letters agree. Placement is randomized with a bounded number of attempts per
word; a word that cannot be placed is reported as dropped, never raised.
"""

import logging
import random
import string
from typing import List, Optional, Sequence, Set

from .models import Board, Coordinate, DIRECTIONS, GeneratedBoard, Placement


logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 500
ALPHABET = string.ascii_uppercase


def _random_grid(size: int, rng: random.Random) -> Board:
    return [[rng.choice(ALPHABET) for _ in range(size)] for _ in range(size)]


def _check_words(words: Sequence[str], size: int) -> None:
    """Fail fast on words that can never be placed."""
    for word in words:
        if not word or not word.isascii() or not word.isalpha():
            raise ValueError(f"Word must contain only letters A-Z: '{word}'")
        if len(word) > size:
            raise ValueError(
                f"Word '{word}' (length {len(word)}) does not fit on a {size}x{size} board"
            )


def place_word(
    grid: Board,
    occupied: Set[Coordinate],
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Placement:
    """
    Try to write `word` into the grid at a random position and direction.

    Cells in `occupied` belong to earlier words and may only be shared when
    the letters match. On success the grid and `occupied` are updated.

    Returns:
        Placement with placed=True and its start/direction, or placed=False
        when every attempt conflicted or ran off the board
    """
    size = len(grid)
    letters = word.upper()
    last = len(letters) - 1

    for attempt in range(1, max_attempts + 1):
        direction = rng.choice(DIRECTIONS)
        row = rng.randrange(size)
        col = rng.randrange(size)

        end_row = row + direction.d_row * last
        end_col = col + direction.d_col * last
        if not (0 <= end_row < size and 0 <= end_col < size):
            continue

        cells = [
            (row + direction.d_row * i, col + direction.d_col * i)
            for i in range(len(letters))
        ]

        conflict = any(
            cell in occupied and grid[cell[0]][cell[1]] != letter
            for cell, letter in zip(cells, letters)
        )
        if conflict:
            continue

        for (r, c), letter in zip(cells, letters):
            grid[r][c] = letter
            occupied.add((r, c))

        return Placement(
            word=word, placed=True, row=row, col=col,
            direction=direction, attempts=attempt,
        )

    return Placement(word=word, placed=False, attempts=max_attempts)


def generate_board(
    words: Sequence[str],
    size: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> GeneratedBoard:
    """
    Generate a size x size board hiding every word that can be placed.

    Longer words go first since they are the hardest to fit. Placements are
    reported in the caller's word order.

    Args:
        words: Words to hide (any case)
        size: Side length of the square board
        rng: Optional random generator for reproducibility
        max_attempts: Placement attempts per word before it is dropped

    Returns:
        GeneratedBoard with the filled grid and one Placement per word

    Raises:
        ValueError: If size < 1 or a word is empty, non-alphabetic or
            longer than the board
    """
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}")
    _check_words(words, size)

    rng = rng or random.Random()
    grid = _random_grid(size, rng)
    occupied: Set[Coordinate] = set()

    # sorted() is stable, so equal lengths keep their input order
    order = sorted(range(len(words)), key=lambda i: len(words[i]), reverse=True)
    placements: List[Optional[Placement]] = [None] * len(words)

    for i in order:
        placement = place_word(grid, occupied, words[i], rng, max_attempts)
        if not placement.placed:
            logger.warning(
                "Could not place '%s' after %d attempts; it is missing from the board",
                words[i], max_attempts,
            )
        placements[i] = placement

    return GeneratedBoard(grid=grid, placements=placements)


def generate(words: Sequence[str], size: int, rng: Optional[random.Random] = None) -> Board:
    """Generate a board and return only its grid."""
    return generate_board(words, size, rng=rng).grid


def render_board(grid: Board) -> str:
    """Render the grid as space-separated rows."""
    return '\n'.join(' '.join(row) for row in grid)
