"""Find where words sit on a finished board."""

from typing import Dict, List, Optional, Sequence

from .models import Board, Coordinate, Direction, DIRECTIONS


def _read_run(board: Board, row: int, col: int, direction: Direction, letters: str) -> Optional[List[Coordinate]]:
    """Return the cells spelling `letters` from (row, col) in `direction`, or None."""
    size = len(board)
    coords: List[Coordinate] = []

    for i, letter in enumerate(letters):
        r = row + direction.d_row * i
        c = col + direction.d_col * i
        if not (0 <= r < size and 0 <= c < len(board[r])) or board[r][c] != letter:
            return None
        coords.append((r, c))

    return coords


def locate_word(board: Board, word: str) -> Optional[List[Coordinate]]:
    """
    Locate a word by exhaustive scan.

    Cells are visited in row-major order and, for each cell, directions in
    DIRECTIONS order; the first full match wins. Returns None when the word
    is not on the board.
    """
    letters = word.upper()
    if not letters:
        return None

    for row in range(len(board)):
        for col in range(len(board[row])):
            if board[row][col] != letters[0]:
                continue
            for direction in DIRECTIONS:
                coords = _read_run(board, row, col, direction, letters)
                if coords is not None:
                    return coords

    return None


def solve_board(board: Board, words: Sequence[str]) -> Dict[str, Optional[List[Coordinate]]]:
    """Build the solution map: each word to its coordinates (None if absent)."""
    return {word: locate_word(board, word) for word in words}
