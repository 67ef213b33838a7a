"""
Validation of a player's selected path on the board.

A path is valid when it is a straight run of adjacent cells in one of the
eight directions and its letters spell a vocabulary word, read either way.

Error codes:
    EMPTY_PATH: no coordinates submitted
    OUT_OF_BOUNDS: a coordinate falls outside the board
    NOT_STRAIGHT: cells are not one contiguous straight line
    NOT_IN_VOCABULARY: the letters (forward or reversed) are not a listed word
"""

from typing import Iterable, List, Sequence

from .models import Board, Coordinate, Direction, PathCheck


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _step(origin: Coordinate, towards: Coordinate) -> Direction:
    return Direction(_sign(towards[0] - origin[0]), _sign(towards[1] - origin[1]))


def _walks_from(start: Coordinate, direction: Direction, cells: Sequence[Coordinate]) -> bool:
    """True if cells[i] == start + direction * i for every i."""
    if direction == (0, 0):
        return False
    return all(
        cell == (start[0] + direction.d_row * i, start[1] + direction.d_col * i)
        for i, cell in enumerate(cells)
    )


def is_straight_line(coordinates: Sequence[Coordinate]) -> bool:
    """
    Check that the coordinates form one straight line of unit steps.

    The direction is taken from the first two cells; failing that, the path
    is checked as if submitted backwards, from the last two cells.
    """
    coords = [tuple(c) for c in coordinates]
    if len(coords) < 2:
        return len(coords) == 1

    if _walks_from(coords[0], _step(coords[0], coords[1]), coords):
        return True

    backwards = coords[::-1]
    return _walks_from(backwards[0], _step(backwards[0], backwards[1]), backwards)


def in_bounds(board: Board, coordinate: Coordinate) -> bool:
    row, col = coordinate
    return 0 <= row < len(board) and 0 <= col < len(board[row])


def read_path(board: Board, coordinates: Iterable[Coordinate]) -> str:
    """Concatenate the letters under the coordinates, in the order given."""
    return ''.join(board[row][col] for row, col in coordinates)


def check_path(board: Board, coordinates: Sequence[Coordinate], vocabulary: Iterable[str]) -> PathCheck:
    """
    Check a submitted path and report why it failed, if it did.

    Args:
        board: Finished board
        coordinates: (row, col) cells in the order the player selected them
        vocabulary: Words that count as a hit (compared lowercase)

    Returns:
        PathCheck with valid=True and the matched word, or an error code
    """
    if not coordinates:
        return PathCheck(valid=False, error="EMPTY_PATH")

    coords: List[Coordinate] = [(row, col) for row, col in coordinates]

    if not all(in_bounds(board, cell) for cell in coords):
        return PathCheck(valid=False, error="OUT_OF_BOUNDS")

    text = read_path(board, coords).lower()

    if len(coords) > 1 and not is_straight_line(coords):
        return PathCheck(valid=False, text=text, error="NOT_STRAIGHT")

    words = {word.lower() for word in vocabulary}
    for candidate in (text, text[::-1]):
        if candidate in words:
            return PathCheck(valid=True, text=text, match=candidate)

    return PathCheck(valid=False, text=text, error="NOT_IN_VOCABULARY")


def validate_path(board: Board, coordinates: Sequence[Coordinate], vocabulary: Iterable[str]) -> bool:
    """True if the path is a straight contiguous line spelling a vocabulary word."""
    return check_path(board, coordinates, vocabulary).valid
