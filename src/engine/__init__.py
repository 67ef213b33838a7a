"""Board generation and word validation engine for sopa-de-letras."""

from .models import (
    Board,
    Coordinate,
    Direction,
    DIRECTIONS,
    ColoredWord,
    Placement,
    GeneratedBoard,
    PathCheck,
)
from .selection import select_words, assign_colors, PALETTE
from .board import generate_board, generate, place_word, render_board, MAX_PLACEMENT_ATTEMPTS
from .locator import locate_word, solve_board
from .validator import validate_path, check_path, read_path, is_straight_line

__all__ = [
    # Models
    "Board",
    "Coordinate",
    "Direction",
    "DIRECTIONS",
    "ColoredWord",
    "Placement",
    "GeneratedBoard",
    "PathCheck",
    # Selection
    "select_words",
    "assign_colors",
    "PALETTE",
    # Generation
    "generate_board",
    "generate",
    "place_word",
    "render_board",
    "MAX_PLACEMENT_ATTEMPTS",
    # Solver
    "locate_word",
    "solve_board",
    # Validation
    "validate_path",
    "check_path",
    "read_path",
    "is_straight_line",
]
