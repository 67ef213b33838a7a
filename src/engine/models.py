"""Data models for board generation and path validation."""

from typing import List, Optional, Tuple, NamedTuple
from pydantic import BaseModel, Field


Coordinate = Tuple[int, int]
Board = List[List[str]]


class Direction(NamedTuple):
    """A unit step on the grid."""
    d_row: int
    d_col: int


# Scan order matters: the locator resolves ties by this order
EAST = Direction(0, 1)
SOUTH = Direction(1, 0)
SOUTH_EAST = Direction(1, 1)
NORTH_EAST = Direction(-1, 1)
WEST = Direction(0, -1)
NORTH = Direction(-1, 0)
NORTH_WEST = Direction(-1, -1)
SOUTH_WEST = Direction(1, -1)

DIRECTIONS: List[Direction] = [
    EAST, SOUTH, SOUTH_EAST, NORTH_EAST,
    WEST, NORTH, NORTH_WEST, SOUTH_WEST,
]


class ColoredWord(BaseModel):
    """A selected word paired with its display color."""
    text: str = Field(..., min_length=1)
    color: str


class Placement(BaseModel):
    """Outcome of placing one word on the board (placed or dropped)."""
    word: str
    placed: bool
    row: Optional[int] = None
    col: Optional[int] = None
    direction: Optional[Direction] = None
    attempts: int = 0

    def coordinates(self) -> List[Coordinate]:
        """Cells covered by the word, empty when it was dropped."""
        if not self.placed:
            return []
        return [
            (self.row + self.direction.d_row * i, self.col + self.direction.d_col * i)
            for i in range(len(self.word))
        ]


class GeneratedBoard(BaseModel):
    """A finished grid plus the placement outcome of every requested word."""
    grid: Board
    placements: List[Placement] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def placed_words(self) -> List[str]:
        return [p.word for p in self.placements if p.placed]

    @property
    def dropped_words(self) -> List[str]:
        return [p.word for p in self.placements if not p.placed]


class PathCheck(BaseModel):
    """Result of checking a coordinate path against the board and vocabulary."""
    valid: bool
    text: str = ""  # Letters read in submitted order, lowercase
    match: Optional[str] = None  # Vocabulary entry matched (forward or reversed)
    error: Optional[str] = None
