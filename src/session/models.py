"""
Pydantic models for the session layer.

Configuration (difficulty tiers, vocabulary location, palette) and the
results handed back to whoever drives a session. The GameSession and
SessionStore classes live in their own modules.
"""

from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, Field, model_validator

from ..engine.models import Coordinate
from ..engine.selection import PALETTE


GuessStatus = Literal["VALID", "INVALID", "DUPLICATE", "INACTIVE"]


class DifficultyTier(BaseModel):
    """Number of words and board side length for one difficulty."""
    word_count: int = Field(..., ge=1)
    board_size: int = Field(..., ge=1)


def _default_difficulties() -> Dict[str, DifficultyTier]:
    return {
        "easy": DifficultyTier(word_count=6, board_size=10),
        "medium": DifficultyTier(word_count=8, board_size=12),
        "hard": DifficultyTier(word_count=12, board_size=14),
    }


class GameConfig(BaseModel):
    """Configuration shared by every session."""
    vocabulary_path: str = "palabras.json"
    default_difficulty: str = "medium"
    max_placement_attempts: int = Field(default=500, ge=1)
    seed: Optional[int] = None
    palette: List[str] = Field(default_factory=lambda: list(PALETTE), min_length=1)
    difficulties: Dict[str, DifficultyTier] = Field(default_factory=_default_difficulties)

    @model_validator(mode="after")
    def _check_default_difficulty(self) -> "GameConfig":
        if self.default_difficulty not in self.difficulties:
            raise ValueError(
                f"default_difficulty '{self.default_difficulty}' is not one of "
                f"{sorted(self.difficulties)}"
            )
        return self

    def tier(self, name: Optional[str] = None) -> DifficultyTier:
        """
        Look up a difficulty tier by name (default tier when None).

        Raises:
            ValueError: If the tier is not configured
        """
        name = name or self.default_difficulty
        if name not in self.difficulties:
            raise ValueError(f"Unknown difficulty '{name}' (choose from {sorted(self.difficulties)})")
        return self.difficulties[name]


class GuessResult(BaseModel):
    """Outcome of one submitted guess."""
    status: GuessStatus
    word: Optional[str] = None
    coordinates: List[Coordinate] = Field(default_factory=list)
    found_words: List[str] = Field(default_factory=list)
    completed: bool = False
    elapsed_seconds: Optional[int] = None
    message: str = ""


class SolutionResult(BaseModel):
    """Solution map for a session, revealed on request."""
    solutions: Dict[str, Optional[List[Coordinate]]] = Field(default_factory=dict)
    elapsed_ms: int = 0

    @property
    def missing_words(self) -> List[str]:
        """Words the board does not contain (dropped during generation)."""
        return [word for word, coords in self.solutions.items() if coords is None]
