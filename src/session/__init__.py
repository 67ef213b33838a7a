"""Per-player game sessions around the board engine."""

from .models import (
    DifficultyTier,
    GameConfig,
    GuessResult,
    GuessStatus,
    SolutionResult,
)
from .vocabulary import load_vocabulary, normalize_vocabulary
from .game import GameSession
from .store import SessionStore, SessionNotFoundError

__all__ = [
    "DifficultyTier",
    "GameConfig",
    "GuessResult",
    "GuessStatus",
    "SolutionResult",
    "load_vocabulary",
    "normalize_vocabulary",
    "GameSession",
    "SessionStore",
    "SessionNotFoundError",
]
