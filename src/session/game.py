import json
import logging
import random
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Optional, Sequence
from pydantic import BaseModel, Field

from ..engine import (
    ColoredWord,
    Coordinate,
    GeneratedBoard,
    MAX_PLACEMENT_ATTEMPTS,
    PALETTE,
    assign_colors,
    check_path,
    generate_board,
    select_words,
    solve_board,
)
from .models import DifficultyTier, GuessResult, SolutionResult
from .vocabulary import normalize_vocabulary


logger = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    One player's game: the words to find, their board and progress.

    Sessions never share state; whoever owns a session is responsible for
    not mutating it from two places at once.

    Attributes:
        session_id: Identifier of the owning connection
        player_name: Display name of the player
        difficulty: Name of the tier the session was created with
        words: Lowercase words to find, in selection order
        colored_words: Words paired with their display colors
        board: Generated board and per-word placement outcomes
        found_words: Words found so far, in the order they were found
        found_coordinates: Cells the player submitted for each found word
        started_at: When the session was created
        ended_at: When the session was completed or revealed
        active: False once completed or revealed
    """

    session_id: str
    player_name: str = ""
    difficulty: Optional[str] = None
    words: List[str] = Field(default_factory=list)
    colored_words: List[ColoredWord] = Field(default_factory=list)
    board: GeneratedBoard
    found_words: List[str] = Field(default_factory=list)
    found_coordinates: Dict[str, List[Coordinate]] = Field(default_factory=dict)
    started_at: datetime = Field(default_factory=datetime.now)
    ended_at: Optional[datetime] = None
    active: bool = True

    def model_post_init(self, __context) -> None:
        """Set default name if not provided."""
        if not self.player_name:
            self.player_name = f"Player {self.session_id}"

    @classmethod
    def create(
        cls,
        vocabulary: Sequence[str],
        tier: DifficultyTier,
        session_id: str,
        player_name: str = "",
        difficulty: Optional[str] = None,
        palette: Sequence[str] = PALETTE,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> "GameSession":
        """
        Factory method: pick words, color them and generate the board.

        Args:
            vocabulary: Shared word list (read only)
            tier: Word count and board size to use
            session_id: Identifier of the owning connection
            player_name: Optional display name
            difficulty: Tier name, kept for reporting
            palette: Display colors to assign from
            rng: Optional random generator for reproducibility
            max_attempts: Placement attempts per word

        Returns:
            A new, active GameSession
        """
        rng = rng or random.Random()
        # Words differing only in case are the same word
        vocabulary = normalize_vocabulary(vocabulary)

        if tier.word_count > len(vocabulary):
            logger.warning(
                "Requested %d words but the vocabulary only has %d; using all of them",
                tier.word_count, len(vocabulary),
            )

        words = select_words(vocabulary, tier.word_count, rng)
        colored_words = assign_colors(words, palette, rng)
        board = generate_board(words, tier.board_size, rng=rng, max_attempts=max_attempts)

        session = cls(
            session_id=session_id,
            player_name=player_name,
            difficulty=difficulty,
            words=words,
            colored_words=colored_words,
            board=board,
        )
        logger.info(
            "Session %s started for %s: %s (%dx%d)",
            session_id, session.player_name, ", ".join(words),
            tier.board_size, tier.board_size,
        )
        return session

    @property
    def grid(self) -> List[List[str]]:
        return self.board.grid

    @property
    def is_complete(self) -> bool:
        """All session words have been found."""
        return bool(self.words) and len(self.found_words) == len(self.words)

    @property
    def remaining_words(self) -> List[str]:
        return [w for w in self.words if w not in self.found_words]

    def elapsed_seconds(self) -> float:
        """Seconds since the session started (frozen once it ended)."""
        end = self.ended_at or datetime.now()
        return (end - self.started_at).total_seconds()

    def _finish(self) -> None:
        self.active = False
        if self.ended_at is None:
            self.ended_at = datetime.now()

    def submit_guess(self, coordinates: Sequence[Coordinate]) -> GuessResult:
        """
        Check a selected path and record it if it finds a new word.

        Only the session's own words count. A word already found is a
        duplicate no matter which way it is selected.
        """
        coords = [(row, col) for row, col in coordinates]

        if not self.active:
            return GuessResult(
                status="INACTIVE",
                found_words=list(self.found_words),
                message="Game is no longer active",
            )

        check = check_path(self.board.grid, coords, self.words)
        if not check.valid:
            logger.debug("%s submitted an invalid path (%s)", self.player_name, check.error)
            return GuessResult(
                status="INVALID",
                coordinates=coords,
                found_words=list(self.found_words),
                message="Not a valid word",
            )

        word = check.match
        if word in self.found_words:
            return GuessResult(
                status="DUPLICATE",
                word=word,
                coordinates=coords,
                found_words=list(self.found_words),
                message="Word already found",
            )

        self.found_words.append(word)
        self.found_coordinates[word] = coords
        logger.info("%s found: %s", self.player_name, word)

        result = GuessResult(
            status="VALID",
            word=word,
            coordinates=coords,
            found_words=list(self.found_words),
        )

        if self.is_complete:
            self._finish()
            result.completed = True
            result.elapsed_seconds = int(self.elapsed_seconds())
            logger.info(
                "%s completed the game in %ds", self.player_name, result.elapsed_seconds
            )

        return result

    def reveal(self) -> SolutionResult:
        """Locate every session word on the board and end the game."""
        logger.info("%s asked for the solution", self.player_name)
        elapsed_ms = int(self.elapsed_seconds() * 1000)
        solutions = solve_board(self.board.grid, self.words)
        self._finish()
        return SolutionResult(solutions=solutions, elapsed_ms=elapsed_ms)

    def get_state(self) -> Dict:
        """
        Get the session state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "session_id": self.session_id,
            "player_name": self.player_name,
            "difficulty": self.difficulty,
            "board": self.board.grid,
            "words": [cw.model_dump() for cw in self.colored_words],
            "dropped_words": self.board.dropped_words,
            "found_words": list(self.found_words),
            "found_coordinates": {w: [list(c) for c in cs] for w, cs in self.found_coordinates.items()},
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "elapsed_seconds": round(self.elapsed_seconds(), 3),
            "active": self.active,
        }

    def save_state(self, path: str | Path) -> None:
        """Write the session state to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.get_state(), f, indent=2, default=str)
