"""
Session store: one GameSession per connected player.

The store is what a transport layer talks to. It owns the shared vocabulary
and configuration, creates sessions on "start game", forwards guesses and
reveal requests, and drops sessions on disconnect.
"""

import logging
import random
import threading
from typing import Dict, Optional, Sequence

from .game import GameSession
from .models import GameConfig, GuessResult, SolutionResult
from .vocabulary import normalize_vocabulary
from ..engine.models import Coordinate


logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No session exists for the given id."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"No active session for '{self.session_id}'"


class SessionStore:
    """
    Explicit store of player sessions keyed by session id.

    Mutations go through a lock so a transport with concurrent handlers can
    share one store. Sessions never interact with each other.
    """

    def __init__(self, vocabulary: Sequence[str], config: Optional[GameConfig] = None):
        self.vocabulary = normalize_vocabulary(vocabulary)
        self.config = config or GameConfig()
        self._sessions: Dict[str, GameSession] = {}
        self._lock = threading.Lock()
        self._rng = random.Random(self.config.seed)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> GameSession:
        """
        Get the session for an id.

        Raises:
            SessionNotFoundError: If there is no such session
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def start(
        self,
        session_id: str,
        player_name: str = "",
        difficulty: Optional[str] = None,
    ) -> GameSession:
        """
        Start a new game for a player, replacing any previous one.

        Raises:
            ValueError: If the difficulty is not configured
        """
        name = difficulty or self.config.default_difficulty
        tier = self.config.tier(name)

        with self._lock:
            session = GameSession.create(
                vocabulary=self.vocabulary,
                tier=tier,
                session_id=session_id,
                player_name=player_name,
                difficulty=name,
                palette=self.config.palette,
                rng=random.Random(self._rng.getrandbits(64)),
                max_attempts=self.config.max_placement_attempts,
            )
            if session_id in self._sessions:
                logger.info("Replacing existing session %s", session_id)
            self._sessions[session_id] = session

        return session

    def submit_guess(self, session_id: str, coordinates: Sequence[Coordinate]) -> GuessResult:
        with self._lock:
            return self.get(session_id).submit_guess(coordinates)

    def reveal(self, session_id: str) -> SolutionResult:
        with self._lock:
            return self.get(session_id).reveal()

    def end(self, session_id: str) -> Optional[GameSession]:
        """Remove a session on disconnect. Returns it, or None if unknown."""
        with self._lock:
            session = self._sessions.pop(session_id, None)

        if session is not None:
            logger.info(
                "%s disconnected (time: %ds, words found: %d/%d)",
                session.player_name,
                int(session.elapsed_seconds()),
                len(session.found_words),
                len(session.words),
            )
        return session
