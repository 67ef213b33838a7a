"""Test game sessions: guesses, duplicates, completion and reveal."""

import json
import random

import pytest
from src.engine import GeneratedBoard, Placement
from src.session import DifficultyTier, GameSession


GRID = [
    ["C", "A", "T", "X"],
    ["D", "X", "X", "X"],
    ["O", "X", "X", "X"],
    ["G", "X", "X", "X"],
]

CAT = [(0, 0), (0, 1), (0, 2)]
DOG = [(1, 0), (2, 0), (3, 0)]

VOCABULARY = ("sol", "luna", "mar", "rio", "monte", "valle", "nube", "lluvia", "tierra", "fuego")


@pytest.fixture
def session():
    board = GeneratedBoard(
        grid=[list(row) for row in GRID],
        placements=[
            Placement(word="cat", placed=True, row=0, col=0, direction=(0, 1)),
            Placement(word="dog", placed=True, row=1, col=0, direction=(1, 0)),
        ],
    )
    return GameSession(session_id="s1", player_name="Ana", words=["cat", "dog"], board=board)


class TestSubmitGuess:
    """Recording guesses in a session."""

    def test_valid_find(self, session):
        """A new word is recorded with its coordinates."""
        result = session.submit_guess(CAT)
        assert result.status == "VALID"
        assert result.word == "cat"
        assert result.found_words == ["cat"]
        assert result.completed is False
        assert session.found_coordinates["cat"] == CAT

    def test_reversed_find(self, session):
        """Dragging backwards finds the same word."""
        result = session.submit_guess(DOG[::-1])
        assert result.status == "VALID"
        assert result.word == "dog"

    def test_duplicate(self, session):
        """Finding a word twice is reported as a duplicate."""
        session.submit_guess(CAT)
        result = session.submit_guess(CAT)
        assert result.status == "DUPLICATE"
        assert session.found_words == ["cat"]

    def test_duplicate_other_direction(self, session):
        """Re-selecting a found word backwards is still a duplicate."""
        session.submit_guess(CAT)
        result = session.submit_guess(CAT[::-1])
        assert result.status == "DUPLICATE"
        assert result.word == "cat"

    def test_invalid(self, session):
        """A path that spells nothing is invalid and changes nothing."""
        result = session.submit_guess([(1, 1), (1, 2)])
        assert result.status == "INVALID"
        assert session.found_words == []
        assert session.active is True

    def test_only_session_words_count(self, session):
        """Letters on the board that are not session words do not count."""
        result = session.submit_guess([(0, 1), (0, 2)])
        assert result.status == "INVALID"

    def test_completion(self, session):
        """Finding the last word completes and ends the game."""
        session.submit_guess(CAT)
        result = session.submit_guess(DOG)

        assert result.status == "VALID"
        assert result.completed is True
        assert result.elapsed_seconds is not None
        assert result.elapsed_seconds >= 0
        assert session.is_complete
        assert session.active is False
        assert session.ended_at is not None

    def test_inactive_after_completion(self, session):
        """Guesses after the game ended are rejected."""
        session.submit_guess(CAT)
        session.submit_guess(DOG)
        result = session.submit_guess(CAT)
        assert result.status == "INACTIVE"

    def test_remaining_words(self, session):
        """Remaining words shrink as words are found."""
        session.submit_guess(DOG)
        assert session.remaining_words == ["cat"]


class TestReveal:
    """Revealing the solution."""

    def test_solution_map(self, session):
        """Every session word maps to its cells."""
        solution = session.reveal()
        assert solution.solutions == {"cat": CAT, "dog": DOG}
        assert solution.missing_words == []
        assert solution.elapsed_ms >= 0

    def test_reveal_ends_session(self, session):
        """After revealing, guesses are no longer accepted."""
        session.reveal()
        assert session.active is False
        assert session.submit_guess(CAT).status == "INACTIVE"

    def test_missing_word(self, session):
        """A word absent from the board maps to None."""
        session.words.append("cow")
        solution = session.reveal()
        assert solution.solutions["cow"] is None
        assert solution.missing_words == ["cow"]


class TestCreate:
    """Building a session from the vocabulary."""

    def test_words_board_and_colors(self):
        """Selection, colors and board follow the tier."""
        tier = DifficultyTier(word_count=6, board_size=10)
        session = GameSession.create(VOCABULARY, tier, session_id="abc", rng=random.Random(3))

        assert len(session.words) == 6
        assert len(set(session.words)) == 6
        assert all(w in VOCABULARY for w in session.words)
        assert [cw.text for cw in session.colored_words] == session.words
        assert session.board.size == 10
        assert [p.word for p in session.board.placements] == session.words
        assert session.active is True
        assert session.found_words == []

    def test_default_player_name(self):
        """Name defaults from the session id."""
        tier = DifficultyTier(word_count=2, board_size=8)
        session = GameSession.create(VOCABULARY, tier, session_id="abc", rng=random.Random(0))
        assert session.player_name == "Player abc"

    def test_more_words_than_vocabulary(self):
        """Requesting too many words uses the whole vocabulary."""
        tier = DifficultyTier(word_count=50, board_size=14)
        session = GameSession.create(VOCABULARY, tier, session_id="abc", rng=random.Random(0))
        assert sorted(session.words) == sorted(VOCABULARY)

    def test_lowercases_words(self):
        """Session words are stored lowercase."""
        tier = DifficultyTier(word_count=2, board_size=6)
        session = GameSession.create(["SOL", "Mar"], tier, session_id="x", rng=random.Random(0))
        assert sorted(session.words) == ["mar", "sol"]

    def test_case_variants_are_one_word(self):
        """Words differing only in case are selected once and the game can finish."""
        tier = DifficultyTier(word_count=2, board_size=6)
        session = GameSession.create(["Sol", "sol"], tier, session_id="x", rng=random.Random(0))
        assert session.words == ["sol"]

        placement = session.board.placements[0]
        result = session.submit_guess(placement.coordinates())
        assert result.status == "VALID"
        assert result.completed is True
        assert session.is_complete

    def test_find_generated_word(self):
        """A placed word can be found through its placement cells."""
        tier = DifficultyTier(word_count=4, board_size=10)
        session = GameSession.create(VOCABULARY, tier, session_id="abc", rng=random.Random(8))
        placement = next(p for p in session.board.placements if p.placed)

        result = session.submit_guess(placement.coordinates())
        assert result.status == "VALID"
        assert result.word == placement.word


class TestState:
    """Serialization of the session."""

    def test_get_state(self, session):
        """State carries board, words and progress."""
        session.submit_guess(CAT)
        state = session.get_state()

        assert state["session_id"] == "s1"
        assert state["player_name"] == "Ana"
        assert state["board"] == GRID
        assert state["found_words"] == ["cat"]
        assert state["found_coordinates"] == {"cat": [[0, 0], [0, 1], [0, 2]]}
        assert state["dropped_words"] == []
        assert state["active"] is True

    def test_json_round_trip(self, session):
        """A session serializes to JSON and validates back unchanged."""
        session.submit_guess(CAT)
        restored = GameSession.model_validate_json(session.model_dump_json())

        assert restored.words == session.words
        assert restored.grid == session.grid
        assert restored.found_coordinates == {"cat": CAT}
        assert restored.board.placements[0].direction == (0, 1)

    def test_save_state(self, session, tmp_path):
        """State is written as JSON."""
        path = tmp_path / "out" / "session.json"
        session.save_state(path)

        data = json.loads(path.read_text())
        assert data["session_id"] == "s1"
        assert data["board"] == GRID
