"""Loading the word list sessions draw their words from."""

import json
import logging
import re
from pathlib import Path
from typing import Iterable, Tuple


logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r'^[a-z]+$')


def normalize_vocabulary(words: Iterable[str]) -> Tuple[str, ...]:
    """
    Lowercase, strip and de-duplicate words, keeping first occurrences.

    Raises:
        ValueError: If an entry is not made of letters a-z, or nothing is left
    """
    seen = set()
    vocabulary = []

    for raw in words:
        if not isinstance(raw, str):
            raise ValueError(f"Vocabulary entries must be strings, got {raw!r}")
        word = raw.strip().lower()
        if not _WORD_RE.match(word):
            raise ValueError(f"Invalid vocabulary word '{raw}': only letters a-z are allowed")
        if word not in seen:
            seen.add(word)
            vocabulary.append(word)

    if not vocabulary:
        raise ValueError("Vocabulary is empty")

    return tuple(vocabulary)


def load_vocabulary(path: str | Path) -> Tuple[str, ...]:
    """
    Load a vocabulary from a JSON file.

    Accepts either {"palabras": [...]} or a bare list of words.

    Returns:
        Immutable tuple of lowercase words in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        if "palabras" not in data:
            raise ValueError(f"Vocabulary file {path} has no 'palabras' list")
        data = data["palabras"]

    if not isinstance(data, list):
        raise ValueError(f"Vocabulary file {path} must contain a list of words")

    vocabulary = normalize_vocabulary(data)
    logger.info("Loaded %d words from %s", len(vocabulary), path)
    return vocabulary
