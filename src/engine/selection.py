"""Random word selection and color assignment for a new game."""

import random
from typing import List, Optional, Sequence

from .models import ColoredWord


# Display colors handed out to the selected words
PALETTE: List[str] = [
    "#e6194b", "#3cb44b", "#ffe119", "#4363d8", "#f58231", "#911eb4",
    "#46f0f0", "#f032e6", "#bcf60c", "#fabebe", "#008080", "#e6beff",
]


def select_words(
    vocabulary: Sequence[str],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Draw a random subset of words without replacement.

    Args:
        vocabulary: Source words (left untouched)
        count: Number of words wanted
        rng: Optional random generator for reproducibility

    Returns:
        min(count, len(vocabulary)) words in the order they were drawn
    """
    rng = rng or random.Random()
    count = max(0, min(count, len(vocabulary)))

    # Sample positions so repeated entries in the source never collide
    indices = rng.sample(range(len(vocabulary)), count)
    return [vocabulary[i] for i in indices]


def assign_colors(
    words: Sequence[str],
    palette: Sequence[str] = PALETTE,
    rng: Optional[random.Random] = None,
) -> List[ColoredWord]:
    """
    Pair each word with a color from a freshly shuffled copy of the palette.

    Colors only repeat once the palette is exhausted.
    """
    if not palette:
        raise ValueError("Color palette is empty")

    rng = rng or random.Random()
    shuffled = list(palette)
    rng.shuffle(shuffled)

    return [
        ColoredWord(text=word, color=shuffled[i % len(shuffled)])
        for i, word in enumerate(words)
    ]
