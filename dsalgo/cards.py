"""Random digits and a shuffled deck of ten cards."""

from __future__ import annotations

import random

__all__ = ["DECK", "random_digits", "shuffled_deck"]

DECK = tuple(range(1, 11))


def random_digits(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` uniformly drawn digits 0-9."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [rng.randint(0, 9) for _ in range(count)]


def shuffled_deck(rng: random.Random | None = None) -> list[int]:
    """Return the cards 1 to 10 in a random order."""
    rng = rng or random.Random()
    deck = list(DECK)
    rng.shuffle(deck)
    return deck