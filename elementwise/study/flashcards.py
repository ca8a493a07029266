"""
Flashcard deck: a cursor over a sampled subset of the difficulty pool.

Flip state belongs to each card and survives navigation; only a reshuffle
resets it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from elementwise.core.difficulty import Difficulty, difficulty_pool
from elementwise.core.elements import Element
from elementwise.core.randomness import RandomSource, make_rng

DEFAULT_DECK_SIZE = 20


@dataclass
class Flashcard:
    element: Element
    flipped: bool = False


class FlashcardDeck:
    """
    Ordered, shuffle-able deck with a clamped cursor.

    Usage:
        deck = FlashcardDeck(catalog, rng=make_rng(3))
        deck.shuffle_new("medium")
        deck.flip_current()
        deck.advance(1)
    """

    def __init__(
        self,
        elements: Iterable[Element],
        rng: RandomSource | None = None,
        size: int = DEFAULT_DECK_SIZE,
    ):
        self.elements = tuple(elements)
        self.rng = rng or make_rng()
        self.size = size
        self.difficulty = Difficulty.EASY
        self.cards: list[Flashcard] = []
        self.index = 0

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle_new(self, difficulty: Difficulty | str | None = None) -> list[Flashcard]:
        """Resample up to ``size`` distinct elements and rewind to the first card."""
        if difficulty is not None:
            self.difficulty = Difficulty.parse(difficulty)

        pool = difficulty_pool(self.elements, self.difficulty)
        picked = self.rng.sample(pool, min(self.size, len(pool)))
        self.cards = [Flashcard(element) for element in picked]
        self.index = 0

        logger.debug("Flashcard deck shuffled: {} cards ({})", len(self.cards), self.difficulty.value)
        return self.cards

    @property
    def current(self) -> Flashcard | None:
        return self.cards[self.index] if self.cards else None

    @property
    def position(self) -> str:
        if not self.cards:
            return "0 / 0"
        return f"{self.index + 1} / {len(self.cards)}"

    @property
    def can_go_back(self) -> bool:
        return self.index > 0

    @property
    def can_go_forward(self) -> bool:
        return self.index < len(self.cards) - 1

    def flip_current(self) -> bool:
        """Toggle the current card. Returns its new flipped state."""
        card = self.current
        if card is None:
            return False
        card.flipped = not card.flipped
        return card.flipped

    def advance(self, step: int = 1) -> int:
        """Move the cursor by ``step``, clamped to the deck (no wraparound)."""
        if not self.cards:
            return 0
        self.index = max(0, min(self.index + step, len(self.cards) - 1))
        return self.index
