"""
Difficulty tiers.

Each tier caps the atomic numbers eligible for the learning modes. The pool
grows monotonically: easy ⊂ medium ⊂ hard.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from elementwise.core.elements import Element


class Difficulty(str, Enum):
    """Difficulty tier for quiz, flashcards, and memory game."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def ceiling(self) -> int:
        """Highest atomic number in this tier's pool."""
        return {
            Difficulty.EASY: 20,
            Difficulty.MEDIUM: 54,
            Difficulty.HARD: 86,
        }[self]

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Difficulty.EASY: "green",
            Difficulty.MEDIUM: "yellow",
            Difficulty.HARD: "red",
        }[self]

    @classmethod
    def parse(cls, value: str | Difficulty) -> Difficulty:
        """Accept an enum member or a case-insensitive tier name."""
        if isinstance(value, Difficulty):
            return value
        return cls(value.strip().lower())


def difficulty_pool(elements: Iterable[Element], difficulty: Difficulty) -> list[Element]:
    """Elements eligible at ``difficulty``, in atomic-number order."""
    ceiling = Difficulty.parse(difficulty).ceiling
    return sorted((e for e in elements if e.number <= ceiling), key=lambda e: e.number)
