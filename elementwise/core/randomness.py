"""
Injectable randomness.

Every sampling component takes a random source instead of touching the
global ``random`` module, so tests can pass a seeded ``random.Random`` and
get a reproducible sequence of prompts, decks, and shuffles.
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the learning modes rely on."""

    def randrange(self, start: int, stop: int | None = ..., step: int = ...) -> int:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def shuffle(self, x: MutableSequence[Any]) -> None:
        ...

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        ...


def create_seed(seed: str | int) -> int:
    """Create a reproducible integer seed from string or int."""
    if isinstance(seed, int):
        return seed

    # Hash string to create seed
    hash_bytes = hashlib.sha256(str(seed).encode()).digest()
    return int.from_bytes(hash_bytes[:8], byteorder="big")


def make_rng(seed: str | int | None = None) -> random.Random:
    """
    Build a random source.

    Args:
        seed: Int or string seed for reproducibility, or None for system entropy

    Returns:
        A private ``random.Random`` instance (never the module-global one)
    """
    if seed is None:
        return random.Random()
    return random.Random(create_seed(seed))
