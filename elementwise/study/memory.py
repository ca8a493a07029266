"""
Memory matching game.

Each sampled element is dealt twice: once showing its symbol, once its
name. The player reveals two cards per move; a pair that shares an element
is locked in after a short delay, a mismatch is hidden again after a
slightly longer one.

State machine:
    IDLE --flip--> ONE_REVEALED --flip--> RESOLVING --timer--> IDLE | COMPLETE

The two delays are the only deferred work in the learning engine. They run
through an injectable scheduler, and every callback carries the epoch of
the game that scheduled it: once the game is re-dealt, stale callbacks are
dropped instead of mutating the new deck.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from loguru import logger

from elementwise.core.difficulty import Difficulty, difficulty_pool
from elementwise.core.elements import Element
from elementwise.core.randomness import RandomSource, make_rng

DEFAULT_PAIRS = 6
MATCH_DELAY_S = 0.5
MISMATCH_DELAY_S = 1.0


# =============================================================================
# Scheduling
# =============================================================================


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything with ``call_later``; ``asyncio`` event loops qualify."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        ...


@dataclass
class ManualTimer:
    """A pending callback on a ManualScheduler."""

    due: float
    seq: int
    callback: Callable[..., Any]
    args: tuple[Any, ...] = ()
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Deterministic virtual-clock scheduler.

    Nothing fires until ``advance`` or ``run_pending`` is called, which
    makes timer behaviour testable and lets a synchronous front end decide
    when the reveal delay has "elapsed".
    """

    def __init__(self):
        self.now = 0.0
        self._seq = 0
        self._timers: list[ManualTimer] = []

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualTimer:
        self._seq += 1
        timer = ManualTimer(due=self.now + max(delay, 0.0), seq=self._seq, callback=callback, args=args)
        self._timers.append(timer)
        return timer

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire every timer that became due. Returns fired count."""
        target = self.now + max(seconds, 0.0)
        fired = 0
        while True:
            due = [t for t in self._timers if not t.cancelled and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due, t.seq))
            self._timers.remove(timer)
            self.now = timer.due
            timer.callback(*timer.args)
            fired += 1
        self.now = target
        self._timers = [t for t in self._timers if not t.cancelled]
        return fired

    def run_pending(self) -> int:
        """Fire everything currently scheduled, advancing the clock as needed."""
        live = [t for t in self._timers if not t.cancelled]
        if not live:
            return 0
        return self.advance(max(t.due for t in live) - self.now)


# =============================================================================
# Game model
# =============================================================================


class FaceKind(str, Enum):
    """What a card shows when face up."""

    SYMBOL = "symbol"
    NAME = "name"


class GameState(str, Enum):
    IDLE = "idle"
    ONE_REVEALED = "one_revealed"
    RESOLVING = "resolving"
    COMPLETE = "complete"


@dataclass
class MemoryCard:
    """A single card in the deck."""

    id: int
    element: Element
    face: FaceKind
    matched: bool = False

    @property
    def label(self) -> str:
        return self.element.symbol if self.face == FaceKind.SYMBOL else self.element.name


class MemoryGame:
    """
    Turn-based reveal/match engine.

    Usage:
        game = MemoryGame(catalog, rng=make_rng(7))
        game.new_game(Difficulty.EASY)
        game.flip(card_id)
    """

    def __init__(
        self,
        elements: Iterable[Element],
        rng: RandomSource | None = None,
        scheduler: Scheduler | None = None,
        pairs: int = DEFAULT_PAIRS,
        match_delay: float = MATCH_DELAY_S,
        mismatch_delay: float = MISMATCH_DELAY_S,
    ):
        self.elements = tuple(elements)
        self.rng = rng or make_rng()
        self.scheduler: Scheduler = scheduler or ManualScheduler()
        self.pairs = pairs
        self.match_delay = match_delay
        self.mismatch_delay = mismatch_delay

        self.difficulty = Difficulty.EASY
        self.cards: list[MemoryCard] = []
        self.revealed: list[int] = []
        self.moves = 0
        self.matches = 0
        self.pair_count = 0
        self.epoch = 0
        self._pending: TimerHandle | None = None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def new_game(self, difficulty: Difficulty | str | None = None) -> list[MemoryCard]:
        """
        Deal a fresh deck.

        Pair count is capped to the pool size so the deck always holds
        exactly two cards per sampled element.
        """
        if difficulty is not None:
            self.difficulty = Difficulty.parse(difficulty)

        self.epoch += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        pool = difficulty_pool(self.elements, self.difficulty)
        count = min(self.pairs, len(pool))
        selected = self.rng.sample(pool, count)

        cards: list[MemoryCard] = []
        for i, element in enumerate(selected):
            cards.append(MemoryCard(id=i * 2, element=element, face=FaceKind.SYMBOL))
            cards.append(MemoryCard(id=i * 2 + 1, element=element, face=FaceKind.NAME))
        self.rng.shuffle(cards)

        self.cards = cards
        self.revealed = []
        self.moves = 0
        self.matches = 0
        self.pair_count = count

        logger.debug(
            "Memory game #{} dealt: {} pairs ({})",
            self.epoch,
            count,
            ", ".join(e.symbol for e in selected),
        )
        return self.cards

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> GameState:
        if self.pair_count and self.matches == self.pair_count:
            return GameState.COMPLETE
        if len(self.revealed) == 2:
            return GameState.RESOLVING
        if len(self.revealed) == 1:
            return GameState.ONE_REVEALED
        return GameState.IDLE

    @property
    def is_complete(self) -> bool:
        return self.state == GameState.COMPLETE

    def card(self, card_id: int) -> MemoryCard | None:
        return next((c for c in self.cards if c.id == card_id), None)

    def is_face_up(self, card: MemoryCard) -> bool:
        return card.matched or card.id in self.revealed

    # =========================================================================
    # Moves
    # =========================================================================

    def flip(self, card_id: int) -> bool:
        """
        Reveal a card.

        Returns:
            True if the card was revealed; False for ignored clicks (two
            cards already up, card matched or already revealed, unknown id)
        """
        if len(self.revealed) == 2:
            return False

        card = self.card(card_id)
        if card is None or card.matched or card_id in self.revealed:
            return False

        self.revealed.append(card_id)
        if len(self.revealed) == 2:
            self.moves += 1
            self._schedule_resolution()
        return True

    def _schedule_resolution(self) -> None:
        first, second = (self.card(card_id) for card_id in self.revealed)
        if first is None or second is None:
            raise RuntimeError(f"Revealed cards {self.revealed} are not in the current deal")
        is_match = first.element.number == second.element.number
        delay = self.match_delay if is_match else self.mismatch_delay
        self._pending = self.scheduler.call_later(delay, self._resolve, self.epoch, is_match)

    def _resolve(self, epoch: int, is_match: bool) -> None:
        if epoch != self.epoch:
            logger.debug("Dropping stale memory timer from game #{} (now #{})", epoch, self.epoch)
            return

        self._pending = None
        if is_match:
            for card_id in self.revealed:
                card = self.card(card_id)
                if card is not None:
                    card.matched = True
            self.matches += 1
            if self.is_complete:
                logger.debug("Memory game #{} complete in {} moves", self.epoch, self.moves)
        self.revealed = []
