"""
Quiz Engine for element recognition questions.

Generates one multiple-choice prompt at a time from the difficulty pool:
- A correct element drawn uniformly from the pool
- A question kind drawn from the tier's kind set
- Distractors sampled without duplicates (capped attempts, never hangs)
- Options shuffled into a uniform random order

QuizSession tracks the selected answer and the running counters
(correct, wrong, streak, best streak) across prompts.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from elementwise.core.difficulty import Difficulty, difficulty_pool
from elementwise.core.elements import Element
from elementwise.core.randomness import RandomSource, make_rng

# Rejection-sampling budget per requested distractor before falling back
MAX_DRAWS_PER_DISTRACTOR = 25


class QuestionKind(str, Enum):
    """What the prompt shows and what the options name."""

    SYMBOL_TO_NAME = "symbol_to_name"
    NAME_TO_SYMBOL = "name_to_symbol"
    ATOMIC_NUMBER = "atomic_number"
    CATEGORY = "category"
    ION_CHARGE = "ion_charge"
    SHELLS = "shells"

    @property
    def prompt_text(self) -> str:
        return {
            QuestionKind.SYMBOL_TO_NAME: "What element is this?",
            QuestionKind.NAME_TO_SYMBOL: "What's the symbol?",
            QuestionKind.ATOMIC_NUMBER: "Which element has this atomic number?",
            QuestionKind.CATEGORY: "Which element is in this category?",
            QuestionKind.ION_CHARGE: "Which element forms this ion?",
            QuestionKind.SHELLS: "Which element has these shells?",
        }[self]


EASY_KINDS = [QuestionKind.SYMBOL_TO_NAME, QuestionKind.NAME_TO_SYMBOL]
MEDIUM_KINDS = [*EASY_KINDS, QuestionKind.ATOMIC_NUMBER, QuestionKind.CATEGORY]
HARD_KINDS = [*MEDIUM_KINDS, QuestionKind.ION_CHARGE, QuestionKind.SHELLS]

QUESTION_KINDS: dict[Difficulty, list[QuestionKind]] = {
    Difficulty.EASY: EASY_KINDS,
    Difficulty.MEDIUM: MEDIUM_KINDS,
    Difficulty.HARD: HARD_KINDS,
}


def distractor_count(difficulty: Difficulty) -> int:
    """Wrong options per prompt: 2 on easy, 3 otherwise."""
    return 2 if difficulty == Difficulty.EASY else 3


@dataclass(frozen=True)
class Question:
    """A single prompt with its shuffled options."""

    element: Element
    kind: QuestionKind
    options: tuple[Element, ...]
    difficulty: Difficulty

    @property
    def prompt(self) -> str:
        return self.kind.prompt_text

    @property
    def content(self) -> str:
        """The clue shown under the prompt text."""
        element = self.element
        if self.kind == QuestionKind.SYMBOL_TO_NAME:
            return element.symbol
        if self.kind == QuestionKind.NAME_TO_SYMBOL:
            return element.name
        if self.kind == QuestionKind.ATOMIC_NUMBER:
            return str(element.number)
        if self.kind == QuestionKind.CATEGORY:
            return element.category.value
        if self.kind == QuestionKind.ION_CHARGE:
            return f"X{element.primary_ion or '+1'}"
        return " · ".join(str(count) for count in element.shells)

    @property
    def hint(self) -> str:
        element = self.element
        return f"Period: {element.period} | Group: {element.group} | Mass: {element.atomic_mass:.2f} u"

    @property
    def correct_index(self) -> int:
        return next(i for i, option in enumerate(self.options) if option.number == self.element.number)

    def option_label(self, option: Element) -> str:
        if self.kind == QuestionKind.SYMBOL_TO_NAME:
            return option.name
        if self.kind == QuestionKind.NAME_TO_SYMBOL:
            return option.symbol
        return f"{option.symbol} - {option.name}"

    def is_correct(self, option: Element) -> bool:
        return option.number == self.element.number


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str
    explanation: str | None = None


@dataclass
class QuizStats:
    """Running counters for a quiz session."""

    correct: int = 0
    wrong: int = 0
    streak: int = 0
    best_streak: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.wrong

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0

    def record(self, correct: bool) -> None:
        if correct:
            self.correct += 1
            self.streak += 1
        else:
            self.wrong += 1
            self.streak = 0
        self.best_streak = max(self.best_streak, self.streak)


class QuestionGenerator:
    """
    Produces quiz prompts from an element collection.

    Randomness comes from an injected source so sequences can be replayed.
    """

    def __init__(self, elements: Iterable[Element], rng: RandomSource | None = None):
        self.elements = tuple(elements)
        self.rng = rng or make_rng()

    def pool(self, difficulty: Difficulty) -> list[Element]:
        return difficulty_pool(self.elements, difficulty)

    def next(self, difficulty: Difficulty | str) -> Question:
        """
        Generate one prompt.

        Args:
            difficulty: Tier controlling the pool, kind set, and option count

        Returns:
            Question whose options contain the correct element exactly once

        Raises:
            ValueError: If no element is eligible at this tier
        """
        difficulty = Difficulty.parse(difficulty)
        pool = self.pool(difficulty)
        if not pool:
            raise ValueError(f"No elements eligible at difficulty {difficulty.value}")

        correct = pool[self.rng.randrange(len(pool))]
        kinds = QUESTION_KINDS[difficulty]
        kind = kinds[self.rng.randrange(len(kinds))]

        distractors = self.pick_distractors(pool, correct, distractor_count(difficulty))
        options = [*distractors, correct]
        self.rng.shuffle(options)

        logger.debug(
            "Quiz prompt: {} ({}) kind={} options={}",
            correct.symbol,
            difficulty.value,
            kind.value,
            [o.symbol for o in options],
        )
        return Question(element=correct, kind=kind, options=tuple(options), difficulty=difficulty)

    def pick_distractors(self, pool: Sequence[Element], correct: Element, count: int) -> list[Element]:
        """
        Sample ``count`` distinct wrong options from ``pool``.

        Rejection sampling with a capped number of draws; whatever is still
        missing afterwards is filled from the unused pool members, so a pool
        smaller than ``count + 1`` just yields fewer distractors.
        """
        target = min(count, max(len(pool) - 1, 0))
        chosen: list[Element] = []
        seen = {correct.number}

        draws = 0
        max_draws = MAX_DRAWS_PER_DISTRACTOR * max(target, 1)
        while len(chosen) < target and draws < max_draws:
            draws += 1
            candidate = pool[self.rng.randrange(len(pool))]
            if candidate.number in seen:
                continue
            seen.add(candidate.number)
            chosen.append(candidate)

        if len(chosen) < target:
            remaining = [e for e in pool if e.number not in seen]
            self.rng.shuffle(remaining)
            logger.debug(
                "Distractor sampling fell back after {} draws ({} of {} chosen)",
                draws,
                len(chosen),
                target,
            )
            chosen.extend(remaining[: target - len(chosen)])

        return chosen


@dataclass
class QuizSession:
    """
    One learner's quiz run.

    A prompt is generated on start, on difficulty change, and on ``next``.
    Counters survive prompts and difficulty changes; only ``restart`` clears them.
    """

    generator: QuestionGenerator
    difficulty: Difficulty = Difficulty.EASY
    stats: QuizStats = field(default_factory=QuizStats)
    question: Question | None = None
    selected: Element | None = None
    result: AnswerResult | None = None

    def __post_init__(self):
        self.difficulty = Difficulty.parse(self.difficulty)
        if self.question is None:
            self.next()

    @property
    def is_answered(self) -> bool:
        return self.selected is not None

    def next(self) -> Question:
        """Move on to a fresh prompt, clearing the selection."""
        self.question = self.generator.next(self.difficulty)
        self.selected = None
        self.result = None
        return self.question

    def set_difficulty(self, difficulty: Difficulty | str) -> Question:
        self.difficulty = Difficulty.parse(difficulty)
        return self.next()

    def restart(self) -> Question:
        """Reset the counters and start over with a fresh prompt."""
        self.stats = QuizStats()
        return self.next()

    def answer(self, choice: Element | int) -> AnswerResult:
        """
        Select an option for the current prompt.

        Only the first selection counts; later calls return the recorded
        result unchanged until ``next`` is called.

        Args:
            choice: The chosen option, or its atomic number

        Raises:
            ValueError: If the choice is not one of the current options
            RuntimeError: If no question is in progress
        """
        if self.question is None:
            raise RuntimeError("No question in progress; call next() first")
        if self.result is not None:
            return self.result

        number = choice if isinstance(choice, int) else choice.number
        option = next((o for o in self.question.options if o.number == number), None)
        if option is None:
            raise ValueError(f"Element {number} is not an option for the current question")

        correct = self.question.is_correct(option)
        self.selected = option
        self.stats.record(correct)

        answer_label = self.question.option_label(self.question.element)
        self.result = AnswerResult(
            correct=correct,
            feedback="Correct!" if correct else "Not quite",
            user_answer=self.question.option_label(option),
            correct_answer=answer_label,
            explanation=f"{self.question.element.name} ({self.question.element.symbol}), atomic number {self.question.element.number}",
        )
        return self.result
