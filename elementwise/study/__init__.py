"""
Study Module - Stateful learning modes over the element catalog.

Components:
- quiz: QuestionGenerator and QuizSession
- memory: MemoryGame with injectable timer scheduling
- flashcards: FlashcardDeck
- selection: SelectionSet and the comparison table
"""

from elementwise.study.flashcards import Flashcard, FlashcardDeck
from elementwise.study.memory import GameState, ManualScheduler, MemoryCard, MemoryGame
from elementwise.study.quiz import (
    AnswerResult,
    Question,
    QuestionGenerator,
    QuestionKind,
    QuizSession,
    QuizStats,
)
from elementwise.study.selection import ComparisonRow, SelectionSet, comparison_rows

__all__ = [
    # Quiz
    "AnswerResult",
    "Question",
    "QuestionGenerator",
    "QuestionKind",
    "QuizSession",
    "QuizStats",
    # Memory
    "GameState",
    "ManualScheduler",
    "MemoryCard",
    "MemoryGame",
    # Flashcards
    "Flashcard",
    "FlashcardDeck",
    # Comparison
    "ComparisonRow",
    "SelectionSet",
    "comparison_rows",
]
