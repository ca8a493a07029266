"""
ElementWise - interactive periodic table and chemistry learning engine.

Two halves:
1. Periodic table - state at temperature, trend highlighting, Bohr diagrams,
   element comparison
2. Learn - quiz, flashcards, and a memory-matching game over difficulty pools
"""

__version__ = "1.0.0"
