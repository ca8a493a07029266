"""
Delivery Module - Terminal rendering for ElementWise.

Components:
- visuals: Rich theme, periodic table grid, detail/comparison views, and
  the panels used by the quiz, flashcard, and memory commands
"""

from elementwise.delivery.visuals import (
    THEME,
    render_comparison_table,
    render_element_panel,
    render_periodic_table,
)

__all__ = [
    "THEME",
    "render_comparison_table",
    "render_element_panel",
    "render_periodic_table",
]
