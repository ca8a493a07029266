"""
Periodic table filters.

Pure derivations over the current filter state: which cells are
highlighted, the quick stats row, and the grid placement. Recomputed on
every change rather than cached, so there are no stale flags to manage.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from elementwise.core.elements import Category, Element
from elementwise.core.phase import STANDARD_TEMPERATURE_K, Phase, classify


@dataclass(frozen=True)
class TableFilter:
    """Active search text, category, and room-temperature state filter."""

    search: str = ""
    category: Category | None = None
    state: Phase | None = None

    @property
    def is_active(self) -> bool:
        return bool(self.search.strip()) or self.category is not None or self.state is not None

    def matches_search(self, element: Element) -> bool:
        term = self.search.strip().lower()
        if not term:
            return True
        return (
            term in element.name.lower()
            or term in element.symbol.lower()
            or term == str(element.number)
        )

    def matches(self, element: Element) -> bool:
        """True if the element passes every active filter."""
        if not self.matches_search(element):
            return False
        if self.category is not None and element.category != self.category:
            return False
        # State filter always uses room temperature, whatever the display temperature
        if self.state is not None and classify(element, STANDARD_TEMPERATURE_K) != self.state:
            return False
        return True


@dataclass(frozen=True)
class TableStats:
    """Counts shown above the table."""

    total: int
    solids: int
    liquids: int
    gases: int


def filter_elements(elements: Iterable[Element], table_filter: TableFilter) -> list[Element]:
    return [e for e in elements if table_filter.matches(e)]


def table_stats(elements: Iterable[Element], table_filter: TableFilter | None = None) -> TableStats:
    """Total and per-state counts at room temperature over the filtered set."""
    shown = filter_elements(elements, table_filter or TableFilter())
    phases = [classify(e, STANDARD_TEMPERATURE_K) for e in shown]
    return TableStats(
        total=len(shown),
        solids=phases.count(Phase.SOLID),
        liquids=phases.count(Phase.LIQUID),
        gases=phases.count(Phase.GAS),
    )


def grid(elements: Iterable[Element]) -> dict[tuple[int, int], Element]:
    """Map (column, row) table positions to elements."""
    return {(e.xpos, e.ypos): e for e in elements}
