"""
Comparison selection.

A bounded, insertion-ordered set of elements picked for side-by-side
comparison. Iteration order is the column order of the comparison table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from elementwise.core.elements import Element

MAX_SELECTION = 4
MISSING = "N/A"


class SelectionSet:
    """Toggle-set of at most ``max_size`` distinct elements."""

    def __init__(self, max_size: int = MAX_SELECTION):
        if not 1 <= max_size <= MAX_SELECTION:
            raise ValueError(f"max_size must be between 1 and {MAX_SELECTION}, got {max_size}")
        self.max_size = max_size
        self._items: list[Element] = []

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __repr__(self) -> str:
        return f"SelectionSet({[e.symbol for e in self._items]})"

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.max_size

    @property
    def elements(self) -> list[Element]:
        return list(self._items)

    def toggle(self, element: Element) -> bool:
        """
        Add or remove ``element``.

        Returns:
            True if the set changed. Adding to a full set is silently ignored.
        """
        if element in self._items:
            self._items.remove(element)
            return True
        if self.is_full:
            return False
        self._items.append(element)
        return True

    def remove(self, element: Element) -> None:
        if element in self._items:
            self._items.remove(element)

    def clear(self) -> None:
        self._items.clear()


# =============================================================================
# Comparison table
# =============================================================================


def _number(value: float | int | None, fmt: str = "{}", unit: str = "") -> str:
    if value is None:
        return MISSING
    text = fmt.format(value)
    return f"{text} {unit}" if unit else text


def _ions(element: Element) -> str:
    return ", ".join(element.ion_charges) if element.ion_charges else MISSING


def _shells(element: Element) -> str:
    return "-".join(str(count) for count in element.shells) if element.shells else MISSING


@dataclass(frozen=True)
class ComparisonRow:
    """One property across every selected element."""

    label: str
    values: tuple[str, ...]


COMPARISON_PROPERTIES: list[tuple[str, Callable[[Element], str]]] = [
    ("Atomic Mass", lambda e: _number(e.atomic_mass, "{:.3f}", "u")),
    ("Electronegativity", lambda e: _number(e.electronegativity)),
    ("Atomic Radius", lambda e: _number(e.atomic_radius, unit="pm")),
    ("Melting Point", lambda e: _number(e.melt, "{:.1f}", "K")),
    ("Boiling Point", lambda e: _number(e.boil, "{:.1f}", "K")),
    ("Period", lambda e: str(e.period)),
    ("Group", lambda e: str(e.group)),
    ("Ion Charges", _ions),
    ("Electron Shells", _shells),
    ("Category", lambda e: e.category.display_name),
]


def comparison_rows(elements: Iterable[Element]) -> list[ComparisonRow]:
    """Rows of the comparison table, columns in selection order."""
    selected = list(elements)
    return [
        ComparisonRow(label=label, values=tuple(extract(e) for e in selected))
        for label, extract in COMPARISON_PROPERTIES
    ]
