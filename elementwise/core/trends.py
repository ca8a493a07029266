"""
Periodic trend intensities.

Maps a trend property (electronegativity, atomic radius, ionization energy)
to a normalized weight in [0, 1] against a fixed reference maximum.
Elements without the property get the ``UNDEFINED`` sentinel, which the
table renders at reduced weight instead of failing.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from elementwise.core.elements import Element


class _Undefined:
    """Sentinel for a trend property that is absent from the record."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

Intensity = float | _Undefined

# Render weight for cells without trend data
UNDEFINED_OPACITY = 0.3


class TrendKind(str, Enum):
    """Periodic trends available for highlighting."""

    ELECTRONEGATIVITY = "electronegativity"
    ATOMIC_RADIUS = "atomic_radius"
    IONIZATION_ENERGY = "ionization_energy"

    @property
    def reference_max(self) -> float:
        """Raw value that maps to full intensity."""
        return {
            TrendKind.ELECTRONEGATIVITY: 4.0,
            TrendKind.ATOMIC_RADIUS: 350.0,
            TrendKind.IONIZATION_ENERGY: 2500.0,
        }[self]

    @property
    def label(self) -> str:
        return {
            TrendKind.ELECTRONEGATIVITY: "Electronegativity",
            TrendKind.ATOMIC_RADIUS: "Atomic Radius",
            TrendKind.IONIZATION_ENERGY: "Ionization Energy",
        }[self]

    @property
    def unit(self) -> str:
        return {
            TrendKind.ELECTRONEGATIVITY: "",
            TrendKind.ATOMIC_RADIUS: "pm",
            TrendKind.IONIZATION_ENERGY: "kJ/mol",
        }[self]

    @property
    def description(self) -> str:
        """One-line reminder of how the trend runs across the table."""
        return {
            TrendKind.ELECTRONEGATIVITY: "Increases across a period, decreases down a group.",
            TrendKind.ATOMIC_RADIUS: "Decreases across a period, increases down a group.",
            TrendKind.IONIZATION_ENERGY: "Increases across a period, decreases down a group.",
        }[self]

    @property
    def gradient(self) -> tuple[str, str]:
        """Low/high colors used to shade table cells."""
        return {
            TrendKind.ELECTRONEGATIVITY: ("#FEF08A", "#EF4444"),
            TrendKind.ATOMIC_RADIUS: ("#BFDBFE", "#1E40AF"),
            TrendKind.IONIZATION_ENERGY: ("#BBF7D0", "#16A34A"),
        }[self]

    @classmethod
    def parse(cls, value: str | TrendKind) -> TrendKind:
        """Accept an enum member, ``atomic_radius`` or ``atomic-radius``."""
        if isinstance(value, TrendKind):
            return value
        return cls(value.strip().lower().replace("-", "_").replace(" ", "_"))


def raw_value(element: Element, trend: TrendKind) -> float | None:
    """The record's raw value for ``trend``, or None when absent."""
    return getattr(element, trend.value)


def intensity(element: Element, trend: TrendKind) -> Intensity:
    """
    Normalized trend weight.

    Returns:
        ``clamp(raw / reference_max, 0, 1)`` or ``UNDEFINED`` if the
        property is missing
    """
    value = raw_value(element, trend)
    if value is None:
        return UNDEFINED
    return min(max(value / trend.reference_max, 0.0), 1.0)


def trend_opacity(element: Element, trend: TrendKind) -> float:
    """Render weight for a table cell: 0.3 at zero intensity up to 1.0."""
    weight = intensity(element, trend)
    if weight is UNDEFINED:
        return UNDEFINED_OPACITY
    return UNDEFINED_OPACITY + weight * (1 - UNDEFINED_OPACITY)
