"""
Physical state of an element at a given temperature.

Classification uses only the melting and boiling points of the record.
When the boiling point is missing, anything at or above the melting point
is reported as liquid: the dataset cannot tell us where the gas phase
starts, so we do not guess.
"""

from __future__ import annotations

from enum import Enum

from elementwise.core.elements import Element

# Room temperature used by the table filters and stats
STANDARD_TEMPERATURE_K = 298.0


class Phase(str, Enum):
    """Physical state at a temperature."""

    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"
    UNKNOWN = "unknown"

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Phase.SOLID: "grey70",
            Phase.LIQUID: "dodger_blue1",
            Phase.GAS: "orange1",
            Phase.UNKNOWN: "grey50",
        }[self]

    @property
    def marker(self) -> str:
        """Single-character state indicator for table cells."""
        return {
            Phase.SOLID: "■",
            Phase.LIQUID: "≈",
            Phase.GAS: "○",
            Phase.UNKNOWN: " ",
        }[self]


def phase_from_points(melt: float | None, boil: float | None, temperature_k: float) -> Phase:
    """Classify a temperature against a pair of transition points."""
    if melt is None:
        return Phase.UNKNOWN
    if temperature_k < melt:
        return Phase.SOLID
    if boil is not None and temperature_k >= boil:
        return Phase.GAS
    return Phase.LIQUID


def classify(element: Element, temperature_k: float) -> Phase:
    """
    Physical state of ``element`` at ``temperature_k``.

    Args:
        element: Element record (only ``melt`` and ``boil`` are read)
        temperature_k: Any real temperature in kelvin

    Returns:
        Phase.UNKNOWN without a melting point, otherwise solid/liquid/gas
    """
    return phase_from_points(element.melt, element.boil, temperature_k)
