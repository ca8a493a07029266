"""
Element records.

The canonical, immutable representation of a chemical element as read from
the element dataset. Records are validated with Pydantic on load and are
never mutated afterwards; atomic number is the only identity.
"""

from __future__ import annotations

from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Category(str, Enum):
    """The ten element families used for colouring and quiz prompts."""

    ALKALI_METAL = "alkali metal"
    ALKALINE_EARTH_METAL = "alkaline earth metal"
    TRANSITION_METAL = "transition metal"
    POST_TRANSITION_METAL = "post-transition metal"
    METALLOID = "metalloid"
    NONMETAL = "nonmetal"
    HALOGEN = "halogen"
    NOBLE_GAS = "noble gas"
    LANTHANIDE = "lanthanide"
    ACTINIDE = "actinide"

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.title()


class Element(BaseModel):
    """A single element record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    number: int = Field(ge=1, le=118)
    symbol: str = Field(min_length=1, max_length=3)
    name: str
    category: Category
    atomic_mass: float = Field(gt=0)

    # Periodic trend properties
    electronegativity: float | None = None
    atomic_radius: float | None = None  # pm
    ionization_energy: float | None = None  # kJ/mol

    # Thermal data (kelvin)
    melt: float | None = None
    boil: float | None = None

    # Structure
    shells: tuple[int, ...] = ()  # index 0 = innermost shell
    ion_charges: tuple[str, ...] | None = None
    electron_configuration: str = ""

    # Free text
    summary: str | None = None
    fun_fact: str | None = None
    uses: tuple[str, ...] = ()
    discovered_by: str | None = None
    year_discovered: int | None = None

    # Table placement
    period: int = Field(ge=1, le=7)
    group: int = Field(ge=1, le=18)
    xpos: int = Field(ge=1, le=18)
    ypos: int = Field(ge=1, le=10)

    @field_validator("shells")
    @classmethod
    def _non_negative_shells(cls, shells: tuple[int, ...]) -> tuple[int, ...]:
        if any(count < 0 for count in shells):
            raise ValueError("shell occupancy cannot be negative")
        return shells

    @model_validator(mode="after")
    def _check_invariants(self) -> Element:
        if self.melt is not None and self.boil is not None and self.melt > self.boil:
            raise ValueError(
                f"{self.symbol}: melting point {self.melt} K exceeds boiling point {self.boil} K"
            )
        if self.shells and sum(self.shells) != self.number:
            logger.warning(
                "{}: shell total {} does not match atomic number {}",
                self.symbol,
                sum(self.shells),
                self.number,
            )
        return self

    # Identity is the atomic number alone
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __repr__(self) -> str:
        return f"Element({self.number}, {self.symbol!r})"

    @property
    def electron_count(self) -> int:
        """Total electrons across all shells."""
        return sum(self.shells)

    @property
    def primary_ion(self) -> str | None:
        """Most common ion charge, if any."""
        return self.ion_charges[0] if self.ion_charges else None


# =============================================================================
# Ion charges
# =============================================================================


def ion_polarity(charge: str) -> str:
    """
    Classify an ion charge string.

    Returns:
        "positive" for cations ("+2"), "negative" for anions ("-1"),
        "neutral" for "0" or anything unsigned.
    """
    charge = charge.strip()
    if charge.startswith("+"):
        return "positive"
    if charge.startswith("-"):
        return "negative"
    return "neutral"


def format_ion(symbol: str, charge: str) -> str:
    """Render an ion label such as ``Na+1``; a zero charge renders the bare symbol."""
    if charge.strip() == "0":
        return symbol
    return f"{symbol}{charge.strip()}"


def describe(element: Element) -> str:
    """Summary text for the detail view, with a generated fallback."""
    if element.summary:
        return element.summary
    return (
        f"Discover {element.name} ({element.symbol}) - element number {element.number} "
        f"on the periodic table. It belongs to the {element.category.value} group and has "
        f"{element.electron_count} electrons."
    )
