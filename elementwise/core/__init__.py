"""
Core Module - Element records and the pure derivations over them.

Components:
- elements: Immutable Element record, Category, ion helpers
- catalog: Load-once ElementCatalog
- phase: Physical state at a temperature
- trends: Periodic trend intensities
- bohr: Bohr diagram geometry
- difficulty: Difficulty tiers and element pools
- filters: Table search/category/state filters and stats
- randomness: Injectable random source

Design Principle:
Nothing in this package holds session state. The learning modes in
elementwise.study build on these functions.
"""

from elementwise.core.bohr import BohrLayout, layout, nucleon_counts
from elementwise.core.catalog import CatalogError, ElementCatalog, default_catalog
from elementwise.core.difficulty import Difficulty, difficulty_pool
from elementwise.core.elements import Category, Element, describe, format_ion, ion_polarity
from elementwise.core.filters import TableFilter, TableStats, table_stats
from elementwise.core.phase import STANDARD_TEMPERATURE_K, Phase, classify
from elementwise.core.randomness import RandomSource, make_rng
from elementwise.core.trends import UNDEFINED, TrendKind, intensity, trend_opacity

__all__ = [
    # Elements
    "Category",
    "Element",
    "describe",
    "format_ion",
    "ion_polarity",
    # Catalog
    "CatalogError",
    "ElementCatalog",
    "default_catalog",
    # Derivations
    "BohrLayout",
    "layout",
    "nucleon_counts",
    "Phase",
    "STANDARD_TEMPERATURE_K",
    "classify",
    "TrendKind",
    "UNDEFINED",
    "intensity",
    "trend_opacity",
    "TableFilter",
    "TableStats",
    "table_stats",
    # Sessions
    "Difficulty",
    "difficulty_pool",
    "RandomSource",
    "make_rng",
]
