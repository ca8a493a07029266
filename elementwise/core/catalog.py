"""
Element Catalog.

Read-only, load-once collection of the 118 element records. The catalog is
shared by every view and learning mode; nothing mutates it after load.

Philosophy:
- Fail fast if the dataset is broken (missing file, bad JSON, bad record)
- No silent fallbacks - explicit failures only
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from elementwise.core.difficulty import Difficulty, difficulty_pool
from elementwise.core.elements import Category, Element

DATA_PACKAGE = "elementwise.data"
DATA_FILE = "elements.json"


class CatalogError(Exception):
    """Raised when the element dataset cannot be loaded."""
    pass


class ElementCatalog:
    """Ordered, immutable element collection keyed by atomic number."""

    def __init__(self, elements: list[Element]):
        ordered = sorted(elements, key=lambda e: e.number)
        by_number: dict[int, Element] = {}
        for element in ordered:
            if element.number in by_number:
                raise CatalogError(f"Duplicate atomic number {element.number} ({element.symbol})")
            by_number[element.number] = element

        self._elements: tuple[Element, ...] = tuple(ordered)
        self._by_number = by_number
        self._by_symbol = {e.symbol.lower(): e for e in ordered}
        self._by_name = {e.name.lower(): e for e in ordered}

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def from_records(cls, records: list[dict]) -> ElementCatalog:
        """Validate raw dataset records and build a catalog."""
        elements = []
        for index, record in enumerate(records):
            try:
                elements.append(Element.model_validate(record))
            except ValidationError as exc:
                label = record.get("symbol", f"record #{index}") if isinstance(record, dict) else f"record #{index}"
                raise CatalogError(f"Invalid element record {label}: {exc}") from exc
        return cls(elements)

    @classmethod
    def load(cls, path: Path | str | None = None) -> ElementCatalog:
        """
        Load the catalog from a JSON dataset.

        Args:
            path: Dataset file; defaults to the packaged ``elements.json``

        Returns:
            ElementCatalog

        Raises:
            CatalogError: If the file is missing, malformed, or invalid
        """
        try:
            if path is None:
                raw = resources.files(DATA_PACKAGE).joinpath(DATA_FILE).read_text(encoding="utf-8")
                source = f"{DATA_PACKAGE}/{DATA_FILE}"
            else:
                raw = Path(path).read_text(encoding="utf-8")
                source = str(path)
        except (FileNotFoundError, ModuleNotFoundError) as exc:
            raise CatalogError(f"Element dataset not found: {path or DATA_FILE}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Element dataset {source} is not valid JSON: {exc}") from exc

        records = data.get("elements") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise CatalogError(f"Expected a list under 'elements' in {source}")

        catalog = cls.from_records(records)
        logger.info("Loaded {} elements from {}", len(catalog), source)
        return catalog

    # =========================================================================
    # Lookup
    # =========================================================================

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Element):
            return item.number in self._by_number
        if isinstance(item, int):
            return item in self._by_number
        return False

    @property
    def elements(self) -> tuple[Element, ...]:
        return self._elements

    def get(self, number: int) -> Element:
        """Element by atomic number. Raises KeyError if unknown."""
        try:
            return self._by_number[number]
        except KeyError:
            raise KeyError(f"No element with atomic number {number}") from None

    def by_symbol(self, symbol: str) -> Element:
        """Element by symbol (case-insensitive). Raises KeyError if unknown."""
        try:
            return self._by_symbol[symbol.strip().lower()]
        except KeyError:
            raise KeyError(f"No element with symbol {symbol!r}") from None

    def find(self, query: str) -> Element | None:
        """Resolve an atomic number, symbol, or name; None if nothing matches."""
        query = query.strip()
        if not query:
            return None
        if query.isdigit():
            return self._by_number.get(int(query))
        key = query.lower()
        return self._by_symbol.get(key) or self._by_name.get(key)

    def resolve(self, query: str) -> Element:
        """Like ``find`` but raises KeyError when nothing matches."""
        element = self.find(query)
        if element is None:
            raise KeyError(f"Unknown element {query!r}")
        return element

    def categories(self) -> list[Category]:
        """Distinct categories in first-appearance order."""
        seen: dict[Category, None] = {}
        for element in self._elements:
            seen.setdefault(element.category, None)
        return list(seen)

    def pool(self, difficulty: Difficulty | str) -> list[Element]:
        """Elements eligible at a difficulty tier."""
        return difficulty_pool(self._elements, Difficulty.parse(difficulty))


@lru_cache(maxsize=1)
def default_catalog() -> ElementCatalog:
    """Process-wide catalog, honouring ``ELEMENTWISE_DATA_PATH``."""
    from elementwise.config import get_settings

    return ElementCatalog.load(get_settings().data_path)
