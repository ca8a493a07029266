"""
Unit tests for the element catalog and record validation.

Run: pytest tests/unit/test_catalog.py -v
"""

import json

import pytest

from elementwise.core.catalog import CatalogError, ElementCatalog
from elementwise.core.difficulty import Difficulty
from elementwise.core.elements import Category, Element, describe, format_ion, ion_polarity


class TestPackagedDataset:
    """Invariants of the shipped elements.json."""

    def test_has_all_118_in_order(self, catalog):
        assert len(catalog) == 118
        assert [e.number for e in catalog] == list(range(1, 119))

    def test_shells_sum_to_number(self, catalog):
        for element in catalog:
            assert element.electron_count == element.number, element.symbol

    def test_melt_not_above_boil(self, catalog):
        for element in catalog:
            if element.melt is not None and element.boil is not None:
                assert element.melt <= element.boil, element.symbol

    def test_ten_categories(self, catalog):
        assert set(catalog.categories()) == set(Category)

    def test_unique_positions(self, catalog):
        positions = [(e.xpos, e.ypos) for e in catalog]
        assert len(positions) == len(set(positions))


class TestLookup:
    def test_get(self, catalog):
        assert catalog.get(26).symbol == "Fe"

    def test_get_unknown_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.get(119)

    def test_by_symbol_case_insensitive(self, catalog):
        assert catalog.by_symbol("na").number == 11
        assert catalog.by_symbol(" NA ").number == 11

    def test_by_symbol_unknown_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.by_symbol("Zz")

    @pytest.mark.parametrize("query", ["11", "Na", "sodium", "SODIUM"])
    def test_find(self, catalog, query):
        assert catalog.find(query).symbol == "Na"

    def test_find_misses(self, catalog):
        assert catalog.find("") is None
        assert catalog.find("kryptonite") is None
        assert catalog.find("0") is None

    def test_resolve_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.resolve("kryptonite")

    def test_contains(self, catalog, sample_element):
        assert sample_element in catalog
        assert 11 in catalog
        assert "Na" not in catalog

    @pytest.mark.parametrize(
        "difficulty, ceiling",
        [(Difficulty.EASY, 20), (Difficulty.MEDIUM, 54), (Difficulty.HARD, 86)],
    )
    def test_pool(self, catalog, difficulty, ceiling):
        pool = catalog.pool(difficulty)
        assert [e.number for e in pool] == list(range(1, ceiling + 1))


class TestLoading:
    """Fail-fast behaviour on broken datasets."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            ElementCatalog.load(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="not valid JSON"):
            ElementCatalog.load(path)

    def test_missing_elements_key(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"items": []}), encoding="utf-8")
        with pytest.raises(CatalogError, match="'elements'"):
            ElementCatalog.load(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"elements": [{"number": 1, "symbol": "H"}]}), encoding="utf-8")
        with pytest.raises(CatalogError, match="Invalid element record H"):
            ElementCatalog.load(path)

    def test_duplicate_numbers(self, make_element):
        with pytest.raises(CatalogError, match="Duplicate"):
            ElementCatalog([make_element(1), make_element(1, name="Other")])

    def test_custom_file(self, tmp_path, make_element):
        records = [make_element(n).model_dump(mode="json") for n in (3, 1, 2)]
        path = tmp_path / "mini.json"
        path.write_text(json.dumps({"elements": records}), encoding="utf-8")

        mini = ElementCatalog.load(path)
        assert [e.number for e in mini] == [1, 2, 3]


class TestElementRecord:
    def test_frozen(self, sample_element):
        with pytest.raises(Exception):
            sample_element.name = "Natrium"

    def test_identity_is_number(self, make_element):
        assert make_element(5) == make_element(5, name="Renamed")
        assert len({make_element(5), make_element(5, name="Renamed")}) == 1

    def test_melt_above_boil_rejected(self, make_element):
        with pytest.raises(ValueError):
            make_element(5, melt=500.0, boil=100.0)

    def test_negative_shell_rejected(self, make_element):
        with pytest.raises(ValueError):
            make_element(5, shells=[7, -2])

    def test_primary_ion(self, catalog):
        assert catalog.by_symbol("Hg").primary_ion == "+2"
        assert catalog.get(118).primary_ion is None


class TestIonHelpers:
    @pytest.mark.parametrize(
        "charge, polarity",
        [("+1", "positive"), ("-2", "negative"), ("0", "neutral"), (" +3 ", "positive")],
    )
    def test_polarity(self, charge, polarity):
        assert ion_polarity(charge) == polarity

    def test_format_ion(self):
        assert format_ion("Na", "+1") == "Na+1"
        assert format_ion("He", "0") == "He"


class TestDescribe:
    def test_uses_summary(self, sample_element):
        assert describe(sample_element) == sample_element.summary

    def test_fallback_sentence(self, catalog):
        text = describe(catalog.by_symbol("Cl"))
        assert text.startswith("Discover Chlorine (Cl) - element number 17")
        assert "halogen" in text
