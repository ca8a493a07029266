"""
Unit tests for periodic trend intensities.

Run: pytest tests/unit/test_trends.py -v
"""

import pytest

from elementwise.core.trends import (
    UNDEFINED,
    UNDEFINED_OPACITY,
    TrendKind,
    intensity,
    raw_value,
    trend_opacity,
)


class TestIntensity:
    """Normalization against the reference maximum."""

    def test_electronegativity_scale(self, make_element):
        element = make_element(9, electronegativity=2.0)
        assert intensity(element, TrendKind.ELECTRONEGATIVITY) == pytest.approx(0.5)

    def test_clamped_to_one(self, make_element):
        element = make_element(3, atomic_radius=500.0)
        assert intensity(element, TrendKind.ATOMIC_RADIUS) == 1.0

    def test_clamped_to_zero(self, make_element):
        element = make_element(3, ionization_energy=-10.0)
        assert intensity(element, TrendKind.IONIZATION_ENERGY) == 0.0

    def test_missing_property_is_undefined(self, catalog):
        helium = catalog.by_symbol("He")
        assert intensity(helium, TrendKind.ELECTRONEGATIVITY) is UNDEFINED
        assert not UNDEFINED

    @pytest.mark.parametrize("trend", list(TrendKind))
    def test_bounded_and_monotonic_over_catalog(self, catalog, trend):
        present = [e for e in catalog if raw_value(e, trend) is not None]
        assert present

        ordered = sorted(present, key=lambda e: raw_value(e, trend))
        weights = [intensity(e, trend) for e in ordered]
        assert all(0.0 <= w <= 1.0 for w in weights)
        assert weights == sorted(weights)


class TestTrendOpacity:
    def test_undefined_renders_at_floor(self, catalog):
        assert trend_opacity(catalog.get(118), TrendKind.ATOMIC_RADIUS) == UNDEFINED_OPACITY

    def test_full_intensity_is_opaque(self, make_element):
        element = make_element(3, electronegativity=4.0)
        assert trend_opacity(element, TrendKind.ELECTRONEGATIVITY) == pytest.approx(1.0)

    def test_linear_between(self, make_element):
        element = make_element(3, atomic_radius=175.0)
        assert trend_opacity(element, TrendKind.ATOMIC_RADIUS) == pytest.approx(0.3 + 0.5 * 0.7)


class TestTrendKind:
    @pytest.mark.parametrize("value", ["atomic_radius", "Atomic-Radius", "atomic radius"])
    def test_parse(self, value):
        assert TrendKind.parse(value) == TrendKind.ATOMIC_RADIUS

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            TrendKind.parse("density")
