"""
Unit tests for physical state classification.

Run: pytest tests/unit/test_phase.py -v
"""

import pytest

from elementwise.core.phase import STANDARD_TEMPERATURE_K, Phase, classify, phase_from_points


class TestPhaseFromPoints:
    """Threshold rules on a pair of transition points."""

    @pytest.mark.parametrize(
        "temperature, expected",
        [
            (500, Phase.SOLID),
            (1500, Phase.LIQUID),
            (2500, Phase.GAS),
        ],
    )
    def test_regions(self, temperature, expected):
        assert phase_from_points(1000, 2000, temperature) == expected

    def test_melting_point_is_liquid(self):
        """Solid only strictly below the melting point."""
        assert phase_from_points(1000, 2000, 1000) == Phase.LIQUID

    def test_boiling_point_is_gas(self):
        assert phase_from_points(1000, 2000, 2000) == Phase.GAS

    def test_missing_melt_is_unknown(self):
        for temperature in (0, 298, 10_000):
            assert phase_from_points(None, 2000, temperature) == Phase.UNKNOWN

    def test_missing_boil_never_gas(self):
        """Without a boiling point anything above melting stays liquid."""
        assert phase_from_points(1000, None, 999) == Phase.SOLID
        assert phase_from_points(1000, None, 1e6) == Phase.LIQUID

    def test_negative_temperature_is_solid(self):
        assert phase_from_points(10, 20, -5) == Phase.SOLID


class TestClassifyCatalog:
    """Room-temperature states from the packaged dataset."""

    def test_mercury_and_bromine_are_liquid(self, catalog):
        assert classify(catalog.by_symbol("Hg"), STANDARD_TEMPERATURE_K) == Phase.LIQUID
        assert classify(catalog.by_symbol("Br"), STANDARD_TEMPERATURE_K) == Phase.LIQUID

    def test_gallium_melts_just_above_room_temperature(self, catalog):
        gallium = catalog.by_symbol("Ga")
        assert classify(gallium, STANDARD_TEMPERATURE_K) == Phase.SOLID
        assert classify(gallium, 310) == Phase.LIQUID

    def test_noble_gases_are_gas(self, catalog):
        for symbol in ("He", "Ne", "Ar", "Kr", "Xe", "Rn"):
            assert classify(catalog.by_symbol(symbol), STANDARD_TEMPERATURE_K) == Phase.GAS

    def test_superheavy_is_unknown(self, catalog):
        assert classify(catalog.get(118), STANDARD_TEMPERATURE_K) == Phase.UNKNOWN

    def test_only_thermal_data_matters(self, make_element):
        a = make_element(5, melt=100.0, boil=200.0, name="Alpha")
        b = make_element(7, melt=100.0, boil=200.0, name="Beta", atomic_mass=99.0)
        for temperature in (50, 150, 250):
            assert classify(a, temperature) == classify(b, temperature)

    def test_every_element_classifies(self, catalog):
        for element in catalog:
            assert classify(element, STANDARD_TEMPERATURE_K) in set(Phase)
