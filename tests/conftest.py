"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from elementwise.core.catalog import ElementCatalog  # noqa: E402
from elementwise.core.elements import Category, Element  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def catalog():
    """The packaged 118-element catalog."""
    return ElementCatalog.load()


@pytest.fixture
def rng():
    """Seeded random source for reproducible sampling."""
    return random.Random(1234)


@pytest.fixture
def make_element():
    """Factory for synthetic element records."""

    def _make(number: int = 1, **overrides) -> Element:
        record = {
            "number": number,
            "symbol": f"X{number}"[:3],
            "name": f"Testium-{number}",
            "category": Category.TRANSITION_METAL,
            "atomic_mass": float(number) * 2 + 0.5,
            "shells": [number],
            "period": 1,
            "group": 1,
            "xpos": 1,
            "ypos": 1,
        }
        record.update(overrides)
        return Element.model_validate(record)

    return _make


@pytest.fixture
def sample_element(catalog):
    """Sodium: three shells, full thermal data, one common ion."""
    return catalog.by_symbol("Na")
