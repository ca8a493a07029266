"""
Unit tests for settings and seeded randomness.

Run: pytest tests/unit/test_config.py -v
"""

import random

import pytest
from pydantic import ValidationError

from elementwise.config import Settings, get_settings
from elementwise.core.difficulty import Difficulty
from elementwise.core.randomness import create_seed, make_rng
from elementwise.study.selection import SelectionSet


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ELEMENTWISE_MEMORY_PAIRS", "ELEMENTWISE_MAX_COMPARE", "ELEMENTWISE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_temperature_k == 298.0
        assert settings.memory_pairs == 6
        assert settings.memory_match_delay_s == 0.5
        assert settings.memory_mismatch_delay_s == 1.0
        assert settings.flashcard_deck_size == 20
        assert settings.max_compare == 4
        assert settings.quiz_default_difficulty == "easy"
        assert settings.data_path is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ELEMENTWISE_MEMORY_PAIRS", "4")
        monkeypatch.setenv("ELEMENTWISE_QUIZ_DEFAULT_DIFFICULTY", "hard")
        settings = Settings(_env_file=None)

        assert settings.memory_pairs == 4
        assert Difficulty.parse(settings.quiz_default_difficulty) == Difficulty.HARD

    def test_invalid_values_rejected(self, monkeypatch):
        monkeypatch.setenv("ELEMENTWISE_MEMORY_PAIRS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("value", ["0", "5", "6"])
    def test_max_compare_bounded(self, monkeypatch, value):
        monkeypatch.setenv("ELEMENTWISE_MAX_COMPARE", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_max_compare_within_bound_builds_selection(self, monkeypatch, catalog):
        monkeypatch.setenv("ELEMENTWISE_MAX_COMPARE", "3")
        selection = SelectionSet(max_size=Settings(_env_file=None).max_compare)
        for number in range(1, 7):
            selection.toggle(catalog.get(number))
        assert len(selection) == 3

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestRandomness:
    def test_string_seed_is_stable(self):
        assert create_seed("periodic") == create_seed("periodic")
        assert create_seed("periodic") != create_seed("table")

    def test_int_seed_passthrough(self):
        assert create_seed(42) == 42

    def test_make_rng_reproducible(self):
        a, b = make_rng("demo"), make_rng("demo")
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_make_rng_is_private(self):
        assert make_rng() is not random
        assert isinstance(make_rng(), random.Random)


class TestDifficulty:
    @pytest.mark.parametrize("value", ["easy", " EASY ", Difficulty.EASY])
    def test_parse(self, value):
        assert Difficulty.parse(value) == Difficulty.EASY

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            Difficulty.parse("expert")
