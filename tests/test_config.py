"""Tests for centralized configuration."""

import pytest
from pydantic import ValidationError

from hyperattack.config import Settings
from hyperattack.constants import DEFAULT_DIMENSIONS, DiagonalMode, KnightMode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SIDE_LENGTH", "DIAGONAL_MODE", "KNIGHT_MODE", "DIMENSIONS", "LOG_LEVEL"):
        monkeypatch.delenv(f"HYPERATTACK_{name}", raising=False)


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.side_length == 8
        assert s.diagonal_mode == DiagonalMode.HYPER
        assert s.knight_mode == KnightMode.ALTERNATIVE
        assert s.dimensions == DEFAULT_DIMENSIONS
        assert s.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HYPERATTACK_SIDE_LENGTH", "5")
        monkeypatch.setenv("HYPERATTACK_DIAGONAL_MODE", "Classic")
        monkeypatch.setenv("HYPERATTACK_KNIGHT_MODE", "Standard")
        monkeypatch.setenv("HYPERATTACK_DIMENSIONS", "[2, 3, 4]")
        s = Settings(_env_file=None)
        assert s.side_length == 5
        assert s.diagonal_mode == DiagonalMode.CLASSIC
        assert s.knight_mode == KnightMode.STANDARD
        assert s.dimensions == [2, 3, 4]

    def test_side_length_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("HYPERATTACK_SIDE_LENGTH", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_mode_rejected(self, monkeypatch):
        monkeypatch.setenv("HYPERATTACK_DIAGONAL_MODE", "Sideways")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults_list_not_shared(self):
        a = Settings(_env_file=None)
        a.dimensions.append(99)
        assert Settings(_env_file=None).dimensions == DEFAULT_DIMENSIONS
