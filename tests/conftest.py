"""Shared pytest fixtures."""

import random
from unittest.mock import MagicMock

import pytest

from montyhall.core.config import clear_settings_cache
from montyhall.models.game_models import Prize


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in ("MONTY_HALL_N_GAMES", "MONTY_HALL_SEED", "MONTY_HALL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def car_middle():
    """Car behind door 2."""
    return (Prize.GOAT, Prize.CAR, Prize.GOAT)


@pytest.fixture
def car_first():
    """Car behind door 1."""
    return (Prize.CAR, Prize.GOAT, Prize.GOAT)


@pytest.fixture
def scripted_rng():
    """Random source whose choice() returns the first candidate."""
    mock_rng = MagicMock(spec=random.Random)
    mock_rng.choice.side_effect = lambda seq: seq[0]
    return mock_rng
