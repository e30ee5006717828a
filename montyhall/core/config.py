"""Environment-based configuration for the simulation.

Values are read from environment variables (optionally via a ``.env`` file)
and cached. Call ``clear_settings_cache()`` after changing the environment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


DEFAULT_N_GAMES = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SimulationSettings:
    """Settings for simulation runs."""

    n_games: int
    seed: int | None
    log_level: str


def _read_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@lru_cache(maxsize=1)
def get_settings() -> SimulationSettings:
    """Load simulation settings from environment variables.

    Returns:
        SimulationSettings with the default game count, seed and log level.

    Raises:
        ValueError: If MONTY_HALL_N_GAMES or MONTY_HALL_SEED is not an integer.
    """
    return SimulationSettings(
        n_games=_read_int("MONTY_HALL_N_GAMES", DEFAULT_N_GAMES),
        seed=_read_int("MONTY_HALL_SEED", None),
        log_level=os.getenv("MONTY_HALL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def clear_settings_cache() -> None:
    """Clear the cached settings.

    Useful for testing when environment variables change.
    """
    get_settings.cache_clear()
