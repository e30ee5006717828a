"""Monte Carlo simulation of the Monty Hall problem."""

from montyhall.core.exceptions import (
    InvalidArgumentError,
    InvalidInputError,
    InvalidStateError,
    MontyHallError,
)
from montyhall.models import (
    BatchResult,
    DoorAssignment,
    GameRound,
    Outcome,
    Prize,
    SimulationSummary,
    Strategy,
    StrategyRates,
    TrialResult,
)
from montyhall.services.game import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    play_game,
    play_round,
    select_door,
)
from montyhall.services.simulator import (
    format_proportion_table,
    iter_games,
    play_n_games,
    run_simulation,
    spawn_rngs,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    # Game primitives
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "play_round",
    "select_door",
    # Batch simulation
    "format_proportion_table",
    "iter_games",
    "play_n_games",
    "run_simulation",
    "spawn_rngs",
    "summarize",
    # Models
    "BatchResult",
    "DoorAssignment",
    "GameRound",
    "Outcome",
    "Prize",
    "SimulationSummary",
    "Strategy",
    "StrategyRates",
    "TrialResult",
    # Errors
    "InvalidArgumentError",
    "InvalidInputError",
    "InvalidStateError",
    "MontyHallError",
]
