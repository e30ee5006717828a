"""Models for the Monty Hall simulator."""

from montyhall.models.game_models import (
    DOORS,
    PRIZES,
    DoorAssignment,
    GameRound,
    Outcome,
    Prize,
    Strategy,
    TrialResult,
)
from montyhall.models.simulation_models import (
    BatchResult,
    SimulationSummary,
    StrategyRates,
)

__all__ = [
    # Game models
    "DOORS",
    "PRIZES",
    "DoorAssignment",
    "GameRound",
    "Outcome",
    "Prize",
    "Strategy",
    "TrialResult",
    # Simulation models
    "BatchResult",
    "SimulationSummary",
    "StrategyRates",
]
