"""Pydantic models for batch simulation results.

A batch plays many independent games and reduces the (strategy, outcome)
rows into win/loss proportions per strategy.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from montyhall.models.game_models import Outcome, Strategy, TrialResult


class StrategyRates(BaseModel):
    """Win/loss counts and proportions for one strategy."""

    wins: int = Field(ge=0, description="Number of games won")
    losses: int = Field(ge=0, description="Number of games lost")
    win_rate: float = Field(ge=0.0, le=1.0, description="Proportion won, 2 decimals")
    lose_rate: float = Field(ge=0.0, le=1.0, description="Proportion lost, 2 decimals")

    @property
    def total(self) -> int:
        return self.wins + self.losses

    def rate(self, outcome: Outcome) -> float:
        return self.win_rate if outcome is Outcome.WIN else self.lose_rate


class SimulationSummary(BaseModel):
    """Row-normalized strategy x outcome proportion table."""

    n_games: int = Field(gt=0, description="Number of games played")
    seed: int | None = Field(
        default=None,
        description="Random seed used for the run (None if unseeded)",
    )
    rates: dict[Strategy, StrategyRates] = Field(
        description="Per-strategy win/loss rates",
    )

    @property
    def stay(self) -> StrategyRates:
        return self.rates[Strategy.STAY]

    @property
    def switch(self) -> StrategyRates:
        return self.rates[Strategy.SWITCH]


@dataclass
class BatchResult:
    """All trial rows of a batch, in play order, plus their summary."""

    results: list[TrialResult]
    summary: SimulationSummary
    games: int = field(init=False)

    def __post_init__(self) -> None:
        self.games = len(self.results) // 2

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[TrialResult]:
        return iter(self.results)

    def as_rows(self) -> list[tuple[str, str]]:
        """Return the rows as plain (strategy, outcome) strings."""
        return [result.as_row() for result in self.results]
