"""Schemas for a single Monty Hall game.

A game is three doors, one car and two goats. Doors are numbered 1 to 3.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Prize(str, Enum):
    """What sits behind a door."""

    GOAT = "goat"
    CAR = "car"


class Outcome(str, Enum):
    """Result of a contestant's final pick."""

    WIN = "WIN"
    LOSE = "LOSE"


class Strategy(str, Enum):
    """What the contestant does after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


DOORS: tuple[int, int, int] = (1, 2, 3)
PRIZES: tuple[Prize, Prize, Prize] = (Prize.GOAT, Prize.GOAT, Prize.CAR)

DoorAssignment = tuple[Prize, Prize, Prize]


@dataclass(frozen=True)
class TrialResult:
    """One (strategy, outcome) row of a game."""

    strategy: Strategy
    outcome: Outcome

    def as_row(self) -> tuple[str, str]:
        return (self.strategy.value, self.outcome.value)


@dataclass(frozen=True)
class GameRound:
    """Everything that happened in one game.

    Both strategies are scored against the same assignment, first pick and
    opened door.
    """

    assignment: DoorAssignment
    first_pick: int
    opened_door: int
    stay: TrialResult
    switch: TrialResult

    @property
    def car_door(self) -> int:
        return self.assignment.index(Prize.CAR) + 1

    @property
    def results(self) -> list[TrialResult]:
        return [self.stay, self.switch]
