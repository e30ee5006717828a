"""Single-game primitives for the Monty Hall problem.

The contestant picks one of three doors, the host opens a goat door the
contestant did not pick, and the contestant stays or switches. Every
random step takes an explicit ``random.Random`` so games can be replayed
from a seed.

Typical usage:
    rng = random.Random(42)
    game = create_game(rng)
    pick = select_door(rng)
    opened = open_goat_door(game, pick, rng)
    final = change_door(stay=False, opened=opened, pick=pick)
    outcome = determine_winner(final, game)
"""

import random
from collections.abc import Sequence

from montyhall.core.exceptions import InvalidInputError, InvalidStateError
from montyhall.core.logging_config import get_logger
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

logger = get_logger(__name__)


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _validate_door(door: object, name: str) -> int:
    if isinstance(door, bool) or not isinstance(door, int) or door not in DOORS:
        raise InvalidInputError(f"{name} must be a door number in {DOORS}, got {door!r}")
    return door


def _validate_assignment(assignment: Sequence[Prize | str]) -> DoorAssignment:
    """Coerce labels to Prize and check the one-car, two-goat invariant."""
    if isinstance(assignment, str) or len(assignment) != len(DOORS):
        raise InvalidInputError(f"Door assignment must have 3 prizes, got {assignment!r}")
    try:
        prizes = tuple(Prize(label) for label in assignment)
    except ValueError:
        raise InvalidInputError(f"Unknown prize label in {list(assignment)!r}") from None
    if prizes.count(Prize.CAR) != 1:
        raise InvalidInputError(
            f"Door assignment must hold exactly one car and two goats, got {list(assignment)!r}"
        )
    return prizes


def create_game(rng: random.Random | None = None) -> DoorAssignment:
    """Place two goats and one car behind the three doors.

    Args:
        rng: Random source. A fresh one is created when omitted.

    Returns:
        Tuple of 3 prizes; position i holds the prize behind door i + 1.
    """
    return tuple(_resolve_rng(rng).sample(PRIZES, k=len(PRIZES)))


def select_door(rng: random.Random | None = None) -> int:
    """Pick the contestant's initial door uniformly at random."""
    return _resolve_rng(rng).choice(DOORS)


def open_goat_door(
    assignment: Sequence[Prize | str],
    pick: int,
    rng: random.Random | None = None,
) -> int:
    """Choose the door the host opens.

    The host never opens the contestant's door and never reveals the car.
    If the contestant already holds the car, the host picks between the two
    goat doors at random; otherwise only one door is eligible.

    Args:
        assignment: Prizes behind doors 1 to 3.
        pick: The contestant's initial door.
        rng: Random source, used only when the contestant picked the car.

    Returns:
        Door number of a goat door other than ``pick``.

    Raises:
        InvalidInputError: If ``pick`` is not a door or the assignment is malformed.
    """
    prizes = _validate_assignment(assignment)
    pick = _validate_door(pick, "pick")

    goat_doors = [door for door in DOORS if prizes[door - 1] is Prize.GOAT]
    if prizes[pick - 1] is Prize.CAR:
        opened = _resolve_rng(rng).choice(goat_doors)
        logger.debug(
            "Contestant holds the car, host picks a goat door at random",
            extra={"extra_data": {"pick": pick, "opened": opened}},
        )
        return opened

    # Exactly one goat door is left once the contestant's goat is excluded
    (opened,) = [door for door in goat_doors if door != pick]
    logger.debug(
        "Contestant holds a goat, host has one eligible door",
        extra={"extra_data": {"pick": pick, "opened": opened}},
    )
    return opened


def change_door(stay: bool, opened: int, pick: int) -> int:
    """Return the contestant's final door.

    Args:
        stay: True to keep the initial pick, False to switch.
        opened: The door opened by the host.
        pick: The contestant's initial door.

    Returns:
        ``pick`` when staying, otherwise the one door that is neither
        ``opened`` nor ``pick``.

    Raises:
        InvalidInputError: If either door is not a door number.
        InvalidStateError: If ``opened`` equals ``pick``.
    """
    opened = _validate_door(opened, "opened")
    pick = _validate_door(pick, "pick")

    remaining = [door for door in DOORS if door not in (opened, pick)]
    if len(remaining) != 1:
        raise InvalidStateError(
            f"Expected exactly one door besides opened={opened} and pick={pick}, "
            f"found {remaining}"
        )

    if stay:
        return pick
    return remaining[0]


def determine_winner(final_pick: int, assignment: Sequence[Prize | str]) -> Outcome:
    """Score a final pick: WIN if the car is behind it, else LOSE."""
    prizes = _validate_assignment(assignment)
    final_pick = _validate_door(final_pick, "final_pick")
    return Outcome.WIN if prizes[final_pick - 1] is Prize.CAR else Outcome.LOSE


def play_round(rng: random.Random | None = None) -> GameRound:
    """Play one game and score both strategies on the same doors.

    Args:
        rng: Random source shared by setup, pick and host reveal.

    Returns:
        GameRound with the assignment, picks and both outcomes.
    """
    rng = _resolve_rng(rng)
    assignment = create_game(rng)
    first_pick = select_door(rng)
    opened = open_goat_door(assignment, first_pick, rng)

    final_stay = change_door(stay=True, opened=opened, pick=first_pick)
    final_switch = change_door(stay=False, opened=opened, pick=first_pick)

    return GameRound(
        assignment=assignment,
        first_pick=first_pick,
        opened_door=opened,
        stay=TrialResult(Strategy.STAY, determine_winner(final_stay, assignment)),
        switch=TrialResult(Strategy.SWITCH, determine_winner(final_switch, assignment)),
    )


def play_game(rng: random.Random | None = None) -> list[TrialResult]:
    """Play one game and return its stay and switch rows, in that order."""
    return play_round(rng).results
