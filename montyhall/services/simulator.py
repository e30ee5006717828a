"""Batch simulation of the Monty Hall game.

Plays many independent games and reduces the stay/switch outcomes into a
row-normalized proportion table.
"""

import random
from collections import Counter
from collections.abc import Iterable, Iterator

from montyhall.core.config import get_settings
from montyhall.core.exceptions import InvalidArgumentError
from montyhall.core.logging_config import get_logger
from montyhall.models.game_models import GameRound, Outcome, Strategy, TrialResult
from montyhall.models.simulation_models import BatchResult, SimulationSummary, StrategyRates
from montyhall.services.game import play_round

logger = get_logger(__name__)


def _validate_n(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"Number of games must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgumentError(f"Number of games must be positive, got {n}")
    return n


def _make_rng(seed: int | None, rng: random.Random | None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def spawn_rngs(seed: int | None, count: int) -> list[random.Random]:
    """Derive independent random streams from one seed.

    Each stream is seeded from a draw of a parent generator, so splitting a
    batch across workers gives reproducible, non-overlapping games.

    Args:
        seed: Seed for the parent generator (None for OS entropy).
        count: Number of streams to create.

    Returns:
        List of ``count`` independent ``random.Random`` instances.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError(f"Number of streams must be a positive integer, got {count!r}")
    parent = random.Random(seed)
    return [random.Random(parent.getrandbits(64)) for _ in range(count)]


def iter_games(n: int, rng: random.Random | None = None) -> Iterator[GameRound]:
    """Lazily play ``n`` games from one random source.

    Raises:
        InvalidArgumentError: If ``n`` is not a positive integer.
    """
    n = _validate_n(n)
    rng = _make_rng(None, rng)
    # Validation runs eagerly; the games themselves are produced on demand
    return (play_round(rng) for _ in range(n))


def summarize(
    results: Iterable[TrialResult],
    n_games: int | None = None,
    seed: int | None = None,
) -> SimulationSummary:
    """Fold trial rows into per-strategy win/loss proportions.

    Args:
        results: Any iterable of TrialResult; consumed in a single pass.
        n_games: Number of games the rows came from. Inferred from the
            stay rows when omitted.
        seed: Seed recorded on the summary.

    Returns:
        SimulationSummary with proportions rounded to 2 decimals.

    Raises:
        InvalidArgumentError: If a strategy has no rows.
    """
    counts: Counter[tuple[Strategy, Outcome]] = Counter(
        (result.strategy, result.outcome) for result in results
    )

    rates: dict[Strategy, StrategyRates] = {}
    for strategy in Strategy:
        wins = counts[(strategy, Outcome.WIN)]
        losses = counts[(strategy, Outcome.LOSE)]
        total = wins + losses
        if total == 0:
            raise InvalidArgumentError(f"No results recorded for strategy '{strategy.value}'")
        rates[strategy] = StrategyRates(
            wins=wins,
            losses=losses,
            win_rate=round(wins / total, 2),
            lose_rate=round(losses / total, 2),
        )

    if n_games is None:
        n_games = rates[Strategy.STAY].total
    return SimulationSummary(n_games=n_games, seed=seed, rates=rates)


def format_proportion_table(summary: SimulationSummary) -> str:
    """Render the strategy x outcome table with 2-decimal proportions."""
    outcomes = [Outcome.WIN, Outcome.LOSE]
    lines = [
        "          outcome",
        "strategy  " + " ".join(f"{outcome.value:>5}" for outcome in outcomes),
    ]
    for strategy in Strategy:
        row = summary.rates[strategy]
        cells = " ".join(f"{row.rate(outcome):>5.2f}" for outcome in outcomes)
        lines.append(f"{strategy.value:<8}  {cells}")
    return "\n".join(lines)


def _log_summary(summary: SimulationSummary) -> None:
    logger.info(
        "Simulation complete",
        extra={
            "extra_data": {
                "n_games": summary.n_games,
                "seed": summary.seed,
                "stay_win_rate": summary.stay.win_rate,
                "switch_win_rate": summary.switch.win_rate,
            }
        },
    )


def run_simulation(
    n: int | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> SimulationSummary:
    """Play ``n`` games and return only the proportion table.

    Rows are folded as they are produced, so memory does not grow with ``n``.

    Args:
        n: Number of games. Defaults to the MONTY_HALL_N_GAMES setting.
        seed: Seed for reproducibility. Defaults to the MONTY_HALL_SEED setting.
            Ignored when ``rng`` is given.
        rng: Explicit random source.

    Returns:
        SimulationSummary for the batch.
    """
    settings = get_settings()
    n = _validate_n(settings.n_games if n is None else n)
    if seed is None and rng is None:
        seed = settings.seed

    logger.info(
        "Simulation started",
        extra={"extra_data": {"n_games": n, "seed": seed, "keep_rows": False}},
    )
    rounds = iter_games(n, _make_rng(seed, rng))
    summary = summarize(
        (result for game in rounds for result in game.results),
        n_games=n,
        seed=seed,
    )
    _log_summary(summary)
    return summary


def play_n_games(
    n: int | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    display: bool = True,
) -> BatchResult:
    """Play ``n`` games, print the proportion table and return every row.

    Args:
        n: Number of games. Defaults to the MONTY_HALL_N_GAMES setting (100).
        seed: Seed for reproducibility. Defaults to the MONTY_HALL_SEED setting.
            Ignored when ``rng`` is given.
        rng: Explicit random source.
        display: Print the proportion table to stdout.

    Returns:
        BatchResult with 2n (strategy, outcome) rows in play order, stay
        before switch within each game.

    Raises:
        InvalidArgumentError: If ``n`` is not a positive integer.
    """
    settings = get_settings()
    n = _validate_n(settings.n_games if n is None else n)
    if seed is None and rng is None:
        seed = settings.seed

    logger.info(
        "Simulation started",
        extra={"extra_data": {"n_games": n, "seed": seed, "keep_rows": True}},
    )
    results: list[TrialResult] = []
    for game in iter_games(n, _make_rng(seed, rng)):
        results.extend(game.results)

    summary = summarize(results, n_games=n, seed=seed)
    _log_summary(summary)

    if display:
        print(format_proportion_table(summary))

    return BatchResult(results=results, summary=summary)
