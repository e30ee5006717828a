"""Tests for the Monty Hall batch simulator."""

import random
from unittest.mock import patch

import pytest

from montyhall.core.exceptions import InvalidArgumentError
from montyhall.models.game_models import GameRound, Outcome, Strategy, TrialResult
from montyhall.models.simulation_models import BatchResult, SimulationSummary
from montyhall.services.simulator import (
    format_proportion_table,
    iter_games,
    play_n_games,
    run_simulation,
    spawn_rngs,
    summarize,
)


def _rows(*pairs):
    return [TrialResult(Strategy(strategy), Outcome(outcome)) for strategy, outcome in pairs]


# =============================================================================
# Test Argument Validation
# =============================================================================


class TestArgumentValidation:
    """Tests for trial count validation."""

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_non_positive_n_rejected(self, n):
        with pytest.raises(InvalidArgumentError):
            play_n_games(n, display=False)

    @pytest.mark.parametrize("n", [1.5, "10", True])
    def test_non_integer_n_rejected(self, n):
        with pytest.raises(InvalidArgumentError):
            play_n_games(n, display=False)

    def test_run_simulation_rejects_zero(self):
        with pytest.raises(InvalidArgumentError):
            run_simulation(0)

    def test_iter_games_validates_eagerly(self):
        """Bad counts fail at call time, not on first iteration."""
        with pytest.raises(InvalidArgumentError):
            iter_games(0)


# =============================================================================
# Test Batch Runner
# =============================================================================


class TestPlayNGames:
    """Tests for play_n_games."""

    def test_single_game_returns_two_rows(self):
        batch = play_n_games(1, seed=1, display=False)

        assert isinstance(batch, BatchResult)
        assert len(batch) == 2
        assert batch.games == 1
        assert [row[0] for row in batch.as_rows()] == ["stay", "switch"]

    def test_returns_2n_rows_in_pairs(self):
        batch = play_n_games(50, seed=2, display=False)

        assert len(batch) == 100
        for stay, switch in zip(batch.results[::2], batch.results[1::2]):
            assert stay.strategy is Strategy.STAY
            assert switch.strategy is Strategy.SWITCH
            assert stay.outcome is not switch.outcome

    def test_defaults_to_100_games(self):
        batch = play_n_games(seed=3, display=False)
        assert len(batch) == 200
        assert batch.summary.n_games == 100

    def test_n_from_environment(self, monkeypatch):
        monkeypatch.setenv("MONTY_HALL_N_GAMES", "7")
        batch = play_n_games(display=False)
        assert len(batch) == 14

    def test_seed_from_environment(self, monkeypatch):
        monkeypatch.setenv("MONTY_HALL_SEED", "2024")
        first = play_n_games(20, display=False)
        second = play_n_games(20, display=False)

        assert first.results == second.results
        assert first.summary.seed == 2024

    def test_reproducible_with_seed(self):
        first = play_n_games(100, seed=12345, display=False)
        second = play_n_games(100, seed=12345, display=False)

        assert first.results == second.results
        assert first.summary == second.summary

    def test_explicit_rng_takes_precedence(self):
        first = play_n_games(30, seed=1, rng=random.Random(8), display=False)
        second = play_n_games(30, rng=random.Random(8), display=False)
        assert first.results == second.results

    def test_summary_matches_rows(self):
        batch = play_n_games(200, seed=4, display=False)
        stay_wins = sum(
            1
            for row in batch
            if row.strategy is Strategy.STAY and row.outcome is Outcome.WIN
        )

        assert batch.summary.stay.wins == stay_wins
        assert batch.summary.stay.total == 200
        assert batch.summary.switch.wins == 200 - stay_wins

    def test_rows_sum_to_one(self):
        summary = play_n_games(300, seed=5, display=False).summary
        for strategy in Strategy:
            rates = summary.rates[strategy]
            assert rates.win_rate + rates.lose_rate == pytest.approx(1.0, abs=0.011)

    def test_prints_table(self, capsys):
        play_n_games(10, seed=6)
        captured = capsys.readouterr()

        assert "strategy" in captured.out
        assert "WIN" in captured.out
        assert "LOSE" in captured.out
        assert "stay" in captured.out
        assert "switch" in captured.out

    def test_display_false_prints_nothing(self, capsys):
        play_n_games(10, seed=6, display=False)
        assert capsys.readouterr().out == ""


# =============================================================================
# Test Summaries
# =============================================================================


class TestSummarize:
    """Tests for folding rows into proportions."""

    def test_proportions_rounded(self):
        rows = _rows(
            ("stay", "WIN"),
            ("switch", "LOSE"),
            ("stay", "LOSE"),
            ("switch", "WIN"),
            ("stay", "LOSE"),
            ("switch", "WIN"),
        )
        summary = summarize(rows)

        assert summary.n_games == 3
        assert summary.stay.win_rate == 0.33
        assert summary.stay.lose_rate == 0.67
        assert summary.switch.win_rate == 0.67
        assert summary.switch.lose_rate == 0.33

    def test_accepts_generator(self):
        rows = (row for row in _rows(("stay", "WIN"), ("switch", "LOSE")))
        summary = summarize(rows, n_games=1, seed=9)

        assert summary.stay.wins == 1
        assert summary.switch.losses == 1
        assert summary.seed == 9

    def test_missing_strategy_rejected(self):
        with pytest.raises(InvalidArgumentError):
            summarize(_rows(("stay", "WIN")))

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            summarize([])


class TestFormatProportionTable:
    """Tests for the printed table."""

    def test_layout(self):
        summary = summarize(
            _rows(
                ("stay", "WIN"),
                ("switch", "LOSE"),
                ("stay", "LOSE"),
                ("switch", "WIN"),
                ("stay", "LOSE"),
                ("switch", "WIN"),
            )
        )
        lines = format_proportion_table(summary).splitlines()

        assert lines[1].split() == ["strategy", "WIN", "LOSE"]
        assert lines[2].split() == ["stay", "0.33", "0.67"]
        assert lines[3].split() == ["switch", "0.67", "0.33"]


# =============================================================================
# Test Lazy Execution
# =============================================================================


class TestLazyExecution:
    """Tests for iter_games and run_simulation."""

    def test_iter_games_is_lazy(self):
        with patch("montyhall.services.simulator.play_round") as mock_play:
            games = iter_games(5, random.Random(1))
            mock_play.assert_not_called()

            next(games)
            assert mock_play.call_count == 1

    def test_iter_games_yields_n_rounds(self, rng):
        games = list(iter_games(25, rng))
        assert len(games) == 25
        assert all(isinstance(game, GameRound) for game in games)

    def test_run_simulation_matches_play_n_games(self):
        summary = run_simulation(500, seed=77)
        batch = play_n_games(500, seed=77, display=False)

        assert isinstance(summary, SimulationSummary)
        assert summary == batch.summary

    def test_run_simulation_does_not_print(self, capsys):
        run_simulation(10, seed=1)
        assert capsys.readouterr().out == ""


# =============================================================================
# Test Independent Streams
# =============================================================================


class TestSpawnRngs:
    """Tests for deriving independent random streams."""

    def test_streams_are_reproducible(self):
        first = [rng.random() for rng in spawn_rngs(10, 4)]
        second = [rng.random() for rng in spawn_rngs(10, 4)]
        assert first == second

    def test_streams_differ(self):
        draws = [rng.random() for rng in spawn_rngs(10, 4)]
        assert len(set(draws)) == 4

    def test_split_batch_summarizes(self):
        rows = [
            result
            for stream in spawn_rngs(3, 4)
            for game in iter_games(250, stream)
            for result in game.results
        ]
        summary = summarize(rows)
        assert summary.n_games == 1000

    @pytest.mark.parametrize("count", [0, -2, True])
    def test_rejects_bad_count(self, count):
        with pytest.raises(InvalidArgumentError):
            spawn_rngs(1, count)


# =============================================================================
# Test Statistical Properties
# =============================================================================


class TestStatisticalProperties:
    """Tests for the classic 1/3 vs 2/3 result."""

    def test_switch_wins_two_thirds(self):
        """Over 10,000 games switching wins about 2/3 of the time."""
        summary = run_simulation(10_000, seed=42)

        assert 0.64 <= summary.switch.win_rate <= 0.70
        assert 0.30 <= summary.stay.win_rate <= 0.36

    def test_switch_beats_stay(self):
        batch = play_n_games(2000, seed=11, display=False)
        assert batch.summary.switch.wins > batch.summary.stay.wins
