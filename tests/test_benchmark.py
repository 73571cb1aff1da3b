"""Tests for headless random-play simulation."""

import pytest

from snake_arcade.benchmark import SimulationResult, simulate
from snake_arcade.config import GameConfig
from snake_arcade.storage import MemoryBestScoreStore


class TestSimulationResult:
    def test_summary_format(self):
        result = SimulationResult(
            total_games=10,
            total_ticks=500,
            wins=0,
            mean_score=12.5,
            max_score=40,
            best_score=40,
            wall_time_seconds=1.5,
        )
        summary = result.summary()
        assert "10 games" in summary
        assert "500 ticks" in summary
        assert "max 40" in summary
        assert "ticks/s" in summary


class TestSimulate:
    def test_basic_run(self):
        result = simulate(
            num_games=5,
            config=GameConfig(grid_width=10, grid_height=10, start_head=(4, 5)),
            max_ticks=100,
        )
        assert result.total_games == 5
        assert result.total_ticks > 0
        assert result.max_score >= result.mean_score >= 0
        assert result.best_score <= result.max_score

    def test_best_score_persisted_once_per_improvement(self):
        store = MemoryBestScoreStore()
        result = simulate(num_games=20, store=store, max_ticks=200, seed=3)
        assert store.saves == sorted(set(store.saves))
        assert store.load() == result.best_score

    def test_deterministic(self):
        a = simulate(num_games=3, max_ticks=50, seed=5)
        b = simulate(num_games=3, max_ticks=50, seed=5)
        assert (a.total_ticks, a.mean_score) == (b.total_ticks, b.mean_score)

    def test_num_games_must_be_positive(self):
        with pytest.raises(ValueError, match="num_games must be at least 1"):
            simulate(num_games=0)
