"""Headless random-play simulation for smoke-testing and throughput."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.session import GameSession, Phase
from snake_arcade.snake import Direction
from snake_arcade.storage import BestScoreStore, MemoryBestScoreStore

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate results of a batch of simulated games."""

    total_games: int
    total_ticks: int
    wins: int
    mean_score: float
    max_score: int
    best_score: int
    wall_time_seconds: float

    @property
    def ticks_per_second(self) -> float:
        return self.total_ticks / max(self.wall_time_seconds, 1e-9)

    def summary(self) -> str:
        return (
            f"Simulation: {self.total_games} games, {self.total_ticks} ticks "
            f"in {self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.1f}, max {self.max_score}, "
            f"best {self.best_score}, wins {self.wins} | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def simulate(
    *,
    num_games: int = 100,
    config: GameConfig | None = None,
    store: BestScoreStore | None = None,
    max_ticks: int = 1_000,
    seed: int = 42,
) -> SimulationResult:
    """Play *num_games* games with random direction requests.

    Each game is a fresh session sharing *store* and the RNG, so best-score
    tracking behaves as it would for one player. Games that survive
    *max_ticks* steps are cut off and counted with their current score.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")

    rng = np.random.default_rng(seed)
    store = store if store is not None else MemoryBestScoreStore()

    scores: list[int] = []
    wins = 0
    total_ticks = 0
    start = time.perf_counter()

    for _ in range(num_games):
        session = GameSession(config=config, store=store, rng=rng)
        session.start()
        for _ in range(max_ticks):
            session.request_direction(_DIRECTIONS[int(rng.integers(4))])
            result = session.tick()
            total_ticks += 1
            if result.phase.terminal:
                break
        wins += session.phase is Phase.WON
        scores.append(session.score)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        total_games=num_games,
        total_ticks=total_ticks,
        wins=wins,
        mean_score=float(np.mean(scores)),
        max_score=max(scores),
        best_score=store.load(),
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
